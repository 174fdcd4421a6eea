import pytest

from testsuites.unit.fakes import PNG_BYTES, FakeBrowser, FakeContext, FakeLocator, FakePage
from ui_helpers.exceptions import TimeoutError, ValidationError
from ui_helpers.facade import BrowserFacade
from ui_helpers.options import NavigationOptions


@pytest.fixture
def facade(fake_page: FakePage) -> BrowserFacade:
    return BrowserFacade(fake_page, navigation_defaults=NavigationOptions())


class TestGoToUrl:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url", [None, ""])
    async def test_empty_url_is_a_no_op(self, facade, fake_page, url):
        await facade.go_to_url(url, {"window_width": 1})
        assert fake_page.calls == []

    @pytest.mark.asyncio
    async def test_defaults(self, facade, fake_page):
        await facade.go_to_url("http://app.test/dashboard")

        assert fake_page.calls == [
            ("set_viewport_size", {"width": 1280, "height": 1024}),
            ("goto", "http://app.test/dashboard"),
            ("wait_for_function", 11000),
        ]

    @pytest.mark.asyncio
    async def test_caller_options_win(self, facade, fake_page):
        await facade.go_to_url(
            "http://app.test/",
            {"windowWidth": 800, "waitForAngular": False},
        )

        assert fake_page.calls == [
            ("set_viewport_size", {"width": 800, "height": 1024}),
            ("goto", "http://app.test/"),
        ]

    @pytest.mark.asyncio
    async def test_explicit_none_option_keeps_default(self, facade, fake_page):
        await facade.go_to_url("http://app.test/", {"windowWidth": None})
        assert fake_page.calls[0] == ("set_viewport_size", {"width": 1280, "height": 1024})

    @pytest.mark.asyncio
    async def test_keyword_overrides(self, facade, fake_page):
        await facade.go_to_url("http://app.test/", window_height=700)
        assert fake_page.calls[0] == ("set_viewport_size", {"width": 1280, "height": 700})

    @pytest.mark.asyncio
    async def test_unknown_option_is_rejected_before_navigation(self, facade, fake_page):
        with pytest.raises(ValidationError):
            await facade.go_to_url("http://app.test/", {"windowDepth": 3})
        assert fake_page.calls == []

    @pytest.mark.asyncio
    async def test_ignore_synchronization_is_scoped_to_the_call(self, facade, fake_page):
        await facade.go_to_url("http://app.test/a", ignore_synchronization=True)

        assert "wait_for_function" not in fake_page.call_names()
        assert facade.synchronization_enabled is True

        await facade.go_to_url("http://app.test/b")
        assert fake_page.call_names()[-1] == "wait_for_function"

    @pytest.mark.asyncio
    async def test_angular_timeout_propagates(self, fake_page):
        fake_page.angular_stable = False
        facade = BrowserFacade(fake_page, angular_timeout=50)

        with pytest.raises(TimeoutError):
            await facade.go_to_url("http://app.test/")

    @pytest.mark.asyncio
    async def test_configured_defaults(self, fake_page, monkeypatch, tmp_path):
        monkeypatch.setenv("UI_HELPERS_CONFIG_DIR", str(tmp_path))
        monkeypatch.setenv("NAVIGATION__WINDOW_WIDTH", "1920")
        monkeypatch.setenv("NAVIGATION__WAIT_FOR_ANGULAR", "false")

        await BrowserFacade(fake_page).go_to_url("http://app.test/")

        assert fake_page.calls == [
            ("set_viewport_size", {"width": 1920, "height": 1024}),
            ("goto", "http://app.test/"),
        ]


class TestSynchronization:

    @pytest.mark.asyncio
    async def test_block_disables_and_restores(self, facade, fake_page):
        async with facade.ignoring_synchronization():
            assert facade.synchronization_enabled is False
            await facade.go_to_url("http://app.test/")

        assert facade.synchronization_enabled is True
        assert "wait_for_function" not in fake_page.call_names()

    @pytest.mark.asyncio
    async def test_block_restores_on_error(self, facade):
        with pytest.raises(RuntimeError):
            async with facade.ignoring_synchronization():
                raise RuntimeError("boom")

        assert facade.synchronization_enabled is True

    @pytest.mark.asyncio
    async def test_block_does_not_change_dom_interactions(self, facade, fake_page):
        outside = FakeLocator()
        await facade.dom.input_text(outside, "abc")
        await facade.dom.wait_visible(outside)

        inside = FakeLocator()
        async with facade.ignoring_synchronization():
            await facade.dom.input_text(inside, "abc")
            await facade.dom.wait_visible(inside)

        assert inside.calls == outside.calls
        assert "wait_for_function" not in fake_page.call_names()

    @pytest.mark.asyncio
    async def test_nested_blocks_keep_outer_state(self, facade):
        async with facade.ignoring_synchronization():
            async with facade.ignoring_synchronization():
                pass
            assert facade.synchronization_enabled is False


class TestScreenshot:

    @pytest.mark.asyncio
    async def test_writes_png(self, facade, tmp_path):
        target = tmp_path / "shot.png"
        target.write_bytes(b"old")

        saved = await facade.save_screenshot(str(target))

        assert saved == target
        assert target.read_bytes() == PNG_BYTES

    @pytest.mark.asyncio
    async def test_unwritable_path_raises(self, facade, tmp_path):
        with pytest.raises(OSError):
            await facade.save_screenshot(tmp_path / "missing-dir" / "shot.png")


class TestBrowserIntrospection:

    @pytest.mark.asyncio
    async def test_capabilities(self, facade):
        assert await facade.get_capabilities() == {
            "browserName": "chromium",
            "browserVersion": "120.0",
            "userAgent": "Mozilla/5.0 FakeBrowser",
        }

    @pytest.mark.asyncio
    async def test_browser_name_is_returned(self, facade):
        assert await facade.get_browser_name() == "chromium"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name, expected",
        [("Internet Explorer", True), ("Internet Explorer 11", True), ("firefox", False)],
    )
    async def test_is_current_browser_ie(self, name, expected):
        page = FakePage(FakeContext(FakeBrowser(name=name)))
        assert await BrowserFacade(page).is_current_browser_ie() is expected

    @pytest.mark.asyncio
    async def test_page_without_browser(self):
        page = FakePage(FakeContext(browser=None))
        with pytest.raises(RuntimeError):
            await BrowserFacade(page).get_browser_name()


class TestSwitchToLatestWindow:

    @pytest.mark.asyncio
    async def test_no_windows(self, facade, fake_page):
        fake_page.context.pages.clear()

        assert await facade.switch_to_latest_window() is None
        assert facade.page is fake_page
        assert fake_page.calls == []

    @pytest.mark.asyncio
    async def test_switches_to_last_window(self, facade, fake_page):
        second = FakePage(fake_page.context, url="http://app.test/second")
        third = FakePage(fake_page.context, url="http://app.test/third")

        switched = await facade.switch_to_latest_window()

        assert switched is third
        assert facade.page is third
        assert facade.cookies.page is third
        assert facade.dom.page is third
        assert third.call_names() == ["bring_to_front"]
        assert second.calls == []
