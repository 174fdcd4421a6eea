"""
Inline test site served through Playwright routing.

Routing the site's origin on a browser context lets UI tests navigate to
real URLs without running a web server.
"""

from typing import Dict

from playwright.async_api import Route


SITE = "http://ui-helpers.test"

PAGES: Dict[str, str] = {
    "/": """
        <html><body>
          <h1 id="title">Home</h1>
          <button id="cta" class="btn active large">Go</button>
          <div id="ad" class="activewear">Ad</div>
          <div id="hidden-panel" style="display:none">Hidden</div>
          <div id="doomed">Soon removed</div>
          <input id="name" type="text">
          <input id="upload" type="file">
          <div id="log"></div>
          <script>
            const log = document.getElementById('log');
            document.getElementById('cta').addEventListener('dblclick', () => log.textContent += 'dblclick;');
            document.getElementById('cta').addEventListener('contextmenu', (e) => {
              e.preventDefault();
              log.textContent += 'contextmenu;';
            });
            document.getElementById('cta').addEventListener('mouseenter', () => log.textContent += 'enter;');
            document.getElementById('cta').addEventListener('mouseleave', () => log.textContent += 'leave;');
          </script>
        </body></html>
    """,
    "/angular": """
        <html><body>
          <div id="status">loading</div>
          <script>
            let stable = false;
            window.getAllAngularTestabilities = () => [{ isStable: () => stable }];
            setTimeout(() => {
              stable = true;
              document.getElementById('status').textContent = 'ready';
            }, 1000);
          </script>
        </body></html>
    """,
    "/popup": "<html><body><h1>Popup</h1></body></html>",
}


async def serve(route: Route) -> None:
    path = route.request.url[len(SITE):].split("?")[0] or "/"
    if path in PAGES:
        await route.fulfill(status=200, content_type="text/html", body=PAGES[path])
    else:
        await route.fulfill(status=404, body="not found")
