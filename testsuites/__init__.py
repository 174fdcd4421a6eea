"""
Test suites package.

Kept importable so tests can share helpers (fakes, inline test site) through
regular imports.
"""
