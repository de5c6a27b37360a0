"""Playwright browser wrapper for the fixture page scenarios."""

from __future__ import annotations

from pathlib import Path

from playwright.sync_api import Browser, BrowserContext, Page

from .constants import CLASS_FILTER


class WebClient:
    """Wraps a Playwright BrowserContext as a single browser session.

    Each WebClient has its own isolated browser context (cookies, storage).
    Uses the sync Playwright API so predicates can be plain callables.
    """

    def __init__(self, browser: Browser, base_url: str, name: str = "default"):
        self._browser = browser
        self._base_url = base_url.rstrip("/")
        self._name = name
        self.context: BrowserContext | None = None
        self.page: Page | None = None

    @property
    def name(self) -> str:
        return self._name

    def start(self) -> "WebClient":
        self.context = self._browser.new_context(base_url=self._base_url)
        self.page = self.context.new_page()
        return self

    def open_fixture(self) -> None:
        """Load the character list page; its script starts loading right after."""
        self.page.goto("/")

    def select_class(self, class_name: str) -> None:
        """Pick a class in the filter, firing the page's change handler."""
        self.page.select_option(CLASS_FILTER, label=class_name)

    def screenshot(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=str(path), full_page=True)

    def close(self) -> None:
        if self.context:
            self.context.close()
            self.context = None
            self.page = None

    def __enter__(self) -> "WebClient":
        return self.start()

    def __exit__(self, *args) -> None:
        self.close()
