"""Page predicates and waiting assertions over a Playwright page.

Predicates here never wait: each call reads the page once. Waiting is the
job of the poll loop in pagewait.retrying, with the budget passed in
explicitly.
"""

from __future__ import annotations

from typing import Callable

from playwright.sync_api import Locator, Page

from .config import WaitConfig
from .retrying import PollOutcome, assert_eventually, assert_never

Predicate = Callable[[], bool]


def _texts(page: Page, selector: str) -> list[str]:
    # all_inner_texts() does not auto-wait, unlike inner_text().
    return page.locator(selector).all_inner_texts()


def content_within(page: Page, selector: str, text: str) -> Predicate:
    return lambda: any(text in t for t in _texts(page, selector))


def content_present(page: Page, text: str) -> Predicate:
    return content_within(page, "body", text)


def content_absent(page: Page, text: str) -> Predicate:
    present = content_present(page, text)
    return lambda: not present()


def css_present(page: Page, selector: str) -> Predicate:
    return lambda: page.locator(selector).count() > 0


def css_absent(page: Page, selector: str) -> Predicate:
    return lambda: page.locator(selector).count() == 0


def text_in(locator: Locator, text: str) -> Predicate:
    return lambda: any(text in t for t in locator.all_inner_texts())


def cells_with_text(page: Page, text: str) -> list[str]:
    """Table cells containing text right now, without retrying."""
    return [t for t in page.locator("td").all_inner_texts() if text in t]


class PageAssertions:
    """Waiting assertions bound to one page and one wait configuration.

    has_* methods return booleans, expect_* methods raise TimeoutExceeded.
    Every method accepts wait_time to override the configured budget for a
    single call.
    """

    def __init__(self, page: Page, config: WaitConfig):
        self._page = page
        self._config = config

    def _budget(self, wait_time: float | None) -> float:
        return self._config.wait_time if wait_time is None else wait_time

    def _present(self, text: str, within: str | None) -> Predicate:
        if within is None:
            return content_present(self._page, text)
        return content_within(self._page, within, text)

    def eventually(self, predicate: Predicate, wait_time: float | None = None) -> PollOutcome:
        return assert_eventually(
            predicate, self._budget(wait_time), self._config.poll_interval
        )

    def never(self, predicate: Predicate, wait_time: float | None = None) -> PollOutcome:
        return assert_never(
            predicate, self._budget(wait_time), self._config.poll_interval
        )

    def has_content(
        self, text: str, within: str | None = None, wait_time: float | None = None
    ) -> bool:
        return self.eventually(self._present(text, within), wait_time).succeeded

    def has_no_content(
        self, text: str, within: str | None = None, wait_time: float | None = None
    ) -> bool:
        present = self._present(text, within)
        return self.eventually(lambda: not present(), wait_time).succeeded

    def expect_content(
        self, text: str, within: str | None = None, wait_time: float | None = None
    ) -> PollOutcome:
        where = f" within {within}" if within else ""
        return self.eventually(
            self._present(text, within), wait_time
        ).raise_for_failure(f"Expected {text!r}{where} to appear:")

    def expect_no_content(
        self, text: str, within: str | None = None, wait_time: float | None = None
    ) -> PollOutcome:
        present = self._present(text, within)
        return self.eventually(lambda: not present(), wait_time).raise_for_failure(
            f"Expected {text!r} to disappear:"
        )

    def expect_content_never(
        self, text: str, within: str | None = None, wait_time: float | None = None
    ) -> PollOutcome:
        return self.never(self._present(text, within), wait_time).raise_for_failure(
            f"Expected {text!r} to stay absent:"
        )

    def expect_css(self, selector: str, wait_time: float | None = None) -> PollOutcome:
        return self.eventually(
            css_present(self._page, selector), wait_time
        ).raise_for_failure(f"Expected {selector} to appear:")

    def expect_no_css(self, selector: str, wait_time: float | None = None) -> PollOutcome:
        return self.eventually(
            css_absent(self._page, selector), wait_time
        ).raise_for_failure(f"Expected {selector} to disappear:")
