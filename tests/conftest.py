"""Test-level fixtures for browser scenarios."""

from pathlib import Path

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from pagewait.config import WaitConfig
from pagewait.matchers import PageAssertions
from pagewait.web_client import WebClient

SCREENSHOT_DIR_KEY = pytest.StashKey[Path]()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Stash test result on the item so fixtures can check for failure."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)

    # Attach screenshot to HTML report if it exists
    if rep.when == "call" and rep.failed:
        screenshot_dir = item.config.stash.get(SCREENSHOT_DIR_KEY, None)
        if screenshot_dir is None:
            return
        name = item.name.replace("/", "_")
        screenshot = screenshot_dir / f"{name}.png"
        if screenshot.exists():
            html_plugin = item.config.pluginmanager.getplugin("html")
            if html_plugin:
                extra = getattr(rep, "extra", [])
                extra.append(html_plugin.extras.image(str(screenshot)))
                rep.extra = extra


@pytest.fixture(scope="session")
def browser(config: WaitConfig, pytestconfig):
    """Session-scoped Chromium instance; skips browser tests if it cannot start."""
    pytestconfig.stash[SCREENSHOT_DIR_KEY] = config.screenshot_dir
    with sync_playwright() as p:
        try:
            browser = p.chromium.launch(headless=config.headless)
        except PlaywrightError as e:
            pytest.skip(f"Chromium unavailable: {e}")
        yield browser
        browser.close()


@pytest.fixture
def web(browser, fixture_server, config: WaitConfig, request) -> WebClient:
    """Fresh browser context with the fixture page already open."""
    client = WebClient(browser, fixture_server.url, name=request.node.name)
    with client:
        client.open_fixture()
        yield client
        # Capture screenshot on failure
        if hasattr(request.node, "rep_call") and request.node.rep_call.failed:
            name = request.node.name.replace("/", "_")
            try:
                client.screenshot(config.screenshot_dir / f"{name}.png")
            except PlaywrightError:
                pass


@pytest.fixture
def page_assertions(web: WebClient, config: WaitConfig) -> PageAssertions:
    return PageAssertions(web.page, config)
