"""
conftest.py

Pytest configuration for the Swag Labs suite: command line options, Playwright fixtures,
page-object fixtures and the hooks that feed the HTML report.
Report logic lives in html_reporter/.
"""

import os
from pathlib import Path

import pytest
from _pytest.runner import CallInfo
from playwright.sync_api import Playwright, sync_playwright, Browser, BrowserContext, Page

from html_reporter.report_handler import generate_html_report
from pages import Pages
from utils.config import TestData, get_test_data


# Constants
REPORT_DIR = Path("reports")
REPORT_DIR.mkdir(exist_ok=True)


# Pytest Configuration
def pytest_addoption(parser):
    """Add custom command-line options"""
    parser.addoption("--headless", action="store", default="false", help="Run tests in headless mode (true/false)")
    parser.addoption("--e2e", action="store_true", default=False,
                     help="Run browser scenarios against the live shop (same as E2E=true)")
    parser.addoption("--base-url", action="store", default=None,
                     help="Address of the shop under test (same as BASE_URL)")
    parser.addoption("--html-report", action="store", default="reports/test_report.html",
                     help="Path to HTML report file")
    parser.addoption("--report-title", action="store", default="Swag Labs Test Report",
                     help="Title for the HTML report")


@pytest.hookimpl
def pytest_configure(config):
    config.screenshots_amount = 0  # Limit the number of screenshots attached to reports.

    os.environ["HEADLESS"] = config.getoption("headless")
    if config.getoption("base_url"):
        os.environ["BASE_URL"] = config.getoption("base_url")


def e2e_enabled(config) -> bool:
    return config.getoption("e2e") or os.getenv("E2E", "false").lower() == "true"


def pytest_collection_modifyitems(config, items):
    """
    Skip browser scenarios unless they were asked for, so the offline unit tests can run anywhere.
    """
    if e2e_enabled(config):
        return
    skip_e2e = pytest.mark.skip(reason="browser scenario: run with --e2e or E2E=true")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


# Playwright Fixtures
@pytest.fixture(scope="session")
def playwright_instance() -> Playwright:
    """
    Set up the Playwright instance for the test session.
    """
    with sync_playwright() as playwright:
        yield playwright


@pytest.fixture(scope="session")
def browser(playwright_instance) -> Browser:
    """
    Launch a Chromium browser instance shared by every test of the worker.

    Environment Variables:
        HEADLESS: When 'true', runs the browser without a visible UI
        GITHUB_RUN: When set, always runs headless
    """
    if os.getenv('HEADLESS', 'false') == 'true' or os.getenv('GITHUB_RUN') is not None:
        browser = playwright_instance.chromium.launch(headless=True)
    else:
        browser = playwright_instance.chromium.launch(headless=False, args=["--start-maximized"])
    yield browser
    browser.close()


@pytest.fixture
def browser_context(browser) -> BrowserContext:
    """
    Create a fresh browser context per test.

    The shop keeps the cart in local storage, so a new context gives every test an empty cart
    and no session.
    """
    if os.getenv('HEADLESS', 'false') == 'true' or os.getenv('GITHUB_RUN') is not None:
        context = browser.new_context(viewport={"width": 1920, "height": 1080}, screen={"width": 1920, "height": 1080})
    else:
        context = browser.new_context(no_viewport=True)
    yield context
    context.close()


@pytest.fixture
def page(request, browser_context) -> Page:
    """
    Create a new page within the test's browser context.

    The page is attached to the request node so hooks can reach it.
    """
    page = browser_context.new_page()
    request.node.page = page
    yield page
    page.close()


@pytest.fixture
def pages(page) -> Pages:
    """
    Page objects and assertion objects bound to the test's page.
    """
    return Pages(page)


@pytest.fixture(scope="session")
def test_data() -> TestData:
    """
    Static fixture data from data/test_data.json, rebased onto --base-url / BASE_URL when given.
    """
    return get_test_data(os.getenv("BASE_URL") or None)


# Pytest Hooks
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call: CallInfo) -> None:
    """
    Feed every phase report of a test to the ResultHandler, which saves one result per attempt.
    """
    # Imported here to avoid circular imports
    from html_reporter.result_handler import ResultHandler

    outcome = yield
    report = outcome.get_result()

    handler = ResultHandler(item.config)
    handler.process_test_result(item, call, report)


@pytest.hookimpl
def pytest_sessionfinish(session):
    """
    Kill orphaned Playwright processes, then build the HTML report from the worker result files.
    """
    import psutil
    current_pid = os.getpid()

    # Only processes started by this worker, so parallel runs are left alone
    for proc in psutil.process_iter():
        try:
            if proc.ppid() == current_pid and 'playwright' in proc.name().lower():
                proc.kill()
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            pass

    if hasattr(session.config, "workerinput"):
        return  # Only the controller generates the report

    generate_html_report(session, REPORT_DIR)

    for json_file in REPORT_DIR.glob("*.json"):
        json_file.unlink(missing_ok=True)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_protocol(item, nextitem):
    """
    Keep a reference to the running test item for helpers that do not receive it,
    such as track_execution_time and the step logger.
    """
    pytest.current_item = item
    yield
    pytest.current_item = None


@pytest.hookimpl(tryfirst=True)
def pytest_configure_node(node):
    """
    Logs when a worker node is configured in distributed testing mode.
    """
    node.log.info(f"Worker {node.gateway.id} is configured and starting")


@pytest.hookimpl(tryfirst=True)
def pytest_testnodedown(node, error):
    """
    Logs the status of a worker node when it completes testing.
    """
    if error:
        node.log.error(f"Worker {node.gateway.id} failed: {error}")
    else:
        node.log.info(f"Worker {node.gateway.id} finished successfully")
