import re
from typing import Any, Callable, Optional

from pages.common.driver import PageDriver
from pages.common.exceptions import AssertionMismatch

DEFAULT_ASSERT_TIMEOUT = 5000
POLL_INTERVAL = 100


class BaseAssertions:
    """
    Base class for feature assertion objects.

    Element, URL and title checks go through the driver's ``expect_*`` methods, which retry until
    the page reaches the expected state or the timeout elapses, like Playwright's ``expect``.
    Checks on values computed from several elements (sort order, totals) re-read the page every
    POLL_INTERVAL ms through the driver. A check that never holds raises AssertionMismatch with
    the expected and the last observed value. Assertion objects never change the page.

    Args:
        driver (PageDriver): The driver bound to the browser tab under test.
        timeout (int): How long each check keeps retrying, in milliseconds.
    """

    def __init__(self, driver: PageDriver, timeout: int = DEFAULT_ASSERT_TIMEOUT):
        self.driver = driver
        self.timeout = timeout

    def _check(self, description: Optional[str], assertion: Callable[..., None], *args, **kwargs) -> None:
        """
        Run a driver check with this object's timeout, reporting a failure under ``description``.
        """
        try:
            assertion(*args, timeout=self.timeout, **kwargs)
        except AssertionMismatch as e:
            if description is None:
                raise
            raise AssertionMismatch(description, e.expected, e.actual) from e

    def _expect(self, read: Callable[[], Any], matches: Callable[[Any], bool], description: str,
                expected: Any) -> Any:
        """
        Call ``read`` until ``matches`` accepts its value.

        Returns:
            The accepted value.

        Raises:
            AssertionMismatch: If the value is still rejected when the timeout elapses.
        """
        for _ in range(self.timeout // POLL_INTERVAL):
            actual = read()
            if matches(actual):
                return actual
            self.driver.wait_for_timeout(POLL_INTERVAL)
        actual = read()
        if matches(actual):
            return actual
        raise AssertionMismatch(description, expected, actual)

    def _expect_visible(self, selector: str, description: Optional[str] = None) -> None:
        self._check(description, self.driver.expect_visible, selector)

    def _expect_hidden(self, selector: str, description: Optional[str] = None) -> None:
        self._check(description, self.driver.expect_hidden, selector)

    def _expect_enabled(self, selector: str, description: Optional[str] = None) -> None:
        self._check(description, self.driver.expect_enabled, selector)

    def _expect_text(self, selector: str, expected: str, description: Optional[str] = None) -> None:
        self._check(description, self.driver.expect_text, selector, expected)

    def _expect_count(self, selector: str, expected: int, description: Optional[str] = None) -> None:
        self._check(description, self.driver.expect_count, selector, expected)

    def _expect_value(self, selector: str, expected: str, description: Optional[str] = None) -> None:
        self._check(description, self.driver.expect_value, selector, expected)

    def _expect_attribute(self, selector: str, name: str, expected: Optional[str] = None,
                          description: Optional[str] = None) -> None:
        """
        Check an attribute value, or only its presence when ``expected`` is None.
        """
        self._check(description, self.driver.expect_attribute, selector, name, expected)

    def verify_page_title(self, expected_title: str = "Swag Labs") -> None:
        self._check("Page title", self.driver.expect_title, expected_title)

    def verify_url(self, expected_url: str) -> None:
        """
        Check the current URL ends with ``expected_url``, optionally followed by a query string.
        """
        self._check("Page URL", self.driver.expect_url, re.compile(f"{re.escape(expected_url)}(\\?.*)?$"))

    def verify_url_contains(self, fragment: str) -> None:
        self._check("Page URL fragment", self.driver.expect_url, re.compile(re.escape(fragment)))
