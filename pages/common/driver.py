"""
driver.py

The browser capability interface used by every page and assertion object.

Page objects never touch ``playwright.sync_api.Page`` directly. They depend on the
``PageDriver`` protocol below, which ``PlaywrightDriver`` implements for a real browser
and which an in-memory fake can implement for unit tests.
"""
import logging
import re
from pathlib import Path
from typing import Callable, Optional, Pattern, Protocol, Union, runtime_checkable

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from pages.common.exceptions import AssertionMismatch, ElementNotFoundError, NavigationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10000
DEFAULT_EXPECT_TIMEOUT = 5000

ANY_VALUE = re.compile(r".*")


@runtime_checkable
class PageDriver(Protocol):
    """
    Everything a page object may ask of a browser tab.

    Selectors are Playwright selector strings. ``nth`` picks one element out of several matches;
    when omitted, actions expect the selector to match a single element and state readers look
    at the first match.

    The ``expect_*`` methods retry until the page reaches the expected state or ``timeout``
    elapses, then raise ``AssertionMismatch`` with the last observed value.
    """

    @property
    def url(self) -> str: ...

    def title(self) -> str: ...

    def goto(self, url: str) -> None: ...

    def click(self, selector: str, nth: Optional[int] = None, button: str = "left") -> None: ...

    def dblclick(self, selector: str, nth: Optional[int] = None) -> None: ...

    def hover(self, selector: str, nth: Optional[int] = None) -> None: ...

    def fill(self, selector: str, text: str, nth: Optional[int] = None) -> None: ...

    def clear(self, selector: str, nth: Optional[int] = None) -> None: ...

    def select_option(self, selector: str, value: str, nth: Optional[int] = None) -> None: ...

    def text_content(self, selector: str, nth: Optional[int] = None) -> Optional[str]: ...

    def all_text_contents(self, selector: str) -> list[str]: ...

    def get_attribute(self, selector: str, name: str, nth: Optional[int] = None) -> Optional[str]: ...

    def input_value(self, selector: str, nth: Optional[int] = None) -> str: ...

    def is_visible(self, selector: str, nth: Optional[int] = None) -> bool: ...

    def is_enabled(self, selector: str, nth: Optional[int] = None) -> bool: ...

    def count(self, selector: str, nth: Optional[int] = None) -> int: ...

    def wait_for(self, selector: str, state: str = "visible", timeout: int = DEFAULT_TIMEOUT,
                 nth: Optional[int] = None) -> None: ...

    def wait_for_load_state(self, state: str = "load") -> None: ...

    def wait_for_timeout(self, timeout: int) -> None: ...

    def screenshot(self, path: Union[str, Path]) -> None: ...

    def expect_visible(self, selector: str, nth: Optional[int] = None,
                       timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None: ...

    def expect_hidden(self, selector: str, nth: Optional[int] = None,
                      timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None: ...

    def expect_enabled(self, selector: str, nth: Optional[int] = None,
                       timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None: ...

    def expect_text(self, selector: str, expected: str, nth: Optional[int] = None,
                    timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None: ...

    def expect_count(self, selector: str, expected: int, timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None: ...

    def expect_value(self, selector: str, expected: str, nth: Optional[int] = None,
                     timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None: ...

    def expect_attribute(self, selector: str, name: str, expected: Optional[str] = None, nth: Optional[int] = None,
                         timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None: ...

    def expect_url(self, pattern: Pattern[str], timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None: ...

    def expect_title(self, expected: str, timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None: ...


class PlaywrightDriver:
    """
    ``PageDriver`` implementation backed by a Playwright sync ``Page``.

    Playwright timeouts on element operations are reported as ``ElementNotFoundError`` and
    failed navigations as ``NavigationError``; every other Playwright error propagates unchanged.
    Checks go through Playwright's ``expect``, whose ``AssertionError`` becomes ``AssertionMismatch``.

    :param page: Playwright Page object, representing the browser tab.
    :param default_timeout: Timeout for element interactions in milliseconds.
    """

    def __init__(self, page: Page, default_timeout: int = DEFAULT_TIMEOUT):
        self.page = page
        self._default_timeout = default_timeout

    def _locate(self, selector: str, nth: Optional[int] = None) -> Locator:
        locator = self.page.locator(selector)
        return locator if nth is None else locator.nth(nth)

    def _first(self, selector: str, nth: Optional[int] = None) -> Locator:
        locator = self.page.locator(selector)
        return locator.first if nth is None else locator.nth(nth)

    @property
    def url(self) -> str:
        return self.page.url

    def title(self) -> str:
        return self.page.title()

    def goto(self, url: str) -> None:
        try:
            self.page.goto(url)
        except PlaywrightError as e:
            raise NavigationError(url, e.message) from e

    def click(self, selector: str, nth: Optional[int] = None, button: str = "left") -> None:
        try:
            self._locate(selector, nth).click(timeout=self._default_timeout, button=button)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, self._default_timeout) from e

    def dblclick(self, selector: str, nth: Optional[int] = None) -> None:
        try:
            self._locate(selector, nth).dblclick(timeout=self._default_timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, self._default_timeout) from e

    def hover(self, selector: str, nth: Optional[int] = None) -> None:
        try:
            self._locate(selector, nth).hover(timeout=self._default_timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, self._default_timeout) from e

    def fill(self, selector: str, text: str, nth: Optional[int] = None) -> None:
        try:
            self._locate(selector, nth).fill(text, timeout=self._default_timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, self._default_timeout) from e

    def clear(self, selector: str, nth: Optional[int] = None) -> None:
        try:
            self._locate(selector, nth).clear(timeout=self._default_timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, self._default_timeout) from e

    def select_option(self, selector: str, value: str, nth: Optional[int] = None) -> None:
        try:
            self._locate(selector, nth).select_option(value=value, timeout=self._default_timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, self._default_timeout) from e

    def text_content(self, selector: str, nth: Optional[int] = None) -> Optional[str]:
        locator = self._locate(selector, nth)
        if locator.count() == 0:
            return None
        return locator.text_content(timeout=self._default_timeout)

    def all_text_contents(self, selector: str) -> list[str]:
        return self._locate(selector).all_text_contents()

    def get_attribute(self, selector: str, name: str, nth: Optional[int] = None) -> Optional[str]:
        locator = self._first(selector, nth)
        if locator.count() == 0:
            return None
        return locator.get_attribute(name, timeout=self._default_timeout)

    def input_value(self, selector: str, nth: Optional[int] = None) -> str:
        try:
            return self._locate(selector, nth).input_value(timeout=self._default_timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, self._default_timeout) from e

    def is_visible(self, selector: str, nth: Optional[int] = None) -> bool:
        return self._first(selector, nth).is_visible()

    def is_enabled(self, selector: str, nth: Optional[int] = None) -> bool:
        locator = self._first(selector, nth)
        return locator.is_visible() and locator.is_enabled()

    def count(self, selector: str, nth: Optional[int] = None) -> int:
        return self._locate(selector, nth).count()

    def wait_for(self, selector: str, state: str = "visible", timeout: int = DEFAULT_TIMEOUT,
                 nth: Optional[int] = None) -> None:
        try:
            self._first(selector, nth).wait_for(state=state, timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, timeout, state) from e

    def wait_for_load_state(self, state: str = "load") -> None:
        self.page.wait_for_load_state(state=state)

    def wait_for_timeout(self, timeout: int) -> None:
        self.page.wait_for_timeout(timeout)

    def screenshot(self, path: Union[str, Path]) -> None:
        logger.debug("Saving screenshot to %s", path)
        self.page.screenshot(path=str(path), full_page=True)

    # Checks

    @staticmethod
    def _check(assertion: Callable[[], None], description: str, expected, actual: Callable[[], object]) -> None:
        try:
            assertion()
        except AssertionError as e:
            raise AssertionMismatch(description, expected, actual()) from e

    def expect_visible(self, selector: str, nth: Optional[int] = None,
                       timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        self._check(lambda: expect(self._first(selector, nth)).to_be_visible(timeout=timeout),
                    f"Element '{selector}' should be visible", True, lambda: self.is_visible(selector, nth))

    def expect_hidden(self, selector: str, nth: Optional[int] = None,
                      timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        self._check(lambda: expect(self._first(selector, nth)).to_be_hidden(timeout=timeout),
                    f"Element '{selector}' should not be visible", False, lambda: self.is_visible(selector, nth))

    def expect_enabled(self, selector: str, nth: Optional[int] = None,
                       timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        def assertion():
            locator = self._first(selector, nth)
            expect(locator).to_be_visible(timeout=timeout)
            expect(locator).to_be_enabled(timeout=timeout)

        self._check(assertion, f"Element '{selector}' should be enabled", True,
                    lambda: self.is_enabled(selector, nth))

    def expect_text(self, selector: str, expected: str, nth: Optional[int] = None,
                    timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        def actual():
            content = self.text_content(selector, nth)
            return content.strip() if content is not None else None

        self._check(lambda: expect(self._locate(selector, nth)).to_have_text(expected, timeout=timeout),
                    f"Text of '{selector}'", expected, actual)

    def expect_count(self, selector: str, expected: int, timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        self._check(lambda: expect(self._locate(selector)).to_have_count(expected, timeout=timeout),
                    f"Number of elements matching '{selector}'", expected, lambda: self.count(selector))

    def expect_value(self, selector: str, expected: str, nth: Optional[int] = None,
                     timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        def actual():
            locator = self._locate(selector, nth)
            return locator.input_value(timeout=self._default_timeout) if locator.count() else None

        self._check(lambda: expect(self._locate(selector, nth)).to_have_value(expected, timeout=timeout),
                    f"Value of '{selector}'", expected, actual)

    def expect_attribute(self, selector: str, name: str, expected: Optional[str] = None, nth: Optional[int] = None,
                         timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        """
        Check an attribute value, or only its presence when ``expected`` is None.
        """
        value = ANY_VALUE if expected is None else expected
        self._check(lambda: expect(self._first(selector, nth)).to_have_attribute(name, value, timeout=timeout),
                    f"Attribute '{name}' of '{selector}'", "<present>" if expected is None else expected,
                    lambda: self.get_attribute(selector, name, nth))

    def expect_url(self, pattern: Pattern[str], timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        self._check(lambda: expect(self.page).to_have_url(pattern, timeout=timeout),
                    "Page URL", pattern.pattern, lambda: self.page.url)

    def expect_title(self, expected: str, timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        self._check(lambda: expect(self.page).to_have_title(expected, timeout=timeout),
                    "Page title", expected, self.page.title)
