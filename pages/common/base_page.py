import logging
from pathlib import Path
from typing import Optional

from pages.common.base_element import BaseElement
from pages.common.driver import DEFAULT_TIMEOUT, PageDriver
from utils.track_time import track_execution_time

logger = logging.getLogger(__name__)

SCREENSHOT_DIR = Path("screenshots")


class BasePage:
    """
    A base class for handling common web page actions.
    Provides the uniform vocabulary of browser operations (navigate, click, type, read, wait)
    that feature page objects build on, so they never reference the automation API directly.
    """

    def __init__(self, driver: PageDriver):
        """
        Initialize the BasePage with a browser driver.

        Args:
            driver (PageDriver): The driver bound to the browser tab under test.
        """
        self.driver = driver

    @property
    def current_url(self) -> str:
        return self.driver.url

    @property
    def title(self) -> str:
        return self.driver.title()

    def find_element(self, selector: str, nth: Optional[int] = None) -> BaseElement:
        """
        Find a single element on the page.

        Args:
            selector (str): Playwright selector.
            nth (Optional[int]): Index of the element when the selector matches several.

        Returns:
            BaseElement: A BaseElement object wrapping the selector.
        """
        return BaseElement(self.driver, selector, nth=nth)

    def find_elements(self, selector: str) -> list[BaseElement]:
        """
        Find all elements currently matching the selector.

        The list is a snapshot: it is not updated when the page changes afterwards.
        """
        return [BaseElement(self.driver, selector, nth=index) for index in range(self.driver.count(selector))]

    @track_execution_time
    def navigate(self, url: str, wait: bool = True) -> None:
        """
        Navigate to the specified URL and optionally wait for the page to fully load.

        Args:
            url (str): The URL of the page to open.
            wait (bool): Whether to wait for the page to fully load. Default is True.

        Raises:
            NavigationError: If the URL cannot be reached.
        """
        logger.debug("Navigating to %s", url)
        self.driver.goto(url)
        if wait:
            self.wait_for_page_load()

    def click(self, selector: str) -> None:
        self.find_element(selector).click()

    def type(self, selector: str, text: str) -> None:
        """
        Replace the content of an input with the given text.
        """
        self.find_element(selector).fill(text)

    def clear_field(self, selector: str) -> None:
        self.find_element(selector).clear()

    def get_text(self, selector: str) -> Optional[str]:
        """
        Get the rendered text of an element, or None if it is not on the page.
        """
        return self.find_element(selector).text

    def get_attribute(self, selector: str, name: str) -> Optional[str]:
        return self.find_element(selector).get_attribute(name)

    @track_execution_time
    def wait_for_element(self, selector: str, timeout: int = DEFAULT_TIMEOUT) -> BaseElement:
        """
        Block until the element is visible.

        Args:
            selector (str): Playwright selector.
            timeout (int): Maximum time to wait in milliseconds.

        Raises:
            ElementNotFoundError: If the element is not visible within the timeout.
        """
        return self.find_element(selector).wait_until_visible(timeout=timeout)

    def is_element_visible(self, selector: str) -> bool:
        return self.find_element(selector).is_visible

    def get_element_count(self, selector: str) -> int:
        return self.find_element(selector).count

    def select_option(self, selector: str, value: str) -> None:
        self.find_element(selector).select_option(value)

    def hover(self, selector: str) -> None:
        self.find_element(selector).hover()

    def double_click(self, selector: str) -> None:
        self.find_element(selector).double_click()

    def right_click(self, selector: str) -> None:
        self.find_element(selector).right_click()

    @track_execution_time
    def wait_for_page_load(self, state: str = "load") -> None:
        """
        Wait for the page to reach the given load state ("load", "domcontentloaded" or "networkidle").
        """
        self.driver.wait_for_load_state(state)

    def wait_for_timeout(self, timeout: int) -> None:
        self.driver.wait_for_timeout(timeout)

    def take_screenshot(self, name: str) -> Path:
        """
        Save a full-page screenshot as screenshots/<name>.png.

        Args:
            name (str): Label used as the file name.

        Returns:
            Path: Location of the written file.
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
        path = SCREENSHOT_DIR / f"{name}.png"
        self.driver.screenshot(path)
        return path
