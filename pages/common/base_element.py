from typing import Optional

from pages.common.driver import PageDriver
from utils.track_time import track_execution_time


class BaseElement:
    """
    BaseElement is a wrapper around one selector on a page, providing
    common interaction methods for web elements like clicking, typing and reading text.

    :param driver: Browser driver the element lives in.
    :param selector: Selector targeting the element.
    :param nth: Index of the element when the selector matches several (default is None).
    """

    def __init__(self, driver: PageDriver, selector: str, nth: Optional[int] = None):
        self.driver = driver
        self.selector = selector
        self.nth = nth

    def __repr__(self) -> str:
        suffix = f" >> nth={self.nth}" if self.nth is not None else ""
        return f"BaseElement({self.selector}{suffix})"

    @property
    def text(self) -> Optional[str]:
        """
        Get the stripped text content of the element.

        :return: The text content, or None if the element is not on the page.
        """
        content = self.driver.text_content(self.selector, nth=self.nth)
        return content.strip() if content is not None else None

    @property
    def value(self) -> str:
        """
        Get the current value of an input element.
        """
        return self.driver.input_value(self.selector, nth=self.nth)

    @property
    def is_visible(self) -> bool:
        return self.driver.is_visible(self.selector, nth=self.nth)

    @property
    def is_enabled(self) -> bool:
        """
        Check if the element is both visible and enabled (clickable).
        """
        return self.driver.is_enabled(self.selector, nth=self.nth)

    @property
    def count(self) -> int:
        """
        Number of elements currently matching the selector, 0 or 1 for an indexed element.
        """
        return self.driver.count(self.selector, nth=self.nth)

    @track_execution_time
    def click(self) -> None:
        self.driver.click(self.selector, nth=self.nth)

    def double_click(self) -> None:
        self.driver.dblclick(self.selector, nth=self.nth)

    def right_click(self) -> None:
        self.driver.click(self.selector, nth=self.nth, button="right")

    @track_execution_time
    def fill(self, text: str) -> None:
        """
        Clear any existing content and fill the element with the provided text.

        Args:
            text (str): The text to fill into the element.

        Raises:
            ElementNotFoundError: If the element cannot be filled within the default timeout.
        """
        self.driver.fill(self.selector, text, nth=self.nth)

    @track_execution_time
    def clear(self) -> None:
        self.driver.clear(self.selector, nth=self.nth)

    def hover(self) -> None:
        self.driver.hover(self.selector, nth=self.nth)

    @track_execution_time
    def select_option(self, value: str) -> None:
        """
        Select a dropdown option by its value attribute.
        """
        self.driver.select_option(self.selector, value, nth=self.nth)

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of a specified attribute of the element.

        :param name: The name of the attribute to retrieve.
        :return: The attribute value as a string or None if the element or attribute is absent.
        """
        return self.driver.get_attribute(self.selector, name, nth=self.nth)

    @track_execution_time
    def wait_until_visible(self, timeout: int = 15000) -> "BaseElement":
        """
        Wait until the element becomes visible on the page.

        Args:
            timeout (int): Maximum time to wait in milliseconds. Defaults to 15000 (15 seconds).

        Raises:
            ElementNotFoundError: If the element does not become visible within the timeout.
        """
        self.driver.wait_for(self.selector, state="visible", timeout=timeout, nth=self.nth)
        return self

    @track_execution_time
    def wait_until_hidden(self, timeout: int = 15000) -> None:
        """
        Wait until the element is hidden, either removed from the DOM or made invisible.

        :param timeout: Time to wait in milliseconds (default is 15000 ms).
        """
        self.driver.wait_for(self.selector, state="hidden", timeout=timeout, nth=self.nth)
