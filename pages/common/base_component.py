from pages.common.base_element import BaseElement
from pages.common.driver import PageDriver


class BaseComponent:
    """
    A group of elements scoped under one root selector, e.g. a product card or a cart row.

    :param driver: Browser driver the component lives in.
    :param root: Selector of the element that defines the component's scope.
    """

    def __init__(self, driver: PageDriver, root: str):
        self.driver = driver
        self.root = root

    @property
    def element(self) -> BaseElement:
        """
        Get the root base element of the component.
        """
        return BaseElement(self.driver, self.root)

    @property
    def is_visible(self) -> bool:
        return self.element.is_visible

    def child_el(self, selector: str) -> BaseElement:
        """
        Find an element within the component's scope.

        :param selector: CSS selector relative to the component root.
        :return: BaseElement for the descendant.
        """
        return BaseElement(self.driver, f"{self.root} {selector}")

    def wait_for_visibility(self, timeout: int = 5000) -> None:
        """
        Wait until the component's root element is visible.

        :param timeout: Timeout in milliseconds.
        """
        self.element.wait_until_visible(timeout=timeout)
