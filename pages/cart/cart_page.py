import logging
from typing import Iterable, Optional

from pages.cart.cart_locators import CartLocators
from pages.common.base_component import BaseComponent
from pages.common.base_element import BaseElement
from pages.common.driver import PageDriver
from pages.common.shop_page import ShopPage
from utils.track_time import track_execution_time

logger = logging.getLogger(__name__)

REMOVE_PAUSE = 500


class CartItem(BaseComponent):
    """
    One row of the cart, located by the product name it shows.
    """

    def __init__(self, driver: PageDriver, name: str):
        super().__init__(driver, CartLocators.cart_item_by_name(name))
        self.name = name

    @property
    def price(self) -> Optional[str]:
        return self.child_el(CartLocators.CART_ITEM_PRICE).text

    @property
    def quantity(self) -> Optional[str]:
        return self.child_el(CartLocators.CART_ITEM_QUANTITY).text

    @property
    def remove_button(self) -> BaseElement:
        return BaseElement(self.driver, CartLocators.remove_button_by_name(self.name))


class CartPage(ShopPage):

    @property
    def checkout_button(self) -> BaseElement:
        return self.find_element(CartLocators.CHECKOUT_BUTTON)

    @property
    def continue_shopping_button(self) -> BaseElement:
        return self.find_element(CartLocators.CONTINUE_SHOPPING_BUTTON)

    def cart_item(self, name: str) -> CartItem:
        return CartItem(self.driver, name)

    def proceed_to_checkout(self) -> None:
        self.checkout_button.click()

    def continue_shopping(self) -> None:
        self.continue_shopping_button.click()

    def remove_item_from_cart(self, item_name: str) -> None:
        self.cart_item(item_name).remove_button.click()

    @track_execution_time
    def remove_items_rapidly(self, item_names: Iterable[str]) -> None:
        """
        Remove the given items back to back, without waiting for the page to settle in between.

        Calls on one page are serialised, so only the state after the last removal is meaningful.
        """
        for name in item_names:
            self.cart_item(name).remove_button.click()

    @track_execution_time
    def remove_all_items_from_cart(self) -> None:
        """
        Remove every row from the cart. An empty cart is left as it is.
        """
        # Removed rows leave the DOM, so the first remaining button is always the next one
        total = self.get_element_count(CartLocators.REMOVE_BUTTONS)
        for _ in range(total):
            self.find_element(CartLocators.REMOVE_BUTTONS, nth=0).click()
            self.wait_for_timeout(REMOVE_PAUSE)
        logger.debug("Removed %d items from the cart", total)

    def get_cart_item_count(self) -> int:
        return self.get_element_count(CartLocators.CART_ITEMS)

    def get_cart_item_names(self) -> list[str]:
        return [name.strip() for name in self.driver.all_text_contents(CartLocators.CART_ITEM_NAMES)]

    def get_cart_item_price(self, item_name: str) -> Optional[str]:
        return self.cart_item(item_name).price

    def get_cart_item_quantity(self, item_name: str) -> Optional[str]:
        return self.cart_item(item_name).quantity

    def is_item_in_cart(self, item_name: str) -> bool:
        return self.cart_item(item_name).is_visible

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def wait_for_cart_to_load(self) -> None:
        self.wait_for_element(CartLocators.CART_ITEMS)
        self.wait_for_page_load()

    def get_total_price(self) -> Optional[str]:
        """
        Text of the cart total, or None when the page does not show one.
        """
        if not self.is_element_visible(CartLocators.TOTAL_PRICE):
            return None
        return self.get_text(CartLocators.TOTAL_PRICE)

    def verify_cart_page_elements(self) -> None:
        self.wait_for_element(CartLocators.CART_ITEMS)
        self.wait_for_element(CartLocators.CHECKOUT_BUTTON)
        self.wait_for_element(CartLocators.CONTINUE_SHOPPING_BUTTON)
