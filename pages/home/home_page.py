import logging
from typing import NamedTuple

from pages.common.base_element import BaseElement
from pages.common.shop_page import ShopPage
from pages.home.home_locators import HomeLocators
from utils.track_time import track_execution_time

logger = logging.getLogger(__name__)

# Pause between bulk cart clicks so the badge re-renders before the next button is looked up
BULK_CLICK_PAUSE = 500


class Product(NamedTuple):
    name: str
    price: str
    description: str


def parse_price(price: str) -> float:
    return float(price.strip().lstrip('$'))


class HomePage(ShopPage):
    """
    The inventory page listing every product.
    """

    @property
    def sort_dropdown(self) -> BaseElement:
        return self.find_element(HomeLocators.PRODUCT_SORT)

    @property
    def inventory(self) -> BaseElement:
        return self.find_element(HomeLocators.INVENTORY_CONTAINER)

    @track_execution_time
    def sort_products(self, criterion: str) -> None:
        """
        Sort the product list.

        Args:
            criterion (str): Option value of the sort dropdown: az, za, lohi or hilo.
        """
        self.sort_dropdown.select_option(criterion)
        self.wait_for_element(HomeLocators.PRODUCT_ITEMS)

    def add_backpack_to_cart(self) -> None:
        self.click(HomeLocators.ADD_TO_CART_BUTTON)

    def add_bike_light_to_cart(self) -> None:
        self.click(HomeLocators.ADD_BIKE_LIGHT_BUTTON)

    def remove_backpack_from_cart(self) -> None:
        self.click(HomeLocators.REMOVE_FROM_CART_BUTTON)

    def add_product_to_cart(self, product_name: str) -> None:
        self.click(HomeLocators.add_to_cart_button_by_name(product_name))

    def remove_product_from_cart(self, product_name: str) -> None:
        self.click(HomeLocators.remove_from_cart_button_by_name(product_name))

    def _click_all(self, selector: str) -> int:
        """
        Click every button matching the selector, one at a time.

        A clicked button swaps to its opposite action and drops out of the selector, so the first
        match is always the next one to click. Returns the number of clicks made.
        """
        total = self.get_element_count(selector)
        for _ in range(total):
            self.find_element(selector, nth=0).click()
            self.wait_for_timeout(BULK_CLICK_PAUSE)
        return total

    @track_execution_time
    def add_all_products_to_cart(self) -> None:
        """
        Add every product that is not in the cart yet. Does nothing when all products are already added.
        """
        added = self._click_all(HomeLocators.ADD_TO_CART_BUTTONS)
        logger.debug("Added %d products to the cart", added)

    @track_execution_time
    def remove_all_products_from_cart(self) -> None:
        removed = self._click_all(HomeLocators.REMOVE_FROM_CART_BUTTONS)
        logger.debug("Removed %d products from the cart", removed)

    def get_product_count(self) -> int:
        return self.get_element_count(HomeLocators.PRODUCT_ITEMS)

    def get_all_products(self) -> list[Product]:
        """
        Read every product card in display order.

        :return: A fresh list on each call; it does not follow later page changes.
        """
        names = self.driver.all_text_contents(HomeLocators.PRODUCT_NAME)
        prices = self.driver.all_text_contents(HomeLocators.PRODUCT_PRICE)
        descriptions = self.driver.all_text_contents(HomeLocators.PRODUCT_DESCRIPTION)
        return [Product(name.strip(), price.strip(), description.strip())
                for name, price, description in zip(names, prices, descriptions)]

    def get_product_names(self) -> list[str]:
        return [name.strip() for name in self.driver.all_text_contents(HomeLocators.PRODUCT_NAME)]

    def get_product_prices(self) -> list[float]:
        return [parse_price(price) for price in self.driver.all_text_contents(HomeLocators.PRODUCT_PRICE)]

    def click_product_by_name(self, product_name: str) -> None:
        self.click(HomeLocators.product_name_link_by_name(product_name))
        self.wait_for_page_load()

    def get_product_image_selector(self, product_name: str) -> str:
        return HomeLocators.product_image_by_name(product_name)

    def wait_for_products_to_load(self) -> None:
        self.wait_for_element(HomeLocators.INVENTORY_CONTAINER)
        self.wait_for_element(HomeLocators.PRODUCT_ITEMS)
