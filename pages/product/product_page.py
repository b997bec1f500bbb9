from typing import Optional

from pages.common.base_element import BaseElement
from pages.common.shop_page import ShopPage
from pages.product.product_locators import ProductLocators


class ProductPage(ShopPage):
    """
    The details page of a single product (inventory-item.html).
    """

    @property
    def add_to_cart_button(self) -> BaseElement:
        return self.find_element(ProductLocators.ADD_TO_CART_BUTTON)

    @property
    def remove_from_cart_button(self) -> BaseElement:
        return self.find_element(ProductLocators.REMOVE_FROM_CART_BUTTON)

    def add_product_to_cart(self) -> None:
        self.add_to_cart_button.click()

    def remove_product_from_cart(self) -> None:
        self.remove_from_cart_button.click()

    def go_back_to_products(self) -> None:
        self.click(ProductLocators.BACK_TO_PRODUCTS_BUTTON)
        self.wait_for_page_load()

    def get_product_name(self) -> Optional[str]:
        return self.get_text(ProductLocators.PRODUCT_NAME)

    def get_product_price(self) -> Optional[str]:
        return self.get_text(ProductLocators.PRODUCT_PRICE)

    def get_product_description(self) -> Optional[str]:
        return self.get_text(ProductLocators.PRODUCT_DESCRIPTION)

    def get_product_image(self) -> Optional[str]:
        """
        Source URL of the product image, or None when the image is missing.
        """
        return self.get_attribute(ProductLocators.PRODUCT_IMAGE, 'src')

    def is_add_to_cart_button_visible(self) -> bool:
        return self.add_to_cart_button.is_visible

    def is_remove_from_cart_button_visible(self) -> bool:
        return self.remove_from_cart_button.is_visible

    def wait_for_product_page(self) -> None:
        self.wait_for_element(ProductLocators.DETAILS_CONTAINER)
        self.wait_for_element(ProductLocators.PRODUCT_NAME)
