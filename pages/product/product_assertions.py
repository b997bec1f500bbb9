import re

from pages.common.base_assertions import BaseAssertions
from pages.product.product_locators import ProductLocators

PRICE_FORMAT = re.compile(r'^\$\d+\.\d{2}$')


class ProductAssertions(BaseAssertions):

    def verify_product_page_loaded(self) -> None:
        self.verify_url_contains('inventory-item.html')
        self._expect_visible(ProductLocators.DETAILS_CONTAINER)

    def verify_product_name_visible(self) -> None:
        self._expect_visible(ProductLocators.PRODUCT_NAME)

    def verify_product_price_visible(self) -> None:
        self._expect_visible(ProductLocators.PRODUCT_PRICE)

    def verify_product_description_visible(self) -> None:
        self._expect_visible(ProductLocators.PRODUCT_DESCRIPTION)

    def verify_product_image_visible(self) -> None:
        self._expect_visible(ProductLocators.PRODUCT_IMAGE)

    def verify_product_name(self, expected_name: str) -> None:
        self._expect_text(ProductLocators.PRODUCT_NAME, expected_name, "Product name")

    def verify_product_price(self, expected_price: str) -> None:
        self._expect_text(ProductLocators.PRODUCT_PRICE, expected_price, "Product price")

    def verify_product_description(self, expected_description: str) -> None:
        self._expect_text(ProductLocators.PRODUCT_DESCRIPTION, expected_description, "Product description")

    def verify_price_format(self) -> None:
        """
        Check the price reads like $29.99.
        """
        def read():
            content = self.driver.text_content(ProductLocators.PRODUCT_PRICE)
            return content.strip() if content is not None else None

        self._expect(read, lambda actual: actual is not None and bool(PRICE_FORMAT.match(actual)),
                     "Product price format", PRICE_FORMAT.pattern)

    def verify_product_image_loaded(self) -> None:
        self._expect_attribute(ProductLocators.PRODUCT_IMAGE, 'src', description="Product image source")

    def verify_add_to_cart_button_visible(self) -> None:
        self._expect_visible(ProductLocators.ADD_TO_CART_BUTTON, "'Add to cart' button should be visible")

    def verify_add_to_cart_button_not_visible(self) -> None:
        self._expect_hidden(ProductLocators.ADD_TO_CART_BUTTON, "'Add to cart' button should not be visible")

    def verify_remove_from_cart_button_visible(self) -> None:
        self._expect_visible(ProductLocators.REMOVE_FROM_CART_BUTTON, "'Remove' button should be visible")

    def verify_remove_from_cart_button_not_visible(self) -> None:
        self._expect_hidden(ProductLocators.REMOVE_FROM_CART_BUTTON, "'Remove' button should not be visible")

    def verify_correct_button_state(self, in_cart: bool) -> None:
        """
        Exactly one of the two cart buttons is shown, depending on whether the product is in the cart.
        """
        if in_cart:
            self.verify_remove_from_cart_button_visible()
            self.verify_add_to_cart_button_not_visible()
        else:
            self.verify_add_to_cart_button_visible()
            self.verify_remove_from_cart_button_not_visible()

    def verify_back_to_products_button_visible(self) -> None:
        self._expect_visible(ProductLocators.BACK_TO_PRODUCTS_BUTTON)

    def verify_cart_badge_count(self, expected_count: int) -> None:
        if expected_count == 0:
            self._expect_hidden(ProductLocators.CART_BADGE, "Cart badge should not be visible")
        else:
            self._expect_text(ProductLocators.CART_BADGE, str(expected_count), "Cart badge count")

    def verify_menu_button_visible(self) -> None:
        self._expect_visible(ProductLocators.MENU_BUTTON)

    def verify_menu_open(self) -> None:
        self._expect_visible(ProductLocators.LOGOUT_LINK, "Menu should be open")
        self._expect_visible(ProductLocators.RESET_APP_STATE_LINK)

    def verify_menu_closed(self) -> None:
        self._expect_hidden(ProductLocators.LOGOUT_LINK, "Menu should be closed")
