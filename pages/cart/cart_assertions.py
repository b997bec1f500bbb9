from pages.cart.cart_locators import CartLocators
from pages.common.base_assertions import BaseAssertions


class CartAssertions(BaseAssertions):

    def verify_item_in_cart(self) -> None:
        """
        Check at least one item is listed in the cart.
        """
        self._expect_visible(CartLocators.CART_ITEMS, "Cart should list at least one item")

    def verify_item_in_cart_by_name(self, item_name: str) -> None:
        self._expect_visible(CartLocators.cart_item_by_name(item_name), f"'{item_name}' should be in the cart")

    def verify_item_not_in_cart_by_name(self, item_name: str) -> None:
        self._expect_hidden(CartLocators.cart_item_by_name(item_name), f"'{item_name}' should not be in the cart")

    def verify_cart_item_count(self, expected_count: int) -> None:
        self._expect_count(CartLocators.CART_ITEMS, expected_count, "Number of cart items")

    def verify_cart_empty(self) -> None:
        self.verify_cart_item_count(0)

    def verify_cart_not_empty(self) -> None:
        self._expect(lambda: self.driver.count(CartLocators.CART_ITEMS), lambda actual: actual > 0,
                     "Number of cart items", "at least 1")

    def verify_cart_title(self, expected_title: str = "Your Cart") -> None:
        self._expect_text(CartLocators.CART_TITLE, expected_title, "Cart page title")

    def verify_cart_description(self) -> None:
        self._expect_visible(CartLocators.CART_DESCRIPTION)
        self._expect_visible(CartLocators.CART_QUANTITY_LABEL)

    def verify_checkout_button_visible(self) -> None:
        self._expect_visible(CartLocators.CHECKOUT_BUTTON)

    def verify_checkout_button_enabled(self) -> None:
        self._expect_enabled(CartLocators.CHECKOUT_BUTTON)

    def verify_continue_shopping_button_visible(self) -> None:
        self._expect_visible(CartLocators.CONTINUE_SHOPPING_BUTTON)

    def verify_continue_shopping_button_enabled(self) -> None:
        self._expect_enabled(CartLocators.CONTINUE_SHOPPING_BUTTON)

    def verify_remove_button_visible(self, item_name: str) -> None:
        self._expect_visible(CartLocators.remove_button_by_name(item_name),
                             f"'Remove' button of '{item_name}' should be visible")
