from pages.common.base_assertions import BaseAssertions
from pages.home.home_locators import HomeLocators
from pages.home.home_page import parse_price


class HomeAssertions(BaseAssertions):

    def verify_cart_count(self, expected_count: int) -> None:
        """
        Check the number on the cart badge. An expected count of 0 means the badge is not rendered.
        """
        if expected_count == 0:
            self.verify_cart_badge_not_visible()
        else:
            self._expect_text(HomeLocators.CART_BADGE, str(expected_count), "Cart badge count")

    def verify_cart_badge_visible(self) -> None:
        self._expect_visible(HomeLocators.CART_BADGE, "Cart badge should be visible")

    def verify_cart_badge_not_visible(self) -> None:
        self._expect_hidden(HomeLocators.CART_BADGE, "Cart badge should not be visible")

    def verify_cart_icon_visible(self) -> None:
        self._expect_visible(HomeLocators.CART_ICON)

    def verify_menu_button_visible(self) -> None:
        self._expect_visible(HomeLocators.MENU_BUTTON)

    def verify_sort_dropdown_visible(self) -> None:
        self._expect_visible(HomeLocators.PRODUCT_SORT)

    def verify_sort_option_selected(self, option: str) -> None:
        self._expect_value(HomeLocators.PRODUCT_SORT, option, "Selected sort option")

    def verify_product_visible(self, product_name: str) -> None:
        self._expect_visible(HomeLocators.product_item_by_name(product_name),
                             f"Product '{product_name}' should be visible")

    def verify_product_price(self, product_name: str, expected_price: str) -> None:
        selector = f'{HomeLocators.product_item_by_name(product_name)} {HomeLocators.PRODUCT_PRICE}'
        self._expect_text(selector, expected_price, f"Price of '{product_name}'")

    def verify_product_description(self, product_name: str, expected_description: str) -> None:
        selector = f'{HomeLocators.product_item_by_name(product_name)} {HomeLocators.PRODUCT_DESCRIPTION}'
        self._expect_text(selector, expected_description, f"Description of '{product_name}'")

    def verify_add_to_cart_button_visible(self, product_name: str) -> None:
        self._expect_visible(HomeLocators.add_to_cart_button_by_name(product_name),
                             f"'Add to cart' button of '{product_name}' should be visible")

    def verify_add_to_cart_button_not_visible(self, product_name: str) -> None:
        self._expect_hidden(HomeLocators.add_to_cart_button_by_name(product_name),
                            f"'Add to cart' button of '{product_name}' should not be visible")

    def verify_remove_from_cart_button_visible(self, product_name: str) -> None:
        self._expect_visible(HomeLocators.remove_from_cart_button_by_name(product_name),
                             f"'Remove' button of '{product_name}' should be visible")

    def verify_remove_from_cart_button_not_visible(self, product_name: str) -> None:
        self._expect_hidden(HomeLocators.remove_from_cart_button_by_name(product_name),
                            f"'Remove' button of '{product_name}' should not be visible")

    def _names(self) -> list[str]:
        return [name.strip() for name in self.driver.all_text_contents(HomeLocators.PRODUCT_NAME)]

    def _prices(self) -> list[float]:
        return [parse_price(price) for price in self.driver.all_text_contents(HomeLocators.PRODUCT_PRICE)]

    def _expect_sorted(self, read, reverse: bool, description: str) -> None:
        self._expect(read, lambda actual: bool(actual) and actual == sorted(actual, reverse=reverse),
                     description, "sorted descending" if reverse else "sorted ascending")

    def verify_products_sorted_by_name_ascending(self) -> None:
        self._expect_sorted(self._names, False, "Product names (A to Z)")

    def verify_products_sorted_by_name_descending(self) -> None:
        self._expect_sorted(self._names, True, "Product names (Z to A)")

    def verify_products_sorted_by_price_ascending(self) -> None:
        self._expect_sorted(self._prices, False, "Product prices (low to high)")

    def verify_products_sorted_by_price_descending(self) -> None:
        self._expect_sorted(self._prices, True, "Product prices (high to low)")
