from pages.common.base_element import BaseElement
from pages.common.base_page import BasePage
from pages.common.header_locators import HeaderLocators


class ShopPage(BasePage):
    """
    Pages shown after login share the header: cart link, cart badge and the burger menu.
    """

    @property
    def cart_button(self) -> BaseElement:
        return self.find_element(HeaderLocators.CART_ICON)

    @property
    def cart_badge(self) -> BaseElement:
        return self.find_element(HeaderLocators.CART_BADGE)

    def go_to_cart(self) -> None:
        self.cart_button.click()

    def get_cart_badge_count(self) -> int:
        """
        Number shown on the cart badge; the badge is not rendered for an empty cart.
        """
        if not self.cart_badge.is_visible:
            return 0
        return int(self.cart_badge.text or 0)

    def open_menu(self) -> None:
        self.click(HeaderLocators.MENU_BUTTON)
        self.wait_for_element(HeaderLocators.LOGOUT_LINK)

    def close_menu(self) -> None:
        self.click(HeaderLocators.CLOSE_MENU_BUTTON)
        self.find_element(HeaderLocators.LOGOUT_LINK).wait_until_hidden()

    def _click_menu_link(self, selector: str) -> None:
        if not self.is_element_visible(selector):
            self.open_menu()
        self.click(selector)

    def logout(self) -> None:
        self._click_menu_link(HeaderLocators.LOGOUT_LINK)

    def reset_app_state(self) -> None:
        self._click_menu_link(HeaderLocators.RESET_APP_STATE_LINK)
