from pages.checkout.checkout_locators import CheckoutLocators
from pages.checkout.checkout_page import parse_amount
from pages.common.base_assertions import BaseAssertions

FORM_PLACEHOLDERS = {
    CheckoutLocators.FIRST_NAME_FIELD: 'First Name',
    CheckoutLocators.LAST_NAME_FIELD: 'Last Name',
    CheckoutLocators.POSTAL_CODE_FIELD: 'Zip/Postal Code',
}


class CheckoutAssertions(BaseAssertions):

    # Step one: your information

    def verify_checkout_form_visible(self) -> None:
        self._expect_visible(CheckoutLocators.CHECKOUT_INFO)
        self.verify_checkout_information_page_elements()

    def verify_checkout_information_page_elements(self) -> None:
        for selector in (CheckoutLocators.FIRST_NAME_FIELD, CheckoutLocators.LAST_NAME_FIELD,
                         CheckoutLocators.POSTAL_CODE_FIELD, CheckoutLocators.CONTINUE_BUTTON,
                         CheckoutLocators.CANCEL_BUTTON):
            self._expect_visible(selector)

    def verify_continue_button_enabled(self) -> None:
        self._expect_enabled(CheckoutLocators.CONTINUE_BUTTON)

    def verify_cancel_button_enabled(self) -> None:
        self._expect_enabled(CheckoutLocators.CANCEL_BUTTON)

    def verify_first_name_field_value(self, expected_value: str) -> None:
        self._expect_value(CheckoutLocators.FIRST_NAME_FIELD, expected_value, "First name")

    def verify_last_name_field_value(self, expected_value: str) -> None:
        self._expect_value(CheckoutLocators.LAST_NAME_FIELD, expected_value, "Last name")

    def verify_postal_code_field_value(self, expected_value: str) -> None:
        self._expect_value(CheckoutLocators.POSTAL_CODE_FIELD, expected_value, "Postal code")

    def verify_form_empty(self) -> None:
        self.verify_first_name_field_value('')
        self.verify_last_name_field_value('')
        self.verify_postal_code_field_value('')

    def verify_form_placeholders(self) -> None:
        for selector, placeholder in FORM_PLACEHOLDERS.items():
            self._expect_attribute(selector, 'placeholder', placeholder)

    def verify_error_message_visible(self) -> None:
        self._expect_visible(CheckoutLocators.ERROR_MESSAGE, "Checkout error message should be visible")

    def verify_error_message_text(self, expected_text: str) -> None:
        self._expect_text(CheckoutLocators.ERROR_MESSAGE, expected_text, "Checkout error message")

    def verify_no_error_message(self) -> None:
        self._expect_count(CheckoutLocators.ERROR_MESSAGE, 0, "Number of checkout error messages")

    # Step two: overview

    def verify_checkout_overview_visible(self) -> None:
        self.verify_url_contains('checkout-step-two.html')
        self._expect_visible(CheckoutLocators.CHECKOUT_ITEMS)
        self._expect_visible(CheckoutLocators.FINISH_BUTTON)
        self._expect_visible(CheckoutLocators.CANCEL_BUTTON)

    def verify_checkout_item_count(self, expected_count: int) -> None:
        self._expect_count(CheckoutLocators.CHECKOUT_ITEMS, expected_count, "Number of items in the overview")

    def verify_checkout_item_visible(self, item_name: str) -> None:
        self._expect_visible(CheckoutLocators.checkout_item_by_name(item_name),
                             f"'{item_name}' should be listed in the overview")

    def verify_checkout_item_price(self, item_name: str, expected_price: str) -> None:
        selector = f'{CheckoutLocators.checkout_item_by_name(item_name)} {CheckoutLocators.CHECKOUT_ITEM_PRICE}'
        self._expect_text(selector, expected_price, f"Price of '{item_name}' in the overview")

    def verify_payment_information_displayed(self) -> None:
        self._expect_visible(CheckoutLocators.PAYMENT_INFO)

    def verify_shipping_information_displayed(self) -> None:
        self._expect_visible(CheckoutLocators.SHIPPING_INFO)

    def verify_totals_visible(self) -> None:
        self._expect_visible(CheckoutLocators.SUBTOTAL)
        self._expect_visible(CheckoutLocators.TAX)
        self._expect_visible(CheckoutLocators.TOTAL)

    def verify_finish_button_enabled(self) -> None:
        self._expect_enabled(CheckoutLocators.FINISH_BUTTON)

    def verify_totals_consistent(self) -> None:
        """
        Check total equals item total plus tax, to the cent.
        """
        def read():
            subtotal = parse_amount(self.driver.text_content(CheckoutLocators.SUBTOTAL))
            tax = parse_amount(self.driver.text_content(CheckoutLocators.TAX))
            total = parse_amount(self.driver.text_content(CheckoutLocators.TOTAL))
            return total, round(subtotal + tax, 2)

        self._expect(read, lambda actual: actual[0] == actual[1], "Total (shown, item total + tax)",
                     "equal amounts")

    # Complete

    def verify_checkout_complete_visible(self) -> None:
        self.verify_url_contains('checkout-complete.html')
        self._expect_visible(CheckoutLocators.COMPLETE_HEADER)
        self._expect_visible(CheckoutLocators.COMPLETE_MESSAGE)
        self._expect_visible(CheckoutLocators.BACK_HOME_BUTTON)

    def verify_complete_header_text(self, expected_text: str) -> None:
        self._expect_text(CheckoutLocators.COMPLETE_HEADER, expected_text, "Order complete header")

    def verify_complete_message_text(self, expected_text: str) -> None:
        self._expect_text(CheckoutLocators.COMPLETE_MESSAGE, expected_text, "Order complete message")

    def verify_pony_express_image_visible(self) -> None:
        self._expect_visible(CheckoutLocators.PONY_EXPRESS_IMAGE)

    def verify_back_home_button_enabled(self) -> None:
        self._expect_enabled(CheckoutLocators.BACK_HOME_BUTTON)
