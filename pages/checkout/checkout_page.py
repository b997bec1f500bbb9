import logging
import math
import re
from enum import Enum
from typing import Optional

from pages.checkout.checkout_locators import CheckoutLocators
from pages.common.driver import PageDriver
from pages.common.exceptions import PageStateError
from pages.common.shop_page import ShopPage
from utils.track_time import track_execution_time

logger = logging.getLogger(__name__)

AMOUNT = re.compile(r'\$([0-9]+\.[0-9]{2})')


def parse_amount(text: Optional[str]) -> float:
    """
    Parse the dollar amount of a summary label such as "Item total: $39.98".

    :return: The amount, or NaN when there is no label or it holds no amount.
    """
    match = AMOUNT.search(text or '')
    return float(match.group(1)) if match else math.nan


class CheckoutStep(Enum):
    INFORMATION = 'checkout-step-one.html'
    OVERVIEW = 'checkout-step-two.html'
    COMPLETE = 'checkout-complete.html'

    @classmethod
    def from_url(cls, url: str) -> Optional["CheckoutStep"]:
        """
        Work out the checkout step from a page URL.

        :return: The matching step, or None when the URL is not part of the checkout flow.
        """
        path = url.split('?', 1)[0].split('#', 1)[0]
        for step in cls:
            if path.endswith(step.value):
                return step
        return None


class CheckoutPage(ShopPage):
    """
    The three checkout pages: customer information, order overview and order complete.

    ``step`` is re-read from the URL after every action, so callers can tell which of the three
    pages the browser is on without probing the DOM.
    """

    def __init__(self, driver: PageDriver):
        super().__init__(driver)
        self.step: Optional[CheckoutStep] = None

    def _sync_step(self) -> Optional[CheckoutStep]:
        self.step = CheckoutStep.from_url(self.current_url)
        return self.step

    @track_execution_time
    def fill_checkout_information(self, first_name: str, last_name: str, postal_code: str) -> None:
        self.type(CheckoutLocators.FIRST_NAME_FIELD, first_name)
        self.type(CheckoutLocators.LAST_NAME_FIELD, last_name)
        self.type(CheckoutLocators.POSTAL_CODE_FIELD, postal_code)
        self._sync_step()

    def continue_to_overview(self) -> None:
        """
        Submit the information form. With a missing field the page stays on the information step.
        """
        self.click(CheckoutLocators.CONTINUE_BUTTON)
        self._sync_step()

    def finish_checkout(self) -> None:
        self.click(CheckoutLocators.FINISH_BUTTON)
        self._sync_step()

    def cancel_checkout(self) -> None:
        self.click(CheckoutLocators.CANCEL_BUTTON)
        self._sync_step()

    def back_home(self) -> None:
        self.click(CheckoutLocators.BACK_HOME_BUTTON)
        self._sync_step()

    def go_back_to_cart(self) -> None:
        """
        Leave the checkout flow from whichever step the browser is on.

        The information step goes back to the cart and the overview step cancels to the inventory;
        both use the cancel button. The complete step only offers "Back Home".

        Raises:
            PageStateError: If the browser is not on a checkout page.
        """
        step = self._sync_step()
        logger.debug("Leaving checkout from step %s", step)
        if step in (CheckoutStep.INFORMATION, CheckoutStep.OVERVIEW):
            self.cancel_checkout()
        elif step is CheckoutStep.COMPLETE:
            self.back_home()
        else:
            raise PageStateError(f"Not on a checkout page: {self.current_url}")

    def get_checkout_item_count(self) -> int:
        return self.get_element_count(CheckoutLocators.CHECKOUT_ITEMS)

    def get_checkout_item_names(self) -> list[str]:
        return [name.strip() for name in self.driver.all_text_contents(CheckoutLocators.CHECKOUT_ITEM_NAMES)]

    def get_checkout_item_price(self, item_name: str) -> Optional[str]:
        return self.get_text(f'{CheckoutLocators.checkout_item_by_name(item_name)} '
                             f'{CheckoutLocators.CHECKOUT_ITEM_PRICE}')

    def get_subtotal(self) -> float:
        return parse_amount(self.get_text(CheckoutLocators.SUBTOTAL))

    def get_tax(self) -> float:
        return parse_amount(self.get_text(CheckoutLocators.TAX))

    def get_total(self) -> float:
        return parse_amount(self.get_text(CheckoutLocators.TOTAL))

    def clear_checkout_form(self) -> None:
        self.clear_field(CheckoutLocators.FIRST_NAME_FIELD)
        self.clear_field(CheckoutLocators.LAST_NAME_FIELD)
        self.clear_field(CheckoutLocators.POSTAL_CODE_FIELD)

    def wait_for_checkout_form(self) -> None:
        self.wait_for_element(CheckoutLocators.FIRST_NAME_FIELD)
        self.wait_for_element(CheckoutLocators.LAST_NAME_FIELD)
        self.wait_for_element(CheckoutLocators.POSTAL_CODE_FIELD)
        self.wait_for_element(CheckoutLocators.CONTINUE_BUTTON)
        self._sync_step()

    def wait_for_checkout_overview(self) -> None:
        self.wait_for_element(CheckoutLocators.CHECKOUT_ITEMS)
        self.wait_for_element(CheckoutLocators.FINISH_BUTTON)
        self.wait_for_element(CheckoutLocators.CANCEL_BUTTON)
        self._sync_step()

    def wait_for_checkout_complete(self) -> None:
        self.wait_for_element(CheckoutLocators.COMPLETE_HEADER)
        self.wait_for_element(CheckoutLocators.COMPLETE_MESSAGE)
        self._sync_step()

    def verify_checkout_page_elements(self) -> None:
        for selector in (CheckoutLocators.CHECKOUT_INFO, CheckoutLocators.FIRST_NAME_FIELD,
                         CheckoutLocators.LAST_NAME_FIELD, CheckoutLocators.POSTAL_CODE_FIELD,
                         CheckoutLocators.CONTINUE_BUTTON, CheckoutLocators.CANCEL_BUTTON):
            self.wait_for_element(selector)
