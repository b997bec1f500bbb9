"""
In-memory stand-in for the Swag Labs shop.

FakeShopDriver implements PageDriver by rebuilding a tiny selector -> elements map from its own
state (current page, cart, form fields) on every call, so page objects and assertion objects run
against it exactly as they would against a browser tab.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Pattern, Union

import pytest

from pages import Pages
from pages.cart.cart_locators import CartLocators
from pages.checkout.checkout_locators import CheckoutLocators
from pages.common.driver import DEFAULT_EXPECT_TIMEOUT, DEFAULT_TIMEOUT
from pages.common.exceptions import AssertionMismatch, ElementNotFoundError, NavigationError
from pages.common.header_locators import HeaderLocators
from pages.home.home_locators import HomeLocators
from pages.login.login_locators import LoginLocators
from pages.product.product_locators import ProductLocators
from utils.config import TestData, get_test_data

BASE_URL = "https://www.saucedemo.com/"
TAX_RATE = 0.08

PAGE_PATHS = {
    "inventory": "inventory.html",
    "product": "inventory-item.html",
    "cart": "cart.html",
    "information": "checkout-step-one.html",
    "overview": "checkout-step-two.html",
    "complete": "checkout-complete.html",
}


@dataclass
class FakeElement:
    text: Optional[str] = None
    value: Optional[str] = None
    attrs: dict = field(default_factory=dict)
    visible: bool = True
    enabled: bool = True
    on_click: Optional[Callable[[], None]] = None


class FakeShopDriver:
    """
    A Swag Labs tab without a browser.

    Records clicks, pauses, load-state waits and checks so tests can see how page objects drive the page.
    """

    def __init__(self, data: TestData):
        self.data = data
        self.products = data.all_products
        self.url = BASE_URL
        self.logged_in = False
        self.cart: list[str] = []
        self.fields: dict[str, str] = {}
        self.error: Optional[str] = None
        self.menu_open = False
        self.sort = "az"
        self.details: Optional[str] = None
        self.clicks: list[str] = []
        self.pauses: list[int] = []
        self.load_states: list[str] = []
        self.screenshots: list[Path] = []
        self.checks: list[str] = []

    # State helpers

    @property
    def current_page(self) -> str:
        path = self.url.split("?", 1)[0]
        for name, suffix in PAGE_PATHS.items():
            if path.endswith(suffix):
                return name
        return "login"

    def _open(self, name: str, query: str = "") -> None:
        self.url = BASE_URL + PAGE_PATHS[name] + query
        self.fields = {}
        self.error = None
        self.menu_open = False

    def login_as(self, user: str = "standard") -> "FakeShopDriver":
        account = getattr(self.data.users, user)
        self.logged_in = True
        self._open("inventory")
        self.clicks.append(f"<login as {account.username}>")
        return self

    def _submit_login(self) -> None:
        username = self.fields.get(LoginLocators.USERNAME_FIELD, "")
        password = self.fields.get(LoginLocators.PASSWORD_FIELD, "")
        messages = self.data.expected_messages
        users = self.data.users
        if not username:
            self.error = messages.username_required_error
        elif not password:
            self.error = messages.password_required_error
        elif username == users.locked.username and password == users.locked.password:
            self.error = messages.locked_user_error
        elif any(username == user.username and password == user.password
                 for user in (users.standard, users.problem, users.performance)):
            self.logged_in = True
            self._open("inventory")
        else:
            self.error = messages.invalid_credentials_error

    def _submit_information(self) -> None:
        messages = self.data.expected_messages
        if not self.fields.get(CheckoutLocators.FIRST_NAME_FIELD):
            self.error = messages.checkout_error
        elif not self.fields.get(CheckoutLocators.LAST_NAME_FIELD):
            self.error = messages.last_name_required_error
        elif not self.fields.get(CheckoutLocators.POSTAL_CODE_FIELD):
            self.error = messages.postal_code_required_error
        else:
            self._open("overview")

    def _finish(self) -> None:
        self.cart = []
        self._open("complete")

    def _logout(self) -> None:
        self.logged_in = False
        self._open_login()

    def _open_login(self) -> None:
        self.url = BASE_URL
        self.fields = {}
        self.error = None
        self.menu_open = False

    def _add(self, name: str) -> Callable[[], None]:
        return lambda: self.cart.append(name)

    def _remove(self, name: str) -> Callable[[], None]:
        return lambda: self.cart.remove(name)

    def _show_details(self, name: str) -> Callable[[], None]:
        def show():
            index = [product.name for product in self.products].index(name)
            self._open("product", f"?id={index}")
            self.details = name

        return show

    def _set(self, attribute: str, value) -> Callable[[], None]:
        return lambda: setattr(self, attribute, value)

    def displayed_products(self):
        by_name = sorted(self.products, key=lambda product: product.name)
        if self.sort == "za":
            return list(reversed(by_name))
        if self.sort == "lohi":
            return sorted(by_name, key=lambda product: product.price_value)
        if self.sort == "hilo":
            return sorted(by_name, key=lambda product: -product.price_value)
        return by_name

    # Virtual DOM

    def _dom(self) -> dict[str, list[FakeElement]]:
        dom: dict[str, list[FakeElement]] = {}

        def add(selector: str, **kwargs) -> None:
            dom.setdefault(selector, []).append(FakeElement(**kwargs))

        def add_field(selector: str, placeholder: str) -> None:
            add(selector, text="", value=self.fields.get(selector, ""), attrs={"placeholder": placeholder})

        page = self.current_page
        if page == "login":
            add_field(LoginLocators.USERNAME_FIELD, "Username")
            add_field(LoginLocators.PASSWORD_FIELD, "Password")
            add(LoginLocators.LOGIN_BUTTON, attrs={"value": "Login"}, on_click=self._submit_login)
            add(LoginLocators.LOGIN_LOGO, text="Swag Labs")
            add(LoginLocators.LOGIN_CONTAINER)
            if self.error:
                add(LoginLocators.ERROR_MESSAGE, text=self.error)
                add(LoginLocators.ERROR_CLOSE_BUTTON, on_click=self._set("error", None))
            return dom

        add(HeaderLocators.CART_ICON, on_click=lambda: self._open("cart"))
        if self.cart:
            add(HeaderLocators.CART_BADGE, text=str(len(self.cart)))
        add(HeaderLocators.MENU_BUTTON, on_click=self._set("menu_open", True))
        if self.menu_open:
            add(HeaderLocators.CLOSE_MENU_BUTTON, on_click=self._set("menu_open", False))
            add(HeaderLocators.ALL_ITEMS_LINK, on_click=lambda: self._open("inventory"))
            add(HeaderLocators.LOGOUT_LINK, on_click=self._logout)
            add(HeaderLocators.RESET_APP_STATE_LINK, on_click=lambda: self.cart.clear())

        if page == "inventory":
            self._inventory_dom(add)
        elif page == "product":
            self._product_dom(add)
        elif page == "cart":
            self._cart_dom(add)
        elif page == "information":
            add(CheckoutLocators.CHECKOUT_INFO)
            add_field(CheckoutLocators.FIRST_NAME_FIELD, "First Name")
            add_field(CheckoutLocators.LAST_NAME_FIELD, "Last Name")
            add_field(CheckoutLocators.POSTAL_CODE_FIELD, "Zip/Postal Code")
            add(CheckoutLocators.CONTINUE_BUTTON, attrs={"value": "Continue"}, on_click=self._submit_information)
            add(CheckoutLocators.CANCEL_BUTTON, text="Cancel", on_click=lambda: self._open("cart"))
            if self.error:
                add(CheckoutLocators.ERROR_MESSAGE, text=self.error)
        elif page == "overview":
            self._overview_dom(add)
        elif page == "complete":
            add(CheckoutLocators.COMPLETE_HEADER, text=self.data.expected_messages.checkout_complete)
            add(CheckoutLocators.COMPLETE_MESSAGE, text=self.data.expected_messages.checkout_complete_message)
            add(CheckoutLocators.PONY_EXPRESS_IMAGE, attrs={"src": "/static/media/pony-express.png"})
            add(CheckoutLocators.BACK_HOME_BUTTON, text="Back Home", on_click=lambda: self._open("inventory"))
        return dom

    def _inventory_dom(self, add) -> None:
        add(HomeLocators.PRODUCT_SORT, value=self.sort)
        add(HomeLocators.INVENTORY_CONTAINER)
        for product in self.displayed_products():
            name = product.name
            item = HomeLocators.product_item_by_name(name)
            slug = ProductLocators.slug(name)
            add(HomeLocators.PRODUCT_ITEMS)
            add(item)
            add(HomeLocators.PRODUCT_NAME, text=name)
            add(HomeLocators.PRODUCT_PRICE, text=product.price)
            add(HomeLocators.PRODUCT_DESCRIPTION, text=product.description)
            add(HomeLocators.PRODUCT_IMAGE, attrs={"src": f"/static/media/{slug}.jpg"})
            add(f"{item} {HomeLocators.PRODUCT_PRICE}", text=product.price)
            add(f"{item} {HomeLocators.PRODUCT_DESCRIPTION}", text=product.description)
            add(HomeLocators.product_image_by_name(name), attrs={"src": f"/static/media/{slug}.jpg"})
            add(HomeLocators.product_name_link_by_name(name), text=name, on_click=self._show_details(name))
            if name in self.cart:
                for selector in (HomeLocators.REMOVE_FROM_CART_BUTTONS, HomeLocators.remove_from_cart_button_by_name(name),
                                 f'[data-test="remove-{slug}"]'):
                    add(selector, text="Remove", on_click=self._remove(name))
            else:
                for selector in (HomeLocators.ADD_TO_CART_BUTTONS, HomeLocators.add_to_cart_button_by_name(name),
                                 f'[data-test="add-to-cart-{slug}"]'):
                    add(selector, text="Add to cart", on_click=self._add(name))

    def _product_dom(self, add) -> None:
        product = next(product for product in self.products if product.name == self.details)
        slug = ProductLocators.slug(product.name)
        add(ProductLocators.DETAILS_CONTAINER)
        add(ProductLocators.PRODUCT_NAME, text=product.name)
        add(ProductLocators.PRODUCT_PRICE, text=product.price)
        add(ProductLocators.PRODUCT_DESCRIPTION, text=product.description)
        add(ProductLocators.PRODUCT_IMAGE, attrs={"src": f"/static/media/{slug}.jpg"})
        add(ProductLocators.BACK_TO_PRODUCTS_BUTTON, on_click=lambda: self._open("inventory"))
        if product.name in self.cart:
            for selector in (ProductLocators.REMOVE_FROM_CART_BUTTON,
                             ProductLocators.remove_from_cart_button_by_name(product.name)):
                add(selector, text="Remove", on_click=self._remove(product.name))
        else:
            for selector in (ProductLocators.ADD_TO_CART_BUTTON,
                             ProductLocators.add_to_cart_button_by_name(product.name)):
                add(selector, text="Add to cart", on_click=self._add(product.name))

    def _cart_rows(self, add, removable: bool) -> None:
        prices = {product.name: product.price for product in self.products}
        for name in self.cart:
            row = CartLocators.cart_item_by_name(name)
            add(CartLocators.CART_ITEMS)
            add(row)
            add(CartLocators.CART_ITEM_NAMES, text=name)
            add(CartLocators.CART_ITEM_PRICE, text=prices[name])
            add(CartLocators.CART_ITEM_QUANTITY, text="1")
            add(f"{row} {CartLocators.CART_ITEM_PRICE}", text=prices[name])
            add(f"{row} {CartLocators.CART_ITEM_QUANTITY}", text="1")
            if removable:
                add(CartLocators.REMOVE_BUTTONS, text="Remove", on_click=self._remove(name))
                add(CartLocators.remove_button_by_name(name), text="Remove", on_click=self._remove(name))

    def _cart_dom(self, add) -> None:
        add(CartLocators.CART_TITLE, text="Your Cart")
        add(CartLocators.CART_QUANTITY_LABEL, text="QTY")
        add(CartLocators.CART_DESCRIPTION, text="Description")
        add(CartLocators.CHECKOUT_BUTTON, text="Checkout", on_click=lambda: self._open("information"))
        add(CartLocators.CONTINUE_SHOPPING_BUTTON, text="Continue Shopping", on_click=lambda: self._open("inventory"))
        self._cart_rows(add, removable=True)

    def _overview_dom(self, add) -> None:
        self._cart_rows(add, removable=False)
        subtotal = round(sum(product.price_value for product in self.products if product.name in self.cart), 2)
        tax = round(subtotal * TAX_RATE, 2)
        add(CheckoutLocators.SUBTOTAL, text=f"Item total: ${subtotal:.2f}")
        add(CheckoutLocators.TAX, text=f"Tax: ${tax:.2f}")
        add(CheckoutLocators.TOTAL, text=f"Total: ${subtotal + tax:.2f}")
        add(CheckoutLocators.PAYMENT_INFO, text="SauceCard #31337")
        add(CheckoutLocators.SHIPPING_INFO, text="Free Pony Express Delivery!")
        add(CheckoutLocators.FINISH_BUTTON, text="Finish", on_click=self._finish)
        add(CheckoutLocators.CANCEL_BUTTON, text="Cancel", on_click=lambda: self._open("inventory"))

    def _find(self, selector: str, nth: Optional[int] = None) -> FakeElement:
        elements = self._dom().get(selector, [])
        if nth is None and len(elements) > 1:
            raise ValueError(f"strict mode violation: '{selector}' resolved to {len(elements)} elements")
        index = nth or 0
        if index >= len(elements) or not elements[index].visible:
            raise ElementNotFoundError(selector, DEFAULT_TIMEOUT)
        return elements[index]

    def _pick(self, selector: str, nth: Optional[int] = None) -> Optional[FakeElement]:
        elements = self._dom().get(selector, [])
        index = nth or 0
        return elements[index] if index < len(elements) else None

    # PageDriver

    def title(self) -> str:
        return "Swag Labs"

    def goto(self, url: str) -> None:
        if not url.startswith(BASE_URL):
            raise NavigationError(url, "net::ERR_NAME_NOT_RESOLVED")
        self.url = url
        self.fields = {}
        self.error = None
        if self.current_page != "login" and not self.logged_in:
            path = url[len(BASE_URL) - 1:]
            self.url = BASE_URL
            self.error = f"Epic sadface: You can only access '{path}' when you are logged in."

    def click(self, selector: str, nth: Optional[int] = None, button: str = "left") -> None:
        element = self._find(selector, nth)
        self.clicks.append(selector)
        if button == "left" and element.on_click is not None:
            element.on_click()

    def dblclick(self, selector: str, nth: Optional[int] = None) -> None:
        self._find(selector, nth)

    def hover(self, selector: str, nth: Optional[int] = None) -> None:
        self._find(selector, nth)

    def fill(self, selector: str, text: str, nth: Optional[int] = None) -> None:
        element = self._find(selector, nth)
        if element.value is None:
            raise ValueError(f"'{selector}' is not an input")
        self.fields[selector] = text

    def clear(self, selector: str, nth: Optional[int] = None) -> None:
        self.fill(selector, "", nth=nth)

    def select_option(self, selector: str, value: str, nth: Optional[int] = None) -> None:
        self._find(selector, nth)
        if selector != HomeLocators.PRODUCT_SORT or value not in ("az", "za", "lohi", "hilo"):
            raise ElementNotFoundError(f"{selector} option[value={value}]", DEFAULT_TIMEOUT)
        self.sort = value

    def text_content(self, selector: str, nth: Optional[int] = None) -> Optional[str]:
        element = self._pick(selector, nth)
        return element.text if element is not None else None

    def all_text_contents(self, selector: str) -> list[str]:
        return [element.text or "" for element in self._dom().get(selector, [])]

    def get_attribute(self, selector: str, name: str, nth: Optional[int] = None) -> Optional[str]:
        element = self._pick(selector, nth)
        return element.attrs.get(name) if element is not None else None

    def input_value(self, selector: str, nth: Optional[int] = None) -> str:
        return self._find(selector, nth).value or ""

    def is_visible(self, selector: str, nth: Optional[int] = None) -> bool:
        element = self._pick(selector, nth)
        return element is not None and element.visible

    def is_enabled(self, selector: str, nth: Optional[int] = None) -> bool:
        element = self._pick(selector, nth)
        return element is not None and element.visible and element.enabled

    def count(self, selector: str, nth: Optional[int] = None) -> int:
        if nth is not None:
            return int(self._pick(selector, nth) is not None)
        return len(self._dom().get(selector, []))

    def wait_for(self, selector: str, state: str = "visible", timeout: int = DEFAULT_TIMEOUT,
                 nth: Optional[int] = None) -> None:
        if self.is_visible(selector, nth) != (state == "visible"):
            raise ElementNotFoundError(selector, timeout, state)

    def wait_for_load_state(self, state: str = "load") -> None:
        self.load_states.append(state)

    def wait_for_timeout(self, timeout: int) -> None:
        self.pauses.append(timeout)

    def screenshot(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.write_bytes(b"\x89PNG fake")
        self.screenshots.append(path)

    # The page never changes on its own, so every check is decided by a single read.

    def _check(self, description: str, expected, actual, holds: bool) -> None:
        self.checks.append(description)
        if not holds:
            raise AssertionMismatch(description, expected, actual)

    def expect_visible(self, selector: str, nth: Optional[int] = None,
                       timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        visible = self.is_visible(selector, nth)
        self._check(f"Element '{selector}' should be visible", True, visible, visible)

    def expect_hidden(self, selector: str, nth: Optional[int] = None,
                      timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        visible = self.is_visible(selector, nth)
        self._check(f"Element '{selector}' should not be visible", False, visible, not visible)

    def expect_enabled(self, selector: str, nth: Optional[int] = None,
                       timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        enabled = self.is_enabled(selector, nth)
        self._check(f"Element '{selector}' should be enabled", True, enabled, enabled)

    def expect_text(self, selector: str, expected: str, nth: Optional[int] = None,
                    timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        content = self.text_content(selector, nth)
        actual = content.strip() if content is not None else None
        self._check(f"Text of '{selector}'", expected, actual, actual == expected)

    def expect_count(self, selector: str, expected: int, timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        actual = self.count(selector)
        self._check(f"Number of elements matching '{selector}'", expected, actual, actual == expected)

    def expect_value(self, selector: str, expected: str, nth: Optional[int] = None,
                     timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        element = self._pick(selector, nth)
        actual = (element.value or "") if element is not None else None
        self._check(f"Value of '{selector}'", expected, actual, actual == expected)

    def expect_attribute(self, selector: str, name: str, expected: Optional[str] = None, nth: Optional[int] = None,
                         timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        actual = self.get_attribute(selector, name, nth)
        if expected is None:
            self._check(f"Attribute '{name}' of '{selector}'", "<present>", actual, actual is not None)
        else:
            self._check(f"Attribute '{name}' of '{selector}'", expected, actual, actual == expected)

    def expect_url(self, pattern: Pattern[str], timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        self._check("Page URL", pattern.pattern, self.url, bool(pattern.search(self.url)))

    def expect_title(self, expected: str, timeout: int = DEFAULT_EXPECT_TIMEOUT) -> None:
        self._check("Page title", expected, self.title(), self.title() == expected)


@pytest.fixture(scope="session")
def shop_data() -> TestData:
    return get_test_data(BASE_URL)


@pytest.fixture
def driver(shop_data) -> FakeShopDriver:
    """
    A fresh fake tab on the login page.
    """
    return FakeShopDriver(shop_data)


@pytest.fixture
def logged_in_driver(driver) -> FakeShopDriver:
    return driver.login_as("standard")


@pytest.fixture
def shop(logged_in_driver) -> Pages:
    """
    Page objects and assertion objects bound to a logged-in fake tab.
    """
    return Pages(logged_in_driver)
