from functools import cached_property

from playwright.sync_api import Page

from pages.cart.cart_assertions import CartAssertions
from pages.cart.cart_page import CartPage
from pages.checkout.checkout_assertions import CheckoutAssertions
from pages.checkout.checkout_page import CheckoutPage
from pages.common.driver import PageDriver, PlaywrightDriver
from pages.common.intercept import RouteMocker
from pages.home.home_assertions import HomeAssertions
from pages.home.home_page import HomePage
from pages.login.login_assertions import LoginAssertions
from pages.login.login_page import LoginPage
from pages.product.product_assertions import ProductAssertions
from pages.product.product_page import ProductPage


class Pages:
    """
    Provides access to all page objects and assertion objects of one browser tab, grouped by feature.

    Accepts either a Playwright page, which is wrapped in a PlaywrightDriver, or any PageDriver.
    """

    def __init__(self, page):
        if isinstance(page, Page):
            self.page = page
            self.driver: PageDriver = PlaywrightDriver(page)
        else:
            self.page = None
            self.driver = page

    # Page objects
    @cached_property
    def login_page(self) -> LoginPage:
        return LoginPage(self.driver)

    @cached_property
    def home_page(self) -> HomePage:
        return HomePage(self.driver)

    @cached_property
    def product_page(self) -> ProductPage:
        return ProductPage(self.driver)

    @cached_property
    def cart_page(self) -> CartPage:
        return CartPage(self.driver)

    @cached_property
    def checkout_page(self) -> CheckoutPage:
        return CheckoutPage(self.driver)

    # Assertion objects
    @cached_property
    def login_assertions(self) -> LoginAssertions:
        return LoginAssertions(self.driver)

    @cached_property
    def home_assertions(self) -> HomeAssertions:
        return HomeAssertions(self.driver)

    @cached_property
    def product_assertions(self) -> ProductAssertions:
        return ProductAssertions(self.driver)

    @cached_property
    def cart_assertions(self) -> CartAssertions:
        return CartAssertions(self.driver)

    @cached_property
    def checkout_assertions(self) -> CheckoutAssertions:
        return CheckoutAssertions(self.driver)

    @cached_property
    def routes(self) -> RouteMocker:
        """
        Network stubbing for the tab. Only available for a real Playwright page.
        """
        if self.page is None:
            raise TypeError("Route mocking needs a Playwright page")
        return RouteMocker(self.page)
