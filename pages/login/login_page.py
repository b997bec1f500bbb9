from typing import Optional

from pages.common.base_element import BaseElement
from pages.common.base_page import BasePage
from pages.login.login_locators import LoginLocators
from utils.track_time import track_execution_time


class LoginPage(BasePage):

    @property
    def username_input(self) -> BaseElement:
        return self.find_element(LoginLocators.USERNAME_FIELD)

    @property
    def password_input(self) -> BaseElement:
        return self.find_element(LoginLocators.PASSWORD_FIELD)

    @property
    def login_button(self) -> BaseElement:
        return self.find_element(LoginLocators.LOGIN_BUTTON)

    @property
    def error_message(self) -> BaseElement:
        return self.find_element(LoginLocators.ERROR_MESSAGE)

    def open_page(self, base_url: str) -> None:
        """
        Open the login page.
        """
        self.navigate(base_url)

    @track_execution_time
    def login(self, username: str, password: str) -> None:
        """
        Fill in the credentials and submit the form.

        Success is not checked here; callers verify the URL or use LoginAssertions.
        """
        self.username_input.fill(username)
        self.password_input.fill(password)
        self.login_button.click()
        self.wait_for_page_load()

    def clear_login_form(self) -> None:
        self.username_input.clear()
        self.password_input.clear()

    def get_username_value(self) -> str:
        return self.username_input.value

    def get_password_value(self) -> str:
        return self.password_input.value

    def is_login_button_enabled(self) -> bool:
        return self.login_button.is_enabled

    def is_username_field_visible(self) -> bool:
        return self.username_input.is_visible

    def is_password_field_visible(self) -> bool:
        return self.password_input.is_visible

    def get_login_button_text(self) -> Optional[str]:
        # The submit control is an <input>, its label lives in the value attribute
        return self.login_button.get_attribute('value')

    def get_error_message(self) -> Optional[str]:
        """
        Text of the error banner, or None when no error is shown.
        """
        if not self.error_message.is_visible:
            return None
        return self.error_message.text

    def wait_for_login_form(self) -> None:
        self.wait_for_element(LoginLocators.USERNAME_FIELD)
        self.wait_for_element(LoginLocators.PASSWORD_FIELD)
        self.wait_for_element(LoginLocators.LOGIN_BUTTON)

    def login_with_empty_credentials(self) -> None:
        self.login_button.click()

    def login_with_username_only(self, username: str) -> None:
        self.username_input.fill(username)
        self.login_button.click()

    def login_with_password_only(self, password: str) -> None:
        self.password_input.fill(password)
        self.login_button.click()
