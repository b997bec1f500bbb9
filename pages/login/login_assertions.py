from pages.common.base_assertions import BaseAssertions
from pages.login.login_locators import LoginLocators


class LoginAssertions(BaseAssertions):

    def verify_login_error_visible(self) -> None:
        self._expect_visible(LoginLocators.ERROR_MESSAGE, "Login error message should be visible")

    def verify_login_error_text(self, expected_text: str) -> None:
        self._expect_text(LoginLocators.ERROR_MESSAGE, expected_text, "Login error message")

    def verify_no_error_messages(self) -> None:
        self._expect_count(LoginLocators.ERROR_MESSAGE, 0, "Number of login error messages")

    def verify_login_form_visible(self) -> None:
        self._expect_visible(LoginLocators.USERNAME_FIELD)
        self._expect_visible(LoginLocators.PASSWORD_FIELD)
        self._expect_visible(LoginLocators.LOGIN_BUTTON)

    def verify_login_button_enabled(self) -> None:
        self._expect_enabled(LoginLocators.LOGIN_BUTTON)

    def verify_login_button_text(self, expected_text: str = "Login") -> None:
        self._expect_attribute(LoginLocators.LOGIN_BUTTON, 'value', expected_text, "Login button label")

    def verify_login_form_placeholders(self) -> None:
        self._expect_attribute(LoginLocators.USERNAME_FIELD, 'placeholder', 'Username')
        self._expect_attribute(LoginLocators.PASSWORD_FIELD, 'placeholder', 'Password')

    def verify_username_field_empty(self) -> None:
        self._expect_value(LoginLocators.USERNAME_FIELD, '', "Username field value")

    def verify_password_field_empty(self) -> None:
        self._expect_value(LoginLocators.PASSWORD_FIELD, '', "Password field value")

    def verify_username_field_value(self, expected_value: str) -> None:
        self._expect_value(LoginLocators.USERNAME_FIELD, expected_value, "Username field value")

    def verify_password_field_value(self, expected_value: str) -> None:
        self._expect_value(LoginLocators.PASSWORD_FIELD, expected_value, "Password field value")
