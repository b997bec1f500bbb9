class LoginLocators:
    USERNAME_FIELD = '[data-test="username"]'
    PASSWORD_FIELD = '[data-test="password"]'
    LOGIN_BUTTON = '[data-test="login-button"]'
    ERROR_MESSAGE = '[data-test="error"]'
    ERROR_CLOSE_BUTTON = '[data-test="error-button"]'
    LOGIN_LOGO = '.login_logo'
    LOGIN_CONTAINER = '.login_wrapper'
