from typing import Any, Optional


class PageObjectError(Exception):
    """
    Base class for failures raised by page objects and the browser driver.
    """


class ElementNotFoundError(PageObjectError):
    """
    Raised when a wait-bounded operation does not find its element in time.

    Args:
        selector (str): Selector that was waited for.
        timeout (int): Timeout that elapsed, in milliseconds.
        state (str): Element state that was expected (visible, hidden, attached).
    """

    def __init__(self, selector: str, timeout: int, state: str = "visible"):
        self.selector = selector
        self.timeout = timeout
        self.state = state
        super().__init__(f"Element '{selector}' was not {state} within {timeout} ms")


class NavigationError(PageObjectError):
    """
    Raised when the browser cannot reach a URL.
    """

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason
        message = f"Failed to navigate to '{url}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class PageStateError(PageObjectError):
    """
    Raised when a page object action is called while the browser is on a page it does not model.
    """


class AssertionMismatch(AssertionError):
    """
    Raised by assertion objects when the rendered page differs from the expected state.

    Subclasses AssertionError so the reporter counts it as a test failure rather than an error.
    """

    def __init__(self, description: str, expected: Any, actual: Any):
        self.description = description
        self.expected = expected
        self.actual = actual
        super().__init__(f"{description}\n  Expected: {expected!r}\n  Actual:   {actual!r}")
