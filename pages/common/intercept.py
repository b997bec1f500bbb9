import logging
from contextlib import contextmanager
from typing import Any, Iterable

from playwright.sync_api import Page, Route

logger = logging.getLogger(__name__)


class RouteMocker:
    """
    Context managers that stub or block network traffic of a page while a block of test code runs.

    Every handler is unrouted on exit, even if the block raises.
    """

    def __init__(self, page: Page):
        self.page = page

    @contextmanager
    def mock_json_response(self, url_pattern: str, payload: Any, status: int = 200):
        """
        Answer requests matching a URL glob with a fixed JSON body instead of reaching the server.

        Args:
            url_pattern (str): Glob passed to ``page.route``, e.g. "**/inventory_items.json".
            payload (Any): Object Playwright serialises as the JSON response body.
            status (int): HTTP status of the stubbed response.
        """
        def handle_route(route: Route):
            logger.debug("Stubbing %s with a %d JSON response", route.request.url, status)
            route.fulfill(status=status, json=payload)

        self.page.route(url_pattern, handle_route)
        try:
            yield
        finally:
            self.page.unroute(url_pattern, handle_route)

    @contextmanager
    def block_resources(self, resource_types: Iterable[str]):
        """
        Abort requests of the given resource types, e.g. ("image", "font"), and let the rest through.

        Args:
            resource_types (Iterable[str]): Playwright resource types to abort.
        """
        blocked = frozenset(resource_types)

        def handle_route(route: Route):
            if route.request.resource_type in blocked:
                route.abort()
            else:
                route.continue_()

        self.page.route("**/*", handle_route)
        try:
            yield
        finally:
            self.page.unroute("**/*", handle_route)
