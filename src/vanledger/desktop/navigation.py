"""Navigation and routing for the Flet desktop app."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

import flet as ft

if TYPE_CHECKING:
    from .context import AppContext

from ..devtools import dev_log
from ..logging_config import get_logger
from .components import show_error_dialog

logger = get_logger(__name__)

ViewBuilder = Callable[["AppContext", ft.Page], ft.View]

LOGIN_ROUTE = "/login"
HOME_ROUTE = "/records"


class Router:
    """Maps routes to view builders; everything but /login needs a login."""

    def __init__(self, page: ft.Page, context: AppContext):
        self.page = page
        self.context = context
        self.routes: Dict[str, ViewBuilder] = {}

    def register(self, route: str, builder: ViewBuilder) -> None:
        logger.debug(f"Registering route: {route}")
        self.routes[route] = builder

    def resolve(self, route: str | None) -> str:
        """Return the route that will actually be shown for ``route``."""

        route = route or HOME_ROUTE
        if route != LOGIN_ROUTE and not self.context.authenticated:
            return LOGIN_ROUTE
        if route not in self.routes:
            logger.warning(f"Unknown route {route}, showing {HOME_ROUTE}")
            return HOME_ROUTE
        return route

    def route_change(self, e: ft.RouteChangeEvent) -> None:
        requested = getattr(e, "route", None) or HOME_ROUTE
        route = self.resolve(requested)
        if route != requested:
            logger.info(f"Redirecting {requested} -> {route}")
            self.page.go(route)
            return

        try:
            view = self.routes[route](self.context, self.page)
            if self.page.views:
                self.page.views[-1] = view
            else:
                self.page.views.append(view)
            self.page.update()
            logger.info(f"Loaded view for route: {route}")
        except Exception as ex:
            logger.error(f"Failed to build view for route {route}: {ex}", exc_info=True)
            dev_log(self.context.config, "Route load failed", exc=ex, context={"route": route})
            show_error_dialog(self.page, "Error", f"Error loading view: {ex}")

    def view_pop(self, e: ft.ViewPopEvent) -> None:
        if len(self.page.views) > 1:
            self.page.views.pop()
