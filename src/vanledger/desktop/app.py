"""Main Flet desktop application entry point."""

from __future__ import annotations

import time

import flet as ft

from ..devtools import dev_log
from ..logging_config import setup_logging
from .context import create_app_context
from .navigation import HOME_ROUTE, LOGIN_ROUTE, Router
from .views.auth import build_auth_view
from .views.records import build_records_view


def main(page: ft.Page) -> None:
    """Main entry point for the Flet desktop app."""

    ctx = create_app_context()

    logger = setup_logging(ctx.config)
    logger.info("VanLedger desktop application starting", extra={"api_url": ctx.config.API_URL})

    def on_page_close(_):
        logger.info("Application closing")
        ctx.client.close()

    page.on_close = on_page_close

    ctx.page = page
    page.title = "VanLedger (DEV)" if ctx.dev_mode else "VanLedger"
    if ctx.dev_mode:
        dev_log(ctx.config, "Dev mode enabled", context={"data_dir": str(ctx.config.DATA_DIR)})
        page.banner = ft.Banner(
            bgcolor=ft.Colors.AMBER_50,
            leading=ft.Icon(ft.Icons.BUG_REPORT, color=ft.Colors.AMBER_700),
            content=ft.Text("Developer mode: errors will be printed to the console."),
            actions=[ft.TextButton("Hide", on_click=lambda e: setattr(page.banner, "open", False))],
            open=True,
        )
    page.theme_mode = ft.ThemeMode.LIGHT
    page.padding = 0
    page.window_width = 1280
    page.window_height = 800
    page.window_min_width = 1024
    page.window_min_height = 600

    router = Router(page, ctx)
    router.register(LOGIN_ROUTE, build_auth_view)
    router.register(HOME_ROUTE, build_records_view)

    page.on_route_change = router.route_change
    page.on_view_pop = router.view_pop

    # Identical Flet error events can repeat many times per second
    last_error = {"message": None, "at": 0.0}

    def _on_error(e: ft.ControlEvent):  # pragma: no cover (UI callback)
        msg = getattr(e, "data", None) or "<no-data>"
        now = time.time()
        if last_error["message"] == msg and now - last_error["at"] < 0.5:
            last_error["at"] = now
            return
        last_error.update(message=msg, at=now)
        logger.error("Flet page error", extra={"event": "error", "data": msg})
        page.snack_bar = ft.SnackBar(content=ft.Text(f"UI error: {msg}"))
        page.snack_bar.open = True
        page.update()

    page.on_error = _on_error

    page.go(LOGIN_ROUTE)


if __name__ == "__main__":
    ft.app(target=main)
