"""Login view."""

from __future__ import annotations

from typing import TYPE_CHECKING

import flet as ft

from ...devtools import dev_log
from ...errors import NetworkError
from ...logging_config import get_logger
from ...services import auth
from ..navigation import HOME_ROUTE

if TYPE_CHECKING:  # pragma: no cover
    from ..context import AppContext

logger = get_logger(__name__)


def build_auth_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build login view with name and password fields."""

    if ctx.authenticated:
        page.go(HOME_ROUTE)
        return ft.View(
            route="/login",
            controls=[ft.Container(content=ft.Text("Redirecting..."), padding=20)],
            padding=0,
        )

    name_field = ft.TextField(label="Name", autofocus=True, width=300)
    password_field = ft.TextField(
        label="Password", password=True, can_reveal_password=True, width=300
    )
    error_text = ft.Text("", color=ft.Colors.ERROR, visible=False)
    login_button = ft.FilledButton("Sign in", width=300)

    def _fail(message: str) -> None:
        error_text.value = message
        error_text.visible = True
        login_button.disabled = False
        page.update()

    def do_login(_e):
        error_text.visible = False
        name = (name_field.value or "").strip()
        password = password_field.value or ""
        if not name or not password:
            _fail("Name and password are required")
            return

        login_button.disabled = True
        try:
            accepted = auth.authenticate(ctx.client, name=name, password=password)
        except NetworkError as exc:
            dev_log(ctx.config, "Login request failed", exc=exc)
            _fail(f"Could not sign in: {exc}")
            return

        if not accepted:
            _fail("Invalid name or password")
            return

        ctx.current_user = name
        login_button.disabled = False
        logger.info("User signed in", extra={"user": name})
        page.go(HOME_ROUTE)

    login_button.on_click = do_login
    name_field.on_submit = lambda _: password_field.focus()
    password_field.on_submit = do_login

    return ft.View(
        route="/login",
        controls=[
            ft.Container(
                content=ft.Column(
                    [
                        ft.Icon(ft.Icons.LOCAL_SHIPPING, size=48),
                        ft.Text("VanLedger", size=28, weight=ft.FontWeight.BOLD),
                        name_field,
                        password_field,
                        error_text,
                        login_button,
                    ],
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    spacing=16,
                ),
                alignment=ft.alignment.center,
                expand=True,
            )
        ],
        padding=0,
    )
