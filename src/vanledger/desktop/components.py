"""Dialogs and small widgets shared by the desktop views."""

from __future__ import annotations

from typing import Callable, Optional

import flet as ft


def _refresh(page: ft.Page) -> None:
    try:
        page.update()
    except AssertionError:
        # Headless/preview pages may not have the dialog attached yet
        pass


def show_snack(page: ft.Page, message: str) -> None:
    page.snack_bar = ft.SnackBar(content=ft.Text(message))
    page.snack_bar.open = True
    _refresh(page)


def show_error_dialog(page: ft.Page, title: str, message: str) -> ft.AlertDialog:
    def close_dialog(_e):
        dialog.open = False
        _refresh(page)

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title),
        content=ft.Text(message),
        actions=[ft.TextButton("OK", on_click=close_dialog)],
    )
    page.dialog = dialog
    dialog.open = True
    _refresh(page)
    return dialog


def show_confirm_dialog(
    page: ft.Page,
    title: str,
    message: str,
    on_confirm: Callable[[], None],
    on_cancel: Optional[Callable[[], None]] = None,
) -> ft.AlertDialog:
    """Two-button confirmation; destructive actions run only from Confirm."""

    def handle_confirm(_e):
        dialog.open = False
        _refresh(page)
        on_confirm()

    def handle_cancel(_e):
        dialog.open = False
        _refresh(page)
        if on_cancel:
            on_cancel()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title),
        content=ft.Text(message),
        actions=[
            ft.TextButton("Cancel", on_click=handle_cancel),
            ft.FilledButton("Confirm", on_click=handle_confirm),
        ],
    )
    page.dialog = dialog
    dialog.open = True
    _refresh(page)
    return dialog


def build_stat_card(label: str, value: str, color: Optional[str] = None) -> ft.Card:
    return ft.Card(
        content=ft.Container(
            content=ft.Column(
                [
                    ft.Text(value, size=22, weight=ft.FontWeight.BOLD, color=color),
                    ft.Text(label, size=13, color=ft.Colors.ON_SURFACE_VARIANT),
                ],
                spacing=4,
            ),
            padding=16,
        ),
        elevation=2,
    )
