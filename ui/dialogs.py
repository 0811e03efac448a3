from typing import Callable

import flet as ft


def confirm_delete_dialog(
    page: ft.Page,
    *,
    on_confirm: Callable[[], None],
    on_cancel: Callable[[], None],
) -> ft.AlertDialog:
    dlg: ft.AlertDialog

    def _close(callback: Callable[[], None]):
        page.close(dlg)
        callback()

    dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text("Delete task"),
        content=ft.Text("Are you sure you want to delete this task? This action cannot be undone."),
        actions=[
            ft.TextButton("Cancel", on_click=lambda e: _close(on_cancel)),
            ft.FilledButton(
                "Delete",
                icon=ft.Icons.DELETE_OUTLINE,
                style=ft.ButtonStyle(bgcolor=ft.Colors.RED_600, color=ft.Colors.WHITE),
                on_click=lambda e: _close(on_confirm),
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    page.open(dlg)
    return dlg


def show_toast(page: ft.Page, message: str, *, error: bool = False) -> None:
    bar = ft.SnackBar(
        ft.Text(message, color=ft.Colors.WHITE),
        bgcolor=ft.Colors.RED_600 if error else ft.Colors.GREEN_700,
    )
    page.open(bar)
