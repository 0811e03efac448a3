# taskpad/main.py
import logging

import flet as ft

from core.logging_setup import setup_logging
from core.settings import APP_NAME, UI
from services.identity import LocalIdentityResolver
from services.tasks import TaskService
from storage.db import init_db
from ui.app_shell import AppShell

logger = logging.getLogger("taskpad")


def main(page: ft.Page):
    page.title = UI.app_title
    page.theme_mode = UI.theme_mode
    page.theme = ft.Theme(color_scheme_seed=UI.color_scheme_seed)
    page.appbar = ft.AppBar(title=ft.Text(APP_NAME), center_title=False)
    page.padding = 0
    page.window.min_width = UI.window_min_width
    page.window.min_height = UI.window_min_height

    caller = LocalIdentityResolver().resolve()
    if caller is None:
        page.add(ft.Text("Could not establish a local user identity. See the log for details."))
        return
    shell = AppShell(page, TaskService(), caller)
    shell.mount()


def run():
    setup_logging()
    init_db()
    logger.info("%s starting", APP_NAME)
    ft.app(target=main)


if __name__ == "__main__":
    run()
