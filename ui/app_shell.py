# ui/app_shell.py
from __future__ import annotations

import logging
from typing import Optional

import flet as ft

from core.settings import UI
from services.tasks import TaskService

from .pages.tasks import TasksPage

logger = logging.getLogger("taskpad.ui")


class AppShell:
    def __init__(self, page: ft.Page, service: TaskService, caller: Optional[str]):
        self.page = page
        self.caller = caller

        self.page.title = UI.app_title
        self.page.horizontal_alignment = ft.CrossAxisAlignment.CENTER
        self.page.vertical_alignment = ft.MainAxisAlignment.START
        self.page.bgcolor = UI.theme.surface_bg

        self._tasks = TasksPage(self, service, caller)

        self.root = ft.Container(
            content=self._tasks.view,
            expand=True,
            width=UI.content_max_width,
        )

    # ---------- mount ----------
    def mount(self):
        self.page.controls.clear()
        self.page.add(self.root)
        self.page.on_disconnect = lambda e: self.unmount()
        self._tasks.activate_from_menu()
        logger.info("UI mounted for user %s", self.caller)

    def unmount(self):
        self._tasks.dispose()
        logger.info("UI closed for user %s", self.caller)
