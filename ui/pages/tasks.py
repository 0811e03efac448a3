# taskpad/ui/pages/tasks.py
from __future__ import annotations

from typing import Callable, Optional

import flet as ft

from core.priorities import (
    priority_bgcolor,
    priority_color,
    priority_icon,
    priority_label,
    priority_options,
)
from core.settings import UI
from models.task import Task, TaskFilter
from services.tasks import TaskService
from ui.compat import strike_text, wrap_row
from ui.dialogs import confirm_delete_dialog, show_toast
from ui.formatting import created_label, due_date_input, due_label, is_overdue
from ui.view_model import TodoViewModel

_FILTER_LABELS = {
    TaskFilter.ALL.value: "All tasks",
    TaskFilter.PENDING.value: "Pending",
    TaskFilter.COMPLETED.value: "Completed",
}


class TasksPage:
    def __init__(self, app, service: TaskService, caller: Optional[str]):
        self.app = app
        self._delete_dialog: ft.AlertDialog | None = None
        self._create_form: ft.Control | None = None
        self._edit_form: tuple[int, ft.Control] | None = None

        # ---------- Stats ----------
        self.total_txt = ft.Text("0", size=24, weight=ft.FontWeight.BOLD)
        self.completed_txt = ft.Text("0", size=24, weight=ft.FontWeight.BOLD)
        self.pending_txt = ft.Text("0", size=24, weight=ft.FontWeight.BOLD)
        self.progress_txt = ft.Text("0%", size=24, weight=ft.FontWeight.BOLD)
        stats_row = wrap_row(
            [
                self._stat_card("📊", "Total Tasks", self.total_txt, UI.stats.total),
                self._stat_card("✅", "Completed", self.completed_txt, UI.stats.completed),
                self._stat_card("⏳", "Pending", self.pending_txt, UI.stats.pending),
                self._stat_card("🎯", "Progress", self.progress_txt, UI.stats.progress),
            ]
        )

        # ---------- Filters ----------
        self.filter_dd = ft.Dropdown(
            label="Show",
            width=180,
            options=[ft.dropdown.Option(key, label) for key, label in _FILTER_LABELS.items()],
            on_change=lambda e: self.vm.set_filter(e.control.value),
        )
        self.search_tf = ft.TextField(
            label="Search",
            hint_text="Search by title or description",
            expand=True,
            prefix=ft.Icon(ft.Icons.SEARCH),
            on_change=lambda e: self.vm.set_search(e.control.value),
        )
        self.add_btn = ft.FilledButton("Add task", icon=ft.Icons.ADD, on_click=lambda e: self.vm.show_form())
        filters = ft.Row(
            [self.search_tf, self.filter_dd, self.add_btn],
            vertical_alignment=ft.CrossAxisAlignment.END,
            spacing=12,
        )

        # ---------- Create form ----------
        self.form_holder = ft.Container()

        # ---------- List ----------
        self.task_list = ft.ListView(expand=True, spacing=10)
        self.empty_block = ft.Container(padding=40, alignment=ft.alignment.center)

        self.view = ft.Container(
            content=ft.Column(
                [
                    stats_row,
                    filters,
                    self.form_holder,
                    self.empty_block,
                    ft.Container(content=self.task_list, expand=True),
                ],
                spacing=16,
                expand=True,
            ),
            expand=True,
            padding=20,
            bgcolor=UI.theme.surface_bg,
        )

        self.vm = TodoViewModel(service, caller, on_change=self.render)
        self.filter_dd.value = self.vm.filter.value

    def activate_from_menu(self):
        self.vm.start()

    def dispose(self):
        self.vm.stop()

    # ---------- Rendering ----------
    def render(self):
        stats = self.vm.stats
        self.total_txt.value = str(stats.total)
        self.completed_txt.value = str(stats.completed)
        self.pending_txt.value = str(stats.pending)
        self.progress_txt.value = f"{stats.completion_rate}%"

        # Forms are kept between renders so typed text survives list refreshes.
        if not self.vm.form_visible:
            self._create_form = None
        elif self._create_form is None:
            self._create_form = self._create_card()
        self.form_holder.content = self._create_form

        if self._edit_form is not None and self._edit_form[0] != self.vm.editing_id:
            self._edit_form = None
        self.task_list.controls = [self._task_card(t) for t in self.vm.tasks]
        self.empty_block.visible = not self.vm.tasks
        self.empty_block.content = self._empty_state()

        for note in self.vm.drain_notifications():
            show_toast(self.app.page, note.message, error=note.kind == "error")

        if self.vm.pending_delete_id is not None and self._delete_dialog is None:
            self._delete_dialog = confirm_delete_dialog(
                self.app.page,
                on_confirm=self._confirm_delete,
                on_cancel=self._cancel_delete,
            )
        self.app.page.update()

    def _confirm_delete(self):
        self._delete_dialog = None
        self.vm.confirm_delete()

    def _cancel_delete(self):
        self._delete_dialog = None
        self.vm.cancel_delete()

    def _stat_card(self, icon: str, label: str, value: ft.Text, color: str):
        return ft.Card(
            content=ft.Container(
                width=200,
                padding=16,
                bgcolor=UI.theme.card_bg,
                content=ft.Row(
                    [
                        ft.Text(icon, size=24, color=color),
                        ft.Column(
                            [ft.Text(label, size=13, color=UI.theme.text_subtle), value],
                            spacing=2,
                        ),
                    ],
                    spacing=12,
                ),
            )
        )

    def _empty_state(self):
        controls = [
            ft.Text("📝", size=48),
            ft.Text("No tasks found", size=18, weight=ft.FontWeight.W_600),
            ft.Text(self.vm.empty_message(), color=UI.theme.text_subtle),
        ]
        if not self.vm.form_visible:
            controls.append(ft.FilledButton("Add Your First Task", on_click=lambda e: self.vm.show_form()))
        return ft.Column(controls, horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=8)

    def _create_card(self):
        form = self._task_form(
            submit_label="Add Task",
            on_submit=lambda title, description, due, priority: self.vm.create_task(
                title, description, due, priority
            ),
        )
        return self._form_card("Add New Task", form, on_close=self.vm.hide_form)

    def _form_card(self, heading: str, form: ft.Control, *, on_close: Callable[[], None]):
        return ft.Card(
            content=ft.Container(
                padding=16,
                bgcolor=UI.theme.card_bg,
                content=ft.Column(
                    [
                        ft.Row(
                            [
                                ft.Text(heading, size=16, weight=ft.FontWeight.W_600),
                                ft.IconButton(icon=ft.Icons.CLOSE, on_click=lambda e: on_close()),
                            ],
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                        ),
                        form,
                    ],
                    spacing=8,
                ),
            )
        )

    def _task_form(self, *, submit_label: str, on_submit, task: Task | None = None):
        title_tf = ft.TextField(
            label="Title", value=task.title if task else "", autofocus=True, expand=True
        )
        description_tf = ft.TextField(
            label="Description",
            value=(task.description or "") if task else "",
            multiline=True,
            min_lines=2,
            max_lines=4,
        )
        due_tf = ft.TextField(
            label="Due date",
            hint_text="YYYY-MM-DD",
            value=due_date_input(task.due_date) if task else "",
            width=180,
        )
        priority_dd = ft.Dropdown(
            label="Priority",
            width=160,
            value=task.priority if task else self.vm.default_priority.value,
            options=[ft.dropdown.Option(key, label) for key, label in priority_options().items()],
        )

        def _submit(_):
            if not (title_tf.value or "").strip():
                title_tf.error_text = "Title is required"
                self.app.page.update()
                return
            on_submit(title_tf.value, description_tf.value, due_tf.value, priority_dd.value)

        return ft.Column(
            [
                title_tf,
                description_tf,
                ft.Row([due_tf, priority_dd], spacing=12),
                ft.Row([ft.FilledButton(submit_label, on_click=_submit)], alignment=ft.MainAxisAlignment.END),
            ],
            spacing=10,
        )

    def _task_card(self, task: Task):
        if self.vm.editing_id == task.id:
            if self._edit_form is not None:
                return self._edit_form[1]
            form = self._task_form(
                submit_label="Save",
                task=task,
                on_submit=lambda title, description, due, priority: self.vm.save_edit(
                    task.id,
                    title=title,
                    description=description,
                    due_date_text=due,
                    priority=priority,
                ),
            )
            card = self._form_card("Edit Task", form, on_close=self.vm.cancel_edit)
            self._edit_form = (task.id, card)
            return card

        overdue = is_overdue(task)
        meta = [self._priority_badge(task.priority)]
        due = due_label(task)
        if due:
            meta.append(
                ft.Text(
                    due,
                    size=12,
                    color=UI.theme.overdue if overdue else UI.theme.text_subtle,
                    weight=ft.FontWeight.W_600 if overdue else None,
                )
            )
        meta.append(ft.Text(created_label(task), size=12, color=UI.theme.text_muted))

        body = [
            strike_text(
                task.title,
                strike=task.completed,
                size=16,
                weight=ft.FontWeight.W_600,
                color=UI.theme.text_subtle if task.completed else None,
            )
        ]
        if task.description:
            body.append(
                strike_text(
                    task.description,
                    strike=task.completed,
                    size=13,
                    color=UI.theme.text_muted if task.completed else UI.theme.text_subtle,
                )
            )
        body.append(ft.Row(meta, spacing=12))

        return ft.Card(
            content=ft.Container(
                padding=16,
                bgcolor=UI.theme.card_bg,
                opacity=0.75 if task.completed else 1.0,
                border=ft.border.only(left=ft.BorderSide(4, UI.theme.overdue)) if overdue else None,
                content=ft.Row(
                    [
                        ft.Checkbox(
                            value=task.completed,
                            on_change=lambda e, task_id=task.id: self.vm.toggle(task_id),
                        ),
                        ft.Column(body, spacing=4, expand=True),
                        ft.IconButton(
                            icon=ft.Icons.EDIT_OUTLINED,
                            tooltip="Edit task",
                            on_click=lambda e, task_id=task.id: self.vm.start_edit(task_id),
                        ),
                        ft.IconButton(
                            icon=ft.Icons.DELETE_OUTLINE,
                            tooltip="Delete task",
                            on_click=lambda e, task_id=task.id: self.vm.request_delete(task_id),
                        ),
                    ],
                    vertical_alignment=ft.CrossAxisAlignment.START,
                ),
            )
        )

    def _priority_badge(self, priority: str):
        return ft.Container(
            content=ft.Text(
                f"{priority_icon(priority)} {priority_label(priority)}",
                size=11,
                weight=ft.FontWeight.W_600,
                color=priority_color(priority),
            ),
            bgcolor=priority_bgcolor(priority),
            padding=ft.padding.symmetric(horizontal=8, vertical=4),
            border_radius=ft.border_radius.all(8),
        )
