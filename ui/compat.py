import flet as ft

HAS_WRAP = hasattr(ft, "Wrap")
TEXT_ACCEPTS_DECORATION = "decoration" in ft.Text.__init__.__code__.co_varnames


def wrap_row(controls, spacing=16, run_spacing=16):
    if HAS_WRAP:
        return ft.Wrap(controls=controls, spacing=spacing, run_spacing=run_spacing)
    return ft.Row(controls=controls, wrap=True, spacing=spacing, run_spacing=run_spacing)


def strike_text(text: str, *, strike: bool = False, size=None, color=None, weight=None):
    """Text that is crossed out when ``strike`` is set (completed tasks)."""
    decoration = ft.TextDecoration.LINE_THROUGH if strike else None
    if TEXT_ACCEPTS_DECORATION:
        t = ft.Text(text, size=size, color=color, weight=weight)
        if decoration:
            t.decoration = decoration
        return t
    return ft.Text(
        text,
        size=size,
        color=color,
        weight=weight,
        style=ft.TextStyle(decoration=decoration),
    )
