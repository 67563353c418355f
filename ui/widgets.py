"""
VocabTrainer – Reusable CustomTkinter widgets
==============================================
Shared UI primitives used across the panels, plus the helper that runs
network calls off the Tk main loop.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

import customtkinter as ctk

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Colours / design tokens
# ---------------------------------------------------------------------------
class Theme:
    """Centralised colour palette – dark-mode first."""
    BG_DARK       = "#0f1117"
    BG_PANEL      = "#161822"
    BG_CARD       = "#1e2030"
    BG_CARD_HOVER = "#272a3d"
    BG_LEARNED    = "#1b2b27"
    ACCENT        = "#7c6ff5"     # purple accent
    ACCENT_HOVER  = "#6958d9"
    SUCCESS       = "#43d9a2"
    SUCCESS_HOVER = "#34b888"
    DANGER        = "#f55a6a"
    WARNING       = "#f5c842"
    TEXT_PRIMARY   = "#e2e4f0"
    TEXT_SECONDARY = "#8b8fa8"
    TEXT_MUTED     = "#5b5f78"
    BORDER         = "#2a2d40"
    FONT_FAMILY    = "Segoe UI"
    FONT_MONO      = "Consolas"


def font(size: int = 13, weight: str = "normal", family: str = Theme.FONT_FAMILY) -> ctk.CTkFont:
    return ctk.CTkFont(family=family, size=size, weight=weight)


# ---------------------------------------------------------------------------
# Styled buttons
# ---------------------------------------------------------------------------
class AccentButton(ctk.CTkButton):
    """A consistently-styled accent button."""

    def __init__(self, master, text: str = "", command=None, **kw):
        kw.setdefault("fg_color", Theme.ACCENT)
        kw.setdefault("hover_color", Theme.ACCENT_HOVER)
        kw.setdefault("text_color", "#ffffff")
        kw.setdefault("corner_radius", 8)
        kw.setdefault("font", font(14, "bold"))
        kw.setdefault("height", 36)
        super().__init__(master, text=text, command=command, **kw)


class SuccessButton(ctk.CTkButton):
    """Green button for positive actions (mark learned)."""

    def __init__(self, master, text: str = "", command=None, **kw):
        kw.setdefault("fg_color", Theme.SUCCESS)
        kw.setdefault("hover_color", Theme.SUCCESS_HOVER)
        kw.setdefault("text_color", Theme.BG_DARK)
        kw.setdefault("corner_radius", 8)
        kw.setdefault("font", font(13, "bold"))
        kw.setdefault("height", 34)
        super().__init__(master, text=text, command=command, **kw)


class DangerButton(ctk.CTkButton):
    """Red-toned button for destructive actions."""

    def __init__(self, master, text: str = "", command=None, **kw):
        kw.setdefault("fg_color", Theme.DANGER)
        kw.setdefault("hover_color", "#d44454")
        kw.setdefault("text_color", "#ffffff")
        kw.setdefault("corner_radius", 8)
        kw.setdefault("font", font(13))
        kw.setdefault("height", 32)
        super().__init__(master, text=text, command=command, **kw)


class GhostButton(ctk.CTkButton):
    """Outlined secondary button."""

    def __init__(self, master, text: str = "", command=None, **kw):
        kw.setdefault("fg_color", "transparent")
        kw.setdefault("hover_color", Theme.BG_CARD_HOVER)
        kw.setdefault("text_color", Theme.TEXT_PRIMARY)
        kw.setdefault("border_width", 1)
        kw.setdefault("border_color", Theme.BORDER)
        kw.setdefault("corner_radius", 8)
        kw.setdefault("font", font(13))
        kw.setdefault("height", 32)
        super().__init__(master, text=text, command=command, **kw)


# ---------------------------------------------------------------------------
# Stat card (mini dashboard widget)
# ---------------------------------------------------------------------------
class StatCard(ctk.CTkFrame):
    """Small rounded card that shows a label + large number."""

    def __init__(self, master, label: str = "", value: str = "0", color: str = Theme.ACCENT, **kw):
        kw.setdefault("fg_color", Theme.BG_CARD)
        kw.setdefault("corner_radius", 12)
        super().__init__(master, **kw)

        self._label = ctk.CTkLabel(
            self, text=label.upper(),
            font=font(11, "bold"),
            text_color=Theme.TEXT_MUTED,
        )
        self._label.pack(padx=14, pady=(12, 0), anchor="w")

        self._value = ctk.CTkLabel(
            self, text=value,
            font=font(24, "bold"),
            text_color=color,
        )
        self._value.pack(padx=14, pady=(2, 12), anchor="w")

    def set_value(self, v: str) -> None:
        self._value.configure(text=v)


# ---------------------------------------------------------------------------
# Section frame + title
# ---------------------------------------------------------------------------
class Section(ctk.CTkFrame):
    """Rounded panel with a bold title row."""

    def __init__(self, master, title: str, **kw):
        kw.setdefault("fg_color", Theme.BG_PANEL)
        kw.setdefault("corner_radius", 14)
        super().__init__(master, **kw)

        ctk.CTkLabel(
            self, text=title,
            font=font(17, "bold"),
            text_color=Theme.TEXT_PRIMARY,
        ).pack(anchor="w", padx=18, pady=(14, 8))


def tag_row(master, tags) -> ctk.CTkFrame:
    """A row of small tag chips."""
    row = ctk.CTkFrame(master, fg_color="transparent")
    for tag in tags:
        ctk.CTkLabel(
            row, text=tag,
            font=font(11),
            fg_color=Theme.BG_CARD_HOVER,
            text_color=Theme.ACCENT,
            corner_radius=6,
            height=22,
        ).pack(side="left", padx=(0, 6), ipadx=6)
    return row


# ---------------------------------------------------------------------------
# Separator
# ---------------------------------------------------------------------------
class Separator(ctk.CTkFrame):
    def __init__(self, master, **kw):
        kw.setdefault("fg_color", Theme.BORDER)
        kw.setdefault("height", 1)
        super().__init__(master, **kw)


# ---------------------------------------------------------------------------
# Background work
# ---------------------------------------------------------------------------
def run_in_background(
    widget,
    task: Callable[[], Any],
    on_success: Callable[[Any], None] | None = None,
    on_error: Callable[[Exception], None] | None = None,
) -> None:
    """Run *task* on a daemon thread and report back on the Tk main loop."""

    def _worker() -> None:
        try:
            result = task()
        except Exception as exc:
            log.debug("Background task %s failed: %s", getattr(task, "__name__", task), exc)
            if on_error:
                widget.after(0, lambda e=exc: on_error(e))
            else:
                log.exception("Unhandled error in background task")
            return
        if on_success:
            widget.after(0, lambda: on_success(result))

    threading.Thread(target=_worker, daemon=True).start()
