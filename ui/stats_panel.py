"""
VocabTrainer – Statistics panel
================================
Four stat cards fed from ``GET /stats`` and a refresh button.
"""

from __future__ import annotations

from typing import Callable

import customtkinter as ctk

from api.models import Stats
from ui.widgets import Theme, GhostButton, Section, StatCard, font


class StatsPanel(Section):
    """Dashboard row: total, learned, progress, practice sessions."""

    def __init__(self, master, on_refresh: Callable[[], None] | None = None, **kw):
        super().__init__(master, title="📊  Statistics", **kw)

        self._placeholder = ctk.CTkLabel(
            self, text="Loading statistics…",
            font=font(13),
            text_color=Theme.TEXT_MUTED,
        )
        self._placeholder.pack(anchor="w", padx=18, pady=(0, 8))

        self._grid = ctk.CTkFrame(self, fg_color="transparent")
        self._cards: dict[str, StatCard] = {}
        for key, label, color in [
            ("total", "Total words", Theme.TEXT_PRIMARY),
            ("learned", "Learned", Theme.SUCCESS),
            ("progress", "Progress", Theme.ACCENT),
            ("practice", "Practice runs", Theme.WARNING),
        ]:
            card = StatCard(self._grid, label=label, value="—", color=color)
            card.pack(side="left", padx=(0, 10), fill="x", expand=True)
            self._cards[key] = card

        self._refresh_btn = GhostButton(
            self, text="⟳  Refresh", command=on_refresh, width=120,
        )
        self._refresh_btn.pack(anchor="e", padx=18, pady=(4, 16))

    def render(self, stats: Stats | None) -> None:
        if stats is None:
            self._grid.pack_forget()
            self._placeholder.pack(anchor="w", padx=18, pady=(0, 8), before=self._refresh_btn)
            return

        self._placeholder.pack_forget()
        self._grid.pack(fill="x", padx=18, pady=(0, 8), before=self._refresh_btn)
        self._cards["total"].set_value(str(stats.total_words))
        self._cards["learned"].set_value(str(stats.learned_words))
        self._cards["progress"].set_value(stats.progress_label)
        self._cards["practice"].set_value(str(stats.total_practice_count))
