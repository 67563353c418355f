"""
VocabTrainer – Word list
=========================
Scrollable list of every word returned by ``GET /words`` with a tag
filter on top.  Learned words get a green-tinted row.
"""

from __future__ import annotations

from typing import Callable, List

import customtkinter as ctk

from api.models import Word
from ui.widgets import Theme, AccentButton, DangerButton, GhostButton, Section, font, tag_row


class WordListView(Section):
    """The "All words" section."""

    def __init__(
        self,
        master,
        on_filter: Callable[[str], None] | None = None,
        on_reset: Callable[[], None] | None = None,
        on_delete: Callable[[Word], None] | None = None,
        **kw,
    ):
        super().__init__(master, title="📖  All words", **kw)

        self._on_filter = on_filter
        self._on_reset = on_reset
        self._on_delete = on_delete

        # ── Filter bar ──
        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.pack(fill="x", padx=18, pady=(0, 10))

        self._filter_entry = ctk.CTkEntry(
            bar, placeholder_text="Filter by tag",
            font=font(13),
            fg_color=Theme.BG_CARD,
            border_color=Theme.BORDER,
            text_color=Theme.TEXT_PRIMARY,
            height=32,
        )
        self._filter_entry.pack(side="left", fill="x", expand=True, padx=(0, 8))
        self._filter_entry.bind("<Return>", lambda _: self._apply())

        AccentButton(bar, text="Apply", command=self._apply, width=80, height=32).pack(
            side="left", padx=(0, 6)
        )
        GhostButton(bar, text="Reset", command=self._reset, width=80).pack(side="left")

        # ── List ──
        self._scroll = ctk.CTkScrollableFrame(
            self, fg_color="transparent",
            scrollbar_button_color=Theme.BORDER,
            scrollbar_button_hover_color=Theme.ACCENT,
        )
        self._scroll.pack(fill="both", expand=True, padx=12, pady=(0, 12))

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def render(self, words: List[Word]) -> None:
        for w in self._scroll.winfo_children():
            w.destroy()

        if not words:
            ctk.CTkLabel(
                self._scroll, text="No words found",
                font=font(14),
                text_color=Theme.TEXT_MUTED,
            ).pack(pady=40)
            return

        for word in words:
            self._build_row(word)

    def clear_filter(self) -> None:
        self._filter_entry.delete(0, "end")

    # ------------------------------------------------------------------
    # Internal builders
    # ------------------------------------------------------------------

    def _build_row(self, word: Word) -> None:
        row = ctk.CTkFrame(
            self._scroll,
            fg_color=Theme.BG_LEARNED if word.learned else Theme.BG_CARD,
            corner_radius=10,
            border_width=1,
            border_color=Theme.SUCCESS if word.learned else Theme.BORDER,
        )
        row.pack(fill="x", pady=3, padx=4)

        title = f"{word.word} - {word.translation}"
        if word.learned:
            title = f"✓ {title}"
        ctk.CTkLabel(
            row, text=title,
            font=font(15, "bold"),
            text_color=Theme.TEXT_PRIMARY,
            anchor="w",
        ).pack(fill="x", padx=14, pady=(10, 0))

        if word.example:
            ctk.CTkLabel(
                row, text=word.example,
                font=font(12),
                text_color=Theme.TEXT_SECONDARY,
                anchor="w", justify="left", wraplength=460,
            ).pack(fill="x", padx=14)

        if word.tags:
            tag_row(row, word.tags).pack(anchor="w", padx=14, pady=(4, 0))

        info = ctk.CTkFrame(row, fg_color="transparent")
        info.pack(fill="x", padx=14, pady=(4, 10))
        ctk.CTkLabel(
            info, text=f"Practised: {word.practice_count}",
            font=font(12),
            text_color=Theme.TEXT_MUTED,
        ).pack(side="left")
        DangerButton(
            info, text="Delete", width=70, height=26,
            command=lambda w=word: self._on_delete(w) if self._on_delete else None,
        ).pack(side="right")

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------

    def _apply(self) -> None:
        if self._on_filter:
            self._on_filter(self._filter_entry.get())

    def _reset(self) -> None:
        self.clear_filter()
        if self._on_reset:
            self._on_reset()
