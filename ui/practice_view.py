"""
VocabTrainer – Practice card
=============================
Shows a random word; the translation, example and tags stay hidden until
the learner asks for them.  From the revealed side the word can be marked
as learned.
"""

from __future__ import annotations

from typing import Callable

import customtkinter as ctk

from core.trainer import PracticeCard
from ui.widgets import Theme, AccentButton, GhostButton, Section, SuccessButton, font, tag_row


class PracticeView(Section):
    """Practice section of the main window."""

    def __init__(
        self,
        master,
        on_random: Callable[[], None] | None = None,
        on_toggle: Callable[[bool], None] | None = None,
        on_learned: Callable[[int | str], None] | None = None,
        **kw,
    ):
        super().__init__(master, title="💪  Practice", **kw)

        self._on_toggle = on_toggle
        self._on_learned = on_learned

        self._card_frame = ctk.CTkFrame(
            self, fg_color=Theme.BG_CARD, corner_radius=16,
            border_width=1, border_color=Theme.BORDER,
        )
        self._card_frame.pack(fill="x", padx=18, pady=(0, 12))

        self._random_btn = AccentButton(
            self, text="🎲  Random word", command=on_random, width=180,
        )
        self._random_btn.pack(padx=18, pady=(0, 16))

        self.render(None)

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def render(self, card: PracticeCard | None) -> None:
        for w in self._card_frame.winfo_children():
            w.destroy()

        if card is None:
            ctk.CTkLabel(
                self._card_frame, text="Press the button to get a word",
                font=font(14),
                text_color=Theme.TEXT_MUTED,
            ).pack(pady=36)
            return

        word = card.word
        ctk.CTkLabel(
            self._card_frame, text=word.word,
            font=font(30, "bold"),
            text_color=Theme.TEXT_PRIMARY,
            wraplength=420,
        ).pack(pady=(24, 8))

        if not card.show_translation:
            AccentButton(
                self._card_frame, text="Show translation",
                command=lambda: self._toggle(True), width=170,
            ).pack(pady=(4, 24))
            return

        ctk.CTkLabel(
            self._card_frame, text=word.translation,
            font=font(20),
            text_color=Theme.ACCENT,
            wraplength=420,
        ).pack(pady=(0, 6))

        if word.example:
            ctk.CTkLabel(
                self._card_frame, text=f"Example: {word.example}",
                font=font(13),
                text_color=Theme.TEXT_SECONDARY,
                wraplength=420,
            ).pack(pady=(0, 6))

        if word.tags:
            tag_row(self._card_frame, word.tags).pack(pady=(0, 8))

        actions = ctk.CTkFrame(self._card_frame, fg_color="transparent")
        actions.pack(pady=(6, 20))
        SuccessButton(
            actions, text="✓  Learned",
            command=lambda: self._on_learned(word.id) if self._on_learned else None,
            width=130,
        ).pack(side="left", padx=6)
        GhostButton(
            actions, text="Hide", command=lambda: self._toggle(False), width=100,
        ).pack(side="left", padx=6)

    def set_loading(self, loading: bool) -> None:
        """Disable the random button while a word is being fetched."""
        if loading:
            self._random_btn.configure(state="disabled", text="Loading…")
        else:
            self._random_btn.configure(state="normal", text="🎲  Random word")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _toggle(self, show: bool) -> None:
        if self._on_toggle:
            self._on_toggle(show)
