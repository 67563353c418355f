"""
VocabTrainer – "Add word" form
===============================
Four entries (word, translation, example, comma-separated tags) and a
submit button.  Validation lives in :mod:`core.word_ops`.
"""

from __future__ import annotations

from typing import Callable

import customtkinter as ctk

from core.word_ops import WordDraft
from ui.widgets import Theme, AccentButton, Section, font


class AddWordForm(Section):
    """Form that hands a :class:`WordDraft` to *on_submit*."""

    FIELDS = [
        ("word", "Word *"),
        ("translation", "Translation *"),
        ("example", "Example"),
        ("tags_text", "Tags (comma-separated)"),
    ]

    def __init__(self, master, on_submit: Callable[[WordDraft], None] | None = None, **kw):
        super().__init__(master, title="➕  Add word", **kw)

        self._on_submit = on_submit
        self._entries: dict[str, ctk.CTkEntry] = {}

        for name, placeholder in self.FIELDS:
            entry = ctk.CTkEntry(
                self, placeholder_text=placeholder,
                font=font(13),
                fg_color=Theme.BG_CARD,
                border_color=Theme.BORDER,
                text_color=Theme.TEXT_PRIMARY,
                height=34,
            )
            entry.pack(fill="x", padx=18, pady=4)
            entry.bind("<Return>", lambda _: self._submit())
            self._entries[name] = entry

        self._submit_btn = AccentButton(self, text="Add", command=self._submit, width=120)
        self._submit_btn.pack(anchor="e", padx=18, pady=(8, 16))

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def get_draft(self) -> WordDraft:
        return WordDraft(**{name: entry.get() for name, entry in self._entries.items()})

    def clear(self) -> None:
        for entry in self._entries.values():
            entry.delete(0, "end")
        # Restore the placeholders after a programmatic delete.
        self.focus_set()

    def set_busy(self, busy: bool) -> None:
        self._submit_btn.configure(state="disabled" if busy else "normal")

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _submit(self) -> None:
        if self._on_submit and self._submit_btn.cget("state") != "disabled":
            self._on_submit(self.get_draft())
