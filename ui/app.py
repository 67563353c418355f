"""
VocabTrainer – Main application window
========================================
Ties together the statistics panel, practice card, add-word form and word
list into a single CustomTkinter window.  Every network call goes through
the :class:`Trainer` on a worker thread; views are re-rendered from
``trainer.state`` on the main loop once the call returns.
"""

from __future__ import annotations

import logging
from tkinter import messagebox

import customtkinter as ctk

from api.client import ApiError, VocabApiClient
from api.models import Word
from core.config import Settings
from core.trainer import Trainer
from core.word_ops import ValidationError, WordDraft, validate_draft
from ui.widgets import Theme, Separator, font, run_in_background
from ui.stats_panel import StatsPanel
from ui.practice_view import PracticeView
from ui.add_word_form import AddWordForm
from ui.word_list import WordListView

log = logging.getLogger(__name__)

ENDPOINTS = (
    "GET /words",
    "GET /words/random",
    "GET /stats",
    "POST /words",
    "PUT /words/:id/learned",
    "DELETE /words/:id",
)


class VocabTrainerApp(ctk.CTk):
    """Root application window."""

    APP_TITLE = "VocabTrainer — Vocabulary practice"
    WIDTH = 1180
    HEIGHT = 780

    def __init__(self, settings: Settings, trainer: Trainer | None = None) -> None:
        super().__init__()

        self._settings = settings
        self._trainer = trainer or Trainer(
            VocabApiClient(settings.api.url, timeout=settings.api.timeout)
        )

        # ── Window setup ──
        self.title(self.APP_TITLE)
        self.geometry(f"{self.WIDTH}x{self.HEIGHT}")
        self.minsize(960, 640)
        self.configure(fg_color=Theme.BG_DARK)

        ctk.set_appearance_mode(settings.ui.appearance_mode)
        ctk.set_default_color_theme(settings.ui.color_theme)

        self._build_header()

        # ── Layout: left column | word list ──
        body = ctk.CTkFrame(self, fg_color="transparent")
        body.pack(fill="both", expand=True, padx=20, pady=(0, 8))
        body.grid_rowconfigure(0, weight=1)
        body.grid_columnconfigure(0, weight=1, uniform="col")
        body.grid_columnconfigure(1, weight=1, uniform="col")

        left = ctk.CTkScrollableFrame(
            body, fg_color="transparent",
            scrollbar_button_color=Theme.BORDER,
            scrollbar_button_hover_color=Theme.ACCENT,
        )
        left.grid(row=0, column=0, sticky="nsew", padx=(0, 10))

        self._stats_panel = StatsPanel(left, on_refresh=self.refresh)
        self._stats_panel.pack(fill="x", pady=(0, 12))

        self._practice = PracticeView(
            left,
            on_random=self._on_random_word,
            on_toggle=self._on_toggle_translation,
            on_learned=self._on_mark_learned,
        )
        self._practice.pack(fill="x", pady=(0, 12))

        self._form = AddWordForm(left, on_submit=self._on_add_word)
        self._form.pack(fill="x")

        self._word_list = WordListView(
            body,
            on_filter=self._on_filter,
            on_reset=self._on_reset_filter,
            on_delete=self._on_delete_word,
        )
        self._word_list.grid(row=0, column=1, sticky="nsew", padx=(10, 0))

        self._build_footer()

        self.protocol("WM_DELETE_WINDOW", self._on_close)

        # Initial load
        self.refresh()

    # ------------------------------------------------------------------
    # Static chrome
    # ------------------------------------------------------------------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.pack(fill="x", padx=28, pady=(20, 12))
        ctk.CTkLabel(
            header, text="📚  VocabTrainer",
            font=font(26, "bold"),
            text_color=Theme.TEXT_PRIMARY,
        ).pack(anchor="w")
        ctk.CTkLabel(
            header, text="Learn foreign words: practise, track progress, grow your list",
            font=font(13),
            text_color=Theme.TEXT_SECONDARY,
        ).pack(anchor="w")

    def _build_footer(self) -> None:
        Separator(self).pack(fill="x", padx=20)
        footer = ctk.CTkFrame(self, fg_color="transparent")
        footer.pack(fill="x", padx=28, pady=(6, 10))
        ctk.CTkLabel(
            footer, text=f"API: {self._settings.api.url}",
            font=font(11, "bold"),
            text_color=Theme.TEXT_MUTED,
        ).pack(side="left")
        ctk.CTkLabel(
            footer, text="  |  ".join(ENDPOINTS),
            font=font(11, family=Theme.FONT_MONO),
            text_color=Theme.TEXT_MUTED,
        ).pack(side="right")

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Reload statistics and the word list independently."""
        self._load_stats()
        self._load_words()

    def _load_stats(self) -> None:
        run_in_background(
            self, self._trainer.load_stats,
            on_success=lambda _: self._stats_panel.render(self._trainer.state.stats),
            on_error=lambda exc: log.warning("Could not load statistics: %s", exc),
        )

    def _load_words(self, task=None) -> None:
        run_in_background(
            self, task or self._trainer.load_words,
            on_success=lambda _: self._word_list.render(self._trainer.state.words),
            on_error=self._on_words_error,
        )

    def _on_words_error(self, exc: Exception) -> None:
        log.error("Could not load words: %s", exc)
        messagebox.showerror("Could not load words", _message(exc), parent=self)

    # ------------------------------------------------------------------
    # Word list callbacks
    # ------------------------------------------------------------------

    def _on_filter(self, tag: str) -> None:
        self._load_words(lambda: self._trainer.apply_filter(tag))

    def _on_reset_filter(self) -> None:
        self._load_words(self._trainer.reset_filter)

    def _on_delete_word(self, word: Word) -> None:
        ok = messagebox.askyesno(
            "Delete word",
            f"Delete '{word.word}'?",
            icon="warning",
            parent=self,
        )
        if not ok:
            return

        def _done(_) -> None:
            messagebox.showinfo("Deleted", f"'{word.word}' was deleted.", parent=self)
            self._practice.render(self._trainer.state.current)
            self.refresh()

        run_in_background(
            self, lambda: self._trainer.delete_word(word.id),
            on_success=_done,
            on_error=lambda exc: self._show_action_error("Could not delete the word", exc),
        )

    # ------------------------------------------------------------------
    # Practice callbacks
    # ------------------------------------------------------------------

    def _on_random_word(self) -> None:
        if self._trainer.state.loading:
            return
        self._practice.set_loading(True)

        def _finish() -> None:
            self._practice.set_loading(False)
            self._practice.render(self._trainer.state.current)

        def _failed(exc: Exception) -> None:
            _finish()
            log.error("Could not get a random word: %s", exc)
            messagebox.showwarning("Practice", _message(exc), parent=self)

        run_in_background(
            self, self._trainer.next_random_word,
            on_success=lambda _: _finish(),
            on_error=_failed,
        )

    def _on_toggle_translation(self, show: bool) -> None:
        if show:
            self._trainer.reveal_translation()
        else:
            self._trainer.hide_translation()
        self._practice.render(self._trainer.state.current)

    def _on_mark_learned(self, word_id: int | str) -> None:
        def _done(_) -> None:
            messagebox.showinfo("Learned", "Word marked as learned!", parent=self)
            self._practice.render(self._trainer.state.current)
            self.refresh()

        run_in_background(
            self, lambda: self._trainer.mark_learned(word_id),
            on_success=_done,
            on_error=lambda exc: self._show_action_error("Could not mark the word", exc),
        )

    # ------------------------------------------------------------------
    # Add-word callbacks
    # ------------------------------------------------------------------

    def _on_add_word(self, draft: WordDraft) -> None:
        try:
            validate_draft(draft)
        except ValidationError as exc:
            messagebox.showwarning("Add word", str(exc), parent=self)
            return

        self._form.set_busy(True)

        def _done(_) -> None:
            self._form.set_busy(False)
            messagebox.showinfo("Add word", "Word added!", parent=self)
            self._form.clear()
            self.refresh()

        def _failed(exc: Exception) -> None:
            self._form.set_busy(False)
            self._show_action_error("Could not add the word", exc)

        run_in_background(
            self, lambda: self._trainer.add_word(draft),
            on_success=_done,
            on_error=_failed,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _show_action_error(self, title: str, exc: Exception) -> None:
        log.error("%s: %s", title, exc)
        messagebox.showerror(title, _message(exc), parent=self)

    def _on_close(self) -> None:
        self._trainer.client.close()
        self.destroy()


def _message(exc: Exception) -> str:
    if isinstance(exc, ApiError):
        return exc.message
    return f"Unexpected error: {exc}"
