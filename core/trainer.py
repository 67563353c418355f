"""
VocabTrainer – Trainer state
=============================
UI-independent holder of everything the window shows: the word list,
the statistics, the practice card and the loading flag.  Each operation
performs its request(s) through the API client and only touches the
state once the request succeeded, so the state always reflects the last
successful fetch.  Errors propagate to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from api.client import VocabApiClient
from api.models import Stats, Word
from core.word_ops import WordDraft, validate_draft

log = logging.getLogger(__name__)


@dataclass
class PracticeCard:
    """The word currently being practised."""
    word: Word
    show_translation: bool = False


@dataclass
class TrainerState:
    words: List[Word] = field(default_factory=list)
    stats: Stats | None = None
    current: PracticeCard | None = None
    loading: bool = False
    filter_tag: str = ""


class Trainer:
    """Performs user actions against the backend and keeps the results."""

    def __init__(self, client: VocabApiClient) -> None:
        self.client = client
        self.state = TrainerState()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_words(self) -> List[Word]:
        words = self.client.list_words(self.state.filter_tag or None)
        self.state.words = words
        return words

    def load_stats(self) -> Stats:
        stats = self.client.get_stats()
        self.state.stats = stats
        return stats

    def refresh(self) -> None:
        """Reload statistics and the word list."""
        self.load_stats()
        self.load_words()

    # ------------------------------------------------------------------
    # Tag filter
    # ------------------------------------------------------------------

    def set_filter(self, tag: str) -> None:
        self.state.filter_tag = tag.strip()

    def apply_filter(self, tag: str) -> List[Word]:
        self.set_filter(tag)
        return self.load_words()

    def reset_filter(self) -> List[Word]:
        self.state.filter_tag = ""
        return self.load_words()

    # ------------------------------------------------------------------
    # Practice
    # ------------------------------------------------------------------

    def next_random_word(self) -> PracticeCard:
        """Draw a new practice card; the translation starts hidden."""
        self.state.loading = True
        try:
            word = self.client.random_word()
        finally:
            self.state.loading = False
        self.state.current = PracticeCard(word=word)
        log.debug("Practising %r", word)
        return self.state.current

    def reveal_translation(self) -> None:
        if self.state.current is not None:
            self.state.current.show_translation = True

    def hide_translation(self) -> None:
        if self.state.current is not None:
            self.state.current.show_translation = False

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_word(self, draft: WordDraft) -> Word | None:
        """Validate *draft* and create it.  Nothing is sent if invalid."""
        validate_draft(draft)
        return self.client.create_word(draft)

    def mark_learned(self, word_id: int | str) -> None:
        self.client.mark_learned(word_id)
        self.state.current = None

    def delete_word(self, word_id: int | str) -> None:
        self.client.delete_word(word_id)
        current = self.state.current
        if current is not None and current.word.id == word_id:
            self.state.current = None
