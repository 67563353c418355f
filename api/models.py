"""
VocabTrainer – API data models
===============================
Plain records for the objects the backend returns: Words and the
aggregate Stats.  The backend owns them; the client only keeps an
ephemeral copy refreshed after every mutation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


# ---------------------------------------------------------------------------
# Word – a single vocabulary entry
# ---------------------------------------------------------------------------
@dataclass
class Word:
    id: int | str
    word: str
    translation: str
    example: str = ""
    tags: List[str] = field(default_factory=list)
    learned: bool = False
    practice_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Word":
        """Build a Word from the backend's JSON object.

        Raises ``KeyError`` when ``id``, ``word`` or ``translation`` is
        missing and ``TypeError`` when *data* is not a mapping.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        return cls(
            id=data["id"],
            word=data["word"],
            translation=data["translation"],
            example=data.get("example") or "",
            tags=[str(t) for t in (data.get("tags") or [])],
            learned=data.get("learned") is True,
            practice_count=int(data.get("practiceCount") or 0),
        )

    def __repr__(self) -> str:
        return f"<Word id={self.id} word={self.word!r} learned={self.learned}>"


# ---------------------------------------------------------------------------
# Stats – collection-wide counters
# ---------------------------------------------------------------------------
@dataclass
class Stats:
    total_words: int = 0
    learned_words: int = 0
    learning_progress: float = 0
    total_practice_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stats":
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        return cls(
            total_words=int(data.get("totalWords") or 0),
            learned_words=int(data.get("learnedWords") or 0),
            learning_progress=float(data.get("learningProgress") or 0),
            total_practice_count=int(data.get("totalPracticeCount") or 0),
        )

    @property
    def progress_label(self) -> str:
        """Progress as shown on the stat card, e.g. ``'42%'``."""
        value = self.learning_progress
        if value == int(value):
            return f"{int(value)}%"
        return f"{value:.1f}%"
