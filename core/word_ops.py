"""
VocabTrainer – Word form helpers
=================================
Pure helpers behind the "Add word" form: tag parsing, draft validation
and the JSON payload sent to the backend.
No UI code and no network access.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


class ValidationError(ValueError):
    """Raised when a draft cannot be submitted."""


# ── Tags ──────────────────────────────────────────────────────────────

def parse_tags(text: str) -> List[str]:
    """Split a comma-separated tag string.

    Each tag is trimmed, empty pieces are dropped, order is kept:
    ``"  verb, travel ,, a1 "`` → ``['verb', 'travel', 'a1']``.
    """
    if not text:
        return []
    return [tag.strip() for tag in text.split(",") if tag.strip()]


# ── Draft ─────────────────────────────────────────────────────────────

@dataclass
class WordDraft:
    """Contents of the "Add word" form before submission."""
    word: str = ""
    translation: str = ""
    example: str = ""
    tags_text: str = ""

    @property
    def tags(self) -> List[str]:
        return parse_tags(self.tags_text)

    def to_payload(self) -> dict:
        """Body for ``POST /words``."""
        return {
            "word": self.word.strip(),
            "translation": self.translation.strip(),
            "example": self.example.strip(),
            "tags": self.tags,
        }


def validate_draft(draft: WordDraft) -> None:
    """Reject drafts without a word or a translation."""
    if not draft.word.strip() or not draft.translation.strip():
        raise ValidationError("Fill in both the word and its translation.")
