"""
Tests for the add-word form helpers: tag parsing and draft validation.
"""

import pytest

from core.word_ops import ValidationError, WordDraft, parse_tags, validate_draft


class TestParseTags:
    def test_split_and_trim(self):
        assert parse_tags("  verb, travel ,a1 ") == ["verb", "travel", "a1"]

    def test_empty_pieces_dropped(self):
        assert parse_tags("food,, ,drinks,") == ["food", "drinks"]

    def test_empty_string(self):
        assert parse_tags("") == []
        assert parse_tags("   ") == []

    def test_single_tag_without_comma(self):
        assert parse_tags("nouns") == ["nouns"]

    def test_order_preserved(self):
        assert parse_tags("c, a, b") == ["c", "a", "b"]


class TestValidateDraft:
    def test_valid_draft_passes(self):
        validate_draft(WordDraft(word="house", translation="дом"))

    @pytest.mark.parametrize(
        "word, translation",
        [("", "дом"), ("house", ""), ("", ""), ("   ", "дом"), ("house", "  ")],
    )
    def test_missing_word_or_translation_rejected(self, word, translation):
        with pytest.raises(ValidationError):
            validate_draft(WordDraft(word=word, translation=translation))

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_draft(WordDraft())

    def test_example_and_tags_optional(self):
        validate_draft(WordDraft(word="cat", translation="кошка", example="", tags_text=""))


class TestPayload:
    def test_payload_fields(self):
        draft = WordDraft(
            word=" apple ",
            translation="яблоко ",
            example="An apple a day.",
            tags_text="food, fruit",
        )
        assert draft.to_payload() == {
            "word": "apple",
            "translation": "яблоко",
            "example": "An apple a day.",
            "tags": ["food", "fruit"],
        }

    def test_payload_without_tags(self):
        assert WordDraft(word="a", translation="b").to_payload()["tags"] == []
