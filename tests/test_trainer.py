"""
Tests for the Trainer – state must reflect the last successful fetch.
"""

from unittest.mock import MagicMock

import pytest

from api.client import ApiError, VocabApiClient
from conftest import make_response
from api.models import Stats, Word
from core.trainer import PracticeCard, Trainer
from core.word_ops import ValidationError, WordDraft


def _word(word_id=1, word="house", translation="дом", **kw) -> Word:
    return Word(id=word_id, word=word, translation=translation, **kw)


@pytest.fixture
def client():
    return MagicMock(spec=VocabApiClient)


@pytest.fixture
def trainer(client):
    return Trainer(client)


class TestLoading:
    def test_initial_state(self, trainer):
        state = trainer.state
        assert state.words == []
        assert state.stats is None
        assert state.current is None
        assert state.loading is False
        assert state.filter_tag == ""

    def test_load_words_replaces_list(self, trainer, client):
        client.list_words.return_value = [_word(1), _word(2, "cat", "кошка")]
        trainer.load_words()
        assert [w.id for w in trainer.state.words] == [1, 2]
        client.list_words.assert_called_once_with(None)

    def test_failed_load_keeps_previous_words(self, trainer, client):
        client.list_words.return_value = [_word(1)]
        trainer.load_words()

        client.list_words.side_effect = ApiError("down")
        with pytest.raises(ApiError):
            trainer.load_words()
        assert [w.id for w in trainer.state.words] == [1]

    def test_load_stats(self, trainer, client):
        client.get_stats.return_value = Stats(3, 1, 33, 7)
        trainer.load_stats()
        assert trainer.state.stats.total_words == 3

    def test_failed_stats_keep_previous(self, trainer, client):
        client.get_stats.return_value = Stats(3, 1, 33, 7)
        trainer.load_stats()
        client.get_stats.side_effect = ApiError("down")
        with pytest.raises(ApiError):
            trainer.load_stats()
        assert trainer.state.stats == Stats(3, 1, 33, 7)

    def test_refresh_loads_both(self, trainer, client):
        client.get_stats.return_value = Stats(1, 0, 0, 0)
        client.list_words.return_value = [_word()]
        trainer.refresh()
        assert trainer.state.stats is not None
        assert len(trainer.state.words) == 1


class TestFilter:
    def test_apply_filter_uses_tag(self, trainer, client):
        client.list_words.return_value = []
        trainer.apply_filter(" food ")
        assert trainer.state.filter_tag == "food"
        client.list_words.assert_called_once_with("food")

    def test_subsequent_loads_keep_filter(self, trainer, client):
        client.list_words.return_value = []
        trainer.apply_filter("food")
        trainer.load_words()
        assert client.list_words.call_args.args == ("food",)

    def test_reset_filter_loads_unfiltered(self, trainer, client):
        client.list_words.return_value = []
        trainer.apply_filter("food")
        trainer.reset_filter()
        assert trainer.state.filter_tag == ""
        assert client.list_words.call_args.args == (None,)


class TestPractice:
    def test_random_word_starts_hidden(self, trainer, client):
        client.random_word.return_value = _word(5, "tree", "дерево")
        card = trainer.next_random_word()
        assert isinstance(card, PracticeCard)
        assert card.word.word == "tree"
        assert card.show_translation is False
        assert trainer.state.loading is False

    def test_new_word_hides_previous_reveal(self, trainer, client):
        client.random_word.return_value = _word(5)
        trainer.next_random_word()
        trainer.reveal_translation()
        client.random_word.return_value = _word(6)
        trainer.next_random_word()
        assert trainer.state.current.show_translation is False

    def test_loading_flag_during_request(self, trainer, client):
        seen = []

        def _random():
            seen.append(trainer.state.loading)
            return _word()

        client.random_word.side_effect = _random
        trainer.next_random_word()
        assert seen == [True]
        assert trainer.state.loading is False

    def test_failed_random_word_resets_loading_and_keeps_card(self, trainer, client):
        client.random_word.return_value = _word(1)
        trainer.next_random_word()

        client.random_word.side_effect = ApiError("No words")
        with pytest.raises(ApiError):
            trainer.next_random_word()
        assert trainer.state.loading is False
        assert trainer.state.current.word.id == 1

    def test_toggle_translation(self, trainer, client):
        client.random_word.return_value = _word()
        trainer.next_random_word()
        trainer.reveal_translation()
        assert trainer.state.current.show_translation is True
        trainer.hide_translation()
        assert trainer.state.current.show_translation is False

    def test_toggle_without_card_is_noop(self, trainer):
        trainer.reveal_translation()
        trainer.hide_translation()
        assert trainer.state.current is None


class TestMutations:
    def test_add_word_rejects_empty_fields_without_request(self, trainer, client):
        with pytest.raises(ValidationError):
            trainer.add_word(WordDraft(word="", translation="дом"))
        client.create_word.assert_not_called()

    def test_add_word(self, trainer, client):
        client.create_word.return_value = _word(8)
        draft = WordDraft(word="house", translation="дом", tags_text="a, b")
        assert trainer.add_word(draft).id == 8
        client.create_word.assert_called_once_with(draft)

    def test_mark_learned_clears_card(self, trainer, client):
        client.random_word.return_value = _word(3)
        trainer.next_random_word()
        trainer.mark_learned(3)
        client.mark_learned.assert_called_once_with(3)
        assert trainer.state.current is None

    def test_failed_mark_learned_keeps_card(self, trainer, client):
        client.random_word.return_value = _word(3)
        trainer.next_random_word()
        client.mark_learned.side_effect = ApiError("nope")
        with pytest.raises(ApiError):
            trainer.mark_learned(3)
        assert trainer.state.current.word.id == 3

    def test_delete_current_word_clears_card(self, trainer, client):
        client.random_word.return_value = _word(3)
        trainer.next_random_word()
        trainer.delete_word(3)
        client.delete_word.assert_called_once_with(3)
        assert trainer.state.current is None

    def test_delete_other_word_keeps_card(self, trainer, client):
        client.random_word.return_value = _word(3)
        trainer.next_random_word()
        trainer.delete_word(4)
        assert trainer.state.current.word.id == 3


class TestMutationEchoes:
    """A successful mutation stays successful whatever the backend echoes."""

    @pytest.fixture
    def live_trainer(self, session):
        return Trainer(VocabApiClient("http://localhost:3000/api", session=session))

    def test_add_word_with_partial_echo(self, live_trainer, session):
        session.request.return_value = make_response({"success": True, "data": {"id": 7}})
        assert live_trainer.add_word(WordDraft(word="a", translation="b")) is None

    def test_mark_learned_with_scalar_echo(self, live_trainer, session):
        live_trainer.state.current = PracticeCard(word=_word(1))
        session.request.return_value = make_response({"success": True, "data": True})
        live_trainer.mark_learned(1)
        assert live_trainer.state.current is None
