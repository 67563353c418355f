"""Shared fixtures: canned backend records and a mocked HTTP session."""
from unittest.mock import MagicMock

import pytest
import requests


def make_word(word_id=1, word="house", translation="дом", **extra) -> dict:
    """A word exactly as the backend serialises it."""
    data = {
        "id": word_id,
        "word": word,
        "translation": translation,
        "example": "",
        "tags": [],
        "learned": False,
        "practiceCount": 0,
    }
    data.update(extra)
    return data


def make_response(payload, status_code: int = 200) -> MagicMock:
    """A fake ``requests.Response`` whose ``json()`` returns *payload*."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.json.return_value = payload
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)
