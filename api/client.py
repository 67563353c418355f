"""
VocabTrainer – REST client
===========================
Thin wrapper around the vocabulary backend.  Every endpoint answers with a
JSON envelope ``{success, data, message}``; this module unwraps it and
turns failures into :class:`ApiError`.
"""

from __future__ import annotations

import logging
from typing import Any, List

import requests

from api.models import Stats, Word
from core.word_ops import WordDraft

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ApiError(Exception):
    """The backend could not be reached or rejected the request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiConnectionError(ApiError):
    """Transport-level failure: refused connection, timeout, DNS…"""


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class VocabApiClient:
    """Synchronous client for the ``/api`` endpoints of the backend."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    def list_words(self, tag: str | None = None) -> List[Word]:
        """``GET /words`` – optionally filtered by a single tag."""
        params = None
        if tag and tag.strip():
            params = {"tag": tag.strip()}
        data = self._request("GET", "/words", params=params)
        if not isinstance(data, list):
            raise ApiError("Malformed response from GET /words: expected a list")
        words = [self._parse(Word, item, "GET /words") for item in data]
        log.info("Loaded %d words (tag=%r)", len(words), params["tag"] if params else None)
        return words

    def random_word(self) -> Word:
        """``GET /words/random`` – one word picked by the backend."""
        data = self._request("GET", "/words/random")
        return self._parse(Word, data, "GET /words/random")

    def get_stats(self) -> Stats:
        """``GET /stats``."""
        data = self._request("GET", "/stats")
        return self._parse(Stats, data, "GET /stats")

    def create_word(self, draft: WordDraft) -> Word | None:
        """``POST /words`` – returns the created word when the backend echoes it."""
        data = self._request("POST", "/words", json=draft.to_payload())
        word = self._parse_echo(data, "POST /words")
        log.info("Created word %r", draft.word.strip())
        return word

    def mark_learned(self, word_id: int | str) -> Word | None:
        """``PUT /words/:id/learned``."""
        data = self._request("PUT", f"/words/{word_id}/learned")
        log.info("Marked word %s as learned", word_id)
        return self._parse_echo(data, "PUT /words/:id/learned")

    def delete_word(self, word_id: int | str) -> None:
        """``DELETE /words/:id``."""
        self._request("DELETE", f"/words/{word_id}")
        log.info("Deleted word %s", word_id)

    def close(self) -> None:
        self._session.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, **kw) -> Any:
        """Send one request and return the envelope's ``data`` field."""
        url = f"{self.base_url}{path}"
        what = f"{method} {path}"
        log.debug("%s %s %s", method, url, kw.get("params") or "")

        try:
            response = self._session.request(method, url, timeout=self.timeout, **kw)
        except requests.RequestException as exc:
            log.error("%s failed: %s", what, exc)
            raise ApiConnectionError(
                f"Could not reach the vocabulary server at {self.base_url}. "
                "Make sure the backend is running."
            ) from exc

        try:
            envelope = response.json()
        except ValueError as exc:
            log.error("%s returned a non-JSON body (HTTP %d)", what, response.status_code)
            raise ApiError(
                f"Invalid response from {what} (HTTP {response.status_code})",
                response.status_code,
            ) from exc

        if not isinstance(envelope, dict):
            raise ApiError(f"Malformed response from {what}", response.status_code)

        if not envelope.get("success"):
            message = envelope.get("message") or (
                f"{what} failed (HTTP {response.status_code})"
            )
            log.warning("%s rejected: %s", what, message)
            raise ApiError(message, response.status_code)

        return envelope.get("data")

    @staticmethod
    def _parse(model, data: Any, what: str):
        try:
            return model.from_dict(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise ApiError(f"Malformed response from {what}: {exc}") from exc

    @staticmethod
    def _parse_echo(data: Any, what: str) -> Word | None:
        """Parse the word a mutation echoes back.

        The mutation already succeeded, so an incomplete echo is only
        logged and ``None`` is returned.
        """
        if not data:
            return None
        try:
            return Word.from_dict(data)
        except (KeyError, TypeError, ValueError) as exc:
            log.warning("Ignoring incomplete echo from %s: %s", what, exc)
            return None
