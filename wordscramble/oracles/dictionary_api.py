"""
Remote dictionary oracle backed by the free dictionaryapi.dev service.

GET {url}/{language}/{word}
  - 200 -> the word has at least one dictionary entry  -> recognized
  - 404 -> "No Definitions Found"                      -> not recognized

The call blocks for at most `timeout` seconds. A timeout counts as "not
recognized": the guess is rejected and can simply be submitted again.
Anything else that stops us from getting an answer (connection refused,
5xx, rate limiting) raises OracleUnavailableError so the caller can tell the
player the dictionary is down rather than blaming their word.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import requests

from .base import BaseOracle, DEFAULT_LANGUAGE, OracleUnavailableError, register

logger = logging.getLogger(__name__)

DICTIONARY_API_URL = "https://api.dictionaryapi.dev/api/v2/entries"
DEFAULT_TIMEOUT = 5.0


@register
class DictionaryApiOracle(BaseOracle):
    id = "dictionaryapi"
    name = "dictionaryapi.dev"

    def __init__(self, *, url: str = DICTIONARY_API_URL, timeout: float = DEFAULT_TIMEOUT,
                 session: requests.Session | None = None):
        self.url = url.rstrip("/")
        self.timeout = float(timeout)
        self._http = session or requests

    def is_recognized(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        word = word.strip().lower()
        endpoint = f"{self.url}/{quote(language, safe='')}/{quote(word, safe='')}"
        try:
            r = self._http.get(endpoint, timeout=self.timeout)
        except requests.Timeout:
            logger.warning("dictionary lookup for %r timed out after %.1fs", word, self.timeout)
            return False
        except requests.RequestException as e:
            raise OracleUnavailableError(f"dictionary lookup failed for {word!r}: {e}") from e

        if r.status_code == 200:
            return True
        if r.status_code == 404:
            return False
        raise OracleUnavailableError(
            f"unexpected dictionary response {r.status_code} for {word!r}")
