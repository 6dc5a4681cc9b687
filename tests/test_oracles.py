from pathlib import Path

import pytest
import requests
from wordscramble.oracles import (
    DictionaryApiOracle,
    OracleUnavailableError,
    WordListOracle,
    build_oracle,
    create_oracle,
    get_oracle_ids,
)


class _Resp:
    def __init__(self, status_code):
        self.status_code = status_code


class _FakeHttp:
    """Stands in for requests.Session; returns a fixed status or raises."""

    def __init__(self, status=200, exc=None):
        self.status = status
        self.exc = exc
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        return _Resp(self.status)


def test_registry_lists_builtin_oracles():
    assert {"wordlist", "dictionaryapi"} <= set(get_oracle_ids())
    with pytest.raises(ValueError):
        create_oracle("nope")


def test_wordlist_oracle_membership():
    o = WordListOracle(["Silk", " worm ", ""])
    assert o.is_recognized("silk", "en") is True
    assert o.is_recognized("WORM", "en") is True
    assert o.is_recognized("milk", "en") is False
    assert o.is_recognized("silk", "fr") is False  # no French list loaded
    assert len(o) == 2


def test_wordlist_oracle_from_file(tmp_path: Path):
    p = tmp_path / "words"
    p.write_text("silk\nworm\n", encoding="utf-8")
    o = build_oracle("wordlist", dictionary=str(p), language="en")
    assert isinstance(o, WordListOracle)
    assert o.is_recognized("worm")


def test_build_wordlist_oracle_requires_dictionary():
    with pytest.raises(ValueError):
        build_oracle("wordlist")


def test_build_dictionaryapi_oracle_timeout():
    o = build_oracle("dictionaryapi", timeout=1.5)
    assert isinstance(o, DictionaryApiOracle)
    assert o.timeout == 1.5


@pytest.mark.parametrize("status,expected", [(200, True), (404, False)])
def test_dictionaryapi_status_mapping(status, expected):
    http = _FakeHttp(status=status)
    o = DictionaryApiOracle(session=http, timeout=2)
    assert o.is_recognized(" Silk ", "en") is expected
    url, timeout = http.calls[0]
    assert url == "https://api.dictionaryapi.dev/api/v2/entries/en/silk"
    assert timeout == 2.0


def test_dictionaryapi_timeout_counts_as_not_recognized():
    o = DictionaryApiOracle(session=_FakeHttp(exc=requests.Timeout("slow")))
    assert o.is_recognized("silk") is False


@pytest.mark.parametrize("http", [
    _FakeHttp(exc=requests.ConnectionError("down")),
    _FakeHttp(status=500),
    _FakeHttp(status=429),
])
def test_dictionaryapi_failures_raise(http):
    o = DictionaryApiOracle(session=http)
    with pytest.raises(OracleUnavailableError):
        o.is_recognized("silk")


def test_dictionaryapi_uses_requests_by_default(monkeypatch):
    seen = {}

    def fake_get(url, timeout=None):
        seen["url"] = url
        return _Resp(200)

    monkeypatch.setattr(requests, "get", fake_get)
    assert DictionaryApiOracle().is_recognized("worm") is True
    assert seen["url"].endswith("/en/worm")


def test_dictionaryapi_escapes_path_separators():
    http = _FakeHttp(status=404)
    o = DictionaryApiOracle(session=http)
    assert o.is_recognized("a/b", "en/x") is False
    url, _ = http.calls[0]
    assert url == "https://api.dictionaryapi.dev/api/v2/entries/en%2Fx/a%2Fb"
