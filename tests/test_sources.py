# tests/test_sources.py
import pytest
import requests

from sources import (
    DEFAULT_TIMEOUT,
    SourceError,
    fetch_rules_text,
    http_timeout,
    is_url,
    read_rules_file,
    read_rules_text,
)


class _FakeResponse:
    def __init__(self, text: str, status_error: Exception | None = None):
        self.text = text
        self.encoding = None
        self._status_error = status_error

    def raise_for_status(self):
        if self._status_error is not None:
            raise self._status_error


def test_read_file_strips_bom(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes("\ufeffA:\n?S Назва:\n".encode("utf-8"))
    assert read_rules_file(path) == "A:\n?S Назва:\n"


def test_read_missing_file(tmp_path):
    with pytest.raises(SourceError):
        read_rules_file(tmp_path / "brak.txt")


def test_read_file_with_invalid_utf8(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"A:\n\xff\xfe\n")
    with pytest.raises(SourceError):
        read_rules_file(path)


def test_fetch_uses_timeout_and_strips_bom(monkeypatch):
    calls = {}

    def fake_get(url, timeout=None, headers=None):
        calls["url"] = url
        calls["timeout"] = timeout
        return _FakeResponse("\ufeffA:\n")

    monkeypatch.setattr(requests, "get", fake_get)
    assert fetch_rules_text("https://example.com/data.txt", timeout=5) == "A:\n"
    assert calls == {"url": "https://example.com/data.txt", "timeout": 5}


def test_fetch_http_error_becomes_source_error(monkeypatch):
    def fake_get(url, timeout=None, headers=None):
        return _FakeResponse("", requests.HTTPError("404 Not Found"))

    monkeypatch.setattr(requests, "get", fake_get)
    with pytest.raises(SourceError, match="404"):
        fetch_rules_text("https://example.com/missing.txt")


def test_read_rules_text_dispatches(monkeypatch, tmp_path):
    monkeypatch.setattr(requests, "get", lambda url, timeout=None, headers=None: _FakeResponse("URL:\n"))
    assert read_rules_text("HTTPS://example.com/data.txt") == "URL:\n"

    path = tmp_path / "data.txt"
    path.write_text("PLIK:\n", encoding="utf-8")
    assert read_rules_text(str(path)) == "PLIK:\n"


def test_http_timeout_from_env(monkeypatch):
    monkeypatch.setenv("RCAT_HTTP_TIMEOUT", "12.5")
    assert http_timeout() == 12.5
    monkeypatch.setenv("RCAT_HTTP_TIMEOUT", "abc")
    assert http_timeout() == DEFAULT_TIMEOUT
    monkeypatch.delenv("RCAT_HTTP_TIMEOUT")
    assert http_timeout() == DEFAULT_TIMEOUT


def test_is_url():
    assert is_url("http://x/data.txt")
    assert not is_url("data.txt")
    assert not is_url("ftp://x/data.txt")
