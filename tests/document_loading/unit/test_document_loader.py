"""Document loading tests for files, URLs and raw text."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import requests

from oas_proptypes.utils import (
    DocumentLoaderError,
    load_document,
    load_document_from_file,
    load_document_from_url,
    parse_document_text,
)

DOCUMENT = {"components": {"schemas": {"flag": {"type": "boolean"}}}}

YAML_DOCUMENT = """\
components:
  schemas:
    flag:
      type: boolean
"""


class _FakeResponse:
    def __init__(self, text: str, content_type: str = "application/json", status: int = 200):
        self.text = text
        self.headers = {"content-type": content_type}
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)


def _serve(monkeypatch: pytest.MonkeyPatch, response: _FakeResponse) -> list:
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return response

    monkeypatch.setattr(requests, "get", fake_get)
    return calls


def test_json_file_is_loaded(tmp_path: Path) -> None:
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")

    source, data = load_document_from_file(path)

    assert source == str(path)
    assert data == DOCUMENT


def test_yaml_file_is_loaded(tmp_path: Path) -> None:
    path = tmp_path / "openapi.yml"
    path.write_text(YAML_DOCUMENT, encoding="utf-8")

    assert load_document(file_path=path)[1] == DOCUMENT


def test_missing_file_raises_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_document_from_file(tmp_path / "absent.json")


def test_invalid_json_file_names_the_file(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(DocumentLoaderError, match="broken.json: Invalid JSON"):
        load_document_from_file(path)


def test_file_that_is_not_utf8_is_wrapped(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"components": {"schemas": "\xff"}}')

    with pytest.raises(DocumentLoaderError, match="Error reading file"):
        load_document_from_file(path)


def test_invalid_yaml_text() -> None:
    with pytest.raises(DocumentLoaderError, match="Invalid YAML"):
        parse_document_text("components: [unclosed", yaml_format=True)


def test_url_json_is_loaded(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _serve(monkeypatch, _FakeResponse(json.dumps(DOCUMENT)))

    source, data = load_document_from_url("https://example.com/openapi.json", timeout=5)

    assert source == "https://example.com/openapi.json"
    assert data == DOCUMENT
    assert calls == [("https://example.com/openapi.json", 5)]


def test_url_yaml_is_detected_by_content_type(monkeypatch: pytest.MonkeyPatch) -> None:
    _serve(monkeypatch, _FakeResponse(YAML_DOCUMENT, content_type="application/yaml"))

    assert load_document(url="https://example.com/api-docs")[1] == DOCUMENT


def test_url_yaml_is_detected_by_extension(monkeypatch: pytest.MonkeyPatch) -> None:
    _serve(monkeypatch, _FakeResponse(YAML_DOCUMENT, content_type="text/plain"))

    assert load_document(url="https://example.com/openapi.yaml")[1] == DOCUMENT


def test_http_errors_are_wrapped(monkeypatch: pytest.MonkeyPatch) -> None:
    _serve(monkeypatch, _FakeResponse("not found", status=404))

    with pytest.raises(DocumentLoaderError, match="HTTP error 404"):
        load_document_from_url("https://example.com/openapi.json")


def test_connection_errors_are_wrapped(monkeypatch: pytest.MonkeyPatch) -> None:
    def refuse(url, timeout):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(requests, "get", refuse)

    with pytest.raises(DocumentLoaderError, match="Connection error"):
        load_document_from_url("https://example.com/openapi.json")


def test_invalid_url_is_rejected_before_requesting() -> None:
    with pytest.raises(DocumentLoaderError, match="Invalid URL"):
        load_document_from_url("not-a-url")


@pytest.mark.parametrize("kwargs", [{}, {"file_path": "a.json", "url": "https://x.io"}])
def test_load_document_requires_exactly_one_source(kwargs) -> None:
    with pytest.raises(DocumentLoaderError):
        load_document(**kwargs)
