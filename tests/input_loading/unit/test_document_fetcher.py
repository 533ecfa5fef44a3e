"""Input document fetcher tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests
from yaml_to_jsonschema.input_loading import InputError, fetch_input, is_url, load_inputs


class _FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class _FakeSession:
    def __init__(self, responses: dict[str, _FakeResponse]) -> None:
        self.responses = responses
        self.calls: list[tuple[str, float]] = []

    def get(self, url: str, *, timeout: float) -> _FakeResponse:
        self.calls.append((url, timeout))
        if url not in self.responses:
            raise requests.ConnectionError(f"cannot reach {url}")
        return self.responses[url]


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("http://example.com/values.yaml", True),
        ("https://example.com/values.yaml", True),
        ("values.yaml", False),
        ("/tmp/values.yaml", False),
        ("ftp://example.com/values.yaml", False),
    ],
)
def test_is_url(identifier: str, expected: bool) -> None:
    assert is_url(identifier) is expected


def test_reads_local_file(tmp_path: Path) -> None:
    path = tmp_path / "values.yaml"
    path.write_bytes(b"a: 1\n")

    assert fetch_input(str(path)) == b"a: 1\n"


def test_missing_local_file_names_the_input(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing.yaml")

    with pytest.raises(InputError) as excinfo:
        fetch_input(missing)

    assert excinfo.value.identifier == missing
    assert missing in str(excinfo.value)


def test_downloads_urls_through_session() -> None:
    url = "https://example.com/values.yaml"
    session = _FakeSession({url: _FakeResponse(b"b: 2\n")})

    assert fetch_input(url, session=session, timeout=5) == b"b: 2\n"
    assert session.calls == [(url, 5)]


def test_http_error_status_is_an_input_error() -> None:
    url = "https://example.com/missing.yaml"
    session = _FakeSession({url: _FakeResponse(b"", status_code=404)})

    with pytest.raises(InputError, match="failed to download file: 404"):
        fetch_input(url, session=session)


def test_connection_failure_is_an_input_error() -> None:
    with pytest.raises(InputError, match="cannot reach"):
        fetch_input("http://unreachable.invalid/values.yaml", session=_FakeSession({}))


def test_load_inputs_keeps_input_order(tmp_path: Path) -> None:
    first = tmp_path / "first.yaml"
    first.write_bytes(b"first: 1\n")
    url = "https://example.com/second.yaml"
    session = _FakeSession({url: _FakeResponse(b"second: 2\n")})

    loaded = list(load_inputs([str(first), url], session=session))

    assert loaded == [(str(first), b"first: 1\n"), (url, b"second: 2\n")]


def test_load_inputs_uses_injected_fetch_in_order() -> None:
    seen: list[str] = []

    def _fetch(identifier: str) -> bytes:
        seen.append(identifier)
        return identifier.encode("utf-8")

    loaded = list(load_inputs(["b.yaml", "a.yaml"], fetch=_fetch))

    assert loaded == [("b.yaml", b"b.yaml"), ("a.yaml", b"a.yaml")]
    assert seen == ["b.yaml", "a.yaml"]
