from __future__ import annotations

from pathlib import Path

import pytest
import requests

from layoff_dashboard.ingest.fetch_dataset import cache_path_for, download_dataset, is_remote

URL = "https://example.com/data/layoffs.csv"


class _FakeResponse:
    def __init__(self, content: bytes, status: int = 200) -> None:
        self.content = content
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_is_remote() -> None:
    assert is_remote(URL)
    assert not is_remote("data/layoffs.csv")
    assert not is_remote("/tmp/layoffs.json")


def test_cache_path_keeps_suffix(tmp_path: Path) -> None:
    path = cache_path_for(URL, tmp_path)
    assert path.parent == tmp_path
    assert path.name.endswith("_layoffs.csv")
    assert cache_path_for(URL + "?v=2", tmp_path) != path


def test_download_writes_cache(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    def fake_get(url: str, timeout: float) -> _FakeResponse:
        calls.append(url)
        return _FakeResponse(b"company,laid_off,date\nAcme,1,2023-01-01\n")

    monkeypatch.setattr(requests, "get", fake_get)
    path = download_dataset(URL, tmp_path / "cache")
    assert path.read_bytes().startswith(b"company,")

    # second call is served from cache
    assert download_dataset(URL, tmp_path / "cache") == path
    assert calls == [URL]


def test_download_raises_on_http_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(requests, "get", lambda url, timeout: _FakeResponse(b"", status=404))
    with pytest.raises(requests.HTTPError):
        download_dataset(URL, tmp_path)
