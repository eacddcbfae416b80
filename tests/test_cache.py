from __future__ import annotations

import os
from pathlib import Path

import pytest

from fx_convert.errors import DownloadError
from fx_convert.rates.cache import RateCache


class _FakeClock:
    def __init__(self, now: float) -> None:
        self.value = now

    def now(self) -> float:
        return self.value


class _RecordingSource:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[Path] = []
        self.error = error

    def refresh(self, destination: Path) -> Path:
        self.calls.append(destination)
        if self.error is not None:
            raise self.error
        destination.write_text('{"rates": {}}')
        return destination


def _cache_file(tmp_path: Path, mtime: float = 1_700_000_000.0) -> Path:
    path = tmp_path / "currency.json"
    path.write_text('{"rates": {"EUR": 1.0}}')
    os.utime(path, (mtime, mtime))
    return path


def test_missing_file_is_not_fresh(tmp_path: Path) -> None:
    cache = RateCache(tmp_path / "currency.json", clock=_FakeClock(0))

    assert cache.is_fresh() is False


def test_recent_file_is_fresh(tmp_path: Path) -> None:
    path = _cache_file(tmp_path)
    cache = RateCache(path, clock=_FakeClock(1_700_000_000.0 + 1))

    assert cache.is_fresh() is True


def test_file_at_ttl_boundary_is_stale(tmp_path: Path) -> None:
    path = _cache_file(tmp_path)
    cache = RateCache(path, clock=_FakeClock(1_700_000_000.0 + 3600))

    assert cache.is_fresh() is False


def test_old_file_is_stale(tmp_path: Path) -> None:
    path = _cache_file(tmp_path)
    cache = RateCache(path, clock=_FakeClock(1_700_000_000.0 + 86_400))

    assert cache.is_fresh() is False


def test_custom_ttl(tmp_path: Path) -> None:
    path = _cache_file(tmp_path)
    cache = RateCache(path, ttl_seconds=10, clock=_FakeClock(1_700_000_000.0 + 11))

    assert cache.is_fresh() is False


def test_metadata_errors_are_treated_as_stale(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    path = _cache_file(tmp_path)
    cache = RateCache(path, clock=_FakeClock(1_700_000_000.0 + 1))

    def _denied(self, *args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "stat", _denied)

    assert cache.is_fresh() is False


def test_invalid_ttl_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        RateCache(tmp_path / "currency.json", ttl_seconds=0)


def test_ensure_fresh_skips_download_for_fresh_cache(tmp_path: Path) -> None:
    path = _cache_file(tmp_path)
    source = _RecordingSource()
    cache = RateCache(path, clock=_FakeClock(1_700_000_000.0 + 5))

    assert cache.ensure_fresh(source) is False
    assert source.calls == []


def test_ensure_fresh_downloads_stale_cache(tmp_path: Path) -> None:
    path = _cache_file(tmp_path)
    source = _RecordingSource()
    cache = RateCache(path, clock=_FakeClock(1_700_000_000.0 + 7200))

    assert cache.ensure_fresh(source) is True
    assert source.calls == [path]


def test_ensure_fresh_propagates_download_errors(tmp_path: Path) -> None:
    source = _RecordingSource(error=DownloadError("offline"))
    cache = RateCache(tmp_path / "currency.json", clock=_FakeClock(0))

    with pytest.raises(DownloadError, match="offline"):
        cache.ensure_fresh(source)


def test_file_dated_in_the_future_is_stale(tmp_path: Path) -> None:
    path = _cache_file(tmp_path)
    cache = RateCache(path, clock=_FakeClock(1_700_000_000.0 - 60))

    assert cache.is_fresh() is False
