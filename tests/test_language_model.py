from __future__ import annotations

import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.language_profile import LanguageModelError, SpanishProfile
from src.language_profile.language_model import LanguageModelHandle, NgramLanguageModel


class CountingLoader:
    """Loader stub that records every directory it is asked to open."""

    def __init__(self, delay: float = 0.0) -> None:
        self.delay = delay
        self.calls: list[Path] = []
        self._lock = threading.Lock()

    def __call__(self, directory: Path) -> "FakeModel":
        with self._lock:
            self.calls.append(directory)
        time.sleep(self.delay)
        return FakeModel(directory)


class FakeModel:
    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self.closed = False
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        self.closed = True


def test_ngram_model_opens_existing_directory(tmp_path: Path) -> None:
    (tmp_path / "1grams").mkdir()
    model = NgramLanguageModel(tmp_path)
    assert model.directory == tmp_path
    assert model.entries == ["1grams"]
    assert not model.closed
    model.close()
    model.close()
    assert model.closed


def test_ngram_model_missing_directory_raises_with_cause(tmp_path: Path) -> None:
    with pytest.raises(LanguageModelError) as excinfo:
        NgramLanguageModel(tmp_path / "missing")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_acquire_loads_language_subdirectory_once(tmp_path: Path) -> None:
    loader = CountingLoader()
    handle = LanguageModelHandle("es", loader)

    first = handle.acquire(tmp_path)
    second = handle.acquire(tmp_path / "elsewhere")

    assert first is second
    assert loader.calls == [tmp_path / "es"]
    assert handle.current is first


def test_concurrent_acquire_creates_a_single_model(tmp_path: Path) -> None:
    loader = CountingLoader(delay=0.05)
    handle = LanguageModelHandle("es", loader)
    barrier = threading.Barrier(8)

    def acquire() -> object:
        barrier.wait()
        return handle.acquire(tmp_path)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: acquire(), range(8)))

    assert len(loader.calls) == 1
    assert all(result is results[0] for result in results)


def test_failed_acquire_stores_nothing_and_can_be_retried(tmp_path: Path) -> None:
    attempts: list[Path] = []

    def flaky_loader(directory: Path) -> FakeModel:
        attempts.append(directory)
        if len(attempts) == 1:
            raise LanguageModelError("index unreadable")
        return FakeModel(directory)

    handle = LanguageModelHandle("es", flaky_loader)
    with pytest.raises(LanguageModelError):
        handle.acquire(tmp_path)
    assert handle.current is None

    model = handle.acquire(tmp_path)
    assert handle.current is model
    assert len(attempts) == 2


def test_release_without_acquire_is_a_no_op(tmp_path: Path) -> None:
    loader = CountingLoader()
    handle = LanguageModelHandle("es", loader)
    handle.release()
    handle.release()

    model = handle.acquire(tmp_path)
    assert model is handle.current
    assert len(loader.calls) == 1


def test_release_closes_and_allows_fresh_acquire(tmp_path: Path) -> None:
    loader = CountingLoader()
    handle = LanguageModelHandle("es", loader)

    first = handle.acquire(tmp_path)
    handle.release()
    assert first.closed
    assert handle.current is None

    second = handle.acquire(tmp_path)
    assert second is not first
    handle.release()
    handle.release()
    assert first.close_calls == 1
    assert second.close_calls == 1


def test_independent_profiles_do_not_share_models(tmp_path: Path) -> None:
    loader = CountingLoader()
    one = SpanishProfile(model_loader=loader)
    two = SpanishProfile(model_loader=loader)

    assert one.acquire_language_model(tmp_path) is not two.acquire_language_model(tmp_path)
    assert len(loader.calls) == 2
    one.close()
    assert one.language_model is None
    assert two.language_model is not None


def test_profile_uses_real_model_from_disk(tmp_path: Path) -> None:
    (tmp_path / "es").mkdir()
    with SpanishProfile() as profile:
        model = profile.acquire_language_model(tmp_path)
        assert isinstance(model, NgramLanguageModel)
        assert model.directory == tmp_path / "es"
    assert model.closed
    assert profile.language_model is None


def test_profile_missing_model_leaves_profile_reusable(tmp_path: Path) -> None:
    profile = SpanishProfile()
    with pytest.raises(LanguageModelError):
        profile.acquire_language_model(tmp_path)
    assert profile.language_model is None

    (tmp_path / "es").mkdir()
    assert profile.acquire_language_model(tmp_path).directory == tmp_path / "es"
    profile.close()
