"""Lazily opened, shared n-gram language model.

Probability-based rules need an on-disk n-gram index that is expensive to
open. A profile owns one :class:`LanguageModelHandle`, which opens the index
on first request and hands the same instance to every later caller until the
profile is closed.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Optional

from .errors import LanguageModelError

LOGGER = logging.getLogger(__name__)


class NgramLanguageModel:
    """An n-gram index stored in a per-language directory."""

    def __init__(self, directory: str | Path) -> None:
        path = Path(directory)
        try:
            if not path.is_dir():
                raise FileNotFoundError(f"Language model directory not found: {path}")
            # Listing the directory surfaces permission problems up front.
            self._entries = sorted(item.name for item in path.iterdir())
        except OSError as exc:
            raise LanguageModelError(f"Cannot open language model at {path}") from exc
        self.directory = path
        self._closed = False
        LOGGER.info("Opened language model at %s (%d entries)", path, len(self._entries))

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        LOGGER.info("Closed language model at %s", self.directory)


ModelLoader = Callable[[Path], NgramLanguageModel]


class LanguageModelHandle:
    """Owns at most one language model for a profile instance.

    ``acquire`` is check-then-create and runs under a lock, so concurrent
    callers all receive the same model and the loader runs at most once.
    """

    def __init__(self, short_code: str, loader: ModelLoader = NgramLanguageModel) -> None:
        self._short_code = short_code
        self._loader = loader
        self._lock = threading.Lock()
        self._model: Optional[NgramLanguageModel] = None

    @property
    def current(self) -> Optional[NgramLanguageModel]:
        return self._model

    def acquire(self, location: str | Path) -> NgramLanguageModel:
        """Return the shared model, opening it below ``location`` if needed.

        Once a model is held, ``location`` is ignored. If the loader fails
        nothing is stored, so a later call may try again.
        """
        with self._lock:
            if self._model is None:
                directory = Path(location) / self._short_code
                LOGGER.info("Loading %s language model from %s", self._short_code, directory)
                self._model = self._loader(directory)
            return self._model

    def release(self) -> None:
        """Close and forget the held model; does nothing if none was acquired."""
        with self._lock:
            model, self._model = self._model, None
        if model is not None:
            model.close()
