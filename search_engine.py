#!/usr/bin/python3
"""
Search engine orchestration.

This module provides a SearchEngine that runs a configured substring search
algorithm over a data file. It supports two operational modes:

- reread_on_query=True: the file is read from disk for every query.
- reread_on_query=False: the file text is cached by warmup() and reused.

Underlying search implementations live in `search.py` and raise SearchError,
which is wrapped as EngineError at this layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from config import SUPPORTED_ALGOS, AppConfig
from search import FILE_SEARCHERS, TEXT_SEARCHERS, SearchError, read_text_file


logger = logging.getLogger(__name__)


class EngineError(RuntimeError):
    """Raised when the search engine cannot operate correctly."""


@dataclass
class SearchEngine:
    """Engine that routes patterns to the configured search algorithm.

    Attributes:
        file_path: Path to the text file being searched.
        reread_on_query: Whether to read the file anew for each query.
        search_algo: Selected search algorithm name.
        _cache: File text cached by warmup() when reread_on_query=False.
    """

    file_path: Path
    reread_on_query: bool
    search_algo: str
    _cache: Optional[str] = None

    @classmethod
    def supported_algorithms(cls) -> set[str]:
        """Return the set of supported algorithm identifiers."""
        return set(SUPPORTED_ALGOS)

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "SearchEngine":
        """Create a SearchEngine from an AppConfig.

        Args:
            cfg: Loaded application configuration.

        Returns:
            A validated SearchEngine instance.
        """
        engine = cls(
            file_path=cfg.linuxpath,
            reread_on_query=cfg.reread_on_query,
            search_algo=cfg.search_algo,
        )
        engine._validate()
        return engine

    def _validate(self) -> None:
        if self.search_algo not in SUPPORTED_ALGOS:
            raise EngineError(f"Unsupported search_algo={self.search_algo!r}")

    def warmup(self) -> None:
        """Load and cache the file text.

        If reread_on_query=True, any existing cache is cleared instead.

        Raises:
            EngineError: If the data file cannot be read.
        """
        self._validate()

        if self.reread_on_query:
            self._cache = None
            return

        try:
            self._cache = read_text_file(self.file_path)
        except SearchError as exc:
            raise EngineError(str(exc)) from exc

        logger.info(
            "Cached %d characters from %s", len(self._cache), self.file_path
        )

    def text(self) -> str:
        """Return the text a query would currently be run against.

        Raises:
            EngineError: If the data file cannot be read.
        """
        if not self.reread_on_query:
            if self._cache is None:
                self.warmup()
            assert self._cache is not None
            return self._cache

        try:
            return read_text_file(self.file_path)
        except SearchError as exc:
            raise EngineError(str(exc)) from exc

    def find(self, pattern: str) -> list[int]:
        """Return every start offset of `pattern` in the data file.

        Args:
            pattern: Pattern to locate.

        Returns:
            Ascending 0-based offsets, overlapping occurrences included.

        Raises:
            EngineError: If the underlying search operation fails or the
                configuration is invalid.
        """
        self._validate()

        if self.reread_on_query:
            try:
                return FILE_SEARCHERS[self.search_algo](
                    self.file_path, pattern
                )
            except SearchError as exc:
                raise EngineError(str(exc)) from exc

        # Cached mode: allow lazy warmup.
        return TEXT_SEARCHERS[self.search_algo](self.text(), pattern)

    def count(self, pattern: str) -> int:
        """Return the number of occurrences of `pattern`."""
        return len(self.find(pattern))
