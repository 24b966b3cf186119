"""Process-wide coverage state: one ingestion pass, then read-only queries."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

import anyio

from ...config import Settings
from ...data.coverage_repository import load_coverage
from ...models.domain import CoverageFailed, CoverageLoaded, CoverageLoadResult, CoverageTable
from .classifier import Outcome, classify

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Coverage data is still loading."

Loader = Callable[[Settings], Awaitable[CoverageLoadResult]]


class CoverageNotReady(RuntimeError):
    """Raised when a query arrives before the coverage table has loaded."""

    def __init__(self, load_error: Optional[str] = None) -> None:
        self.load_error = load_error
        super().__init__(load_error or LOADING_MESSAGE)


class CoverageService:
    """Owns the coverage table for the lifetime of the application.

    ``load`` runs ingestion at most once; the result (table or error) is latched
    and a restart is the only way to reload.
    """

    def __init__(self, config: Settings, loader: Optional[Loader] = None) -> None:
        self._config = config
        self._loader: Loader = loader or load_coverage
        self._result: Optional[CoverageLoadResult] = None
        self._lock = anyio.Lock()

    @property
    def table(self) -> Optional[CoverageTable]:
        if isinstance(self._result, CoverageLoaded):
            return self._result.table
        return None

    @property
    def table_ready(self) -> bool:
        return self.table is not None

    @property
    def load_error(self) -> Optional[str]:
        if isinstance(self._result, CoverageFailed):
            return self._result.message
        return None

    async def load(self) -> CoverageLoadResult:
        if self._result is not None:
            return self._result
        async with self._lock:
            if self._result is None:
                self._result = await self._loader(self._config)
                if isinstance(self._result, CoverageFailed):
                    logger.warning(f"ZIP coverage lookup disabled: {self._result.message}")
        return self._result

    def classify(self, raw: str) -> Outcome:
        table = self.table
        if table is None:
            raise CoverageNotReady(self.load_error)
        return classify(raw, table, contact_message=self._config.contact_message)

    def summary(self) -> dict:
        table = self.table
        return {
            "tableReady": table is not None,
            "loadError": self.load_error,
            "zipCount": len(table) if table is not None else 0,
            "rowsRead": table.rows_read if table is not None else 0,
            "duplicateRows": table.duplicate_rows if table is not None else 0,
            "rowsSkipped": table.rows_skipped if table is not None else 0,
            "source": table.source if table is not None else None,
        }
