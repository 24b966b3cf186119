"""Data access helpers for loading the ZIP coverage table."""

from __future__ import annotations

import asyncio
import csv
import io
import logging
import re
import zipfile
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping, Optional

import anyio.to_thread
import httpx
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..config import Settings, settings as default_settings
from ..models.domain import (
    CoverageFailed,
    CoverageLoaded,
    CoverageLoadResult,
    CoverageRecord,
    CoverageTable,
)

logger = logging.getLogger(__name__)

ZIP_LENGTH = 5
COVERAGE_COLUMNS = ("Zone", "Zip", "City", "DeliveryDays")

_NON_DIGITS = re.compile(r"[^0-9]")
_VALID_KEY = re.compile(r"^[0-9]{5}$")


def _cell_text(value: Any) -> str:
    """Render a parsed cell as text without numeric coercion artifacts."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_zip(value: Any) -> str:
    digits = _NON_DIGITS.sub("", _cell_text(value))
    if not digits:
        return ""
    return digits.rjust(ZIP_LENGTH, "0")


def normalize_row(row: Mapping[Optional[str], Any]) -> CoverageRecord:
    """Coerce one raw row into a CoverageRecord; missing columns become empty strings."""

    return CoverageRecord(
        zone=_cell_text(row.get("Zone")).strip(),
        zip=normalize_zip(row.get("Zip")),
        city=_cell_text(row.get("City")).strip(),
        delivery_days=_cell_text(row.get("DeliveryDays")).strip().upper(),
    )


def build_coverage_table(rows: Iterable[Mapping[Optional[str], Any]], source: Optional[str] = None) -> CoverageTable:
    """Normalize rows in order and index them by ZIP, keeping the first row per ZIP."""

    records: dict[str, CoverageRecord] = {}
    rows_read = 0
    skipped = 0
    duplicates = 0
    for row in rows:
        rows_read += 1
        record = normalize_row(row)
        if not _VALID_KEY.match(record.zip):
            skipped += 1
            continue  # empty or over-long ZIPs can never be queried
        if record.zip in records:
            duplicates += 1
            logger.debug(f"Dropping duplicate coverage row for ZIP {record.zip}")
            continue
        records[record.zip] = record
    return CoverageTable(
        records=records,
        rows_read=rows_read,
        rows_skipped=skipped,
        duplicate_rows=duplicates,
        source=source,
    )


def iter_csv_rows(text: str) -> Iterator[dict[Optional[str], Any]]:
    reader = csv.DictReader(io.StringIO(text, newline=""))
    if not reader.fieldnames:
        raise ValueError("Coverage data is missing a header row.")
    reader.fieldnames = [name.strip() for name in reader.fieldnames]
    _warn_missing_columns(reader.fieldnames)
    yield from reader


def iter_xlsx_rows(payload: bytes) -> Iterator[dict[Optional[str], Any]]:
    try:
        wb = load_workbook(io.BytesIO(payload), data_only=True, read_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        raise ValueError(f"Unable to open coverage workbook: {exc}") from exc
    try:
        sheet = wb.active
        rows = sheet.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None or all(cell is None for cell in header):
            raise ValueError("Coverage workbook is missing a header row.")
        names = [_cell_text(cell).strip() for cell in header]
        _warn_missing_columns(names)
        for row in rows:
            if all(cell is None or _cell_text(cell).strip() == "" for cell in row):
                continue
            yield {name: value for name, value in zip(names, row) if name}
    finally:
        wb.close()


def parse_coverage_bytes(payload: bytes, name: str) -> CoverageTable:
    """Parse a CSV or XLSX payload; the format is chosen from the resource name."""

    if _is_workbook(name):
        rows: Iterable[Mapping[Optional[str], Any]] = iter_xlsx_rows(payload)
    else:
        try:
            text = payload.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ValueError(f"Coverage data '{name}' is not valid UTF-8.") from exc
        rows = iter_csv_rows(text)
    try:
        return build_coverage_table(rows, source=name)
    except csv.Error as exc:
        raise ValueError(f"Unable to parse coverage data '{name}': {exc}") from exc


def load_coverage_file(source: Optional[Path] = None) -> CoverageTable:
    """Load the coverage table from the configured CSV/XLSX file."""

    path = source or default_settings.coverage_file
    if not path.exists():
        raise FileNotFoundError(f"Coverage file not found: {path}")
    return parse_coverage_bytes(path.read_bytes(), str(path))


async def fetch_coverage_bytes(
    url: str,
    *,
    timeout: float,
    max_retries: int,
    backoff_seconds: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> bytes:
    """Download the coverage resource, retrying transport and status failures."""

    async with httpx.AsyncClient(timeout=httpx.Timeout(timeout), transport=transport) as client:
        attempt = 0
        while True:
            try:
                response = await client.get(url)
                response.raise_for_status()
                return response.content
            except httpx.HTTPError as exc:
                attempt += 1
                if attempt > max_retries:
                    raise
                logger.warning(
                    f"Coverage fetch from {url} failed ({exc}); retrying (attempt {attempt}/{max_retries})"
                )
                await asyncio.sleep(backoff_seconds * attempt)


async def load_coverage(
    config: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> CoverageLoadResult:
    """Run one ingestion pass and report it as CoverageLoaded or CoverageFailed."""

    config = config or default_settings
    source = config.coverage_url or str(config.coverage_file)
    try:
        if config.coverage_url:
            payload = await fetch_coverage_bytes(
                config.coverage_url,
                timeout=config.coverage_timeout_seconds,
                max_retries=config.coverage_max_retries,
                backoff_seconds=config.coverage_backoff_seconds,
                transport=transport,
            )
            table = await anyio.to_thread.run_sync(
                parse_coverage_bytes, payload, httpx.URL(config.coverage_url).path
            )
        else:
            table = await anyio.to_thread.run_sync(load_coverage_file, config.coverage_file)
    except httpx.HTTPError as exc:
        logger.error(f"Failed to download coverage data from {source}: {exc}")
        return CoverageFailed(message=f"Failed to load coverage data: {exc}")
    except (OSError, ValueError) as exc:
        logger.error(f"Failed to load coverage data from {source}: {exc}")
        return CoverageFailed(message=str(exc) or "Failed to load coverage data.")

    logger.info(
        f"Loaded {len(table)} coverage ZIPs from {source} "
        f"({table.rows_read} rows, {table.duplicate_rows} duplicates, {table.rows_skipped} without a valid ZIP)"
    )
    return CoverageLoaded(table=table)


def _is_workbook(name: str) -> bool:
    return name.lower().endswith((".xlsx", ".xlsm"))


def _warn_missing_columns(names: Iterable[str]) -> None:
    missing = set(COVERAGE_COLUMNS) - set(names)
    if missing:
        logger.warning(f"Coverage data missing columns: {', '.join(sorted(missing))}; using empty values")
