import io
import logging
import math
from typing import Any, Iterable, Sequence

import pandas as pd

from . import settings
from .errors import DecodeError
from .schemas import CoercionFailure, DecodedDataset

logger = logging.getLogger(__name__)


def _to_text(source: str | bytes) -> str:
    """
    Mirrors the loader's encoding fallback:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which can read any byte.
    """
    if isinstance(source, str):
        return source.lstrip("\ufeff")
    if isinstance(source, (bytes, bytearray)):
        try:
            return bytes(source).decode("utf-8-sig")
        except UnicodeDecodeError:
            logger.info("INFO: UTF-8 decoding failed. Retrying with 'latin-1'.")
            return bytes(source).decode("latin-1")
    raise DecodeError(f"Unsupported source type: {type(source).__name__}")


def _is_missing(value: Any) -> bool:
    return (
        value is None
        or value is pd.NA
        or (isinstance(value, float) and math.isnan(value))
    )


def _has_text(value: Any) -> bool:
    return not _is_missing(value) and str(value).strip() != ""


def coerce_number(value: Any) -> tuple[Any, bool]:
    """
    Tries to read a cell as a finite float.
    Returns (value, ok); on failure the original value comes back untouched.
    """
    if isinstance(value, bool):
        return value, False
    if isinstance(value, (int, float)):
        return value, math.isfinite(value)
    try:
        number = float(str(value).strip())
    except ValueError:
        return value, False
    if not math.isfinite(number):
        return value, False
    return number, True


def decode_rows(
    header: Sequence[Any],
    rows: Iterable[Sequence[Any]],
    numeric_fields: Iterable[str] = settings.NUMERIC_FIELDS,
) -> DecodedDataset:
    """
    Zips each row against the header by position.
    - Rows without a single non-empty cell are skipped.
    - Missing trailing cells leave the field out; extra cells are dropped.
    - Designated numeric columns are coerced; failures are recorded, not raised.
    """
    fields = [str(name).strip() for name in header]
    numeric = set(numeric_fields)
    width = len(fields)

    records: list[dict[str, Any]] = []
    failures: list[CoercionFailure] = []
    warnings: list[str] = []

    for cells in rows:
        cells = list(cells)
        if not any(_has_text(cell) for cell in cells):
            continue

        row_number = len(records) + 1
        filled = sum(1 for cell in cells[:width] if not _is_missing(cell))
        if len(cells) > width:
            warnings.append(
                f"Row {row_number}: expected {width} fields, found {len(cells)}. Extra cells ignored."
            )
        elif filled < width:
            warnings.append(
                f"Row {row_number}: expected {width} fields, found {filled}."
            )

        record: dict[str, Any] = {}
        for name, cell in zip(fields, cells):
            if _is_missing(cell):
                continue
            if name in numeric:
                value, ok = coerce_number(cell)
                if not ok and _has_text(cell):
                    failures.append(
                        CoercionFailure(row=row_number, field=name, value=str(cell))
                    )
                record[name] = value
            else:
                record[name] = cell
        records.append(record)

    for message in warnings:
        logger.warning(f"⚠️ {message}")

    return DecodedDataset(rows=records, failures=failures, warnings=warnings)


def decode(
    source: str | bytes, numeric_fields: Iterable[str] = settings.NUMERIC_FIELDS
) -> DecodedDataset:
    """
    Decodes raw CSV text (header row first) into field -> value mappings.
    Raises DecodeError only when the input cannot be read as CSV at all.
    """
    text = _to_text(source)
    if "\x00" in text:
        raise DecodeError("Input looks like binary data, not comma-separated text.")
    if not text.strip():
        return DecodedDataset()

    truncated: list[str] = []
    # object dtype keeps every cell as the raw text; padding for short rows stays None
    read_options = dict(
        header=None, dtype=object, keep_default_na=False, engine="python"
    )

    try:
        # The header row fixes the width every later row is cut to.
        width = pd.read_csv(io.StringIO(text), nrows=1, **read_options).shape[1]

        def _truncate(bad_line: list[str]) -> list[str]:
            truncated.append(
                f"Expected {width} fields, found {len(bad_line)}. Extra cells ignored."
            )
            return bad_line[:width]

        df = pd.read_csv(
            io.StringIO(text),
            skip_blank_lines=True,
            on_bad_lines=_truncate,
            **read_options,
        )
    except pd.errors.EmptyDataError:
        return DecodedDataset()
    except pd.errors.ParserError as e:
        raise DecodeError(f"Could not parse CSV input. Reason: {e}") from e

    if df.empty:
        return DecodedDataset()

    for message in truncated:
        logger.warning(f"⚠️ {message}")

    header = df.iloc[0].tolist()
    body = df.iloc[1:].values.tolist()
    decoded = decode_rows(header, body, numeric_fields)
    decoded.warnings = truncated + decoded.warnings

    logger.debug(
        f"Decoded {len(decoded.rows)} rows ({len(decoded.failures)} numeric coercion failures)."
    )
    return decoded
