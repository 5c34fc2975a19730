"""Parsing and validation of import documents.

An import either fails outright (``ImportRejected``) or yields an
``ImportResult`` listing what survived validation and how many entries were
dropped. Nothing here touches session state; the caller decides whether to
apply the result, after confirming with the user when entries were dropped.
"""

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.catalog import BUILTIN_SOUNDS
from ..core.errors import ImportRejected
from ..core.models import ImportResult, SelectionRow, SoundDefinition
from ..validation import ShapeCheck, validate_row_shape, validate_sound_shape


logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Could not import file. Is it valid JSON?"
MISSING_ROWS_MESSAGE = "Invalid file: missing selectedRows array."

ModelT = TypeVar("ModelT", bound=BaseModel)


def _collect(
    items: list[Any],
    check: ShapeCheck,
    model: type[ModelT],
    key: str,
    reserved: frozenset[str] | set[str] = frozenset(),
) -> tuple[list[ModelT], int]:
    """Validate each item, returning the survivors and the number dropped."""
    kept: list[ModelT] = []
    seen = set(reserved)
    dropped = 0

    for index, item in enumerate(items):
        is_valid, error = check(item)
        if not is_valid:
            logger.info(f"[Import] Dropping {model.__name__} #{index}: {error}")
            dropped += 1
            continue

        if item[key] in seen:
            logger.info(f"[Import] Dropping {model.__name__} #{index}: duplicate {key} '{item[key]}'")
            dropped += 1
            continue

        try:
            parsed = model.model_validate(item)
        except ValidationError as e:
            logger.info(
                f"[Import] Dropping {model.__name__} #{index}: "
                f"{e.error_count()} invalid field(s)"
            )
            dropped += 1
            continue

        seen.add(item[key])
        kept.append(parsed)

    return kept, dropped


def parse_import(text: str | bytes) -> ImportResult:
    """Parse and validate the text of an import document.

    Args:
        text: Raw file contents, as text or undecoded bytes.

    Returns:
        ImportResult with the surviving rows and custom sounds.

    Raises:
        ImportRejected: If the text is not JSON, or has no selectedRows array.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        logger.warning(f"[Import] Rejected, not valid JSON: {e}")
        raise ImportRejected(INVALID_JSON_MESSAGE) from e

    if not isinstance(data, dict) or not isinstance(data.get("selectedRows"), list):
        logger.warning("[Import] Rejected, missing selectedRows array")
        raise ImportRejected(MISSING_ROWS_MESSAGE)

    rows, dropped_rows = _collect(
        data["selectedRows"], validate_row_shape, SelectionRow, key="rowId"
    )

    custom_sounds = None
    dropped_sounds = 0
    if isinstance(data.get("customSounds"), list):
        custom_sounds, dropped_sounds = _collect(
            data["customSounds"],
            validate_sound_shape,
            SoundDefinition,
            key="id",
            reserved={s.id for s in BUILTIN_SOUNDS},
        )
        custom_sounds = tuple(custom_sounds)

    result = ImportResult(
        rows=tuple(rows),
        custom_sounds=custom_sounds,
        dropped_rows=dropped_rows,
        dropped_sounds=dropped_sounds,
    )
    logger.info(
        f"[Import] Parsed {len(result.rows)} rows ({dropped_rows} dropped), "
        f"status={result.status.value}"
    )
    return result
