"""Structural checks for elements of an import document.

Each check takes one raw JSON value and returns ``(is_valid, error_message)``.
The checks only cover the fields needed to identify an entry; everything
else is left for model validation.
"""

from typing import Any, Callable


# Takes a raw JSON value, returns (is_valid, error_message)
ShapeCheck = Callable[[Any], tuple[bool, str]]


def validate_row_shape(item: Any) -> tuple[bool, str]:
    """Minimum shape of a selected row: string ids and a freqBands array."""
    if not isinstance(item, dict):
        return False, f"row must be an object, got {type(item).__name__}"
    if not isinstance(item.get("rowId"), str):
        return False, "row is missing a string rowId"
    if not isinstance(item.get("soundId"), str):
        return False, f"row {item['rowId']} is missing a string soundId"
    if not isinstance(item.get("freqBands"), list):
        return False, f"row {item['rowId']} is missing a freqBands array"
    return True, ""


def validate_sound_shape(item: Any) -> tuple[bool, str]:
    """Minimum shape of a custom sound definition: string id and name."""
    if not isinstance(item, dict):
        return False, f"sound must be an object, got {type(item).__name__}"
    if not isinstance(item.get("id"), str):
        return False, "sound is missing a string id"
    if not isinstance(item.get("name"), str):
        return False, f"sound {item['id']} is missing a string name"
    return True, ""
