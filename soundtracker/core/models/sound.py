"""Sound definitions, selection rows and the classification axes.

Field names on the wire are camelCase (``rowId``, ``freqBands``, ...) so that
exported documents stay compatible with existing project files. Python code
uses the snake_case attribute names.
"""

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Axis(str, Enum):
    """The four independent classification axes of a row."""

    FREQUENCY = "freqBands"
    STEREO = "stereoPresences"
    DEPTH = "depths"
    SHAPE = "shapes"

    @property
    def field_name(self) -> str:
        """Python attribute name of this axis on SelectionRow."""
        return _AXIS_FIELDS[self]


FREQUENCY_BANDS: tuple[str, ...] = ("low", "low-mid", "mid", "high")
STEREO_PRESENCES: tuple[str, ...] = ("narrow", "medium", "wide")
DEPTHS: tuple[str, ...] = ("front", "middle", "back")
SHAPES: tuple[str, ...] = ("transient", "sustained")

AXIS_VOCABULARIES: dict[Axis, tuple[str, ...]] = {
    Axis.FREQUENCY: FREQUENCY_BANDS,
    Axis.STEREO: STEREO_PRESENCES,
    Axis.DEPTH: DEPTHS,
    Axis.SHAPE: SHAPES,
}

_AXIS_FIELDS: dict[Axis, str] = {
    Axis.FREQUENCY: "freq_bands",
    Axis.STEREO: "stereo_presences",
    Axis.DEPTH: "depths",
    Axis.SHAPE: "shapes",
}


def unique_values(values: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates, keeping the first occurrence of each value."""
    return tuple(dict.fromkeys(values))


def _as_attribute_set(value):
    # Only real sequences; a bare string would otherwise split into letters.
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ValueError("attribute set must be an array of strings")
    return unique_values(value)


# =============================================================================
# Sound definitions
# =============================================================================


class SoundDefinition(BaseModel):
    """A catalog entry: display name plus default tags for new rows."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: str
    name: str
    default_freq_bands: tuple[str, ...] = Field(default=(), alias="defaultFreqBands")
    default_stereo_presence: tuple[str, ...] = Field(
        default=(), alias="defaultStereoPresence"
    )
    default_depth: tuple[str, ...] = Field(default=(), alias="defaultDepth")
    default_shape: tuple[str, ...] = Field(default=(), alias="defaultShape")

    @field_validator(
        "default_freq_bands",
        "default_stereo_presence",
        "default_depth",
        "default_shape",
        mode="before",
    )
    @classmethod
    def _dedupe_defaults(cls, value):
        return _as_attribute_set(value)

    def defaults_for(self, axis: Axis) -> tuple[str, ...]:
        """Default tags this sound contributes on the given axis."""
        return {
            Axis.FREQUENCY: self.default_freq_bands,
            Axis.STEREO: self.default_stereo_presence,
            Axis.DEPTH: self.default_depth,
            Axis.SHAPE: self.default_shape,
        }[axis]


# =============================================================================
# Selection rows
# =============================================================================


class SelectionRow(BaseModel):
    """One selected sound in the project, tagged along the four axes.

    Rows are immutable; mutation operations build replacements with
    ``model_copy(update=...)``. Unknown fields from imported files are kept
    so they survive a later export.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    row_id: str = Field(alias="rowId")
    sound_id: str = Field(alias="soundId")
    label: str = ""
    freq_bands: tuple[str, ...] = Field(default=(), alias="freqBands")
    stereo_presences: tuple[str, ...] = Field(default=(), alias="stereoPresences")
    depths: tuple[str, ...] = ()
    shapes: tuple[str, ...] = ()

    @field_validator(
        "freq_bands", "stereo_presences", "depths", "shapes", mode="before"
    )
    @classmethod
    def _dedupe_tags(cls, value):
        return _as_attribute_set(value)

    def tags(self, axis: Axis) -> tuple[str, ...]:
        """Tags currently set on the given axis."""
        return getattr(self, axis.field_name)

    def has_tag(self, axis: Axis, value: str) -> bool:
        return value in self.tags(axis)

    def to_dict(self) -> dict:
        """JSON-ready dictionary using the exported field names."""
        return self.model_dump(mode="json", by_alias=True)
