"""Command objects accepted by the mutation API."""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from ..core.models import Axis


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True)


class AddSound(_Command):
    kind: Literal["add"] = "add"
    sound_id: str


class RemoveRow(_Command):
    kind: Literal["remove"] = "remove"
    row_id: str


class RelabelRow(_Command):
    kind: Literal["relabel"] = "relabel"
    row_id: str
    label: str


class ToggleAttribute(_Command):
    kind: Literal["toggle"] = "toggle"
    row_id: str
    axis: Axis
    value: str


class ClearRows(_Command):
    kind: Literal["clear"] = "clear"


Command = Union[AddSound, RemoveRow, RelabelRow, ToggleAttribute, ClearRows]
