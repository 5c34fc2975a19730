"""Sound catalog: built-in definitions merged with user-defined ones.

Built-in definitions always win a lookup. Registering a custom sound whose
identifier is already taken (built-in or custom) is rejected, so the merged
view never holds two entries with the same id.
"""

import logging
from typing import Iterable

from .errors import DuplicateSoundError
from .models import SoundDefinition


logger = logging.getLogger(__name__)


def _sound(sound_id, name, freq, stereo, depth, shape) -> SoundDefinition:
    return SoundDefinition(
        id=sound_id,
        name=name,
        default_freq_bands=freq,
        default_stereo_presence=stereo,
        default_depth=depth,
        default_shape=shape,
    )


BUILTIN_SOUNDS: tuple[SoundDefinition, ...] = (
    _sound("ambience", "Ambience", ["low-mid", "mid"], ["medium", "wide"], ["back"], ["transient", "sustained"]),
    _sound("arp", "Arpeggiator", ["low-mid", "mid", "high"], ["narrow", "medium"], ["front", "middle"], ["transient"]),
    _sound("bass", "Bass", ["low", "low-mid"], ["narrow", "wide"], ["front"], ["transient", "sustained"]),
    _sound("bell", "Bell", ["mid", "high"], ["narrow", "medium"], ["front", "middle"], ["transient"]),
    _sound("brass", "Brass", ["low-mid", "mid", "high"], ["narrow", "medium"], ["front", "middle"], ["transient", "sustained"]),
    _sound("flute", "Flute", ["mid", "high"], ["narrow", "medium"], ["front", "middle"], ["transient", "sustained"]),
    _sound("guitar", "Guitar", ["low-mid", "mid", "high"], ["narrow", "medium"], ["middle", "back"], ["transient"]),
    _sound("keys", "Keys", ["low-mid", "mid", "high"], ["narrow", "medium"], ["front", "middle"], ["transient"]),
    _sound("lead", "Lead", ["mid", "high"], ["narrow", "medium"], ["front", "middle"], ["sustained"]),
    _sound("organ", "Organ", ["low-mid", "mid"], ["narrow", "medium"], ["front", "middle"], ["sustained"]),
    _sound("pad", "Pad", ["low-mid", "mid"], ["medium", "wide"], ["middle", "back"], ["sustained"]),
    _sound("percussion", "Percussion", ["mid", "high"], ["narrow", "medium", "wide"], ["front", "middle"], ["transient"]),
    _sound("pluck", "Pluck", ["mid", "high"], ["narrow", "medium"], ["front", "middle"], ["transient"]),
    _sound("strings", "Strings", ["mid", "high"], ["medium", "wide"], ["middle", "back"], ["sustained"]),
    _sound("synth", "Synthesizer", ["low-mid", "mid", "high"], ["narrow", "medium", "wide"], ["front", "middle"], ["transient", "sustained"]),
)


class Catalog:
    """Merged lookup over built-in and custom sound definitions.

    Args:
        custom: User-defined sounds, in registration order.
        builtin: Built-in table; defaults to BUILTIN_SOUNDS.
    """

    def __init__(
        self,
        custom: Iterable[SoundDefinition] = (),
        builtin: Iterable[SoundDefinition] = BUILTIN_SOUNDS,
    ) -> None:
        self._builtin = {s.id: s for s in builtin}
        self._custom: dict[str, SoundDefinition] = {}
        for sound in custom:
            if sound.id in self._builtin or sound.id in self._custom:
                # Stored data may predate the collision rule; keep the first.
                logger.warning(f"[Catalog] Ignoring duplicate custom sound '{sound.id}'")
                continue
            self._custom[sound.id] = sound

    @property
    def builtin(self) -> tuple[SoundDefinition, ...]:
        return tuple(self._builtin.values())

    @property
    def custom(self) -> tuple[SoundDefinition, ...]:
        return tuple(self._custom.values())

    def all(self) -> tuple[SoundDefinition, ...]:
        """Every definition, built-in first, then custom in registration order."""
        return self.builtin + self.custom

    def resolve(self, sound_id: str) -> SoundDefinition | None:
        """Look up a sound by id, or None when it is unknown."""
        return self._builtin.get(sound_id) or self._custom.get(sound_id)

    def display_name(self, sound_id: str) -> str:
        """Catalog name for a sound, falling back to the raw id."""
        sound = self.resolve(sound_id)
        return sound.name if sound else sound_id

    def with_custom(self, sound: SoundDefinition) -> "Catalog":
        """Return a new catalog with one more custom definition.

        Raises:
            DuplicateSoundError: If the id is already in use.
        """
        if self.resolve(sound.id) is not None:
            raise DuplicateSoundError(sound.id)
        return Catalog(custom=self.custom + (sound,), builtin=self.builtin)

    def replace_custom(self, custom: Iterable[SoundDefinition]) -> "Catalog":
        """Return a new catalog whose custom definitions are replaced wholesale."""
        return Catalog(custom=custom, builtin=self.builtin)

    def __contains__(self, sound_id: str) -> bool:
        return self.resolve(sound_id) is not None

    def __len__(self) -> int:
        return len(self._builtin) + len(self._custom)
