"""Exception types raised by the Sound Tracker engine."""


class SoundTrackerError(Exception):
    """Base class for all Sound Tracker errors."""


class ImportRejected(SoundTrackerError):
    """Raised when an import document cannot be used at all.

    The Row Store is never touched when this is raised. ``reason`` is the
    user-facing message.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class DuplicateSoundError(SoundTrackerError):
    """Raised when a custom sound definition reuses an existing identifier."""

    def __init__(self, sound_id: str) -> None:
        self.sound_id = sound_id
        super().__init__(f"Sound '{sound_id}' is already defined")


class ConfigError(SoundTrackerError):
    """Raised when a configuration key or value is invalid."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.message = message
        self.key = key
        super().__init__(message)
