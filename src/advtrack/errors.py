"""Exception types raised by the tracker core."""


class TrackerError(Exception):
    """Base class for tracker failures."""


class PersistenceError(TrackerError):
    """Reading or writing a persisted tracker file failed.

    Always raised from the underlying ``OSError`` so the cause stays attached.
    """

    def __init__(self, path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class DefinitionError(TrackerError, ValueError):
    """Static objective data is malformed (missing ids, duplicates)."""
