"""
Error kinds raised by the core layers.

Lower layers raise these; the manager catches them and turns each one into
an ``Outcome`` the front end can render.  ``kind`` is the stable tag the
front end switches on.
"""


class SaveManagerError(Exception):
    kind = "error"


class ConfigIncomplete(SaveManagerError):
    """Origin or destination folder not set."""

    kind = "config_incomplete"


class NoSelection(SaveManagerError):
    kind = "no_selection"


class NameConflict(SaveManagerError):
    kind = "name_conflict"


class InvalidName(SaveManagerError):
    kind = "invalid_name"


class NoSlotAvailable(SaveManagerError):
    kind = "no_slot_available"


class LastProfileError(SaveManagerError):
    kind = "last_profile"


class ProfileNotFound(SaveManagerError):
    kind = "not_found"


class StageError(SaveManagerError):
    """
    A filesystem call failed part-way through an operation.

    ``stage`` names the step that failed (``"create"``, ``"copy"``,
    ``"restore"``, ``"delete"``, ...).  Nothing written before the failure is
    rolled back.
    """

    kind = "io_error"

    def __init__(self, stage: str, cause: OSError):
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage} failed: {cause}")
