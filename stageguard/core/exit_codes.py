"""Process exit codes consumed by the invoking commit tooling."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Outcome of a single guard run."""

    ALLOWED = 0
    BLOCKED = 1
    ENVIRONMENT_ERROR = 2
