"""Type definitions for working-tree status entries."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ChangeKind(StrEnum):
    """Staged (index) change recorded for a path."""

    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    OTHER = "other"

    @classmethod
    def from_index_code(cls, code: str) -> "ChangeKind":
        """Map a porcelain index status letter to a change kind."""
        return _INDEX_CODES.get(code, cls.OTHER)


_INDEX_CODES = {
    "A": ChangeKind.ADDED,
    "M": ChangeKind.MODIFIED,
    "D": ChangeKind.DELETED,
}


class StagedFile(BaseModel):
    """A single path reported by the status query."""

    model_config = ConfigDict(frozen=True)

    path: str
    change_kind: ChangeKind
