"""Select the status entries that will land in the next commit."""

from collections.abc import Iterable

from stageguard.git.types import ChangeKind, StagedFile

COMMITTED_KINDS = frozenset({ChangeKind.ADDED, ChangeKind.MODIFIED})


def select_staged(files: Iterable[StagedFile]) -> list[StagedFile]:
    """Keep added and modified entries, preserving order."""
    return [f for f in files if f.change_kind in COMMITTED_KINDS]
