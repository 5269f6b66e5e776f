"""Tests for the stage filter."""

from stageguard.git.stage_filter import select_staged
from stageguard.git.types import ChangeKind, StagedFile


def _file(path: str, kind: ChangeKind) -> StagedFile:
    return StagedFile(path=path, change_kind=kind)


class TestSelectStaged:
    """Tests for select_staged."""

    def test_keeps_added_and_modified_in_order(self) -> None:
        files = [
            _file("b.txt", ChangeKind.MODIFIED),
            _file("gone.pem", ChangeKind.DELETED),
            _file("a.txt", ChangeKind.ADDED),
            _file("untracked.key", ChangeKind.OTHER),
        ]
        assert [f.path for f in select_staged(files)] == ["b.txt", "a.txt"]

    def test_empty_input(self) -> None:
        assert select_staged([]) == []

    def test_only_deletions(self) -> None:
        files = [_file("old_secrets.pem", ChangeKind.DELETED)]
        assert select_staged(files) == []
