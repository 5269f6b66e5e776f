"""Read working-tree status from git."""

import subprocess

from stageguard.git.types import ChangeKind, StagedFile

STATUS_COMMAND = ("status", "--porcelain=v1", "-z", "--untracked-files=all")

# Status codes whose record is followed by the original path, in either column
_TWO_PATH_CODES = {"R", "C"}

# "XY " prefix before the path in each porcelain record
_PREFIX_LENGTH = 3


class NotARepositoryError(RuntimeError):
    """Raised when git status cannot be read for the working directory."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or "git status failed")
        self.detail = detail


def parse_porcelain(output: str) -> list[StagedFile]:
    """Parse NUL-separated ``git status --porcelain=v1 -z`` output."""
    records = output.split("\0")
    files: list[StagedFile] = []
    index = 0
    while index < len(records):
        record = records[index]
        index += 1
        if len(record) <= _PREFIX_LENGTH:
            continue

        code = record[0]
        files.append(
            StagedFile(
                path=record[_PREFIX_LENGTH:],
                change_kind=ChangeKind.from_index_code(code),
            )
        )
        if code in _TWO_PATH_CODES or record[1] in _TWO_PATH_CODES:
            index += 1  # skip the rename/copy source path
    return files


def read_status(repo_dir: str = ".", git_executable: str = "git") -> list[StagedFile]:
    """Return the status entries of the working tree containing ``repo_dir``.

    Paths are relative to the repository root, in the order git reports them.

    Raises:
        NotARepositoryError: ``repo_dir`` is not inside a working tree, or git
            could not be run.
    """
    try:
        result = subprocess.run(
            [git_executable, *STATUS_COMMAND],
            capture_output=True,
            cwd=repo_dir,
            check=True,
        )
        output = result.stdout.decode("utf-8")
    except FileNotFoundError as exc:
        missing = exc.filename or git_executable
        raise NotARepositoryError(f"{missing}: not found") from exc
    except OSError as exc:
        raise NotARepositoryError(str(exc)) from exc
    except subprocess.CalledProcessError as exc:
        stderr = (exc.stderr or b"").decode("utf-8", errors="replace").strip()
        raise NotARepositoryError(stderr) from exc
    except UnicodeDecodeError as exc:
        raise NotARepositoryError("git status output is not valid UTF-8") from exc

    return parse_porcelain(output)
