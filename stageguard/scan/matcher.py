"""Match staged paths against sensitive-file patterns."""

from collections.abc import Iterable
from pathlib import PurePosixPath

from stageguard.git.types import StagedFile
from stageguard.scan.patterns import SensitivePattern, SensitivePatternSet
from stageguard.scan.types import MatchResult


def first_match(path: str, patterns: SensitivePatternSet) -> SensitivePattern | None:
    """Return the first pattern that flags ``path``, or None."""
    basename = PurePosixPath(path).name
    return next((p for p in patterns if p.matches(basename)), None)


def is_sensitive(path: str, patterns: SensitivePatternSet) -> bool:
    """Check whether a staged path looks like a secret or credential file."""
    return first_match(path, patterns) is not None


def find_sensitive(
    files: Iterable[StagedFile], patterns: SensitivePatternSet
) -> list[MatchResult]:
    """Collect matches in staged order, reporting each path once."""
    results: list[MatchResult] = []
    seen: set[str] = set()
    for staged in files:
        if staged.path in seen:
            continue
        pattern = first_match(staged.path, patterns)
        if pattern is None:
            continue
        seen.add(staged.path)
        results.append(MatchResult(path=staged.path, pattern=pattern.source))
    return results
