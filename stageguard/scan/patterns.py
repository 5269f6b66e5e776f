"""Sensitive file-name patterns.

Patterns are tested against the final path component of a staged file only.
A pattern that spells out a directory, such as ``config/secrets``, can never
match a basename and is kept for parity with the published rule list.
"""

import re
from collections.abc import Iterable, Iterator

DEFAULT_PATTERN_SOURCES = (
    r"^\.env(\..+)?$",
    r"^\.?env$",
    r"\.pem$",
    r"\.key$",
    r"\.crt$",
    r"id_rsa$",
    r"id_rsa\.pub$",
    r"credentials\.json$",
    r"firebase.*\.json$",
    r"serviceAccount.*\.json$",
    r"secrets?\..*$",
    r"config/secrets.*$",
    r"\.p12$",
    r"\.keystore$",
)


class SensitivePattern:
    """A compiled, case-insensitive file-name rule."""

    def __init__(self, source: str):
        self.source = source
        self._compiled = re.compile(source, re.IGNORECASE)

    def matches(self, basename: str) -> bool:
        """Check the rule against a file basename."""
        return self._compiled.search(basename) is not None

    def __repr__(self) -> str:
        return f"SensitivePattern({self.source!r})"


class SensitivePatternSet:
    """Ordered, read-only collection of sensitive-file rules."""

    def __init__(self, sources: Iterable[str]):
        self._patterns = tuple(SensitivePattern(source) for source in sources)

    def __iter__(self) -> Iterator[SensitivePattern]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    @property
    def sources(self) -> tuple[str, ...]:
        return tuple(p.source for p in self._patterns)


def default_patterns() -> SensitivePatternSet:
    """Build the built-in rule set."""
    return SensitivePatternSet(DEFAULT_PATTERN_SOURCES)
