"""Type definitions for sensitive-file matches."""

from pydantic import BaseModel, ConfigDict


class MatchResult(BaseModel):
    """A staged path that matched a sensitive-file pattern."""

    model_config = ConfigDict(frozen=True)

    path: str
    pattern: str
