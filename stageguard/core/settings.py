"""Guard settings loaded from environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ColorMode = Literal["auto", "always", "never"]


class GuardSettings(BaseSettings):
    """Runtime knobs for the pre-commit guard.

    None of these change which files are considered sensitive.
    """

    model_config = SettingsConfigDict(env_prefix="STAGEGUARD_")

    git_executable: str = "git"
    repo_dir: str = "."
    color: ColorMode = "auto"
    verbose: bool = False
