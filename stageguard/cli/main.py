"""
Pre-commit hook that blocks commits staging secret or credential files.

Reads the index status from git, keeps added and modified files, and flags
any whose name matches a known sensitive pattern (.env, *.pem, id_rsa, ...).
File contents are never inspected.

Exit codes: 0 allowed, 1 sensitive files staged, 2 git status unavailable.
"""

import sys

from pydantic import ValidationError

from stageguard.cli.report import Reporter
from stageguard.core.exit_codes import ExitCode
from stageguard.core.settings import GuardSettings
from stageguard.git.stage_filter import select_staged
from stageguard.git.status import NotARepositoryError, read_status
from stageguard.scan.matcher import find_sensitive
from stageguard.scan.patterns import SensitivePatternSet, default_patterns


def run(
    settings: GuardSettings,
    patterns: SensitivePatternSet,
    reporter: Reporter,
) -> ExitCode:
    """Run one guard pass and return the exit code."""
    try:
        entries = read_status(settings.repo_dir, settings.git_executable)
    except NotARepositoryError as e:
        reporter.environment_error(e.detail)
        return ExitCode.ENVIRONMENT_ERROR

    staged = select_staged(entries)
    matches = find_sensitive(staged, patterns)

    if settings.verbose:
        reporter.summary(len(entries), len(staged), len(matches))

    if matches:
        reporter.matches(matches, show_patterns=settings.verbose)
        return ExitCode.BLOCKED
    return ExitCode.ALLOWED


def main() -> None:
    """Main entry point."""
    try:
        settings = GuardSettings()
    except ValidationError as e:
        Reporter().environment_error(f"Invalid STAGEGUARD_* setting: {e}")
        sys.exit(ExitCode.ENVIRONMENT_ERROR)

    reporter = Reporter(color=settings.color)
    sys.exit(run(settings, default_patterns(), reporter))


if __name__ == "__main__":
    main()
