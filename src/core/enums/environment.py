"""Application environment types.

Used by Settings and the composition root to pick environment-specific
behavior (log rendering, debug output).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test runs against throwaway SQLite databases
- CI: Continuous integration
- PRODUCTION: Deployed service
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def is_automated(self) -> bool:
        """True when no human reads the console (tests, CI)."""
        return self in (Environment.TESTING, Environment.CI)
