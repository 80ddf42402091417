"""Runtime settings, read from the environment with project-relative defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    root: Path
    validation_dir: Path
    test_dir: Path
    log_level: str = "WARNING"

    def shapes_path(self, profile: str) -> Path:
        return self.validation_dir / f"{profile}.ttl"

    def fixture_dir(self, profile: str) -> Path:
        return self.test_dir / profile

    @property
    def observations_dir(self) -> Path:
        return self.test_dir / "observations"

    def available_profiles(self) -> list[str]:
        """Profile names are the stems of the shape files in validation_dir."""
        if not self.validation_dir.is_dir():
            return []
        return sorted(p.stem for p in self.validation_dir.glob("*.ttl"))


def build_settings(root: Path | str | None = None) -> Settings:
    """Collect runtime settings.

    ``root`` wins over SHAPETEST_ROOT, which wins over the current directory.
    The validation and test directories default to ``<root>/validation`` and
    ``<root>/test`` unless SHAPETEST_VALIDATION_DIR / SHAPETEST_TEST_DIR are set.
    """
    if root is None:
        root = os.getenv("SHAPETEST_ROOT") or Path.cwd()
    root = Path(root)

    validation_dir = Path(os.getenv("SHAPETEST_VALIDATION_DIR", root / "validation"))
    test_dir = Path(os.getenv("SHAPETEST_TEST_DIR", root / "test"))
    log_level = os.getenv("SHAPETEST_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = "WARNING"

    return Settings(
        root=root,
        validation_dir=validation_dir,
        test_dir=test_dir,
        log_level=log_level,
    )
