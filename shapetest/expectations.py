"""Expected conformance from fixture filenames.

  valid*            → must conform
  valid*warning*    → skipped: pySHACL treats sh:Warning results as
                      non-conformance, the metadata pipeline tolerates them
  anything else     → must not conform (invalid*, warning*)
"""

from __future__ import annotations

from pathlib import PurePath

SKIP_REASON = "warning test (warnings treated differently)"


def expected_conformance(filename: str | PurePath) -> bool | None:
    """Return the expected sh:conforms value for a fixture, or None to skip it."""
    name = PurePath(filename).name
    if name.startswith("valid"):
        if "warning" in name:
            return None
        return True
    return False


def is_skipped(filename: str | PurePath) -> bool:
    return expected_conformance(filename) is None
