"""Conformance test driver.

Two harnesses:

  run_profile()       — validation/<profile>.ttl (with its imports) against
                        every test/<profile>/*.ttl fixture, expectation taken
                        from the fixture's filename
  run_observations()  — self-contained observation files that carry their
                        own shapes, checked against a fixed expectation table

Shape-side failures abort the run with ProfileError. Fixture-side failures
become an ERROR result for that fixture and the batch continues.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from rdflib import Graph

from .config import Settings
from .expectations import SKIP_REASON, expected_conformance, is_skipped
from .imports import load_turtle, resolve_with_trace
from .types import FixtureOutcome, FixtureResult, ParseError, ProfileError, RunReport
from .validation import validate_file, validate_graph

logger = logging.getLogger(__name__)

ResultCallback = Callable[[FixtureResult], None]

# Expected sh:conforms per observation file
OBSERVATION_CASES: tuple[tuple[str, bool], ...] = (
    ("undefinedAllowed.ttl", True),
    ("undefinedNotAllowed.ttl", False),
    ("undefinedOrBounded.ttl", True),
    ("withoutName.ttl", True),
    ("withoutType.ttl", True),
)


def format_result(result: FixtureResult) -> str:
    """Render one fixture result as a console line."""
    name = result.name
    if result.outcome == FixtureOutcome.SKIP:
        return f"SKIP - {name}: {SKIP_REASON}"
    if result.outcome == FixtureOutcome.ERROR:
        return f"ERROR - {name}: {result.error}"
    if result.outcome == FixtureOutcome.PASS:
        return f"PASS - {name}: sh:conforms {_bool(result.conforms)}"
    return (
        f"FAIL - {name}: expected sh:conforms {_bool(result.expected)}, "
        f"got {_bool(result.conforms)}"
    )


def _bool(value: bool | None) -> str:
    return "unknown" if value is None else str(value).lower()


def _judge(name: str, expected: bool, conforms: bool) -> FixtureResult:
    outcome = FixtureOutcome.PASS if conforms == expected else FixtureOutcome.FAIL
    return FixtureResult(name=name, outcome=outcome, expected=expected, conforms=conforms)


def check_fixture(shapes: Graph, path: Path, expected: bool) -> FixtureResult:
    """Validate one data file against ``shapes`` and compare to ``expected``."""
    try:
        result = validate_file(shapes, path)
    except Exception as e:
        logger.debug("Fixture %s raised", path, exc_info=True)
        return FixtureResult(name=path.name, outcome=FixtureOutcome.ERROR, expected=expected, error=str(e))
    judged = _judge(path.name, expected, result.conforms)
    if judged.outcome == FixtureOutcome.FAIL:
        logger.debug("%s\n%s", path.name, result.summary())
    return judged


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

def load_profile_shapes(profile: str, settings: Settings) -> Graph:
    """Resolve a profile's shape root and all its imports."""
    shapes_path = settings.shapes_path(profile)
    try:
        shapes, trace = resolve_with_trace(shapes_path)
    except (FileNotFoundError, ParseError) as e:
        raise ProfileError(f"Could not load shapes: {e}") from e
    logger.debug(trace.describe())
    return shapes


def list_fixtures(directory: Path) -> list[Path]:
    if not directory.is_dir():
        raise ProfileError(f"Could not read test directory: {directory}")
    return sorted(p for p in directory.iterdir() if p.suffix == ".ttl" and p.is_file())


def run_profile(
    profile: str,
    settings: Settings,
    on_result: ResultCallback | None = None,
    shapes: Graph | None = None,
) -> RunReport:
    """Validate every fixture of ``profile`` against the profile's shapes.

    ``shapes`` may be passed in when the caller has already resolved them.
    """
    if shapes is None:
        shapes = load_profile_shapes(profile, settings)
    report = RunReport(label=profile, shape_triples=len(shapes))
    logger.info("Profile %s: %d shape triples", profile, len(shapes))

    for path in list_fixtures(settings.fixture_dir(profile)):
        if is_skipped(path.name):
            result = FixtureResult(name=path.name, outcome=FixtureOutcome.SKIP)
        else:
            result = check_fixture(shapes, path, expected_conformance(path.name))
        report.add(result)
        if on_result is not None:
            on_result(result)

    return report


# ---------------------------------------------------------------------------
# Observations
# ---------------------------------------------------------------------------

def check_observation(path: Path, expected: bool) -> FixtureResult:
    """Validate a file that holds both the constraint and the observations."""
    try:
        graph = load_turtle(path)
        result = validate_graph(graph, graph)
    except Exception as e:
        logger.debug("Observation %s raised", path, exc_info=True)
        return FixtureResult(name=path.name, outcome=FixtureOutcome.ERROR, expected=expected, error=str(e))
    return _judge(path.name, expected, result.conforms)


def run_observations(
    settings: Settings,
    cases: tuple[tuple[str, bool], ...] = OBSERVATION_CASES,
    on_result: ResultCallback | None = None,
) -> RunReport:
    report = RunReport(label="observations")
    for filename, expected in cases:
        result = check_observation(settings.observations_dir / filename, expected)
        report.add(result)
        if on_result is not None:
            on_result(result)
    return report
