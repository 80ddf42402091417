"""shapetest — SHACL conformance harness for Turtle metadata fixtures.

The package is thin plumbing around rdflib and pySHACL:

- Import resolution (shapetest.imports): loads a shape file, follows its
  code:imports directives and merges everything into one shapes graph
- Expectations (shapetest.expectations): maps fixture filenames to the
  expected sh:conforms verdict
- Validation (shapetest.validation): runs pySHACL and collects violations
- Runner (shapetest.runner): validates a profile's fixtures and tallies
  PASS / FAIL / ERROR / SKIP
- CLI (shapetest.cli): ``shapetest run <profile>`` and friends

Fixture naming is the contract: ``valid*`` must conform, ``invalid*`` and
``warning*`` must not, ``valid*warning*`` is skipped.
"""

from .expectations import expected_conformance
from .imports import CODE, load_turtle, resolve
from .types import ParseError, ProfileError, ShapetestError

__all__ = [
    "CODE",
    "ParseError",
    "ProfileError",
    "ShapetestError",
    "expected_conformance",
    "load_turtle",
    "resolve",
]
