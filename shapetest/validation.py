"""SHACL validation through pySHACL.

The validator is used as a black box: shapes graph in, data graph in,
boolean conformance and a results graph out. Violations are pulled out
of the results graph for reporting only; the verdict is sh:conforms.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pyshacl import validate as pyshacl_validate
from rdflib import Graph, RDF
from rdflib.namespace import SH

from .imports import load_turtle


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class Violation:
    """A single sh:ValidationResult."""
    focus_node: str
    path: str
    message: str
    severity: str

    def __repr__(self) -> str:
        return f"Violation({_short(self.focus_node)}.{_short(self.path)}: {self.message})"


@dataclass
class ConformanceResult:
    """Outcome of validating one data graph against a shapes graph."""
    conforms: bool
    violations: list[Violation] = field(default_factory=list)
    results_text: str = ""

    def summary(self) -> str:
        lines = []
        status = "CONFORMS" if self.conforms else "DOES NOT CONFORM"
        lines.append(f"SHACL Validation: {status}")
        lines.append("-" * 50)
        if self.violations:
            lines.append(f"  Results ({len(self.violations)}):")
            for v in self.violations:
                lines.append(
                    f"    - [{_short(v.severity)}] {_short(v.focus_node)}.{_short(v.path)}: {v.message}"
                )
        else:
            lines.append("  No violations found.")
        return "\n".join(lines)


def _short(iri: str) -> str:
    for sep in ("#", "/"):
        if sep in iri:
            iri = iri.rsplit(sep, 1)[-1]
    return iri


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_graph(shapes: Graph, data: Graph) -> ConformanceResult:
    """Validate ``data`` against ``shapes`` and return the conformance result."""
    conforms, results_graph, results_text = pyshacl_validate(
        data,
        shacl_graph=shapes,
        inference="none",
        abort_on_first=False,
    )

    violations = []
    for result in results_graph.subjects(RDF.type, SH.ValidationResult):
        focus = results_graph.value(result, SH.focusNode)
        path = results_graph.value(result, SH.resultPath)
        message = results_graph.value(result, SH.resultMessage)
        severity = results_graph.value(result, SH.resultSeverity)

        violations.append(Violation(
            focus_node=str(focus) if focus else "",
            path=str(path) if path else "",
            message=str(message) if message else "",
            severity=str(severity) if severity else "",
        ))

    return ConformanceResult(
        conforms=bool(conforms),
        violations=violations,
        results_text=results_text,
    )


def validate_file(shapes: Graph, data_path: Path | str) -> ConformanceResult:
    """Load a Turtle data file and validate it against ``shapes``."""
    return validate_graph(shapes, load_turtle(data_path))
