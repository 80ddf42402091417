"""Shape import resolution — merges shape files linked by code:imports.

A shape document may contain control triples alongside its SHACL shapes:

  <doc> code:imports <./other-shapes> .
  <doc> code:extension ... .

resolve() follows the imports transitively, relative to the importing
document's directory, and returns one rdflib Graph with every shape triple
reachable from the root and none of the control triples.

Policy:
  - the root document must exist (FileNotFoundError otherwise)
  - a syntax error anywhere is fatal (ParseError)
  - an import whose target file does not exist is skipped
  - each file is loaded at most once per top-level call, so cycles terminate
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from rdflib import Graph, Namespace

from .types import ParseError

logger = logging.getLogger(__name__)


CODE = Namespace("https://code.described.at/")

# Control predicates, never shape constraints
DIRECTIVES = (CODE.imports, CODE.extension)


# ---------------------------------------------------------------------------
# ImportTrace — what one resolution actually did
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ImportEdge:
    """A followed code:imports reference."""
    source: Path
    target: Path


@dataclass
class ImportTrace:
    """Record of one resolve() call tree, for reporting."""
    loaded: list[Path] = field(default_factory=list)
    edges: list[ImportEdge] = field(default_factory=list)
    missing: list[ImportEdge] = field(default_factory=list)

    def cycles(self) -> list[list[Path]]:
        """Return the import cycles among the followed edges (empty if acyclic)."""
        adj: dict[Path, list[Path]] = defaultdict(list)
        for edge in self.edges:
            adj[edge.source].append(edge.target)

        cycles: list[list[Path]] = []
        WHITE, GRAY, BLACK = 0, 1, 2
        color: dict[Path, int] = {p: WHITE for p in self.loaded}
        path: list[Path] = []

        def dfs(node: Path) -> None:
            color[node] = GRAY
            path.append(node)
            for neighbor in adj.get(node, []):
                if color.get(neighbor) == GRAY:
                    cycles.append(path[path.index(neighbor):] + [neighbor])
                elif color.get(neighbor, WHITE) == WHITE:
                    dfs(neighbor)
            path.pop()
            color[node] = BLACK

        for node in self.loaded:
            if color[node] == WHITE:
                dfs(node)

        return cycles

    def describe(self) -> str:
        lines = [f"Loaded {len(self.loaded)} shape document(s):"]
        for p in self.loaded:
            lines.append(f"  - {p}")
        for edge in self.missing:
            lines.append(f"  skipped import {edge.target.name} (from {edge.source.name}): not found")
        for cycle in self.cycles():
            lines.append("  import cycle: " + " → ".join(p.name for p in cycle))
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_turtle(path: Path | str) -> Graph:
    """Parse one Turtle file into a Graph.

    Relative IRIs are resolved against the file's own location, so
    ``<./base>`` inside ``/shapes/root.ttl`` becomes ``file:///shapes/base``.
    """
    path = Path(path)
    raw = path.read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(path, f"not valid UTF-8: {e}") from e
    graph = Graph()
    try:
        graph.parse(data=text, format="turtle", publicID=path.resolve().as_uri())
    except Exception as e:
        # rdflib raises more than BadSyntax on truncated input (IndexError on a missing final dot)
        raise ParseError(path, str(e) or type(e).__name__) from e
    return graph


def import_target(document: Path, reference: str) -> Path:
    """Map the object of a code:imports triple to a file path.

    Accepts a relative reference (``./base``, ``base``, ``base.ttl``) or the
    file IRI it was absolutized to at parse time.
    """
    if reference.startswith("file:"):
        reference = url2pathname(urlparse(reference).path)
    if reference.startswith("./"):
        reference = reference[2:]
    if not reference.endswith(".ttl"):
        reference = reference + ".ttl"
    return (document.parent / reference).resolve()


def strip_directives(graph: Graph) -> Graph:
    """Remove code:imports and code:extension triples in place."""
    for predicate in DIRECTIVES:
        graph.remove((None, predicate, None))
    return graph


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def resolve(
    path: Path | str,
    visited: set[Path] | None = None,
    trace: ImportTrace | None = None,
) -> Graph:
    """Load a shape document and everything it imports, merged into one Graph.

    ``visited`` holds the absolute paths already loaded in this call tree;
    pass an empty set (or nothing) at the top level. A path that is already
    visited contributes an empty graph.
    """
    if visited is None:
        visited = set()
    path = Path(path).resolve()
    if path in visited:
        return Graph()
    visited.add(path)

    graph = load_turtle(path)
    logger.debug("Loaded %s (%d triples)", path, len(graph))
    if trace is not None:
        trace.loaded.append(path)

    targets: list[Path] = []
    for reference in sorted(str(o) for o in graph.objects(None, CODE.imports)):
        target = import_target(path, reference)
        if not target.is_file():
            logger.debug("Skipping import %s from %s: file not found", reference, path)
            if trace is not None:
                trace.missing.append(ImportEdge(path, target))
            continue
        if trace is not None:
            trace.edges.append(ImportEdge(path, target))
        targets.append(target)

    merged = strip_directives(graph)
    for target in targets:
        if target in visited:
            logger.debug("Import %s from %s already loaded", target, path)
            continue
        merged += resolve(target, visited, trace)

    return merged


def resolve_with_trace(path: Path | str) -> tuple[Graph, ImportTrace]:
    """Resolve from a fresh visited set and return the import trace alongside."""
    trace = ImportTrace()
    graph = resolve(path, set(), trace)
    for cycle in trace.cycles():
        logger.info("Import cycle: %s", " -> ".join(p.name for p in cycle))
    return graph, trace
