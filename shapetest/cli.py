"""Command line entry point for ``shapetest``.

  shapetest run <profile>      validate test/<profile>/*.ttl against validation/<profile>.ttl
  shapetest observations       validate the self-contained observation fixtures
  shapetest shapes <profile>   print a profile's merged shapes as Turtle

Exit status is 0 when every non-skipped fixture matched its expectation, 1 otherwise.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .config import Settings, build_settings
from .imports import resolve_with_trace
from .logger_config import configure_logging
from .runner import format_result, load_profile_shapes, run_observations, run_profile
from .types import FixtureResult, ParseError, ProfileError, RunReport


def _print_result(result: FixtureResult) -> None:
    click.echo(f"  {format_result(result)}")


def _print_observation(result: FixtureResult) -> None:
    click.echo(format_result(result))


def _finish(ctx: click.Context, report: RunReport) -> None:
    logging.getLogger(__name__).info(report.summary())
    ctx.exit(0 if report.passed else 1)


def _usage(settings: Settings) -> None:
    click.echo("Usage: shapetest run <profile>")
    click.echo("Available profiles:")
    for profile in settings.available_profiles():
        click.echo(f"  - {profile}")


@click.group()
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root holding validation/ and test/ (default: $SHAPETEST_ROOT or cwd).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, root: Path | None, verbose: bool) -> None:
    """SHACL conformance harness for Turtle metadata fixtures."""
    settings = build_settings(root)
    configure_logging(logging.DEBUG if verbose else settings.log_level)
    ctx.obj = settings


@main.command()
@click.argument("profile", required=False)
@click.pass_context
def run(ctx: click.Context, profile: str | None) -> None:
    """Validate a profile's fixtures against its shapes."""
    settings: Settings = ctx.obj
    if not profile:
        _usage(settings)
        ctx.exit(1)

    click.echo(f"Testing profile: {profile}")
    try:
        shapes = load_profile_shapes(profile, settings)
        click.echo(f"  Loaded shapes: {len(shapes)} triples")
        report = run_profile(profile, settings, on_result=_print_result, shapes=shapes)
    except ProfileError as e:
        click.echo(f"  ERROR: {e}")
        ctx.exit(1)
    _finish(ctx, report)


@main.command()
@click.pass_context
def observations(ctx: click.Context) -> None:
    """Validate observation files that carry their own shapes."""
    settings: Settings = ctx.obj
    report = run_observations(settings, on_result=_print_observation)
    _finish(ctx, report)


@main.command()
@click.argument("profile")
@click.pass_context
def shapes(ctx: click.Context, profile: str) -> None:
    """Print the merged shapes of a profile as Turtle."""
    settings: Settings = ctx.obj
    try:
        graph, trace = resolve_with_trace(settings.shapes_path(profile))
    except (FileNotFoundError, ParseError) as e:
        click.echo(f"ERROR: Could not load shapes: {e}", err=True)
        ctx.exit(1)
    if logging.getLogger("shapetest").isEnabledFor(logging.DEBUG):
        click.echo(trace.describe(), err=True)
    click.echo(graph.serialize(format="turtle"))


if __name__ == "__main__":  # pragma: no cover
    main()
