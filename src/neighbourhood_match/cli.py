"""CLI for neighbourhood matching.

Commands:
- match: Rank the catalogue for a preference profile and write scored outputs
- explain: Show the category breakdown and rank of one neighbourhood
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint
from rich.table import Table

from . import __version__
from .application.match_run import explain_neighbourhood, run_match
from .application.shortlist import SORT_MODES
from .config import MatcherConfig
from .config_file import load_matcher_config_file
from .protocols import FileSystem


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: MatcherConfig) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: MatcherConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(self, *, config: MatcherConfig | None = None) -> CliDependencies:
        """Return dependencies using the configured builder."""
        return self.deps_builder(config=config or self.config)


class SortModeOptionError(typer.BadParameter):
    """Raised when --sort-by is not a supported mode."""

    def __init__(self, value: str) -> None:
        super().__init__(f"--sort-by must be one of {', '.join(SORT_MODES)} (got {value!r}).")


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__(
            "CLI context is not initialised. Use the neighbourhood-match entry point."
        )


DEFAULT_PROCESSED_DIR = Path("data/processed")


def _sort_mode(value: str | None) -> str | None:
    if value is None:
        return None
    mode = value.strip().lower()
    if mode not in SORT_MODES:
        raise SortModeOptionError(value)
    return mode


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"neighbourhood-match {__version__}")
        raise typer.Exit()


def _format_score(value: float) -> str:
    return f"{value:.1f}"


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Neighbourhood matcher: rank neighbourhoods against your preferences",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        config_file: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="TOML config file (overrides environment values)",
            ),
        ] = None,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                callback=_version_callback,
                is_eager=True,
                help="Show the package version and exit",
            ),
        ] = False,
    ) -> None:
        """Initialise CLI context."""
        _ = version
        config = MatcherConfig.from_env()
        if config_file is not None:
            deps = deps_builder(config=config)
            config = config.with_file_overrides(
                load_matcher_config_file(path=config_file, fs=deps.fs)
            )
        ctx.obj = CliContext(config=config, deps_builder=deps_builder)

    @app.command()
    def match(
        ctx: typer.Context,
        catalogue: Annotated[
            Path | None,
            typer.Option(
                "--catalogue",
                help="Neighbourhood catalogue JSON (default: CATALOGUE_PATH)",
            ),
        ] = None,
        preferences: Annotated[
            Path | None,
            typer.Option(
                "--preferences",
                "-p",
                help="Preference profile JSON (default: the preference form's starting values)",
            ),
        ] = None,
        out_dir: Annotated[
            Path,
            typer.Option(
                "--output-dir",
                "-o",
                help="Directory for output files",
            ),
        ] = DEFAULT_PROCESSED_DIR,
        sort_by: Annotated[
            str | None,
            typer.Option(
                "--sort-by",
                "-s",
                help="Result order: match, price or safety",
            ),
        ] = None,
        min_score: Annotated[
            int | None,
            typer.Option(
                "--min-score",
                help="Hide matches with an overall score below this value",
                min=0,
            ),
        ] = None,
        limit: Annotated[
            int | None,
            typer.Option(
                "--limit",
                "-n",
                help="Show at most this many matches",
                min=1,
            ),
        ] = None,
    ) -> None:
        """Match: rank neighbourhoods for a preference profile and write scored output."""
        state = _get_context(ctx)
        config = state.config.with_overrides(
            catalogue_path=str(catalogue) if catalogue is not None else None,
            preferences_path=str(preferences) if preferences is not None else None,
            sort_by=_sort_mode(sort_by),
            min_match_score=min_score,
            result_limit=limit,
        )
        deps = state.build_dependencies(config=config)
        result = run_match(out_dir=out_dir, config=config, fs=deps.fs)

        if not result.matches:
            rprint("[yellow]No neighbourhoods match your current filters.[/yellow]")
        else:
            table = Table(title=f"Found {len(result.matches)} matching neighbourhoods")
            table.add_column("#", justify="right")
            table.add_column("Neighbourhood")
            table.add_column("Match", justify="right")
            table.add_column("Why")
            for rank, match_result in enumerate(result.matches, start=1):
                record = match_result.record
                table.add_row(
                    str(rank),
                    f"{record.name}, {record.city} {record.state}",
                    f"{match_result.overall_score}%",
                    "\n".join(match_result.reasons),
                )
            rprint(table)

        if result.summary is not None:
            summary = result.summary
            rprint("\n[bold]Quick summary[/bold]")
            rprint(
                f"  Best overall match: {summary.best_overall.record.name} "
                f"({summary.best_overall.overall_score}% match)"
            )
            rprint(
                f"  Most affordable: {summary.most_affordable.record.name} "
                f"(${summary.most_affordable.record.housing.median_rent:,.0f}/month)"
            )
            rprint(
                f"  Safest: {summary.safest.record.name} "
                f"({summary.safest.record.safety.safety_score:g}/100 safety score)"
            )

        rprint("[green]✓ Match complete:[/green]")
        for k, v in result.outputs.items():
            rprint(f"  {k}: {v}")

    @app.command()
    def explain(
        ctx: typer.Context,
        neighbourhood_id: Annotated[str, typer.Argument(help="Neighbourhood id, e.g. sf-mission")],
        preferences: Annotated[
            Path | None,
            typer.Option(
                "--preferences",
                "-p",
                help="Preference profile JSON (default: the preference form's starting values)",
            ),
        ] = None,
    ) -> None:
        """Explain: show one neighbourhood's category breakdown and rank."""
        state = _get_context(ctx)
        config = state.config.with_overrides(
            preferences_path=str(preferences) if preferences is not None else None,
        )
        deps = state.build_dependencies(config=config)
        explanation = explain_neighbourhood(neighbourhood_id, config=config, fs=deps.fs)

        match_result = explanation.match
        record = match_result.record
        scores = match_result.category_scores
        rprint(f"[bold]{record.name}[/bold], {record.city} {record.state}")
        rprint(
            f"  Overall: {match_result.overall_score}% "
            f"(rank {explanation.rank} of {explanation.total})"
        )
        rprint(f"  Lifestyle:    {_format_score(scores.lifestyle)}")
        rprint(f"  Demographics: {_format_score(scores.demographics)}")
        rprint(f"  Housing:      {_format_score(scores.housing)}")
        rprint(f"  Safety:       {_format_score(scores.safety)}")
        rprint(f"  Climate:      {_format_score(scores.climate)}")
        rprint(f"  Commute:      {_format_score(scores.commute)}")
        for reason in match_result.reasons:
            rprint(f"  • {reason}")

    _ = (main, match, explain)

    return app
