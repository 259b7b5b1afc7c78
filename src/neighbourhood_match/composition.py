"""Composition root for wiring CLI dependencies."""

from __future__ import annotations

from .cli import CliDependencies, create_app
from .config import MatcherConfig
from .infrastructure import LocalFileSystem


def build_cli_dependencies(*, config: MatcherConfig) -> CliDependencies:
    """Build concrete dependencies for CLI commands.

    Args:
        config: Matcher configuration. All inputs are local files, so it is only
            accepted to keep the builder signature stable.
    """
    _ = config
    return CliDependencies(fs=LocalFileSystem())


app = create_app(build_cli_dependencies)
