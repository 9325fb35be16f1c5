"""Main CLI entry point."""

import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

import click

from .. import __version__
from ..config import ConfigManager
from ..core.models import Genre, RequestOutcome
from ..core.view import build_view, render_view
from ..infrastructure import Container, setup_logging
from ..utils import ConfigurationError, FilmWizardError


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="film-wizard")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool) -> None:
    """Film Wizard - Get a random movie suggestion from TMDb."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config

    # Skip configuration loading for commands that don't need it
    if ctx.invoked_subcommand == "init":
        return

    try:
        config_manager = ConfigManager(config)
        app_config = config_manager.load_config()

        if verbose:
            app_config.logging.level = "DEBUG"
        setup_logging(app_config.logging)

        container = Container(config_manager)
        container.configure_default_services()

        ctx.obj["config"] = app_config
        ctx.obj["container"] = container

    except (ConfigurationError, FileNotFoundError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--genre",
    "-g",
    "genre_args",
    multiple=True,
    help="Genre ID or name; repeat for several genres",
)
@click.option("--year-start", type=int, help="Earliest release year")
@click.option("--year-end", type=int, help="Latest release year")
@click.option("--min-rating", type=click.FloatRange(0, 10), help="Minimum TMDb rating (0-10)")
@click.option("--max-runtime", type=click.IntRange(min=1), help="Maximum runtime in minutes")
@click.option("--interactive", "-i", is_flag=True, help="Offer another movie after each one")
@click.pass_context
def suggest(
    ctx: click.Context,
    genre_args: Tuple[str, ...],
    year_start: Optional[int],
    year_end: Optional[int],
    min_rating: Optional[float],
    max_runtime: Optional[int],
    interactive: bool,
) -> None:
    """Suggest a random movie matching the filters."""
    container = ctx.obj["container"]

    try:
        outcome = asyncio.run(
            _run_suggest(
                container=container,
                genre_args=genre_args,
                year_start=year_start,
                year_end=year_end,
                min_rating=min_rating,
                max_runtime=max_runtime,
                interactive=interactive,
            )
        )
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.")
        sys.exit(1)
    except FilmWizardError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if outcome.is_failure:
        sys.exit(1)


@cli.command()
@click.pass_context
def genres(ctx: click.Context) -> None:
    """List the TMDb movie genres."""
    container = ctx.obj["container"]

    catalog = asyncio.run(_load_genres(container))
    if not catalog:
        click.echo("No genres available.", err=True)
        sys.exit(1)

    for genre in catalog:
        click.echo(f"{genre.id:>6}  {genre.name}")


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=Path.cwd() / "config" / "config.yaml",
    help="Output path for configuration file",
)
def init(output: Path) -> None:
    """Initialize configuration file."""
    try:
        if output.exists():
            if not click.confirm(f"Configuration file {output} already exists. Overwrite?"):
                return

        output.parent.mkdir(parents=True, exist_ok=True)

        ConfigManager.create_default_config(output)
        click.echo(f"Configuration file created at: {output}")
        click.echo("Set TMDB_API_KEY in your environment or .env file before use.")

    except OSError as e:
        click.echo(f"Failed to create configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration summary."""
    config = ctx.obj["config"]

    click.echo("Film Wizard Status")
    click.echo("=" * 40)
    click.echo(f"TMDb Configured: {'✓' if _has_api_key(config.tmdb.api_key) else '✗'}")
    click.echo(f"TMDb Base URL: {config.tmdb.base_url}")
    click.echo(f"Language: {config.tmdb.language}")
    click.echo(f"Random Pages: 1-{config.suggestion.max_random_page}")
    click.echo(f"Top Cast Size: {config.suggestion.top_cast_size}")


async def _run_suggest(
    container: Container,
    genre_args: Sequence[str],
    year_start: Optional[int],
    year_end: Optional[int],
    min_rating: Optional[float],
    max_runtime: Optional[int],
    interactive: bool,
) -> RequestOutcome:
    """Load genres, apply filters and show suggestions."""
    config = container.get_config()

    try:
        async with container.create_session() as session:
            catalog = await session.load_genres()
            for arg in genre_args:
                genre_id = _resolve_genre(arg, catalog)
                if not session.filters.has_genre(genre_id):
                    session.toggle_genre(genre_id)
            session.update_filters(
                year_start=year_start,
                year_end=year_end,
                min_rating=min_rating,
                max_runtime_minutes=max_runtime,
            )

            while True:
                outcome = await session.suggest_movie()
                view = build_view(
                    session.state,
                    session.filters,
                    session.genres,
                    image_base_url=config.tmdb.image_base_url,
                    top_cast_size=config.suggestion.top_cast_size,
                )
                click.echo(render_view(view))

                if not interactive or not click.confirm("\nShow another movie?", default=True):
                    return outcome
                click.echo("")
    finally:
        await container.close()


async def _load_genres(container: Container) -> Sequence[Genre]:
    """Load the genre catalog."""
    try:
        async with container.create_session() as session:
            return await session.load_genres()
    finally:
        await container.close()


def _resolve_genre(value: str, catalog: Sequence[Genre]) -> int:
    """Turn a genre ID or name into a genre ID.

    Raises:
        click.BadParameter: If the name matches no genre.
    """
    value = value.strip()
    if value.isdigit():
        return int(value)

    for genre in catalog:
        if genre.name.lower() == value.lower():
            return genre.id

    known = ", ".join(genre.name for genre in catalog) or "none loaded"
    raise click.BadParameter(f"Unknown genre '{value}' (known: {known})", param_hint="--genre")


def _has_api_key(api_key: str) -> bool:
    return bool(api_key) and not api_key.startswith("${")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
