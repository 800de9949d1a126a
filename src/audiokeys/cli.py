"""Command-line interface for AudioKeys."""

import json
import sys
from pathlib import Path
from uuid import UUID

import click

from audiokeys import __version__
from audiokeys.config import load_config
from audiokeys.core.catalog import load_catalog
from audiokeys.core.library import AudioKeysError
from audiokeys.core.media_source import MediaSourceBuilder
from audiokeys.core.sort_name import sort_name
from audiokeys.core.user_data import UserDataKeyResolver
from audiokeys.models.item import AudioItem
from audiokeys.utils.logger import setup_logging
from audiokeys.utils.path_mapper import PathMapper


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (defaults to built-in defaults)",
)
@click.pass_context
def cli(ctx, config):
    """AudioKeys - media sources and play state keys for audio libraries."""
    try:
        cfg = load_config(config)
        ctx.ensure_object(dict)
        ctx.obj["config"] = cfg

        setup_logging(cfg.logging)

    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)


def _load_track(catalog: Path, item_id: str):
    """Load the catalog and look up an audio track, exiting on failure."""
    try:
        parsed_id = UUID(item_id)
    except ValueError:
        click.secho(f"✗ Invalid item id: {item_id}", fg="red", err=True)
        sys.exit(1)

    try:
        library = load_catalog(catalog)
        item = library.get_item(parsed_id)
    except AudioKeysError as e:
        click.secho(f"✗ {e}", fg="red", err=True)
        sys.exit(1)

    if not isinstance(item, AudioItem):
        click.secho(f"✗ Not an audio track: {item_id}", fg="red", err=True)
        sys.exit(1)

    return library, item


@cli.command("sort-name")
@click.argument("catalog", type=click.Path(exists=True, path_type=Path))
@click.argument("item_id")
def sort_name_command(catalog, item_id):
    """Print the sort name of a track."""
    _, item = _load_track(catalog, item_id)
    click.echo(sort_name(item.name, item.index_number, item.parent_index_number))


@cli.command("user-key")
@click.argument("catalog", type=click.Path(exists=True, path_type=Path))
@click.argument("item_id")
def user_key(catalog, item_id):
    """Print the user data key of a track."""
    library, item = _load_track(catalog, item_id)

    try:
        key = UserDataKeyResolver(library).get_user_data_key(item)
    except AudioKeysError as e:
        click.secho(f"✗ {e}", fg="red", err=True)
        sys.exit(1)

    click.echo(key)


@cli.command()
@click.argument("catalog", type=click.Path(exists=True, path_type=Path))
@click.argument("item_id")
@click.option(
    "--substitute/--no-substitute",
    default=False,
    help="Apply configured path mappings (default: False)",
)
@click.pass_context
def sources(ctx, catalog, item_id, substitute):
    """Print the media sources of a track as JSON."""
    config = ctx.obj["config"]
    library, item = _load_track(catalog, item_id)

    builder = MediaSourceBuilder(library, PathMapper(config.path_mappings))
    media_sources = builder.get_media_sources(item, enable_path_substitution=substitute)

    click.echo(json.dumps([s.to_dict() for s in media_sources], indent=2))


@cli.command()
def version():
    """Show version information."""
    click.echo(f"AudioKeys v{__version__}")


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
