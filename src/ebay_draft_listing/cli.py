"""Command line interface for eBay Draft Listing."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from .config import Config
from .errors import ConfigError, DraftListingError
from .lister import create_draft_from_photos
from .photos import validate_photo_paths
from .utils import setup_logging

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Create an eBay draft listing from photos with Gemini.")


def load_config() -> Config:
    """Load configuration, prefixing any failure with context.

    Raises:
        ConfigError: If the environment is incomplete or invalid.
    """

    try:
        return Config.from_env()
    except ConfigError as exc:
        raise ConfigError(f"failed to load configuration: {exc}") from exc


@app.command()
def create(
    photos: List[Path] = typer.Argument(..., help="Photo files of the item to list."),
    sku: Optional[str] = typer.Option(None, help="SKU for the inventory item (default: DRAFT-<timestamp>)."),
    dry_run: bool = typer.Option(False, help="Log actions without calling any API."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Generate a title and description from PHOTOS and create an eBay draft listing.

    Example:
        ebay-draft-listing front.jpg back.jpg label.png
    """

    setup_logging(level=10 if verbose else 20)  # 10=DEBUG, 20=INFO

    try:
        photo_paths = validate_photo_paths(photos)
        typer.echo(f"Processing {len(photo_paths)} photo(s)...")

        config = load_config()
        result = create_draft_from_photos(photo_paths, config, sku=sku, dry_run=dry_run)
    except (DraftListingError, FileNotFoundError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\n=== Generated Content ===")
    typer.echo(f"Title: {result['title']}")
    typer.echo(f"Description:\n{result['description']}")
    typer.echo("========================\n")

    if dry_run:
        typer.echo("[dry-run] No draft listing created.")
    else:
        typer.echo("Draft listing created successfully!")
        typer.echo(f"Offer ID: {result['offer_id']}")
    typer.echo(f"SKU: {result['sku']}")
    typer.echo(f"Environment: {result['environment']}")


if __name__ == "__main__":  # pragma: no cover
    app()
