"""
main.py

Command line helpers for inspecting media library classification.
"""

import logging
import os
from typing import Annotated

import django
from django.apps import apps
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from typer import Typer, Option, Argument

app = Typer()
console = Console()


@app.callback()
def callback(
        verbose: bool = Option(False, "-v", "--verbose", help='Show verbose output.')
):
    logging.basicConfig(
        level="DEBUG" if verbose else "INFO", format="%(message)s", datefmt="[%X]", handlers=[RichHandler()]
    )
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "cms.settings")
    if not apps.ready:
        django.setup()


@app.command()
def classify(
        paths: Annotated[list[str], Argument(help='File paths, relative to the library root.')],
):
    """Show the media type each path would be classified as."""
    from medialibrary.items import ItemType, MediaLibraryItem

    table = Table("Path", "Title", "Type")
    for path in paths:
        item = MediaLibraryItem(path, 0, None, ItemType.FILE, "")
        table.add_row(path, item.title, item.get_file_type().value)
    console.print(table)


@app.command()
def extensions():
    """List the extensions currently recognised for each media type."""
    from medialibrary.extensions import registry

    tables = registry.tables()
    table = Table("Type", "Extensions")
    table.add_row("image", ", ".join(sorted(tables.image)))
    table.add_row("video", ", ".join(sorted(tables.video)))
    table.add_row("audio", ", ".join(sorted(tables.audio)))
    console.print(table)


if __name__ == '__main__':
    app()
