"""insta-component CLI entry point."""

import typer

from insta_component.cli.create_cmd import create

app = typer.Typer(
    name="insta-component",
    help="Scaffold React component boilerplate interactively",
    add_completion=False,
)

app.command()(create)
