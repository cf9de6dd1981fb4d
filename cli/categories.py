"""
Categories Subcommand Module

Lists the marketplace taxonomy: code, name and the aliases the category
resolver accepts.
"""

import json

import click

from stockmeta.taxonomy import DEFAULT_TAXONOMY

from .help_texts import CATEGORIES_HELP


@click.command(help=CATEGORIES_HELP)
@click.option("--json", "as_json", is_flag=True, help="Print the taxonomy as JSON")
@click.option("--aliases", is_flag=True, help="Also show the aliases accepted for each category")
def categories(as_json: bool, aliases: bool):
    """List category codes and names."""
    entries = DEFAULT_TAXONOMY.entries()

    if as_json:
        payload = [
            {"code": e.code, "name": e.name, "aliases": sorted(e.aliases)}
            for e in entries
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    for entry in entries:
        line = f"{entry.code:>2}  {entry.name}"
        if aliases and entry.aliases:
            line += f"  ({', '.join(sorted(entry.aliases))})"
        click.echo(line)
