"""
CLI Package for stockmeta

Click group with one module per subcommand:
- generate: images -> vision model -> CSV metadata or JSON prompts
- process: saved model responses -> metadata JSON (offline)
- categories: list the marketplace taxonomy

The main entry point is the main() click group. The cli() function serves
as the console script entry point for setup.py.
"""

import os

import click
from dotenv import load_dotenv

from stockmeta import __version__
from stockmeta.utils.logging_config import configure_logging

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')

from .categories import categories
from .generate import generate
from .process import process

# Configure logging when CLI package is imported
configure_logging()


@click.group()
@click.version_option(version=__version__, prog_name='stockmeta')
def main():
    """stockmeta - Stock image metadata from vision model descriptions.

    Sends images to a vision model, then parses, spell-corrects, classifies
    and curates the response into a marketplace-ready title, keyword list,
    category and description.
    """
    pass


# Register subcommands
main.add_command(generate)
main.add_command(process)
main.add_command(categories)


# Entry point for setup.py console script
def cli():
    """Console script entry point."""
    main()
