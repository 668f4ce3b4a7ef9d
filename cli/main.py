# cli/main.py
import logging
import click
from core.config import settings
from .commands.db import db
from .commands.scraper import scraper


@click.group()
@click.option('--verbose/--no-verbose', default=False, help='Show debug logging')
def cli(verbose: bool):
    """Academix ingestion CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

cli.add_command(db)
cli.add_command(scraper)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
