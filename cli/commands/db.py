# cli/commands/db.py
import click
from typing import Optional
from core.sa.database import Database


@click.group()
def db():
    """Database management commands"""
    pass

@db.command()
@click.option('--database-url', default=None, help='Database URL (defaults to DATABASE_URL)')
def init(database_url: Optional[str]):
    """Create all catalog tables"""
    database = Database(database_url)
    database.init_db()
    click.echo(click.style("Database initialized: ", fg='green') +
               click.style(database.connection_string, fg='cyan'))
