# cli/commands/scraper.py
import click
from pathlib import Path
from typing import Optional
from core.models.ingestion import ScraperType
from core.sa.database import Database
from core.services.ingestion_service import IngestionService
from ..utils import load_selectors, load_specs, print_batch_result, print_run_result


def _service(database_url: Optional[str], delay: Optional[float] = None) -> IngestionService:
    database = Database(database_url)
    database.init_db()
    return IngestionService(database, batch_delay=delay)

@click.group()
def scraper():
    """Commands for ingesting books from external sources"""
    pass

@scraper.command()
@click.option('--type', 'scraper_type', required=True,
              type=click.Choice([t.value for t in ScraperType]), help='Scraper to use')
@click.option('--query', required=True, help='Subject, search term, or page URL for custom scraping')
@click.option('--source-name', required=True, help='Name of the source')
@click.option('--base-url', required=True, help='Base URL of the source')
@click.option('--selectors', 'selectors_path', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='JSON file with CSS selectors (required for custom)')
@click.option('--database-url', default=None, help='Database URL (defaults to DATABASE_URL)')
def run(scraper_type: str, query: str, source_name: str, base_url: str,
        selectors_path: Optional[Path], database_url: Optional[str]):
    """Scrape a single source and save the results

    Example:
        academix scraper run --type openlibrary --query science --source-name "Open Library" --base-url https://openlibrary.org
    """
    if scraper_type == ScraperType.CUSTOM.value and not selectors_path:
        raise click.UsageError("--selectors is required for custom scraping")

    selectors = load_selectors(selectors_path) if selectors_path else None
    result = _service(database_url).run_single_source(
        ScraperType(scraper_type), query, source_name, base_url, selectors
    )
    print_run_result(result)

@scraper.command()
@click.argument('specs_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--delay', default=None, type=float, help='Seconds to wait between sources')
@click.option('--database-url', default=None, help='Database URL (defaults to DATABASE_URL)')
def batch(specs_path: Path, delay: Optional[float], database_url: Optional[str]):
    """Scrape every source listed in a JSON file, one after another

    The file holds a list of objects with type, query, source_name, base_url
    and, for custom sources, selectors.
    """
    specs = load_specs(specs_path)
    if not specs:
        raise click.UsageError("The specs file does not list any sources")

    print_batch_result(_service(database_url, delay).run_multiple_sources(specs))

@scraper.command()
@click.option('--limit', default=10, type=int, help='Number of recent runs to show')
@click.option('--database-url', default=None, help='Database URL (defaults to DATABASE_URL)')
def stats(limit: int, database_url: Optional[str]):
    """Show the most recent scraping runs"""
    logs = _service(database_url).get_recent_logs(limit)
    if not logs:
        click.echo("\nNo scraping runs recorded.")
        return

    for log in logs:
        color = {'completed': 'green', 'failed': 'red'}.get(log.status.value, 'yellow')
        click.echo(
            click.style(f"#{log.id} ", fg='blue') +
            click.style(f"{log.source_name} ", fg='cyan') +
            click.style(log.status.value, fg=color) +
            f" started {log.started_at:%Y-%m-%d %H:%M:%S}"
            f" added={log.books_added} updated={log.books_updated} errors={log.errors}"
        )

@scraper.command()
@click.option('--database-url', default=None, help='Database URL (defaults to DATABASE_URL)')
def sources(database_url: Optional[str]):
    """List active sources"""
    active = _service(database_url).get_active_sources()
    if not active:
        click.echo("\nNo active sources.")
        return

    for source in active:
        last = f"{source.last_scraped:%Y-%m-%d %H:%M:%S}" if source.last_scraped else "never"
        click.echo(click.style(source.name, fg='cyan') + f" ({source.base_url}) last scraped: {last}")
