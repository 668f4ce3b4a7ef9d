import json
import click
from pathlib import Path
from typing import List
from pydantic import TypeAdapter
from core.models.candidate import CustomSelectors
from core.models.ingestion import BatchResult, RunResult, RunStatus, SourceSpec


def load_selectors(path: Path) -> CustomSelectors:
    """Read custom scraper selectors from a JSON file"""
    with open(path, 'r', encoding='utf-8') as f:
        return CustomSelectors.model_validate(json.load(f))


def load_specs(path: Path) -> List[SourceSpec]:
    """Read a list of source specs from a JSON file"""
    with open(path, 'r', encoding='utf-8') as f:
        return TypeAdapter(List[SourceSpec]).validate_python(json.load(f))


def print_run_result(result: RunResult) -> None:
    """Print the outcome of a single run"""
    color = 'green' if result.status == RunStatus.COMPLETED else 'red'
    click.echo("\n" + click.style(f"{result.source_name or 'Source'}: ", fg='blue') +
               click.style(result.status.value, fg=color))
    click.echo(click.style("Added: ", fg='blue') + click.style(str(result.books_added), fg='green'))
    click.echo(click.style("Updated: ", fg='blue') + click.style(str(result.books_updated), fg='cyan'))
    click.echo(click.style("Errors: ", fg='blue') +
               click.style(str(result.errors), fg='red' if result.errors else 'cyan'))
    if result.skipped_items:
        click.echo(click.style(f"Skipped {result.skipped_items} unparseable items", fg='yellow'))
    if result.error_details:
        click.echo(click.style(result.error_details, fg=color))


def print_batch_result(batch: BatchResult) -> None:
    """Print every run of a batch followed by the totals"""
    for result in batch.results:
        print_run_result(result)

    click.echo("\n" + click.style("Summary:", fg='blue'))
    click.echo(click.style("Successful: ", fg='blue') + click.style(str(batch.completed), fg='green'))
    click.echo(click.style("Failed: ", fg='blue') +
               click.style(str(batch.failed), fg='red' if batch.failed else 'cyan'))
    click.echo(click.style("Books added: ", fg='blue') + click.style(str(batch.total_added), fg='cyan'))
    click.echo(click.style("Books updated: ", fg='blue') + click.style(str(batch.total_updated), fg='cyan'))
    click.echo(click.style("Total errors: ", fg='blue') + click.style(str(batch.total_errors), fg='cyan'))
