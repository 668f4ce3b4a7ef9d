# core/services/ingestion_service.py

import logging
import time
from typing import List, Optional, Sequence

from core.config import settings
from core.exceptions import IngestionError
from core.models.candidate import CustomSelectors
from core.models.ingestion import (
    BatchResult, RunResult, RunStatus, SaveResult, ScraperType,
    ScrapingLogSummary, SourceSpec, SourceSummary
)
from core.resolvers.book_upserter import BookUpserter
from core.sa.database import Database
from core.sa.repositories.scraping_log import ScrapingLogRepository
from core.sa.repositories.source import SourceRepository
from core.scrapers.base_scraper import BaseScraper
from core.scrapers.custom_scraper import CustomScraper
from core.scrapers.google_books_scraper import GoogleBooksScraper
from core.scrapers.gutenberg_scraper import GutenbergScraper
from core.scrapers.open_library_scraper import OpenLibraryScraper
from core.utils.http import Downloader

logger = logging.getLogger(__name__)

MAX_FAILURE_DETAILS = 10


class IngestionService:
    """Runs scrapers against sources and records every run in the scraping log.

    The service holds no per-run state: each run opens its own session, which
    is the transaction handle for everything written during that run.
    """

    def __init__(
        self,
        database: Database,
        downloader: Optional[Downloader] = None,
        batch_delay: Optional[float] = None
    ):
        self.database = database
        self.downloader = downloader or Downloader()
        self.batch_delay = settings.BATCH_DELAY_SECONDS if batch_delay is None else batch_delay

    def build_scraper(self, scraper_type: ScraperType, selectors: Optional[CustomSelectors] = None) -> BaseScraper:
        """Create the scraper for a source type

        Raises:
            IngestionError: For unknown types or a custom type without selectors
        """
        try:
            scraper_type = ScraperType(scraper_type)
        except ValueError:
            raise IngestionError(f"Unknown scraping type: {scraper_type}")

        if scraper_type == ScraperType.OPEN_LIBRARY:
            return OpenLibraryScraper(downloader=self.downloader)
        if scraper_type == ScraperType.GOOGLE_BOOKS:
            return GoogleBooksScraper(downloader=self.downloader)
        if scraper_type == ScraperType.GUTENBERG:
            return GutenbergScraper(downloader=self.downloader)

        if selectors is None:
            raise IngestionError("Custom selectors required for custom scraping")
        return CustomScraper(selectors, downloader=self.downloader)

    def run_single_source(
        self,
        scraper_type: ScraperType,
        query: str,
        source_name: str,
        base_url: str,
        selectors: Optional[CustomSelectors] = None
    ) -> RunResult:
        """
        Scrape one source and save the books it yields.

        Args:
            scraper_type: Which scraper to use
            query: Subject, search term or page URL, depending on the scraper
            source_name: Name of the source, created on first use
            base_url: Base URL stored with a newly created source
            selectors: Selectors for the custom scraper

        Returns:
            RunResult describing the run; failures are reported here rather than raised
        """
        logger.info("=" * 70)
        logger.info(f"Starting scraping process - type: {getattr(scraper_type, 'value', scraper_type)}, "
                    f"query: {query}, source: {source_name}")

        session = self.database.get_session()
        source_id: Optional[int] = None
        log_id: Optional[int] = None
        log_repo = ScrapingLogRepository(session)

        try:
            source_id = SourceRepository(session).get_or_create_source(source_name, base_url)
            session.commit()

            log_id = log_repo.create_log(source_id).id
            session.commit()
            logger.info(f"Created scraping log (ID: {log_id})")

            scraper = self.build_scraper(scraper_type, selectors)
            scraped = scraper.scrape(query)
            for error in scraped.parse_errors:
                logger.warning(f"Skipped item from {scraper.name}: {error}")

            saved = BookUpserter(session).save_batch(scraped.books, source_id)

            result = RunResult(
                log_id=log_id,
                source_id=source_id,
                source_name=source_name,
                books_added=saved.added,
                books_updated=saved.updated,
                errors=saved.failed,
                skipped_items=len(scraped.parse_errors),
                status=RunStatus.COMPLETED,
                error_details=self._describe_failures(saved)
            )
            log_repo.close_log(
                log_id,
                RunStatus.COMPLETED,
                books_added=result.books_added,
                books_updated=result.books_updated,
                errors=result.errors,
                error_details=result.error_details
            )
            session.commit()
            logger.info(f"Scraping completed successfully: {result.books_added} added, "
                        f"{result.books_updated} updated, {result.errors} errors")
            return result

        except Exception as e:
            session.rollback()
            logger.error(f"Scraping failed: {e}")
            if log_id is not None:
                self._close_failed_log(log_repo, log_id, str(e))
            return RunResult(
                log_id=log_id,
                source_id=source_id,
                source_name=source_name,
                errors=1,
                status=RunStatus.FAILED,
                error_details=str(e)
            )
        finally:
            session.close()

    def run_multiple_sources(self, specs: Sequence[SourceSpec]) -> BatchResult:
        """
        Scrape several sources one after another.

        A failing source never stops the ones after it. A fixed delay is
        inserted between consecutive sources, but not after the last one.

        Returns:
            BatchResult with one RunResult per source, in order, plus totals
        """
        results: List[RunResult] = []
        logger.info(f"Scraping {len(specs)} sources...")

        for index, spec in enumerate(specs):
            logger.info(f"[{index + 1}/{len(specs)}] Processing: {spec.source_name}")
            try:
                result = self.run_single_source(
                    spec.type,
                    spec.query,
                    spec.source_name,
                    spec.base_url,
                    spec.selectors
                )
            except Exception as e:
                logger.error(f"Failed to scrape {spec.source_name}: {e}")
                result = RunResult(
                    source_name=spec.source_name,
                    errors=1,
                    status=RunStatus.FAILED,
                    error_details=str(e)
                )
            results.append(result)

            if index < len(specs) - 1:
                logger.info(f"Waiting {self.batch_delay} seconds before next source...")
                time.sleep(self.batch_delay)

        batch = BatchResult.from_results(results)
        logger.info(
            f"SCRAPING SUMMARY - sources: {len(specs)}, successful: {batch.completed}, "
            f"failed: {batch.failed}, added: {batch.total_added}, "
            f"updated: {batch.total_updated}, errors: {batch.total_errors}"
        )
        return batch

    def get_recent_logs(self, limit: int = 10) -> List[ScrapingLogSummary]:
        """Get the most recent runs, newest first, with their source name and base URL"""
        with self.database.get_db() as session:
            rows = ScrapingLogRepository(session).get_recent_logs(limit)
            return [
                ScrapingLogSummary(
                    id=log.id,
                    source_id=log.source_id,
                    source_name=source.name,
                    base_url=source.base_url,
                    started_at=log.started_at,
                    completed_at=log.completed_at,
                    books_added=log.books_added,
                    books_updated=log.books_updated,
                    errors=log.errors,
                    status=RunStatus(log.status),
                    error_details=log.error_details
                )
                for log, source in rows
            ]

    def get_active_sources(self) -> List[SourceSummary]:
        """Get every active source"""
        with self.database.get_db() as session:
            sources = SourceRepository(session).get_active_sources()
            return [SourceSummary.model_validate(source) for source in sources]

    def _close_failed_log(self, log_repo: ScrapingLogRepository, log_id: int, message: str) -> None:
        try:
            log_repo.close_log(log_id, RunStatus.FAILED, errors=1, error_details=message)
            log_repo.session.commit()
        except Exception as e:
            log_repo.session.rollback()
            logger.error(f"Could not close scraping log {log_id}: {e}")

    def _describe_failures(self, saved: SaveResult) -> Optional[str]:
        failures = saved.failures
        if not failures:
            return None
        lines = [f"{o.title}: {o.error}" for o in failures[:MAX_FAILURE_DETAILS]]
        if len(failures) > MAX_FAILURE_DETAILS:
            lines.append(f"... and {len(failures) - MAX_FAILURE_DETAILS} more")
        return f"{len(failures)} book(s) failed to save\n" + "\n".join(lines)
