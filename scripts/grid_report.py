"""
Pulls a snapshot from a running record store API and saves the guarantee
letter grid as CSV.

    python -m scripts.grid_report --currency USD --project <id> --bank <id>
"""
import argparse
import asyncio
import logging

from app.core.config import settings
from app.services.api_client import ApiError, RecordStoreClient
from app.services.converter import CurrencyConverter
from app.services.export import save_grid_csv
from app.services.filters import ViewState
from app.services.formatter import CurrencyFormatter
from app.services.grid import build_letter_grid

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
	parser = argparse.ArgumentParser(description="Teminat mektubu tablosunu CSV olarak kaydet")
	parser.add_argument("--base-url", default=settings.API_BASE_URL)
	parser.add_argument("--currency", default=settings.DEFAULT_CURRENCY)
	parser.add_argument("--project", action="append", default=[], help="Proje id (tekrarlanabilir)")
	parser.add_argument("--bank", action="append", default=[], help="Banka id (tekrarlanabilir)")
	return parser.parse_args(argv)


async def run(args) -> int:
	client = RecordStoreClient(base_url=args.base_url)
	try:
		snapshot = await client.load_snapshot()
	except ApiError as e:
		logger.error("Kayıtlar yüklenemedi: %s", e)
		return 1
	
	state = ViewState(
		selected_projects=frozenset(args.project),
		selected_banks=frozenset(args.bank),
	).with_currency(args.currency)
	
	grid = build_letter_grid(
		snapshot.letters, snapshot.banks, snapshot.projects, state,
		CurrencyConverter(snapshot.rate_table()),
		CurrencyFormatter.from_currencies(snapshot.currencies, locale=settings.DISPLAY_LOCALE),
	)
	path = save_grid_csv(grid, "teminat_mektuplari")
	logger.info("%d / %d rows written to %s", grid["filtered_count"], grid["total_count"], path)
	return 0


def main():
	raise SystemExit(asyncio.run(run(parse_args())))


if __name__ == "__main__":
	main()
