# app/services/export.py
import io
import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from app.core.config import settings

logger = logging.getLogger(__name__)


def grid_to_dataframe(grid: dict) -> pd.DataFrame:
	"""Rendered rows under the Turkish column titles, in column order."""
	columns = grid["columns"]
	fields = [column["field"] for column in columns]
	titles = [column["title"] for column in columns]
	
	df = pd.DataFrame(grid["rows"], columns=fields)
	df.columns = titles
	return df


def export_grid_csv(grid: dict) -> bytes:
	df = grid_to_dataframe(grid)
	buffer = io.StringIO()
	df.to_csv(buffer, index=False, sep=";")
	# BOM so spreadsheet apps open the Turkish characters correctly
	return buffer.getvalue().encode("utf-8-sig")


def save_grid_csv(grid: dict, name: str, export_dir: Path | None = None) -> Path:
	export_dir = export_dir or settings.EXPORT_DIR
	export_dir.mkdir(parents=True, exist_ok=True)
	path = export_dir / f"{name}_{datetime.now():%Y%m%d_%H%M%S}.csv"
	path.write_bytes(export_grid_csv(grid))
	logger.info("Grid exported to %s (%d rows)", path, len(grid["rows"]))
	return path
