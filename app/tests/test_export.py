import io

import pandas as pd

from app.services.export import export_grid_csv, grid_to_dataframe, save_grid_csv

GRID = {
	"columns": [
		{"title": "Banka", "field": "bank.name", "width": 150, "frozen": True},
		{"title": "Mektup Tutarı", "field": "letter_amount", "width": 130, "frozen": False},
	],
	"rows": [
		{"id": "l1", "bank.name": "Ziraat Bankası", "letter_amount": "₺60.000,00"},
		{"id": "l2", "bank.name": "Garanti BBVA", "letter_amount": "$1.250,50"},
	],
	"total_count": 5,
	"filtered_count": 2,
}


def test_dataframe_uses_titles_in_column_order():
	df = grid_to_dataframe(GRID)
	assert list(df.columns) == ["Banka", "Mektup Tutarı"]
	assert df.iloc[1]["Mektup Tutarı"] == "$1.250,50"


def test_csv_has_bom_and_semicolons():
	content = export_grid_csv(GRID)
	assert content.startswith(b"\xef\xbb\xbf")
	text = content.decode("utf-8-sig")
	assert text.splitlines()[0] == "Banka;Mektup Tutarı"
	
	df = pd.read_csv(io.BytesIO(content), sep=";", encoding="utf-8-sig")
	assert len(df) == 2
	assert df.loc[0, "Banka"] == "Ziraat Bankası"


def test_save_grid_csv(tmp_path):
	path = save_grid_csv(GRID, "teminat", export_dir=tmp_path / "exports")
	assert path.exists()
	assert path.name.startswith("teminat_")
	assert path.read_bytes() == export_grid_csv(GRID)
