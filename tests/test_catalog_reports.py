"""Tests for catalog connectors, repositories, reports and the CLI."""

import json
import os
import pandas as pd
import pytest
from bangle_storefront.data.connectors.file_connector import FileConnector
from bangle_storefront.data.repositories.catalog_repository import CatalogRepository
from bangle_storefront.reports.report_factory import ReportFactory
from bangle_storefront.reports.stock_urgency_report import StockUrgencyReport
from bangle_storefront.reports.last_few_left_report import LastFewLeftReport
from bangle_storefront.reports.color_palette_report import ColorPaletteReport
from bangle_storefront.reports.exporters.csv_exporter import CSVExporter
from bangle_storefront.cli.storefront_cli import main, parse_args
from bangle_storefront.config.palette_config import DEFAULT_COLORS, DEFAULT_SIZES


def test_file_connector_reads_csv_and_json(catalog_dir, catalog_rows):
    connector = FileConnector(str(catalog_dir))
    assert len(connector.read_table("bangles")) == len(catalog_rows)

    with open(catalog_dir / "extra.json", "w") as f:
        json.dump([{"id": "j1", "number_of_stock": 4}], f)
    df = connector.read_table("extra.json", filters={"id": "j1"})
    assert df["id"].tolist() == ["j1"]


def test_file_connector_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileConnector(str(tmp_path / "missing")).connect()

    connector = FileConnector(str(tmp_path))
    with pytest.raises(FileNotFoundError):
        connector.read_table("bangles")
    with pytest.raises(ValueError):
        connector.read_table("bangles.xlsx")


def test_repository_renames_and_filters_inactive(catalog_dir):
    repository = CatalogRepository(FileConnector(str(catalog_dir)))
    df = repository.get_raw_data()

    assert "stock_count" in df.columns
    assert "number_of_stock" not in df.columns
    assert df["id"].tolist() == ["b1", "b2", "b3", "b5"]
    assert df["stock_count"].tolist() == [3, 1, 45, 0]

    assert len(repository.get_raw_data(active_only=False)) == 5


def test_repository_items_have_normalized_colors_and_sizes(catalog_dir):
    items = {item.id: item for item in CatalogRepository(FileConnector(str(catalog_dir))).get_all()}

    assert items["b1"].color_names == ["Red", "Blue"]
    assert items["b1"].available_sizes == ["2.2", "2.4", "2.6"]
    assert items["b1"].price == 120.0
    # The gray "Custom" entry is dropped as noise
    assert items["b2"].color_names == ["Sunset"]
    assert items["b2"].available_sizes == ["2.4", "2.6"]
    assert items["b3"].available_colors == []
    assert items["b3"].available_sizes == list(DEFAULT_SIZES)
    assert items["b5"].available_sizes == ["2.8", "2.10"]


def test_stock_urgency_report(catalog_dir):
    report = StockUrgencyReport(CatalogRepository(FileConnector(str(catalog_dir))))
    result = report.run()

    assert result["id"].tolist() == ["b5", "b2", "b1", "b3"]
    assert result["stock_tier"].tolist() == [
        "out_of_stock", "last_few_left", "last_few_left", "abundant_stock"
    ]
    assert result["disabled"].tolist() == [True, False, False, False]
    assert result["badge_variant"].tolist()[-1] == "outline"


def test_last_few_left_report(catalog_dir):
    report = LastFewLeftReport(CatalogRepository(FileConnector(str(catalog_dir))))
    result = report.run()

    # b4 has 2 left but is inactive
    assert result["id"].tolist() == ["b2", "b1"]
    assert set(result["stock_message"]) == {"Last few left — shop now"}


def test_last_few_left_report_empty_when_nothing_qualifies():
    report = LastFewLeftReport(catalog_repository=None)
    frame = pd.DataFrame({"id": ["a"], "name": ["A"], "price": [1.0], "stock_count": [40]})
    assert report.build(frame).empty


def test_color_palette_report(catalog_dir):
    report = ColorPaletteReport(CatalogRepository(FileConnector(str(catalog_dir))))
    result = report.run()

    names = result["name"].tolist()
    assert len(names) == len(DEFAULT_COLORS) + 1
    assert names[-1] == "Sunset"

    counts = dict(zip(result["name"].str.lower(), result["product_count"]))
    assert counts["red"] == 2
    assert counts["blue"] == 1
    assert counts["gold"] == 1
    assert counts["sunset"] == 1
    assert counts["pink"] == 0


def test_report_factory(catalog_dir):
    factory = ReportFactory(CatalogRepository(FileConnector(str(catalog_dir))))
    assert isinstance(factory.get_report("last_few_left"), LastFewLeftReport)
    assert factory.get_report("nope") is None
    assert set(factory.get_all_reports()) == {"stock_urgency", "last_few_left", "color_palette"}


def test_csv_exporter_skips_empty_reports(tmp_path):
    results = {
        "stock_urgency": pd.DataFrame({"id": ["a"], "disabled": [True]}),
        "last_few_left": pd.DataFrame(),
    }
    written = CSVExporter().export(results, str(tmp_path / "out"))

    assert list(written) == ["stock_urgency"]
    exported = pd.read_csv(written["stock_urgency"], dtype=str)
    assert exported["disabled"].tolist() == ["true"]


def test_parse_args_defaults():
    args = parse_args([])
    assert args.catalog_table == "bangles"
    assert args.reports is None
    assert args.verbose is False


def test_cli_writes_reports(catalog_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output_dir = tmp_path / "reports"

    exit_code = main([
        "--data-dir", str(catalog_dir),
        "--reports", "stock_urgency,last_few_left",
        "--output-dir", str(output_dir),
    ])

    assert exit_code == 0
    assert sorted(os.listdir(output_dir)) == ["last_few_left.csv", "stock_urgency.csv"]


def test_cli_rejects_unknown_report(catalog_dir):
    assert main(["--data-dir", str(catalog_dir), "--reports", "sales"]) == 1


def test_cli_returns_error_for_missing_data(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--data-dir", str(tmp_path / "missing"), "--output-dir", str(tmp_path / "o")]) == 1


def test_palette_report_survives_malformed_color_cells(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    pd.DataFrame([
        {"id": "b1", "name": "Broken", "price": "10", "number_of_stock": "4",
         "available_colors": "[" * 50000, "available_sizes": "[" * 50000},
        {"id": "b2", "name": "Glass", "price": "20", "number_of_stock": "9",
         "available_colors": json.dumps(["Red"]), "available_sizes": ""},
    ]).to_csv(data_dir / "bangles.csv", index=False)
    repository = CatalogRepository(FileConnector(str(data_dir)))

    result = ColorPaletteReport(repository).run()
    counts = dict(zip(result["name"].str.lower(), result["product_count"]))
    assert counts["red"] == 1

    items = {item.id: item for item in repository.get_all()}
    assert items["b1"].available_colors == []
    assert items["b1"].available_sizes == list(DEFAULT_SIZES)
