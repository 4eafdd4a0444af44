"""Shared fixtures for catalog tests."""

import json
import pandas as pd
import pytest


@pytest.fixture
def catalog_rows():
    return [
        {"id": "b1", "name": "Glass Bangle", "price": "120", "number_of_stock": "3",
         "is_active": "true", "available_colors": json.dumps(["Red", "Blue"]),
         "available_sizes": json.dumps(["2.2", "2.4", "2.6"])},
        {"id": "b2", "name": "Lac Bangle", "price": "250", "number_of_stock": "1",
         "is_active": "true",
         "available_colors": json.dumps([{"name": "Sunset", "hex": "#ff8800"}, "#888888"]),
         "available_sizes": "2.4, 2.6"},
        {"id": "b3", "name": "Metal Kada", "price": "400", "number_of_stock": "45",
         "is_active": "true", "available_colors": "", "available_sizes": ""},
        {"id": "b4", "name": "Old Stock", "price": "90", "number_of_stock": "2",
         "is_active": "false", "available_colors": json.dumps(["Red"]), "available_sizes": ""},
        {"id": "b5", "name": "Silk Thread", "price": "80", "number_of_stock": "0",
         "is_active": "true", "available_colors": json.dumps(["red", "Gold"]),
         "available_sizes": "[\"2.8\", \"2.10\"]"},
    ]


@pytest.fixture
def catalog_dir(tmp_path, catalog_rows):
    """A data directory holding bangles.csv."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    pd.DataFrame(catalog_rows).to_csv(data_dir / "bangles.csv", index=False)
    return data_dir
