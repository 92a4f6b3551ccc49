"""
Tests for the catalogue generator script.
"""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "generate_suburbs.py"

SEED_CSV = """Name,Postcode,Lat,Lng,Population
Kilburn,5084,-34.8597,138.5856,
Prospect,5082,-34.8833,138.5945,21000
Gawler,5118,-34.5980,138.7450,
Victor Harbor,5211,-35.5520,138.6170,15000
Glenelg,5045,-34.9799,138.5156,
"""


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("generate_suburbs", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def seed_file(tmp_path):
    path = tmp_path / "seed.csv"
    path.write_text(SEED_CSV, encoding="utf-8")
    return path


class TestReadSeedRows:
    """Tests for CSV seed parsing."""

    def test_columns_lowercased_and_blanks_none(self, script, seed_file):
        rows = script.read_seed_rows(str(seed_file))
        assert len(rows) == 5
        assert rows[0]["name"] == "Kilburn"
        assert rows[0]["postcode"] == "5084"
        assert rows[0]["population"] is None
        assert rows[1]["population"] == 21000

    def test_missing_columns(self, script, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("name,postcode\nKilburn,5084\n", encoding="utf-8")
        with pytest.raises(SystemExit):
            script.read_seed_rows(str(path))


class TestMain:
    """Tests for the command-line entry point."""

    def test_writes_catalogue(self, script, seed_file, tmp_path, capsys):
        output = tmp_path / "out" / "suburbs.json"
        code = script.main([
            "--input", str(seed_file),
            "--output", str(output),
            "--lat", "-34.8517",
            "--lng", "138.5829",
            "--radius", "50",
            "--state", "SA",
        ])
        assert code == 0

        document = json.loads(output.read_text(encoding="utf-8"))
        names = [row["name"] for row in document["suburbs"]]
        assert names[0] == "Kilburn"
        assert "Victor Harbor" not in names
        assert document["count"] == 4
        assert all(row["state"] == "SA" for row in document["suburbs"])
        assert "Distance breakdown" in capsys.readouterr().out
