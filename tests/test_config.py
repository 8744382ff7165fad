from pathlib import Path

import pytest

from bidsort.config import AppConfig, ColumnMapping, ParsingConfig, load_config


def test_load_config_resolves_paths_relative_to_file(sample_config, sample_csv):
    config = load_config(sample_config)

    assert config.csv_path == sample_csv.resolve()
    assert config.columns == ColumnMapping()
    assert config.parsing.strip_char == "$"
    assert config.chunk_size is None


def test_load_config_defaults_when_sections_missing(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    config = load_config(path)

    assert config.csv_path == (tmp_path / "eBid_Monthly_Sales.csv").resolve()
    assert config.columns == ColumnMapping(title=0, bid_id=1, amount=4, fund=8)
    assert config.parsing == ParsingConfig()


def test_load_config_reads_overrides(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "\n".join(
            [
                "paths:",
                "  csv: /data/bids.csv",
                "columns:",
                "  title: 2",
                "  amount: 3",
                "parsing:",
                "  strip_char: '£'",
                "loading:",
                "  chunk_size: 500",
            ]
        ),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.csv_path == Path("/data/bids.csv")
    assert config.columns == ColumnMapping(title=2, bid_id=1, amount=3, fund=8)
    assert config.columns.required_width == 9
    assert config.parsing.strip_char == "£"
    assert config.chunk_size == 500


@pytest.mark.parametrize(
    "body,message",
    [
        ("columns:\n  title: -1\n", "non-negative"),
        ("columns:\n  title: first\n", "non-negative"),
        ("columns:\n  price: 3\n", "Unknown column"),
        ("parsing:\n  strip_char: '$$'\n", "single character"),
        ("loading:\n  chunk_size: 0\n", "positive"),
        ("- just\n- a list\n", "mapping"),
    ],
)
def test_load_config_rejects_invalid_values(tmp_path, body, message):
    path = tmp_path / "config.yaml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        load_config(path)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_app_config_defaults():
    config = AppConfig()

    assert config.csv_path == Path("eBid_Monthly_Sales.csv")
    assert config.columns.as_dict() == {"title": 0, "bid_id": 1, "amount": 4, "fund": 8}
