from pathlib import Path

import pytest

from infrastructure.config import ConverterConfig, load_converter_config, parse_converter_config

REPO_CONFIG = Path(__file__).resolve().parents[2] / "configs" / "converter.yaml"


def test_repo_config_matches_defaults() -> None:
    assert load_converter_config(REPO_CONFIG) == ConverterConfig()


def test_partial_config_keeps_defaults() -> None:
    cfg = parse_converter_config({"source": {"root_element": "Zthes"}, "output": {"indent": None}})

    assert cfg.source.root_element == "Zthes"
    assert cfg.source.term_element == "term"
    assert cfg.output.indent is None
    assert cfg.output.exclude_absent is True
    assert cfg.tracing is False


def test_empty_file_means_defaults(tmp_path: Path) -> None:
    path = tmp_path / "converter.yaml"
    path.write_text("", encoding="utf-8")

    assert load_converter_config(path) == ConverterConfig()


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_converter_config(tmp_path / "nope.yaml")


def test_non_mapping_yaml(tmp_path: Path) -> None:
    path = tmp_path / "converter.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Expected YAML dict"):
        load_converter_config(path)


@pytest.mark.parametrize(
    "data",
    [
        {"source": "Synaptica-ZThes"},
        {"source": {"root_element": ""}},
        {"output": {"indent": -1}},
        {"unexpected": True},
    ],
)
def test_invalid_values(data: dict) -> None:
    with pytest.raises(ValueError):
        parse_converter_config(data)
