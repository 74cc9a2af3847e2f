import json
from pathlib import Path

from application import convert_tree, lmt_to_dict, serialize_lmt, summarize_lmt
from domain.lmt import to_lmt
from infrastructure.config import ConverterConfig, OutputConfig
from tests.builders import document, term_node


def test_output_uses_lmt_key_spelling(chinese_group: dict) -> None:
    lmt = to_lmt(document(term_node("T1", audio_tag="en-US", visual_tag="en-Latn"), chinese_group))

    out = lmt_to_dict(lmt)

    assert set(out) == {"Metadata", "terms", "groups", "mapping"}
    assert out["terms"][0] == {
        "Name": "English",
        "Code": "en",
        "LongDescription1": "English language",
        "AudioLanguageTag": "en-US",
        "VisualLanguageTag1": "en-Latn",
    }
    assert out["groups"][0] == {
        "Name": "Chinese",
        "Code": "zh",
        "GroupTag": "zh-group",
        "members": [
            {"relationType": "NT", "relationWeight": "1", "AudioLanguageTag": "cmn"},
            {"relationType": "NT", "relationWeight": "2", "AudioLanguageTag": "yue"},
        ],
    }
    assert out["mapping"]["group"] == {}


def test_absent_fields_can_be_kept() -> None:
    lmt = to_lmt(document(term_node("T1", audio_tag="en")))

    term = lmt_to_dict(lmt, exclude_absent=False)["terms"][0]
    assert term["notes"] is None
    assert term["VisualLanguageTag2"] is None


def test_serialize_writes_json(tmp_path: Path) -> None:
    lmt = to_lmt(document(term_node("T1", audio_tag="en")))
    path = tmp_path / "nested" / "lmt.json"

    written = serialize_lmt(lmt, path, OutputConfig(indent=None))

    assert written == path
    assert json.loads(path.read_text(encoding="utf-8"))["mapping"]["term"] == {"en": "T1"}
    assert "\n" not in path.read_text(encoding="utf-8")


def test_convert_tree_and_summary(chinese_group: dict) -> None:
    tree = document(
        term_node("T1", audio_tag="en"),
        term_node("T2", "Serbian", code="sr", visual_tag="sr-Cyrl"),
        chinese_group,
    )

    lmt = convert_tree(tree, ConverterConfig())

    assert summarize_lmt(lmt) == {
        "terms": 4,
        "groups": 1,
        "members": 2,
        "mappings": 5,
        "audio_tagged_terms": 3,
        "visual_tagged_terms": 1,
    }
