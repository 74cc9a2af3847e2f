import os

# Conversions are decorated with opik.track; never trace from the test suite
os.environ.setdefault("OPIK_TRACK_DISABLE", "true")

import pytest  # noqa: E402

from tests.builders import group_node, relation, term_node  # noqa: E402


@pytest.fixture
def chinese_group() -> dict:
    return group_node(
        "G1",
        relations=[
            relation(term_node("T10", "Mandarin", code="cmn", audio_tag="cmn")),
            relation(term_node("T11", "Cantonese", code="yue", audio_tag="yue"), weight="2"),
        ],
    )
