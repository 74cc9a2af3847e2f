import pytest

from domain.errors import DuplicateTagMapping
from domain.lmt.mapping import MappingBuilder


def test_register_and_freeze() -> None:
    mapping = MappingBuilder()
    mapping.register("en-US", "T1")
    mapping.register_all([("fr-FR", "T2"), ("de-DE", "T3")])

    frozen = mapping.freeze()
    assert dict(frozen) == {"en-US": "T1", "fr-FR": "T2", "de-DE": "T3"}
    assert len(frozen) == 3
    assert "fr-FR" in frozen
    with pytest.raises(TypeError):
        frozen["xx"] = "T9"  # ty: ignore


def test_duplicate_tag_names_tag_and_both_ids() -> None:
    mapping = MappingBuilder({"en-US": "T1"})

    with pytest.raises(DuplicateTagMapping) as exc:
        mapping.register("en-US", "T2")
    assert exc.value.tag == "en-US"
    assert exc.value.node_id == "T2"
    assert exc.value.existing_id == "T1"
    assert "en-US" in str(exc.value) and "T2" in str(exc.value)


def test_seed_is_copied() -> None:
    seed = {"en-US": "T1"}
    mapping = MappingBuilder(seed)
    mapping.register("fr-FR", "T2")

    assert seed == {"en-US": "T1"}
