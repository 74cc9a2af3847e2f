import json
import logging
import shutil
from collections.abc import Iterator
from pathlib import Path

import opik
import pytest
from opik import tracing_runtime_config

import main

DATA = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture
def workspace(tmp_path: Path) -> Iterator[Path]:
    (tmp_path / "converter.yaml").write_text(
        f"output:\n  root: {tmp_path / 'outputs'}\n",
        encoding="utf-8",
    )
    shutil.copy(DATA / "sample_mesa.xml", tmp_path / "sample_mesa.xml")
    yield tmp_path
    # configure_logging attaches a file handler inside tmp_path
    logging.getLogger().handlers.clear()


def _run_dir(workspace: Path) -> Path:
    (run_dir,) = (workspace / "outputs").iterdir()
    return run_dir


def test_cli_writes_lmt_and_summary(workspace: Path) -> None:
    code = main.main(
        [
            str(workspace / "sample_mesa.xml"),
            "--config",
            str(workspace / "converter.yaml"),
            "--env",
            str(workspace / "missing.env"),
        ]
    )

    assert code == 0
    run_dir = _run_dir(workspace)
    assert run_dir.name.endswith("_sample_mesa")

    lmt = json.loads((run_dir / "lmt.json").read_text(encoding="utf-8"))
    assert len(lmt["terms"]) == 4
    assert lmt["groups"][0]["GroupTag"] == "zh-all"

    summary = json.loads((run_dir / "summary.json").read_text(encoding="utf-8"))
    assert summary["terms"] == 4
    assert summary["mappings"] == 5
    assert summary["document"] == "sample_mesa.xml"
    assert summary["run_id"] == run_dir.name
    assert (run_dir / "config.resolved.json").exists()
    assert (run_dir / "run.log").exists()


def test_cli_output_override(workspace: Path) -> None:
    target = workspace / "custom" / "out.json"

    code = main.main(
        [
            str(workspace / "sample_mesa.xml"),
            "--config",
            str(workspace / "converter.yaml"),
            "--env",
            str(workspace / "missing.env"),
            "--output",
            str(target),
        ]
    )

    assert code == 0
    assert json.loads(target.read_text(encoding="utf-8"))["mapping"]["term"]["cmn"] == "1003"
    assert not (_run_dir(workspace) / "lmt.json").exists()


def test_cli_conversion_error_exits_1(workspace: Path) -> None:
    xml = workspace / "dup.xml"
    xml.write_text(
        "<Synaptica-ZThes>"
        + "".join(
            f"<term><termID>{i}</termID><termName>English</termName>"
            '<termNote label="Code">en</termNote>'
            '<termNote label="Long Description 1">English</termNote>'
            '<termNote label="Audio Language Tag">en</termNote></term>'
            for i in (1, 2)
        )
        + "</Synaptica-ZThes>",
        encoding="utf-8",
    )

    code = main.main([str(xml), "--config", str(workspace / "converter.yaml"), "--env", str(workspace / "x.env")])

    assert code == 1
    run_dir = _run_dir(workspace)
    assert not (run_dir / "lmt.json").exists()
    assert "duplicate unique term tag en" in (run_dir / "run.log").read_text(encoding="utf-8")


def test_cli_missing_input(workspace: Path) -> None:
    with pytest.raises(FileNotFoundError):
        main.main([str(workspace / "nope.xml"), "--config", str(workspace / "converter.yaml")])


def test_cli_turns_tracing_off_by_default(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPIK_TRACK_DISABLE", raising=False)
    was_active = tracing_runtime_config.is_tracing_active()
    opik.set_tracing_active(True)
    try:
        code = main.main(
            [
                str(workspace / "sample_mesa.xml"),
                "--config",
                str(workspace / "converter.yaml"),
                "--env",
                str(workspace / "missing.env"),
            ]
        )

        assert code == 0
        assert tracing_runtime_config.is_tracing_active() is False
    finally:
        opik.set_tracing_active(was_active)
