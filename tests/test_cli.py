from __future__ import annotations

from pathlib import Path

import yaml
from pptx import Presentation

from deck_overlays.cli import main


def _deck(path: Path) -> Path:
    prs = Presentation()
    for layout_idx, title in [(0, "Deck"), (2, "Intro"), (1, "Body")]:
        slide = prs.slides.add_slide(prs.slide_layouts[layout_idx])
        slide.shapes.title.text = title
    prs.save(str(path))
    return path


def _config(tmp_path: Path, **paths) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"paths": {"project_root": ".", **paths}}), encoding="utf-8")
    return path


def test_cli_writes_output(tmp_path: Path, capsys) -> None:
    _deck(tmp_path / "deck.pptx")
    config = _config(tmp_path, input="deck.pptx", output="out/deck.pptx")

    assert main(["--config", str(config)]) == 0
    assert (tmp_path / "out" / "deck.pptx").exists()
    assert "operations submitted" in capsys.readouterr().out


def test_cli_input_override(tmp_path: Path) -> None:
    _deck(tmp_path / "other.pptx")
    config = _config(tmp_path, input="missing.pptx")

    assert main(["--config", str(config), "--input", str(tmp_path / "other.pptx")]) == 0
    names = [shape.name for slide in Presentation(str(tmp_path / "other.pptx")).slides for shape in slide.shapes]
    assert any(name.startswith("progress_") for name in names)


def test_cli_reports_missing_input(tmp_path: Path) -> None:
    config = _config(tmp_path, input="missing.pptx")
    assert main(["--config", str(config)]) == 1


def test_cli_reports_missing_config(tmp_path: Path) -> None:
    assert main(["--config", str(tmp_path / "nope.yaml")]) == 1


def test_checkout_script_runs_the_cli() -> None:
    import generate_overlays

    assert generate_overlays.main is main
