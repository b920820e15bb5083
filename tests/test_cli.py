import json

import pytest
from click.testing import CliRunner
from docx import Document
from docx.oxml.ns import qn

from kdp_page_setup.cli import main
from kdp_page_setup.config.sizes import SETTINGS_KEY


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def env(tmp_path):
    return {"KDP_PAGE_SETUP_STORE": str(tmp_path / "store.json"), "KDP_PAGE_SETUP_PROFILE": "local"}


def test_presets_lists_hardcover_sizes(runner) -> None:
    result = runner.invoke(main, ["presets", "--book-type", "hardcover"])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert len(lines) == 8
    assert lines[0].startswith("Hardcover - 5 x 8")
    assert "(360 x 576 pt)" in lines[0]


def test_resolve_prints_spec_and_warnings(runner) -> None:
    result = runner.invoke(main, ["resolve", "--size", "Custom", "--width", "4", "--height", "6", "--margin", "1", "1", "2", "2.5"])
    assert result.exit_code == 0
    assert 'Size: Custom (4" x 6")' in result.output
    assert "Margins (custom)" in result.output
    assert "WARNING: Inside + outside" in result.output


def test_resolve_remaps_hardcover_standard_ink(runner) -> None:
    result = runner.invoke(main, ["resolve", "--size", "Hardcover - 6 x 9", "--ink", "standard"])
    assert result.exit_code == 0
    assert "ink: premium" in result.output


def test_resolve_rejects_out_of_range_custom_size(runner) -> None:
    result = runner.invoke(main, ["resolve", "--size", "Custom", "--width", "3.9", "--height", "9"])
    assert result.exit_code == 1
    assert "below the KDP minimum" in result.output


def test_apply_writes_docx_and_remembers_settings(runner, env, tmp_path) -> None:
    doc_path = tmp_path / "book.docx"
    Document().save(str(doc_path))

    result = runner.invoke(main, ["apply", str(doc_path), "--size", "Paperback - 6 x 9", "--paper", "cream"], env=env)
    assert result.exit_code == 0, result.output
    assert "Page size set to 6 x 9" in result.output

    section = Document(str(doc_path)).sections[0]
    assert section.page_width.pt == 432

    stored = json.loads(json.loads((tmp_path / "store.json").read_text())[SETTINGS_KEY])
    assert stored["sizeName"] == "Paperback - 6 x 9"
    assert stored["paperType"] == "cream"

    shown = runner.invoke(main, ["last-settings"], env=env)
    assert '"sizeName": "Paperback - 6 x 9"' in shown.output


def test_apply_ephemeral_profile_skips_store(runner, env, tmp_path) -> None:
    doc_path = tmp_path / "book.docx"
    result = runner.invoke(main, ["--profile", "ephemeral", "apply", str(doc_path), "--create"], env=env)
    assert result.exit_code == 0, result.output
    assert not (tmp_path / "store.json").exists()


def test_apply_missing_docx_fails(runner, env, tmp_path) -> None:
    result = runner.invoke(main, ["apply", str(tmp_path / "missing.docx")], env=env)
    assert result.exit_code == 1
    assert "Could not open" in result.output


def test_last_settings_when_empty(runner, env) -> None:
    result = runner.invoke(main, ["last-settings"], env=env)
    assert result.exit_code == 0
    assert "No saved settings." in result.output


def test_proof_then_show(runner, env, tmp_path) -> None:
    pdf_path = tmp_path / "proof.pdf"
    result = runner.invoke(main, ["proof", str(pdf_path), "--size", "Paperback - 8.5 x 11", "--margins", "narrow"], env=env)
    assert result.exit_code == 0, result.output
    shown = runner.invoke(main, ["show", str(pdf_path)])
    assert shown.exit_code == 0
    assert 'Page Size: 8.50" × 11.00" (612 × 792 pts)' in shown.output
    assert 'Top: 0.50" (36 pts)' in shown.output


def test_unknown_profile(runner) -> None:
    result = runner.invoke(main, ["--profile", "cloud", "presets"])
    assert result.exit_code == 2


def test_show_docx_without_page_size(runner, tmp_path) -> None:
    path = tmp_path / "no_pgsz.docx"
    doc = Document()
    sect_pr = doc.sections[0]._sectPr
    sect_pr.remove(sect_pr.find(qn("w:pgSz")))
    doc.save(str(path))

    result = runner.invoke(main, ["show", str(path)])
    assert result.exit_code == 0, result.output
    assert 'Page Size: 8.50" × 11.00" (612 × 792 pts)' in result.output


@pytest.mark.parametrize("content", ["[]", "{not json", '{"kdpFormatterSettings": "{\\"sizeName\\": 1}"}'])
def test_last_settings_with_corrupt_store(runner, env, tmp_path, content) -> None:
    (tmp_path / "store.json").write_text(content)
    result = runner.invoke(main, ["last-settings"], env=env)
    assert result.exit_code == 1
    assert result.output.startswith("❌")
    assert result.exception is None or isinstance(result.exception, SystemExit)
