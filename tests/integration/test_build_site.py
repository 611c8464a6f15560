"""
Integration tests for the full read / update / write pipeline.
"""

import importlib.util
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from typer.testing import CliRunner

from resumesync.contexts.site.builder import (
    build_site,
    serialize_document,
    update_html_from_markdown,
)

SCRIPTS_PATH = Path(__file__).parent.parent.parent / "scripts"


def _load_cli():
    spec = importlib.util.spec_from_file_location(
        "sync_resume", SCRIPTS_PATH / "sync_resume.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app


@pytest.mark.integration
def test_doctype_and_void_tags_preserved(site_html, resume_markdown):
    updated_html, result = update_html_from_markdown(site_html, resume_markdown)

    assert result.success
    assert updated_html.startswith("<!DOCTYPE html>")
    assert '<meta charset="utf-8">' in updated_html
    assert '<link rel="stylesheet" href="styles.css">' in updated_html
    assert '<div class="pdf-container"><button id="downloadPdf">Save as PDF</button></div>' in updated_html


@pytest.mark.integration
def test_untouched_page_serializes_verbatim(site_html):
    document = BeautifulSoup(site_html, "html.parser")

    assert serialize_document(document) == site_html


@pytest.mark.integration
def test_attribute_order_is_kept():
    html = '<!DOCTYPE html><html><body><a title="t" href="/x" class="c">x</a></body></html>'

    assert serialize_document(BeautifulSoup(html, "html.parser")) == html


@pytest.mark.integration
def test_markup_outside_anchors_unchanged(site_html, resume_markdown):
    updated_html, _ = update_html_from_markdown(site_html, resume_markdown)

    head = site_html[: site_html.index("<body>")]
    assert updated_html.startswith(head)
    assert updated_html.endswith('<script src="pdf-generator.js"></script>\n</body>\n</html>\n')


@pytest.mark.integration
def test_preamble_reported_as_warning(site_html, resume_markdown):
    _, result = update_html_from_markdown(site_html, resume_markdown)

    assert len(result.warnings) == 1
    assert "Draft notes" in result.warnings[0]


@pytest.mark.integration
def test_rerun_is_idempotent(site_html, resume_markdown):
    first, _ = update_html_from_markdown(site_html, resume_markdown)
    second, _ = update_html_from_markdown(first, resume_markdown)

    assert first == second


@pytest.mark.integration
def test_build_site_writes_target(site_files):
    source, target = site_files

    result = build_site(source=source, target=target)

    assert result.success
    assert result.output_path == target
    assert result.error is None
    written = target.read_text(encoding="utf-8")
    assert "<h1>Jane Doe</h1>" in written
    assert "Old summary" not in written


@pytest.mark.integration
def test_build_site_is_deterministic(site_files, site_html):
    source, target = site_files

    build_site(source=source, target=target)
    first = target.read_bytes()

    target.write_text(site_html, encoding="utf-8")
    build_site(source=source, target=target)

    assert target.read_bytes() == first


@pytest.mark.integration
def test_build_site_output_leaves_target_alone(site_files, site_html, tmp_path):
    source, target = site_files
    output = tmp_path / "preview.html"

    result = build_site(source=source, target=target, output=output)

    assert result.success
    assert result.output_path == output
    assert target.read_text(encoding="utf-8") == site_html
    assert "<h1>Jane Doe</h1>" in output.read_text(encoding="utf-8")


@pytest.mark.integration
def test_dry_run_writes_nothing(site_files, site_html):
    source, target = site_files

    result = build_site(source=source, target=target, dry_run=True)

    assert result.success
    assert result.output_path is None
    assert target.read_text(encoding="utf-8") == site_html
    assert any(line.startswith("-<h1>Old Name</h1>") for line in result.diff)
    assert any(line.startswith("+<h1>Jane Doe</h1>") for line in result.diff)


@pytest.mark.integration
def test_missing_source_fails_without_touching_target(site_files, site_html, tmp_path):
    _, target = site_files

    result = build_site(source=tmp_path / "missing.md", target=target)

    assert not result.success
    assert "missing.md" in result.error
    assert target.read_text(encoding="utf-8") == site_html


@pytest.mark.integration
def test_missing_target_fails(site_files, tmp_path):
    source, _ = site_files

    result = build_site(source=source, target=tmp_path / "missing.html")

    assert not result.success
    assert "missing.html" in result.error
    assert not (tmp_path / "missing.html").exists()


@pytest.mark.integration
def test_unwritable_output_fails(site_files, tmp_path):
    source, target = site_files

    result = build_site(source=source, target=target, output=tmp_path / "no_such_dir" / "out.html")

    assert not result.success
    assert result.output_path is None


@pytest.mark.integration
def test_custom_schema(site_files, tmp_path):
    source, target = site_files
    schema = tmp_path / "schema.yaml"
    schema_text = (
        Path(__file__).parent.parent.parent
        / "resumesync" / "contexts" / "site" / "site_schema.yaml"
    ).read_text(encoding="utf-8")
    schema.write_text(schema_text.replace("max_rendered: 3", "max_rendered: 1"), encoding="utf-8")

    result = build_site(source=source, target=target, schema_path=schema)

    assert result.success
    assert target.read_text(encoding="utf-8").count("sidebar-certification-title") == 1


@pytest.mark.integration
def test_cli_updates_page(site_files, tmp_path):
    source, target = site_files
    runner = CliRunner()

    result = runner.invoke(
        _load_cli(),
        ["-s", str(source), "-t", str(target), "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 0
    assert "<h1>Jane Doe</h1>" in target.read_text(encoding="utf-8")
    assert list((tmp_path / "logs").glob("*.log"))


@pytest.mark.integration
def test_cli_dry_run_prints_diff(site_files, site_html, tmp_path):
    source, target = site_files
    runner = CliRunner()

    result = runner.invoke(
        _load_cli(),
        ["-s", str(source), "-t", str(target), "-n", "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 0
    assert "+<h1>Jane Doe</h1>" in result.output
    assert target.read_text(encoding="utf-8") == site_html


@pytest.mark.integration
def test_cli_missing_source_exits_nonzero(site_files, tmp_path):
    _, target = site_files
    runner = CliRunner()

    result = runner.invoke(
        _load_cli(),
        ["-s", str(tmp_path / "missing.md"), "-t", str(target), "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 1
