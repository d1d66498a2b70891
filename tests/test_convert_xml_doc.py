"""Tests for the end-to-end conversion and the command line."""

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from doc_to_markdown.build_link_targets import build_link_targets
from doc_to_markdown.build_renderer_pool import build_renderer_pool
from doc_to_markdown.convert_xml_doc import main
from doc_to_markdown.correct_document import correct_document
from doc_to_markdown.load_config import load_config
from doc_to_markdown.output_file_for_namespace import (
    namespace_file_name,
    output_file_for_namespace,
)
from doc_to_markdown.render_namespace_documents import render_namespace_documents

SAMPLE_XML = """<?xml version="1.0"?>
<doc>
    <assembly>
        <name>Sample</name>
    </assembly>
    <members>
        <member name="T:Sample.Collections.Bag`1">
            <summary>
            A bag of <typeparamref name="T"/> items.
            </summary>
            <typeparam name="T">The item type.</typeparam>
        </member>
        <member name="M:Sample.Collections.Bag`1.Add(`0)">
            <summary>Adds an item, see <see cref="T:Sample.Collections.Bag`1"/>.</summary>
            <param name="item">The item.</param>
        </member>
        <member name="T:Program"/>
        <member name="N:Sample.Collections"/>
    </members>
</doc>
"""


def test_pipeline_renders_namespaces() -> None:
    """Verify correction followed by rendering of every namespace."""
    root = ET.fromstring(SAMPLE_XML)
    pool = build_renderer_pool("\n", link_targets=build_link_targets(root))
    markdown = render_namespace_documents(correct_document(root), pool)

    # N: entries lose a segment like any non-type member and land in ""
    assert list(markdown) == ["Sample.Collections", ""]
    assert markdown["Sample.Collections"] == (
        "# Sample\n\n"
        "---\n"
        '#### Type: <a name="sample.collections.bag|t|"></a>Bag|T|\n\n'
        "A bag of *T* items.\n\n"
        "\tType parameter T: The item type. \n"
        "\n\n"
        '#### Method: <a name="sample.collections.add"></a>Add\n\n\n'
        "Adds an item, see [Bag](#sample.collections.bag|t|).\n\n"
        "\tParameter item: The item. \n"
        "\n"
    )
    # The N: member is grouped under "" but never rendered.
    assert markdown[""] == (
        "# Sample\n\n---\n"
        '#### Type: <a name=".program"></a>Program\n\n\n\n'
    )


def test_output_file_for_namespace(tmp_path: Path) -> None:
    """Verify namespace file names, including the global namespace."""
    config = load_config(None)
    assert output_file_for_namespace(tmp_path, "A.B", config) == tmp_path / "A.B.md"
    assert output_file_for_namespace(tmp_path, "", config) == tmp_path / "global.md"
    assert namespace_file_name("A.B") == "A.B.md"


def test_main_writes_files(tmp_path: Path) -> None:
    """Verify the CLI writes one Markdown file per namespace."""
    xml_file = tmp_path / "Sample.xml"
    xml_file.write_text(SAMPLE_XML, encoding="utf-8")
    out_dir = tmp_path / "out"

    assert main([str(xml_file), str(out_dir), "--newline", "lf"]) == 0

    written = sorted(p.name for p in out_dir.iterdir())
    assert written == ["Sample.Collections.md", "global.md"]
    content = (out_dir / "Sample.Collections.md").read_bytes().decode("utf-8")
    assert content.startswith("# Sample\n\n---\n#### Type: ")
    assert "\r\n" not in content


def test_main_crlf(tmp_path: Path) -> None:
    """Verify CRLF separators are written unchanged."""
    xml_file = tmp_path / "Sample.xml"
    xml_file.write_text(SAMPLE_XML, encoding="utf-8")
    out_dir = tmp_path / "out"

    main([str(xml_file), str(out_dir), "--newline", "crlf"])

    content = (out_dir / "global.md").read_bytes()
    assert content.startswith(b"# Sample\r\n\r\n---\r\n")


def test_main_dry_run(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify dry runs write nothing."""
    xml_file = tmp_path / "Sample.xml"
    xml_file.write_text(SAMPLE_XML, encoding="utf-8")
    out_dir = tmp_path / "out"

    assert main([str(xml_file), str(out_dir), "--dry-run"]) == 0
    assert not out_dir.exists()
    assert "2 namespaces rendered" in capsys.readouterr().out


def test_main_missing_file(tmp_path: Path) -> None:
    """Verify a missing input file exits with a message."""
    with pytest.raises(SystemExit, match="not found"):
        main([str(tmp_path / "absent.xml"), str(tmp_path / "out")])


def test_main_malformed_xml(tmp_path: Path) -> None:
    """Verify malformed XML exits with a message."""
    xml_file = tmp_path / "broken.xml"
    xml_file.write_text("<doc><members>", encoding="utf-8")
    with pytest.raises(SystemExit, match="Could not parse"):
        main([str(xml_file), str(tmp_path / "out")])


def test_main_strict(tmp_path: Path) -> None:
    """Verify --strict surfaces undecodable identifiers."""
    xml_file = tmp_path / "bad.xml"
    xml_file.write_text(
        '<doc><members><member name="bogus"/></members></doc>', encoding="utf-8"
    )
    with pytest.raises(SystemExit, match="Invalid member identifier .bogus."):
        main([str(xml_file), str(tmp_path / "out"), "--strict"])
