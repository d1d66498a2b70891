"""Tests for cross-reference resolution and see links."""

import xml.etree.ElementTree as ET

from doc_to_markdown.build_link_targets import build_link_targets
from doc_to_markdown.build_renderer_pool import build_renderer_pool
from doc_to_markdown.correct_document import correct_document
from doc_to_markdown.link_target import LinkTarget
from doc_to_markdown.render_namespace_documents import render_namespace_documents

LINKS_XML = """
<doc>
  <members>
    <member name="T:A.Dict`2">
      <typeparam name="K"/>
      <typeparam name="V"/>
      <summary>
        Uses <see cref="T:System.String"/>, <see cref="T:A.Dict`2"/>
        and <see cref="T:B.Other"/>.
      </summary>
    </member>
    <member name="M:A.Helper.Run(System.Int32)">
      <summary>See <see cref="M:A.Helper.Run(System.Int32)">itself</see>.</summary>
    </member>
    <member name="T:B.Other">
      <seealso cref="T:A.Dict`2"/>
    </member>
    <member name="N:A.Ns"/>
  </members>
</doc>
"""


def _render_links() -> dict[str, str]:
    root = ET.fromstring(LINKS_XML)
    pool = build_renderer_pool("\n", link_targets=build_link_targets(root))
    return render_namespace_documents(correct_document(root), pool)


def test_build_link_targets() -> None:
    """Verify targets use corrected crefs as keys and heading anchors as values."""
    targets = build_link_targets(ET.fromstring(LINKS_XML))
    assert targets["T:A.Dict"] == LinkTarget("Dict", "A", "a.dict|k, v|")
    assert targets["T:B.Other"] == LinkTarget("Other", "B", "b.other")
    assert targets["M:A.Helper.Run(System.Int32)"] == LinkTarget("Run", "A", "a.run")
    assert "N:A.Ns" not in targets


def test_build_link_targets_ambiguous() -> None:
    """Verify crefs that collapse onto different headings are not linked."""
    xml = """
    <doc><members>
      <member name="M:A.Box`1.Add(`0)"/>
      <member name="M:A.Box`1.Remove(`0)"/>
      <member name="M:A.Plain.Run(System.Int32)"/>
      <member name="M:A.Plain.Run(System.String)"/>
    </members></doc>
    """
    targets = build_link_targets(ET.fromstring(xml))
    assert targets["M:A.Box"] is None
    assert targets["M:A.Plain.Run(System.String)"] == LinkTarget("Run", "A", "a.run")


def test_see_external_type_is_code() -> None:
    """Verify references without a rendered heading fall back to code."""
    assert "Uses `String`," in _render_links()["A"]


def test_see_generic_type_uses_heading_anchor() -> None:
    """Verify generic links point at the pipe-marked heading anchor."""
    markdown = _render_links()["A"]
    assert '<a name="a.dict|k, v|"></a>Dict|K, V|' in markdown
    assert "[Dict](<#a.dict|k, v|>)" in markdown


def test_see_other_namespace_links_to_its_page() -> None:
    """Verify targets in other namespaces are prefixed with their page."""
    markdown = _render_links()
    assert "and [Other](B.md#b.other)." in markdown["A"]
    assert "See also: [Dict](<A.md#a.dict|k, v|>)\n" in markdown["B"]


def test_see_same_namespace_with_text() -> None:
    """Verify link text from the see element wins over the target title."""
    assert "See [itself](#a.run)." in _render_links()["A"]


def test_resolve_link_namespace_binding() -> None:
    """Verify binding a namespace leaves the original pool unbound."""
    targets = {"T:A.B": LinkTarget("B", "A", "a.b")}
    pool = build_renderer_pool(
        "\n", link_targets=targets, namespace_page=lambda ns: f"api/{ns}.md"
    )
    bound = pool.with_namespace("A")
    assert bound.resolve_link("T:A.B") == (targets["T:A.B"], "#a.b")
    assert pool.namespace is None
    assert pool.resolve_link("T:A.B") == (targets["T:A.B"], "api/A.md#a.b")
    assert pool.resolve_link("T:Missing") is None
