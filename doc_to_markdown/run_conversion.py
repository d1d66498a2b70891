"""Orchestration logic for converting XML documentation to Markdown."""

import argparse
import logging
import xml.etree.ElementTree as ET

from doc_to_markdown.build_link_targets import build_link_targets
from doc_to_markdown.build_renderer_pool import build_renderer_pool
from doc_to_markdown.correct_document import correct_document
from doc_to_markdown.errors import InvalidIdentifierError
from doc_to_markdown.load_config import load_config, newline_for
from doc_to_markdown.load_doc_tree import load_doc_tree
from doc_to_markdown.output_file_for_namespace import (
    namespace_file_name,
    output_file_for_namespace,
)
from doc_to_markdown.render_namespace_documents import render_namespace_documents

logger = logging.getLogger(__name__)


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline."""
    if not args.xml_file.is_file():
        msg = f"XML documentation file not found: {args.xml_file}"
        raise SystemExit(msg)

    config = load_config(args.config)
    if args.strict:
        config["correction"]["strict_identifiers"] = True
    if args.newline:
        config["rendering"]["newline"] = args.newline

    try:
        tree = load_doc_tree(args.xml_file)
    except ET.ParseError as e:
        msg = f"Could not parse {args.xml_file}: {e}"
        raise SystemExit(msg) from e

    try:
        documents = correct_document(
            tree, strict=config["correction"]["strict_identifiers"]
        )
    except InvalidIdentifierError as e:
        msg = f"Could not convert {args.xml_file}: {e}"
        raise SystemExit(msg) from e

    pool = build_renderer_pool(
        newline_for(config),
        link_targets=build_link_targets(tree),
        namespace_page=lambda ns: namespace_file_name(ns, config),
    )
    markdown = render_namespace_documents(documents, pool)

    if args.dry_run:
        print(f"Dry run: {len(markdown)} namespaces rendered, nothing written.")
        return 0

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)

    for namespace, md in markdown.items():
        out_file = output_file_for_namespace(out_root, namespace, config)
        # newline="" keeps the configured separator as-is on every platform
        with out_file.open("w", encoding="utf-8", newline="") as f:
            f.write(md)
        logger.debug("Wrote %s", out_file)

    print(f"Generated {len(markdown)} Markdown pages into: {out_root}")
    return 0
