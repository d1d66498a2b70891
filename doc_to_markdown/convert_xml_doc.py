"""Convert compiler-generated XML documentation to per-namespace Markdown.

Member identifiers such as ``M:Foo.Bar.Baz(System.Int32)`` are decoded into
kind, namespace and display name, members are regrouped by namespace, and one
Markdown file is written per namespace.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from doc_to_markdown.load_config import NEWLINES
from doc_to_markdown.run_conversion import run_conversion

if TYPE_CHECKING:
    from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="Convert XML documentation comments to per-namespace Markdown.",
    )
    ap.add_argument(
        "xml_file",
        type=Path,
        help="XML documentation file generated by the compiler",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the namespace Markdown files",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Fail on undecodable member identifiers instead of skipping them",
    )
    ap.add_argument(
        "--newline",
        choices=sorted(NEWLINES),
        help="Line separator for generated Markdown (default: from config)",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Render all namespaces without writing files",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
