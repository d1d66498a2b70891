"""Logic for mapping namespaces to output files."""

from pathlib import Path
from typing import Any

from doc_to_markdown.load_config import DEFAULT_CONFIG


def namespace_file_name(namespace: str, config: dict[str, Any] | None = None) -> str:
    """File name of a namespace page (global namespace -> global.md)."""
    output = (config or DEFAULT_CONFIG)["output"]
    stem = namespace or output["global_namespace_file"]
    return f"{stem}{output['extension']}"


def output_file_for_namespace(
    out_root: Path,
    namespace: str,
    config: dict[str, Any],
) -> Path:
    """Determine the Markdown file for a namespace and create its directory."""
    p = out_root / namespace_file_name(namespace, config)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
