"""Logic for loading and merging configuration files."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from doc_to_markdown.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "correction": {
        "strict_identifiers": False,
    },
    "rendering": {
        "newline": "platform",
    },
    "output": {
        "extension": ".md",
        "global_namespace_file": "global",
    },
}

NEWLINES: dict[str, str] = {
    "platform": os.linesep,
    "lf": "\n",
    "crlf": "\r\n",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config


def newline_for(config: dict[str, Any]) -> str:
    """Resolve the configured line separator."""
    setting = str(config["rendering"].get("newline", "platform")).lower()
    if setting not in NEWLINES:
        msg = (
            f"Unknown newline setting: {setting!r} "
            f"(expected one of {sorted(NEWLINES)})"
        )
        raise ValueError(msg)
    return NEWLINES[setting]
