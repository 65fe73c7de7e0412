"""Serialization utilities."""

import json
from typing import Any


def dump_pretty_json(document: Any) -> bytes:
    """Encode a document as pretty-printed UTF-8 JSON with sorted keys.

    Slashes are never escaped and non-ASCII characters are kept literal.
    """
    text = json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False)
    return (text + "\n").encode("utf-8")
