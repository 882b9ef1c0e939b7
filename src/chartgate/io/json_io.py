"""Atomic text and JSON writers."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from chartgate.types import JsonValue


def write_text_atomic(*, path: Path, content: str, temp_prefix: str, temp_suffix: str) -> None:
    """Write ``content`` to ``path`` via a temp file in the same directory and a rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(prefix=temp_prefix, suffix=temp_suffix, dir=path.parent)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


def write_json_atomic(*, path: Path, payload: JsonValue, temp_prefix: str, temp_suffix: str) -> None:
    """Serialize ``payload`` as indented JSON and write it atomically."""
    content = json.dumps(payload, indent=2, sort_keys=True) + "\n"
    write_text_atomic(path=path, content=content, temp_prefix=temp_prefix, temp_suffix=temp_suffix)
