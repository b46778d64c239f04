"""Safe file writes for project configuration files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def write_json_atomically(path: Path, data: Any, indent: int = 2) -> None:
    """Write ``data`` as JSON to ``path`` via a sibling temp file and os.replace.

    Readers never see a half-written file; the original is left untouched
    if serialization or the write fails. A trailing newline is added, as
    package managers do for package.json.
    """
    text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
    tmp = path.with_name(path.name + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            pass
        raise
