"""Target directory resolution for copied logos.

The directory is resolved once per run, in this order: an explicit
override, a ``brandcn.outputDir`` entry in package.json, then a default
based on whether the project has a ``src/`` folder.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from brandcn.config.constants import (
    DEFAULT_SRC_TARGET_DIR,
    DEFAULT_TARGET_DIR,
    PACKAGE_JSON_KEY,
    WORKSPACE_ROOTS,
)
from brandcn.config.logging import get_logger
from brandcn.utils.file_utils import write_json_atomically

logger = get_logger(__name__)

PACKAGE_JSON = "package.json"


def get_default_directory_path(cwd: Path | None = None) -> str:
    """Relative default target: ``src/components/logos`` when ``src/`` exists."""
    cwd = cwd or Path.cwd()
    try:
        if (cwd / "src").is_dir():
            return DEFAULT_SRC_TARGET_DIR
    except OSError:
        pass
    return DEFAULT_TARGET_DIR


def find_nearest_package_json(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` and return the first package.json found."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PACKAGE_JSON
        if candidate.is_file():
            return candidate
    return None


def _load_package_json(pkg_path: Path) -> dict | None:
    try:
        data = json.loads(pkg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("Could not read %s: %s", pkg_path, e)
        return None
    return data if isinstance(data, dict) else None


def read_output_dir(pkg_path: Path) -> Path | None:
    """Return the absolute ``brandcn.outputDir`` configured in ``pkg_path``."""
    data = _load_package_json(pkg_path)
    if data is None:
        return None
    section = data.get(PACKAGE_JSON_KEY)
    if not isinstance(section, dict):
        return None
    output = section.get("outputDir")
    if isinstance(output, str) and output.strip():
        return (pkg_path.parent / output.strip()).resolve()
    return None


def _workspace_package_jsons(cwd: Path) -> list[Path]:
    found = []
    for root in WORKSPACE_ROOTS:
        root_path = cwd / root
        if not root_path.is_dir():
            continue
        for entry in sorted(root_path.iterdir()):
            pkg = entry / PACKAGE_JSON
            if pkg.is_file():
                found.append(pkg)
    return found


def get_configured_output_dir(cwd: Path | None = None) -> Path | None:
    """Find a configured output directory for the project at ``cwd``.

    The nearest package.json wins. Otherwise, in a monorepo, a single
    ``apps/*`` or ``packages/*`` package carrying the setting is used;
    several candidates are ambiguous and ignored.
    """
    cwd = cwd or Path.cwd()
    nearest = find_nearest_package_json(cwd)
    if nearest is not None:
        configured = read_output_dir(nearest)
        if configured is not None:
            return configured

    candidates = [d for d in map(read_output_dir, _workspace_package_jsons(cwd)) if d]
    if len(candidates) == 1:
        return candidates[0]
    if len(candidates) > 1:
        logger.debug("Ignoring %d workspace outputDir settings (ambiguous)", len(candidates))
    return None


def resolve_target_dir(override: str | Path | None = None, cwd: Path | None = None) -> Path:
    """Absolute directory logos are copied into for this run."""
    cwd = cwd or Path.cwd()
    if override is not None and str(override).strip():
        return (cwd / str(override).strip()).resolve()
    configured = get_configured_output_dir(cwd)
    if configured is not None:
        return configured
    return (cwd / get_default_directory_path(cwd)).resolve()


def normalize_directory(directory: str | None) -> str:
    """Trimmed user input, falling back to the default directory when blank."""
    value = (directory or "").strip()
    return value or DEFAULT_TARGET_DIR


def persist_output_dir(directory: str, cwd: Path | None = None) -> Path | None:
    """Store ``directory`` as ``brandcn.outputDir`` in the nearest package.json.

    The package.json closest to the target directory is preferred, then the
    one closest to ``cwd``. Other keys are preserved. Failures are logged
    and reported as ``None``; the run continues with the in-memory value.

    Returns:
        The package.json that was updated, or None.
    """
    cwd = cwd or Path.cwd()
    normalized = normalize_directory(directory)
    target = (cwd / normalized).resolve()
    pkg_path = find_nearest_package_json(target.parent) or find_nearest_package_json(cwd)
    if pkg_path is None:
        logger.debug("No package.json found; outputDir not persisted")
        return None

    # Stored relative to the package.json so read_output_dir resolves it back
    relative = Path(os.path.relpath(target, pkg_path.parent)).as_posix()
    data = _load_package_json(pkg_path)
    if data is None:
        logger.warning("Not saving outputDir: %s is not a readable JSON object", pkg_path)
        return None
    section = data.get(PACKAGE_JSON_KEY)
    section = dict(section) if isinstance(section, dict) else {}
    section["outputDir"] = relative
    data[PACKAGE_JSON_KEY] = section
    try:
        write_json_atomically(pkg_path, data)
    except OSError as e:
        logger.warning("Could not save outputDir to %s: %s", pkg_path, e)
        return None
    logger.info("Saved outputDir %s to %s", relative, pkg_path)
    return pkg_path
