# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Resolution of declared patch paths against the manifest directory.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Union

from ..errors import PatchPathResolutionError
from ..structures.schemas import PackageManifest

logger = logging.getLogger(__name__)


def _check_path(name: str, relative_path: str, base_dir: Path, resolved: Path) -> None:
    if not relative_path.strip():
        raise PatchPathResolutionError(name, relative_path, "path is empty")
    if Path(relative_path).is_absolute():
        raise PatchPathResolutionError(name, relative_path, "path must be relative to the manifest")
    base = Path(os.path.normpath(base_dir))
    if base not in Path(os.path.normpath(resolved)).parents:
        raise PatchPathResolutionError(name, relative_path, f"path escapes {base_dir}")
    if not resolved.is_file():
        raise PatchPathResolutionError(name, relative_path, f"{resolved} does not exist")


def resolve_patched_dependencies(
    manifest: PackageManifest,
    base_dir: Union[str, Path],
    strict: bool = False,
) -> Dict[str, Path]:
    """
    Resolve every declared patch path against `base_dir`.

    Each value is `base_dir / relative_path`, without normalisation. A
    manifest with no patches yields an empty mapping.

    Args:
        manifest: The loaded package manifest
        base_dir: Directory containing the manifest
        strict: Also reject empty, absolute, escaping and missing paths.
            Off by default; the backend reports missing patches when it
            applies them.

    Returns:
        Dependency name -> patch path

    Raises:
        PatchPathResolutionError: Only in strict mode
    """
    base_dir = Path(base_dir)
    resolved: Dict[str, Path] = {}
    for name, relative_path in manifest.patched_dependencies.items():
        path = base_dir / relative_path
        if strict:
            _check_path(name, relative_path, base_dir, path)
        resolved[name] = path
        logger.info(f"Patch for {name}: {path}")

    if not resolved:
        logger.info("No patched dependencies declared")
    return resolved
