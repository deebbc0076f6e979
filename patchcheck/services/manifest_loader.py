# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Package manifest loading.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..errors import ManifestNotFound, ManifestParseError
from ..structures.schemas import PackageManifest

logger = logging.getLogger(__name__)


def load_manifest(path: Union[str, Path]) -> PackageManifest:
    """
    Read and parse a package manifest.

    Raises:
        ManifestNotFound: If `path` is not an existing file
        ManifestParseError: If the content is not a JSON object, or if
            `patchedDependencies` is not a mapping of strings to strings
    """
    path = Path(path)
    if not path.is_file():
        raise ManifestNotFound(path)

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestParseError(path, str(e)) from e

    if not isinstance(payload, dict):
        raise ManifestParseError(path, f"expected a JSON object, got {type(payload).__name__}")

    try:
        manifest = PackageManifest.model_validate(payload)
    except ValidationError as e:
        raise ManifestParseError(path, str(e)) from e

    logger.debug(f"Loaded manifest {path} ({len(manifest.patched_dependencies)} patched dependencies)")
    return manifest
