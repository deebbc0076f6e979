# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Conversion of resolved patches into backend overrides.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

OverrideConverter = Callable[[Mapping[str, Path]], Any]
"""Backend-supplied callable turning name -> patch path into an override set."""


def build_overrides(resolved: Mapping[str, Path], converter: OverrideConverter) -> Any:
    """
    Hand the resolved patches to the backend's converter.

    The returned override set is opaque here and is passed on to the
    backend unmodified.
    """
    overrides = converter(dict(resolved))
    logger.info(f"Built overrides for {len(resolved)} patched dependencies")
    return overrides
