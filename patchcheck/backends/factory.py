# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Factory for creating build backend instances.
"""

import logging
import os
from typing import Optional

from .base import BuildBackend
from .node import BunBackend, NpmBackend

logger = logging.getLogger(__name__)

# Global backend instance
_backend_instance: Optional[BuildBackend] = None


def get_backend(name: Optional[str] = None) -> BuildBackend:
    """
    Get or create the global build backend instance.

    The backend is selected by `name`, or by the PATCHCHECK_BACKEND
    environment variable when no name is given:
    - "bun" (default): bun install / bun run
    - "npm": npm ci / npm run

    Returns:
        BuildBackend instance
    """
    global _backend_instance

    backend_type = (name or os.getenv("PATCHCHECK_BACKEND", "bun")).lower().strip()

    if _backend_instance is not None:
        if _backend_instance.get_backend_name() == backend_type:
            return _backend_instance
        logger.info(
            f"Switching build backend: {_backend_instance.get_backend_name()} -> {backend_type}"
        )
        _backend_instance = None

    logger.info(f"Initializing build backend: {backend_type}")

    if backend_type == "bun":
        _backend_instance = BunBackend()
    elif backend_type == "npm":
        _backend_instance = NpmBackend()
    else:
        logger.error(f"Unknown backend type: {backend_type}")
        raise ValueError(
            f"Unknown PATCHCHECK_BACKEND: {backend_type}. "
            f"Supported values: 'bun', 'npm'"
        )

    return _backend_instance


def reset_backend() -> None:
    """Reset the global backend instance (useful for testing)."""
    global _backend_instance
    _backend_instance = None
