# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Build backend implementations.
"""

from .base import BuildBackend
from .factory import get_backend, reset_backend
from .node import BunBackend, NpmBackend, PatchOverride

__all__ = [
    "BuildBackend",
    "BunBackend",
    "NpmBackend",
    "PatchOverride",
    "get_backend",
    "reset_backend",
]
