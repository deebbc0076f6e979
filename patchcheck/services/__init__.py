# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Pipeline stages, in execution order.
"""

from .manifest_loader import load_manifest
from .patch_resolver import resolve_patched_dependencies
from .overrides import build_overrides
from .orchestrator import BuildOrchestrator, BuildResult, BuildState
from .recorder import record_success

__all__ = [
    "load_manifest",
    "resolve_patched_dependencies",
    "build_overrides",
    "BuildOrchestrator",
    "BuildResult",
    "BuildState",
    "record_success",
]
