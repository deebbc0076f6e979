# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Data structures shared across the pipeline.
"""

from .schemas import PackageManifest

__all__ = ["PackageManifest"]
