# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
patchcheck - verify that declared dependency patches are wired into a build.
"""

__version__ = "0.1.0"
