# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Configuration module for the patch verification harness.

All options are read from the environment once, at import time. Command line
flags take precedence over the values defined here.
"""

import os

# ============================================================================
# Backend Selection
# ============================================================================

PATCHCHECK_BACKEND = os.getenv("PATCHCHECK_BACKEND", "bun")
"""
Build backend used to fetch dependencies and run the build script.
Options: 'bun', 'npm'
- 'bun': bun install --frozen-lockfile, then bun run <script> (default)
- 'npm': npm ci, then npm run <script>
"""

# ============================================================================
# Inputs
# ============================================================================

PATCHCHECK_MANIFEST = os.getenv("PATCHCHECK_MANIFEST", "package.json")
"""
Path to the package manifest declaring `patchedDependencies`.
Patch paths are resolved relative to the directory containing this file.
"""

PATCHCHECK_LOCKFILE = os.getenv("PATCHCHECK_LOCKFILE") or None
"""
Path to the dependency lockfile.
When unset, the backend's lockfile name is looked up beside the manifest
(bun.lock for 'bun', package-lock.json for 'npm').
"""

PATCHCHECK_BUILD_SCRIPT = os.getenv("PATCHCHECK_BUILD_SCRIPT") or None
"""
Script executed after dependencies are fetched.
When unset, the backend default is used ('index.ts' for bun, 'build' for npm).
"""

# ============================================================================
# Output
# ============================================================================

PATCHCHECK_OUT = os.getenv("PATCHCHECK_OUT", "result")
"""
Location of the success marker written when the build passes.
"""

SUCCESS_MESSAGE = "Patch test passed!"
"""
Fixed content of the success marker (a trailing newline is added on write).
"""

# ============================================================================
# Patch Handling
# ============================================================================

PATCHCHECK_STRICT_PATHS = os.getenv("PATCHCHECK_STRICT_PATHS", "false").lower() == "true"
"""
Reject empty, absolute, escaping or missing patch paths while resolving,
instead of leaving that to the backend.
"""

PATCHCHECK_PATCH_STRIP = int(os.getenv("PATCHCHECK_PATCH_STRIP", "1"))
"""
Number of leading path components stripped by `patch -p`.
Patches produced by `bun patch` and `patch-package` use a/ and b/ prefixes,
so the default is 1.
"""

# ============================================================================
# Logging
# ============================================================================

PATCHCHECK_LOG_LEVEL = os.getenv("PATCHCHECK_LOG_LEVEL", "INFO").upper()
"""
Root log level. Subprocess output is logged at DEBUG.
"""
