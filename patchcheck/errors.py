# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Error kinds raised by the patch verification pipeline.

Every error is fatal: nothing is retried and the success marker is never
written once one of these has been raised.
"""

from pathlib import Path
from typing import Union


class PatchCheckError(Exception):
    """Base class for all pipeline failures."""


class ManifestNotFound(PatchCheckError):
    """The package manifest does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Manifest not found: {self.path}")


class ManifestParseError(PatchCheckError):
    """The package manifest is not valid structured data."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not parse manifest {self.path}: {reason}")


class PatchPathResolutionError(PatchCheckError):
    """A declared patch path was rejected during strict resolution."""

    def __init__(self, name: str, path: str, reason: str):
        self.name = name
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid patch path for '{name}' ({path!r}): {reason}")


class DependencyFetchError(PatchCheckError):
    """The backend failed to fetch dependencies or apply a patch."""


class BuildScriptError(PatchCheckError):
    """The build script exited unsuccessfully."""

    def __init__(self, script: str, returncode: int, output: str = ""):
        self.script = script
        self.returncode = returncode
        self.output = output
        message = f"Build script '{script}' failed with exit code {returncode}"
        if output:
            message = f"{message}\n{output}"
        super().__init__(message)
