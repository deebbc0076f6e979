# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Base class for build backends.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Mapping, Tuple


class BuildBackend(ABC):
    """
    Abstract base class for build backends.

    A backend owns everything past patch resolution: converting resolved
    patch paths into its own override representation, fetching dependencies
    with those overrides applied, and running the build script.
    """

    lockfile_name: str = ""
    """File name of the backend's lockfile, looked up beside the manifest."""

    lockfile_names: Tuple[str, ...] = ()
    """Accepted lockfile names, in lookup order. Empty means `lockfile_name` only."""

    default_script: str = ""
    """Script run when none is configured."""

    def find_lockfile(self, base_dir: Path) -> Path:
        """
        Return the first existing lockfile in `base_dir`.

        Falls back to `base_dir / lockfile_name` when none exists, leaving
        the "not found" error to `fetch_dependencies`.
        """
        for name in self.lockfile_names or (self.lockfile_name,):
            candidate = base_dir / name
            if candidate.is_file():
                return candidate
        return base_dir / self.lockfile_name

    @abstractmethod
    def get_backend_name(self) -> str:
        """Return the name of this backend."""
        pass

    @abstractmethod
    def patched_dependencies_to_overrides(self, resolved: Mapping[str, Path]) -> Any:
        """
        Convert resolved patch paths into the backend's override set.

        Args:
            resolved: Dependency name -> absolute patch path

        Returns:
            An override set understood by `fetch_dependencies`. Must be
            empty when `resolved` is empty.
        """
        pass

    @abstractmethod
    def fetch_dependencies(self, work_dir: Path, lock_path: Path, overrides: Any) -> None:
        """
        Fetch dependencies into `work_dir`, applying `overrides`.

        Raises:
            DependencyFetchError: If fetching or patching fails
        """
        pass

    @abstractmethod
    def run_script(self, work_dir: Path, script: str) -> None:
        """
        Run the build script inside `work_dir`.

        Raises:
            BuildScriptError: If the script exits unsuccessfully
        """
        pass
