# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Build orchestration: fetch dependencies with overrides, then run the build.
"""

import logging
import shutil
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from ..backends.base import BuildBackend

logger = logging.getLogger(__name__)

# Never copied into the isolated working tree
IGNORED_SOURCE_ENTRIES = ("node_modules", ".git", ".hg", ".svn")


class BuildState(str, Enum):
    NOT_STARTED = "not_started"
    FETCHING_DEPENDENCIES = "fetching_dependencies"
    BUILDING = "building"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class BuildResult:
    succeeded: bool
    state: BuildState
    backend: str
    script: str


class BuildOrchestrator:
    """
    Runs one build of a package with patch overrides applied.

    The package directory (the manifest's parent) is copied into a fresh
    temporary working tree, the backend fetches dependencies there with the
    overrides applied, and then runs the build script. Any failure moves the
    orchestrator to FAILED and is re-raised unchanged; there are no retries.
    """

    def __init__(
        self,
        backend: BuildBackend,
        manifest_path: Union[str, Path],
        lock_path: Union[str, Path],
        overrides: Any,
        build_script: Optional[str] = None,
    ):
        self.backend = backend
        self.manifest_path = Path(manifest_path)
        self.lock_path = Path(lock_path)
        self.overrides = overrides
        self.build_script = build_script or backend.default_script
        self.state = BuildState.NOT_STARTED

    def _transition(self, state: BuildState) -> None:
        logger.info(f"Build state: {self.state.value} -> {state.value}")
        self.state = state

    def _prepare_work_tree(self, root: Path) -> Path:
        work_dir = root / "src"
        shutil.copytree(
            self.manifest_path.parent,
            work_dir,
            ignore=shutil.ignore_patterns(*IGNORED_SOURCE_ENTRIES),
        )
        return work_dir

    def run(self) -> BuildResult:
        """
        Fetch dependencies, then build.

        Returns:
            BuildResult in the SUCCEEDED state

        Raises:
            RuntimeError: If this orchestrator has already run
            DependencyFetchError, BuildScriptError: From the backend, unchanged
        """
        if self.state is not BuildState.NOT_STARTED:
            raise RuntimeError(f"Build already ran (state: {self.state.value})")

        try:
            with tempfile.TemporaryDirectory(prefix="patchcheck-") as tmp:
                work_dir = self._prepare_work_tree(Path(tmp))

                self._transition(BuildState.FETCHING_DEPENDENCIES)
                self.backend.fetch_dependencies(work_dir, self.lock_path, self.overrides)

                self._transition(BuildState.BUILDING)
                self.backend.run_script(work_dir, self.build_script)
        except Exception:
            self._transition(BuildState.FAILED)
            raise

        self._transition(BuildState.SUCCEEDED)
        return BuildResult(
            succeeded=True,
            state=self.state,
            backend=self.backend.get_backend_name(),
            script=self.build_script,
        )
