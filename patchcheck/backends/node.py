# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Node.js package manager backends.

Dependencies are installed with the package manager's frozen-lockfile
command, then every declared patch is applied to the installed copy under
node_modules/ with the `patch` tool before the build script runs.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Tuple

from ..config import PATCHCHECK_PATCH_STRIP
from ..errors import BuildScriptError, DependencyFetchError
from .base import BuildBackend
from .registry import split_package_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatchOverride:
    """Patches to apply to one installed dependency, in order."""

    name: str
    patches: Tuple[Path, ...]


def _run(command: List[str], cwd: Path) -> subprocess.CompletedProcess:
    logger.debug(f"Running {' '.join(command)} in {cwd}")
    result = subprocess.run(
        command,
        cwd=cwd,
        stdin=subprocess.DEVNULL,
        capture_output=True,
        text=True,
    )
    if result.stdout:
        logger.debug(result.stdout.rstrip())
    if result.stderr:
        logger.debug(result.stderr.rstrip())
    return result


def apply_patch(patch_file: Path, package_dir: Path, strip: int = 1) -> bool:
    """
    Apply a unified diff to an installed package.

    Returns True if the patch was applied now, False if it was already
    applied (for example by the package manager itself during install).

    Raises:
        DependencyFetchError: If the patch does not apply cleanly
    """
    base = ["patch", f"-p{strip}", "--force", "-i", str(patch_file)]

    try:
        # Already applied if the reverse dry-run succeeds
        result = _run([*base, "--reverse", "--dry-run"], package_dir)
    except FileNotFoundError as e:
        raise DependencyFetchError(f"'patch' executable not found: {e}") from e
    if result.returncode == 0:
        logger.info(f"  OK    {patch_file.name}: already applied")
        return False

    result = _run([*base, "--dry-run"], package_dir)
    if result.returncode != 0:
        raise DependencyFetchError(
            f"Patch {patch_file} does not apply cleanly to {package_dir}:\n"
            f"{(result.stdout + result.stderr).strip()}"
        )

    result = _run([*base, "--no-backup-if-mismatch"], package_dir)
    if result.returncode != 0:
        raise DependencyFetchError(
            f"Applying {patch_file} to {package_dir} failed:\n{result.stderr.strip()}"
        )
    logger.info(f"  DONE  {patch_file.name}: applied successfully")
    return True


class NodeBackend(BuildBackend):
    """Shared implementation for package managers installing into node_modules/."""

    install_command: Tuple[str, ...] = ()
    run_command: Tuple[str, ...] = ()

    def __init__(self, patch_strip: int = PATCHCHECK_PATCH_STRIP):
        self.patch_strip = patch_strip

    def patched_dependencies_to_overrides(
        self, resolved: Mapping[str, Path]
    ) -> Dict[str, PatchOverride]:
        return {
            name: PatchOverride(name=name, patches=(Path(path),))
            for name, path in resolved.items()
        }

    def fetch_dependencies(
        self, work_dir: Path, lock_path: Path, overrides: Mapping[str, PatchOverride]
    ) -> None:
        lock_path = Path(lock_path)
        if not lock_path.is_file():
            raise DependencyFetchError(f"Lockfile not found: {lock_path}")

        if lock_path.name in self.lockfile_names:
            target = work_dir / lock_path.name
        else:
            target = work_dir / self.lockfile_name
        if lock_path.resolve() != target.resolve():
            shutil.copyfile(lock_path, target)

        command = list(self.install_command)
        logger.info(f"Installing dependencies: {' '.join(command)}")
        try:
            result = _run(command, work_dir)
        except FileNotFoundError as e:
            raise DependencyFetchError(f"{command[0]} executable not found: {e}") from e
        if result.returncode != 0:
            raise DependencyFetchError(
                f"{' '.join(command)} failed with exit code {result.returncode}:\n"
                f"{result.stderr.strip()}"
            )

        for override in overrides.values():
            self._apply_override(work_dir, override)

    def _apply_override(self, work_dir: Path, override: PatchOverride) -> None:
        package_name, _ = split_package_key(override.name)
        package_dir = work_dir / "node_modules" / package_name
        if not package_dir.is_dir():
            raise DependencyFetchError(
                f"Patched dependency '{override.name}' is not installed in {work_dir / 'node_modules'}"
            )
        for patch_file in override.patches:
            if not patch_file.is_file():
                raise DependencyFetchError(
                    f"Patch file for '{override.name}' not found: {patch_file}"
                )
            apply_patch(patch_file, package_dir, strip=self.patch_strip)

    def run_script(self, work_dir: Path, script: str) -> None:
        command = [*self.run_command, script]
        logger.info(f"Running build script: {' '.join(command)}")
        try:
            result = _run(command, work_dir)
        except FileNotFoundError as e:
            raise BuildScriptError(script, 127, str(e)) from e
        if result.returncode != 0:
            raise BuildScriptError(script, result.returncode, result.stderr.strip())


class BunBackend(NodeBackend):
    """Bun backend: bun install --frozen-lockfile, then bun run <script>."""

    lockfile_name = "bun.lock"
    # bun.lockb is the binary lockfile of Bun releases before 1.2
    lockfile_names = ("bun.lock", "bun.lockb")
    default_script = "index.ts"
    install_command = ("bun", "install", "--frozen-lockfile")
    run_command = ("bun", "run")

    def get_backend_name(self) -> str:
        return "bun"


class NpmBackend(NodeBackend):
    """npm backend: npm ci, then npm run <script>."""

    lockfile_name = "package-lock.json"
    lockfile_names = ("package-lock.json",)
    default_script = "build"
    install_command = ("npm", "ci")
    run_command = ("npm", "run")

    def get_backend_name(self) -> str:
        return "npm"
