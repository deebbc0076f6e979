# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
End-to-end patch verification pipeline.

    load manifest -> resolve patch paths -> build overrides -> build -> marker

Each stage runs exactly once, in order. Any error aborts the run before the
success marker is written.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .backends.base import BuildBackend
from .backends.registry import npm_tarball_url, split_package_key
from .errors import PatchCheckError
from .services.manifest_loader import load_manifest
from .services.orchestrator import BuildOrchestrator
from .services.overrides import OverrideConverter, build_overrides
from .services.patch_resolver import resolve_patched_dependencies
from .services.recorder import record_success

logger = logging.getLogger(__name__)

EXACT_VERSION = re.compile(r"^\d+\.\d+\.\d+(?:-[0-9A-Za-z.-]+)?$")


def run_patch_test(
    manifest_path: Union[str, Path],
    out_path: Union[str, Path],
    backend: BuildBackend,
    lock_path: Optional[Union[str, Path]] = None,
    build_script: Optional[str] = None,
    converter: Optional[OverrideConverter] = None,
    strict_paths: bool = False,
) -> Path:
    """
    Verify that the manifest's patched dependencies build.

    Args:
        manifest_path: Path to package.json
        out_path: Where the success marker is written
        backend: Backend that fetches dependencies and runs the build
        lock_path: Lockfile; defaults to the backend's lockfile beside the manifest
        build_script: Script to run; defaults to the backend's default script
        converter: Override converter; defaults to the backend's own
        strict_paths: Validate patch paths while resolving

    Returns:
        Path of the written success marker
    """
    manifest_path = Path(manifest_path).absolute()
    out_path = Path(out_path)
    base_dir = manifest_path.parent
    if lock_path is None:
        lock_path = backend.find_lockfile(base_dir)
    if converter is None:
        converter = backend.patched_dependencies_to_overrides

    if out_path.is_dir():
        raise PatchCheckError(f"Output location is a directory: {out_path}")
    if out_path.exists():
        logger.info(f"Removing stale success marker {out_path}")
        out_path.unlink()

    manifest = load_manifest(manifest_path)
    resolved = resolve_patched_dependencies(manifest, base_dir, strict=strict_paths)
    overrides = build_overrides(resolved, converter)

    orchestrator = BuildOrchestrator(
        backend=backend,
        manifest_path=manifest_path,
        lock_path=lock_path,
        overrides=overrides,
        build_script=build_script,
    )
    result = orchestrator.run()
    return record_success(result, out_path)


def describe_patches(
    manifest_path: Union[str, Path],
    backend: BuildBackend,
    converter: Optional[OverrideConverter] = None,
    strict_paths: bool = False,
) -> Dict[str, Any]:
    """
    Run the pipeline up to override construction and report what would be patched.

    Patches keyed "name@version", or whose dependency is pinned to an exact
    version in the manifest, also report the registry tarball the backend
    fetches them from.
    """
    manifest_path = Path(manifest_path).absolute()
    if converter is None:
        converter = backend.patched_dependencies_to_overrides

    manifest = load_manifest(manifest_path)
    resolved = resolve_patched_dependencies(manifest, manifest_path.parent, strict=strict_paths)
    overrides = build_overrides(resolved, converter)

    patches: Dict[str, Dict[str, Any]] = {}
    for name, path in sorted(resolved.items()):
        package_name, version = split_package_key(name)
        if version is None:
            version = manifest.dependencies.get(package_name)
        tarball = None
        if isinstance(version, str) and EXACT_VERSION.match(version):
            tarball = npm_tarball_url(f"{package_name}@{version}")
        patches[name] = {"patch": str(path), "exists": path.is_file(), "tarball": tarball}

    return {
        "manifest": str(manifest_path),
        "backend": backend.get_backend_name(),
        "overrides": len(overrides),
        "patches": patches,
    }
