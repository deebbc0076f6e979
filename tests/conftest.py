# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures: a throwaway package directory and a fake build backend.
"""

import json
from pathlib import Path

import pytest

from patchcheck.backends.base import BuildBackend
from patchcheck.backends.factory import reset_backend


class FakeBackend(BuildBackend):
    """Records every call instead of running a package manager."""

    lockfile_name = "fake.lock"
    default_script = "index.ts"

    def __init__(self):
        self.calls = []
        self.fetch_error = None
        self.script_error = None
        self.work_dir_entries = None

    def get_backend_name(self):
        return "fake"

    def patched_dependencies_to_overrides(self, resolved):
        self.calls.append(("convert", dict(resolved)))
        return {name: str(path) for name, path in resolved.items()}

    def fetch_dependencies(self, work_dir, lock_path, overrides):
        self.calls.append(("fetch", work_dir, lock_path, overrides))
        self.work_dir_entries = sorted(p.name for p in work_dir.iterdir())
        if self.fetch_error is not None:
            raise self.fetch_error

    def run_script(self, work_dir, script):
        self.calls.append(("run", work_dir, script))
        if self.script_error is not None:
            raise self.script_error

    def call_names(self):
        return [call[0] for call in self.calls]


def write_manifest(directory: Path, payload) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "package.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def package_dir(tmp_path):
    """A package declaring one patch for left-pad, with a lockfile and stray node_modules."""
    pkg = tmp_path / "pkg"
    write_manifest(
        pkg,
        {
            "name": "patched-deps",
            "dependencies": {"left-pad": "1.3.0"},
            "patchedDependencies": {"left-pad": "patches/left-pad.patch"},
        },
    )
    (pkg / "patches").mkdir()
    (pkg / "patches" / "left-pad.patch").write_text("--- a/index.js\n+++ b/index.js\n", encoding="utf-8")
    (pkg / "fake.lock").write_text("{}", encoding="utf-8")
    (pkg / "index.ts").write_text("console.log('ok')\n", encoding="utf-8")
    (pkg / "node_modules" / "left-pad").mkdir(parents=True)
    return pkg


@pytest.fixture(autouse=True)
def reset_backend_after_test():
    """Reset backend after each test."""
    yield
    reset_backend()
