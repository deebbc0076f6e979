# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Tests for the success marker.
"""

import pytest

from patchcheck.services.orchestrator import BuildResult, BuildState
from patchcheck.services.recorder import record_success


def test_writes_fixed_message(tmp_path):
    result = BuildResult(succeeded=True, state=BuildState.SUCCEEDED, backend="fake", script="index.ts")

    out = record_success(result, tmp_path / "result")

    assert out == tmp_path / "result"
    assert out.read_text(encoding="utf-8") == "Patch test passed!\n"


def test_creates_parent_directories(tmp_path):
    result = BuildResult(succeeded=True, state=BuildState.SUCCEEDED, backend="fake", script="index.ts")

    out = record_success(result, tmp_path / "out" / "nested" / "result")
    assert out.is_file()


def test_refuses_failed_build(tmp_path):
    result = BuildResult(succeeded=False, state=BuildState.FAILED, backend="fake", script="index.ts")

    with pytest.raises(ValueError):
        record_success(result, tmp_path / "result")
    assert not (tmp_path / "result").exists()
