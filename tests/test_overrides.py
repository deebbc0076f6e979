# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Tests for override construction.
"""

from pathlib import Path

from patchcheck.backends.node import BunBackend, PatchOverride
from patchcheck.services.overrides import build_overrides


class TestBuildOverrides:
    """Tests for build_overrides."""

    def test_empty_resolved_set_gives_empty_overrides(self):
        assert build_overrides({}, BunBackend().patched_dependencies_to_overrides) == {}

    def test_converter_result_is_passed_through_unmodified(self):
        sentinel = object()

        assert build_overrides({"a": Path("/pkg/a.patch")}, lambda resolved: sentinel) is sentinel

    def test_converter_receives_resolved_paths(self):
        received = []
        resolved = {"left-pad": Path("/pkg/patches/left-pad.patch")}

        build_overrides(resolved, lambda r: received.append(r) or {})
        assert received == [resolved]

    def test_node_backend_override_shape(self):
        overrides = build_overrides(
            {"left-pad": Path("/pkg/patches/left-pad.patch")},
            BunBackend().patched_dependencies_to_overrides,
        )

        assert overrides == {
            "left-pad": PatchOverride(
                name="left-pad", patches=(Path("/pkg/patches/left-pad.patch"),)
            )
        }
