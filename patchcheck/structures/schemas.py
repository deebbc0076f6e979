# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Pydantic models for the package manifest.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PackageManifest(BaseModel):
    """
    Parsed ``package.json``.

    Only the fields the harness reads are declared; every other key is kept
    as an extra attribute and never interpreted.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    name: Optional[str] = None
    version: Optional[str] = None
    # Only read by describe_patches; values are not validated
    dependencies: Dict[str, Any] = Field(default_factory=dict)
    patched_dependencies: Dict[str, str] = Field(
        default_factory=dict,
        alias="patchedDependencies",
        description="Dependency name -> patch file path relative to the manifest",
    )

    @field_validator("dependencies", "patched_dependencies", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        # `"patchedDependencies": null` means no patches
        if value is None:
            return {}
        return value
