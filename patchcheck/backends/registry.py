# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
npm registry helpers.
"""

from typing import Optional, Tuple

from ..errors import DependencyFetchError

DEFAULT_REGISTRY = "https://registry.npmjs.org/"


def npm_tarball_url(ident: str, registry: Optional[str] = None) -> str:
    """
    Build the tarball URL for an npm package identifier.

    Args:
        ident: Package identifier, e.g. "lodash@4.17.21" or "@types/node@20.1.0"
        registry: Optional registry. Empty or None selects the public npm
            registry; a full tarball URL (ending in .tgz) is returned as is;
            anything else is treated as a base URL.

    Returns:
        The tarball URL, e.g.
        "https://registry.npmjs.org/@types/node/-/node-20.1.0.tgz"

    Raises:
        DependencyFetchError: If the identifier carries no version
    """
    if registry and registry.endswith(".tgz"):
        return registry

    if registry:
        base_url = registry if registry.endswith("/") else f"{registry}/"
    else:
        base_url = DEFAULT_REGISTRY

    scope, sep, name_and_version = ident.partition("/")
    if not sep:
        name, at, version = ident.partition("@")
        if not at:
            raise DependencyFetchError(f"No '@' in package identifier: {ident}")
        return f"{base_url}{name}/-/{name}-{version}.tgz"

    name, at, version = name_and_version.partition("@")
    if not at:
        raise DependencyFetchError(f"No '@' in package identifier: {ident}")
    return f"{base_url}{scope}/{name}/-/{name}-{version}.tgz"


def split_package_key(key: str) -> Tuple[str, Optional[str]]:
    """
    Split a `patchedDependencies` key into package name and version.

    `bun patch` writes keys as "name@version"; plain names are accepted too.

        >>> split_package_key("@scope/util@2.0.0")
        ('@scope/util', '2.0.0')
        >>> split_package_key("left-pad")
        ('left-pad', None)
    """
    name, at, version = key.rpartition("@")
    if not at or not name:
        # No '@', or only the leading '@' of a scoped name
        return key, None
    return name, version or None
