# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Render a yarn v1 lockfile for linked workspace packages.

The output only has to look like what ``yarn install`` leaves behind for a
workspace: one entry per package keyed on a caret range of its own version,
plus the dependency names it declares. Nothing is resolved.
"""

from __future__ import annotations

from typing import Dict, List, Mapping

from monorepo_fixture.errors import MonorepoFixtureError
from monorepo_fixture.templates import DEFAULT_VERSION

LOCKFILE_HEADER = (
    "# THIS IS AN AUTOGENERATED FILE. DO NOT EDIT THIS FILE DIRECTLY.\n"
    "# yarn lockfile v1\n"
)


def _checked_version(package: str, version: object) -> str:
    # Any non-empty string is accepted; semver ranges are never resolved here.
    if not isinstance(version, str) or not version.strip():
        raise MonorepoFixtureError(f"{package}: invalid version {version!r}")
    return version


def render_lockfile(manifests: Mapping[str, Mapping]) -> str:
    """Render lockfile text from ``{package_dir: package.json contents}``."""
    versions: Dict[str, str] = {}
    for pkg, manifest in manifests.items():
        versions[pkg] = _checked_version(pkg, manifest.get("version", DEFAULT_VERSION))

    chunks: List[str] = [LOCKFILE_HEADER]
    for pkg in sorted(manifests):
        version = versions[pkg]
        entry = [f'"{pkg}@^{version}":', f'  version "{version}"']
        deps = manifests[pkg].get("dependencies") or {}
        if deps:
            entry.append("  dependencies:")
            for dep in deps:
                entry.append(f'    "{dep}" "{versions.get(dep, DEFAULT_VERSION)}"')
        chunks.append("\n".join(entry) + "\n")
    return "\n".join(chunks)
