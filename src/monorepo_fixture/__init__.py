# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Throwaway git-backed monorepo fixtures.

Builds temporary workspaces (root package.json, workspace packages, a fake
yarn.lock and a fake orchestrator bin shim) so a build orchestrator can be
driven from integration tests without a real package manager.
"""

from monorepo_fixture.config import Settings, load_settings
from monorepo_fixture.errors import MonorepoFixtureError
from monorepo_fixture.monorepo import Monorepo

__all__: list[str] = [
    "Monorepo",
    "MonorepoFixtureError",
    "Settings",
    "load_settings",
]
