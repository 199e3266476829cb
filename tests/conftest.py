# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

import os

import pytest

from monorepo_fixture.config import Settings
from monorepo_fixture.pytest_plugin import monorepo_factory  # noqa: F401


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Host git config (signing, hook paths, default branch) must not leak in.
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("MONOREPO_FIXTURE_TMPDIR", str(tmp_path / "fixtures"))
    monkeypatch.setenv("MONOREPO_FIXTURE_TOOL_ROOT", str(tmp_path / "tool"))
    (tmp_path / "tool").mkdir()


@pytest.fixture
def settings(tmp_path):
    return Settings(tmpdir=tmp_path / "fixtures", tool_root=tmp_path / "tool")
