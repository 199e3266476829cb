# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Fixture settings resolved from the environment and optional env files."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

DEFAULT_TOOL = "lage"
DEFAULT_BRANCH = "main"
DEFAULT_GIT_NAME = "Monorepo Fixture"
DEFAULT_GIT_EMAIL = "fixture@example.invalid"


@dataclass
class Settings:
    tmpdir: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))
    tool_name: str = DEFAULT_TOOL
    tool_root: Path = field(default_factory=Path.cwd)
    git_bin: str = "git"
    yarn_bin: str = "yarn"
    default_branch: str = DEFAULT_BRANCH
    git_user_name: str = DEFAULT_GIT_NAME
    git_user_email: str = DEFAULT_GIT_EMAIL

    @property
    def yarn_cache(self) -> Path:
        return self.tmpdir / "yarn-cache-"


def load_env(path: Path) -> Dict[str, str]:
    """Read ``KEY=value`` pairs, accepting ``export`` prefixes and quoted values."""
    if not path.exists():
        return {}
    env: Dict[str, str] = {}
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        env[key.strip()] = value
    return env


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[Path] = None,
) -> Settings:
    """Build settings from an env file overlaid by the process environment.

    Keys that are unset or empty fall back to the dataclass defaults.
    """
    values: Dict[str, str] = {}
    if env_file is not None:
        values.update(load_env(env_file))
    values.update(os.environ if environ is None else environ)

    def pick(key: str) -> Optional[str]:
        value = values.get(key, "").strip()
        return value or None

    settings = Settings()
    tmpdir = pick("MONOREPO_FIXTURE_TMPDIR")
    if tmpdir:
        settings.tmpdir = Path(tmpdir)
    tool_root = pick("MONOREPO_FIXTURE_TOOL_ROOT")
    if tool_root:
        settings.tool_root = Path(tool_root).resolve()
    settings.tool_name = pick("MONOREPO_FIXTURE_TOOL") or settings.tool_name
    settings.git_bin = pick("GIT_BIN") or settings.git_bin
    settings.yarn_bin = pick("YARN_BIN") or settings.yarn_bin
    settings.default_branch = pick("MONOREPO_FIXTURE_BRANCH") or settings.default_branch
    settings.git_user_name = pick("MONOREPO_FIXTURE_GIT_NAME") or settings.git_user_name
    settings.git_user_email = pick("MONOREPO_FIXTURE_GIT_EMAIL") or settings.git_user_email
    return settings
