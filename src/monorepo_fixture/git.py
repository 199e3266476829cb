# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Git subprocess wrappers. Failures surface as CalledProcessError."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)


def run_git(git_bin: str, args: Sequence[str], cwd: Path) -> subprocess.CompletedProcess:
    cmd = [git_bin, *args]
    logger.debug("running %s in %s", " ".join(cmd), cwd)
    return subprocess.run(cmd, cwd=cwd, check=True, capture_output=True, text=True)


def init(git_bin: str, cwd: Path, branch: str) -> None:
    run_git(git_bin, ["init"], cwd)
    # Unborn HEAD, so this only renames the branch the first commit lands on.
    run_git(git_bin, ["symbolic-ref", "HEAD", f"refs/heads/{branch}"], cwd)


def configure_identity(git_bin: str, cwd: Path, name: str, email: str) -> None:
    run_git(git_bin, ["config", "user.name", name], cwd)
    run_git(git_bin, ["config", "user.email", email], cwd)


def add(git_bin: str, cwd: Path, paths: Sequence[str]) -> subprocess.CompletedProcess:
    return run_git(git_bin, ["add", "--force", "--", *paths], cwd)


def commit(git_bin: str, cwd: Path, message: str) -> subprocess.CompletedProcess:
    return run_git(git_bin, ["commit", "--no-verify", "-m", message], cwd)


def clone(git_bin: str, cwd: Path, origin: str) -> subprocess.CompletedProcess:
    return run_git(git_bin, ["clone", origin], cwd)


def push(git_bin: str, cwd: Path, origin: str, branch: str) -> subprocess.CompletedProcess:
    return run_git(git_bin, ["push", origin, branch], cwd)


def current_branch(git_bin: str, cwd: Path) -> str:
    result = run_git(git_bin, ["symbolic-ref", "--short", "HEAD"], cwd)
    return result.stdout.strip()
