# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

import shutil
import stat
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def git_output(cwd, *args):
    result = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True, check=True)
    return result.stdout


def staged_files(root):
    return set(git_output(root, "diff", "--cached", "--name-only").split())


def write_fake_bin(directory: Path, name: str, body: str) -> Path:
    fake_bin = directory / name
    fake_bin.write_text(f"#!/bin/sh\n{body}\n")
    fake_bin.chmod(stat.S_IRWXU)
    return fake_bin
