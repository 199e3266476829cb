# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""A temporary git-backed monorepo that a build orchestrator can run against.

Typical use from an integration test::

    with Monorepo("basic") as repo:
        repo.init()
        repo.add_package("a", ["b"])
        repo.add_package("b")
        repo.install()
        repo.link_packages()
        repo.run("build")

Nothing here installs real packages. ``install`` and ``link_packages`` only
create the symlinks and lockfile a package manager would have produced, and
``commit_files`` stages what it writes so the orchestrator's git-based
change detection sees a populated index.
"""

from __future__ import annotations

import json
import logging
import os
import re
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from monorepo_fixture import git, templates
from monorepo_fixture.config import Settings, load_settings
from monorepo_fixture.errors import MonorepoFixtureError
from monorepo_fixture.files import write_files
from monorepo_fixture.lockfile import render_lockfile

logger = logging.getLogger(__name__)

PACKAGE_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def root_prefix(tool_name: str, name: str) -> str:
    return f"{tool_name}-monorepo-{name}-"


def _relink(link: Path, target: Path) -> None:
    if link.is_symlink():
        link.unlink()
    link.symlink_to(target, target_is_directory=True)
    logger.debug("linked %s -> %s", link, target)


class Monorepo:
    def __init__(
        self,
        name: str,
        settings: Optional[Settings] = None,
        pipeline: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        self.name = name
        self.settings = settings or load_settings()
        self.pipeline: Dict[str, List[str]] = {
            task: list(deps) for task, deps in (pipeline or templates.DEFAULT_PIPELINE).items()
        }
        self.settings.tmpdir.mkdir(parents=True, exist_ok=True)
        self.root = Path(
            tempfile.mkdtemp(
                prefix=root_prefix(self.settings.tool_name, name),
                dir=self.settings.tmpdir,
            )
        )
        logger.info("created monorepo fixture %s at %s", name, self.root)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()

    def __repr__(self) -> str:
        return f"Monorepo(name={self.name!r}, root={str(self.root)!r})"

    @property
    def node_modules_path(self) -> Path:
        return self.root / "node_modules"

    @property
    def packages_path(self) -> Path:
        return self.root / "packages"

    @property
    def tasks(self) -> List[str]:
        return list(self.pipeline)

    def init(self) -> None:
        git.init(self.settings.git_bin, self.root, self.settings.default_branch)
        git.configure_identity(
            self.settings.git_bin,
            self.root,
            self.settings.git_user_name,
            self.settings.git_user_email,
        )
        self.generate_repo_files()

    def install(self) -> Path:
        """Pretend to npm-install the orchestrator by linking its checkout."""
        self.node_modules_path.mkdir(parents=True, exist_ok=True)
        link = self.node_modules_path / self.settings.tool_name
        _relink(link, Path(self.settings.tool_root).resolve())
        return link

    def package_manifests(self) -> Dict[str, dict]:
        if not self.packages_path.is_dir():
            raise MonorepoFixtureError(f"no packages directory under {self.root}")
        manifests: Dict[str, dict] = {}
        for pkg_dir in sorted(self.packages_path.iterdir()):
            if not pkg_dir.is_dir():
                continue
            manifests[pkg_dir.name] = json.loads((pkg_dir / "package.json").read_text(encoding="utf-8"))
        return manifests

    def link_packages(self) -> subprocess.CompletedProcess:
        """Simulate ``yarn`` by linking workspace packages and writing yarn.lock."""
        manifests = self.package_manifests()
        self.node_modules_path.mkdir(parents=True, exist_ok=True)
        for pkg in manifests:
            _relink(self.node_modules_path / pkg, self.packages_path / pkg)
        return self.commit_files({"yarn.lock": render_lockfile(manifests)})

    def generate_repo_files(self) -> None:
        tool = self.settings.tool_name
        self.commit_files(
            {
                "package.json": templates.root_manifest(
                    self.name, tool, str(Path(self.settings.tool_root).resolve()), self.tasks
                ),
                f"{tool}.config.js": templates.pipeline_config(self.pipeline),
            }
        )
        self.commit_files(
            {
                f"node_modules/.bin/{tool}": templates.posix_shim(tool),
                f"node_modules/.bin/{tool}.cmd": templates.windows_shim(tool),
            },
            executable=True,
        )

    def add_package(self, name: str, internal_deps: Iterable[str] = ()) -> subprocess.CompletedProcess:
        if not PACKAGE_NAME_RE.match(name):
            raise MonorepoFixtureError(f"invalid package name: {name!r}")
        deps = list(internal_deps or ())
        files: Dict[str, Any] = {
            f"packages/{name}/{task}.js": templates.task_script(name, task) for task in self.tasks
        }
        files[f"packages/{name}/package.json"] = templates.package_manifest(name, self.tasks, deps)
        logger.info("adding package %s (deps: %s)", name, ", ".join(deps) or "none")
        return self.commit_files(files)

    def clone(self, origin: str) -> subprocess.CompletedProcess:
        return git.clone(self.settings.git_bin, self.root, origin)

    def push(self, origin: str, branch: str) -> subprocess.CompletedProcess:
        return git.push(self.settings.git_bin, self.root, origin, branch)

    def commit_files(self, files: Mapping[str, Any], executable: bool = False) -> subprocess.CompletedProcess:
        """Write ``files`` (str as-is, anything else as JSON) and stage them."""
        written = write_files(self.root, files, executable=executable)
        return git.add(self.settings.git_bin, self.root, written)

    def commit(self, message: str) -> subprocess.CompletedProcess:
        return git.commit(self.settings.git_bin, self.root, message)

    def current_branch(self) -> str:
        return git.current_branch(self.settings.git_bin, self.root)

    def run(self, command: str, args: Optional[Sequence[str]] = None) -> subprocess.CompletedProcess:
        cmd = [self.settings.yarn_bin, command, *(args or [])]
        env = os.environ.copy()
        env["YARN_CACHE_FOLDER"] = str(self.settings.yarn_cache)
        logger.debug("running %s in %s", " ".join(cmd), self.root)
        return subprocess.run(cmd, cwd=self.root, env=env, check=True, capture_output=True, text=True)

    def cleanup(self) -> None:
        if not self.root.exists():
            return
        shutil.rmtree(self.root)
        logger.info("removed monorepo fixture %s", self.root)
