# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Create or remove throwaway monorepo fixtures from the command line."""

from __future__ import annotations

import argparse
import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from monorepo_fixture.config import load_settings
from monorepo_fixture.errors import MonorepoFixtureError
from monorepo_fixture.logging_config import setup_logging
from monorepo_fixture.monorepo import Monorepo, root_prefix

logger = logging.getLogger(__name__)


def parse_package(value: str) -> Tuple[str, List[str]]:
    """Parse ``name`` or ``name:dep1,dep2`` into a name and its internal deps."""
    name, _, deps = value.partition(":")
    name = name.strip()
    if not name:
        raise argparse.ArgumentTypeError(f"missing package name in {value!r}")
    return name, [dep.strip() for dep in deps.split(",") if dep.strip()]


def parse_args(argv: List[str]) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--env-file", type=Path, help="env-style file with MONOREPO_FIXTURE_* settings")
    common.add_argument("--verbose", action="store_true", help="Log every git and filesystem step")

    parser = argparse.ArgumentParser(prog="monorepo-fixture", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", parents=[common], help="Build a fixture and print its root")
    create.add_argument("name")
    create.add_argument(
        "--package",
        dest="packages",
        action="append",
        type=parse_package,
        default=[],
        metavar="NAME[:DEP,...]",
        help="Workspace package to add (repeatable)",
    )
    create.add_argument("--link", action="store_true", help="Link packages and write yarn.lock")
    create.add_argument("--install", action="store_true", help="Link the orchestrator into node_modules")
    create.add_argument("--commit", metavar="MESSAGE", help="Commit the staged tree")

    cleanup = sub.add_parser("cleanup", parents=[common], help="Remove a fixture created earlier")
    cleanup.add_argument("path", type=Path)
    return parser.parse_args(argv)


def create(args: argparse.Namespace) -> int:
    settings = load_settings(env_file=args.env_file)
    repo = Monorepo(args.name, settings=settings)
    try:
        repo.init()
        for name, deps in args.packages:
            repo.add_package(name, deps)
        if args.link:
            repo.link_packages()
        if args.install:
            repo.install()
        if args.commit:
            repo.commit(args.commit)
    except BaseException:
        repo.cleanup()
        raise
    print(repo.root)
    return 0


def cleanup(args: argparse.Namespace) -> int:
    settings = load_settings(env_file=args.env_file)
    path = args.path.resolve()
    if not path.is_dir():
        raise MonorepoFixtureError(f"not a directory: {path}")
    if not path.name.startswith(root_prefix(settings.tool_name, "")[:-1]):
        raise MonorepoFixtureError(f"refusing to remove {path}: not a fixture root")
    shutil.rmtree(path)
    logger.info("removed %s", path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    handlers = {"create": create, "cleanup": cleanup}
    try:
        return handlers[args.command](args)
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip()
        print(f"[monorepo-fixture] {' '.join(map(str, exc.cmd))} failed: {detail}", file=sys.stderr)
        return 1
    except (MonorepoFixtureError, OSError) as exc:
        print(f"[monorepo-fixture] {exc}", file=sys.stderr)
        return 1
