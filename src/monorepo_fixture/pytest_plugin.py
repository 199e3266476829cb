# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""pytest fixtures that hand out monorepo fixtures and remove them afterwards."""

from __future__ import annotations

import contextlib
import logging
from typing import Iterable, Mapping, Optional

import pytest

from monorepo_fixture.config import Settings, load_settings
from monorepo_fixture.errors import MonorepoFixtureError
from monorepo_fixture.monorepo import Monorepo

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def monorepo_builder(settings: Settings):
    """Yield a ``make(name, packages, link, install)`` callable.

    Every monorepo it made is removed on exit, even when removing an
    earlier one fails.
    """
    created = []

    def make(
        name: str,
        packages: Optional[Mapping[str, Iterable[str]]] = None,
        link: bool = False,
        install: bool = False,
    ) -> Monorepo:
        repo = Monorepo(name, settings=settings)
        created.append(repo)
        repo.init()
        for pkg, deps in (packages or {}).items():
            repo.add_package(pkg, deps)
        if link:
            repo.link_packages()
        if install:
            repo.install()
        return repo

    try:
        yield make
    finally:
        failures = []
        for repo in created:
            try:
                repo.cleanup()
            except OSError as exc:
                logger.error("could not remove %s: %s", repo.root, exc)
                failures.append(exc)
        if failures:
            raise MonorepoFixtureError(f"{len(failures)} monorepo fixture(s) were not removed") from failures[0]


@pytest.fixture
def monorepo_factory(tmp_path_factory):
    settings = load_settings()
    settings.tmpdir = tmp_path_factory.mktemp("monorepos")
    with monorepo_builder(settings) as make:
        yield make
