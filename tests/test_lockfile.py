# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

import pytest

from monorepo_fixture.errors import MonorepoFixtureError
from monorepo_fixture.lockfile import LOCKFILE_HEADER, render_lockfile


def test_render_lockfile_sorted_entries_and_pinned_deps():
    lockfile = render_lockfile(
        {
            "b": {"name": "b", "version": "0.1.0", "dependencies": {}},
            "a": {
                "name": "a",
                "version": "0.2.0",
                "dependencies": {"b": "*", "left-pad": "^1.3.0"},
            },
        }
    )
    assert lockfile == (
        LOCKFILE_HEADER
        + "\n"
        + '"a@^0.2.0":\n'
        + '  version "0.2.0"\n'
        + "  dependencies:\n"
        + '    "b" "0.1.0"\n'
        + '    "left-pad" "0.1.0"\n'
        + "\n"
        + '"b@^0.1.0":\n'
        + '  version "0.1.0"\n'
    )


def test_render_lockfile_header_only_for_no_packages():
    assert render_lockfile({}) == LOCKFILE_HEADER
    assert LOCKFILE_HEADER.splitlines() == [
        "# THIS IS AN AUTOGENERATED FILE. DO NOT EDIT THIS FILE DIRECTLY.",
        "# yarn lockfile v1",
    ]


def test_render_lockfile_defaults_missing_version():
    assert '"a@^0.1.0":' in render_lockfile({"a": {"name": "a"}})


def test_render_lockfile_keeps_prerelease_versions():
    lockfile = render_lockfile({"a": {"name": "a", "version": "1.0.0-canary.0"}})
    assert '"a@^1.0.0-canary.0":\n  version "1.0.0-canary.0"\n' in lockfile


@pytest.mark.parametrize("version", ["", "   ", None, 1])
def test_render_lockfile_rejects_missing_versions(version):
    with pytest.raises(MonorepoFixtureError, match="a: invalid version"):
        render_lockfile({"a": {"name": "a", "version": version}})
