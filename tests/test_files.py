# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

import os
import stat

import pytest

from monorepo_fixture.files import render_contents, write_files


def test_render_contents_passes_strings_through():
    assert render_contents("console.log('hi');") == "console.log('hi');"


def test_render_contents_serializes_objects_with_two_space_indent():
    assert render_contents({"name": "a", "private": True, "workspaces": ["packages/*"]}) == (
        '{\n  "name": "a",\n  "private": true,\n  "workspaces": [\n    "packages/*"\n  ]\n}'
    )


def test_write_files_creates_parents_and_keeps_order(tmp_path):
    written = write_files(
        tmp_path,
        {
            "packages/a/package.json": {"name": "a"},
            "README.md": "hello",
        },
    )
    assert written == ["packages/a/package.json", "README.md"]
    assert (tmp_path / "packages" / "a" / "package.json").read_text() == '{\n  "name": "a"\n}'
    assert (tmp_path / "README.md").read_text() == "hello"


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
def test_write_files_executable_mode(tmp_path):
    write_files(tmp_path, {"node_modules/.bin/lage": "#!/bin/sh\n"}, executable=True)
    mode = stat.S_IMODE((tmp_path / "node_modules" / ".bin" / "lage").stat().st_mode)
    assert mode == stat.S_IXUSR | stat.S_IRUSR | stat.S_IROTH


def test_write_files_overwrites_existing(tmp_path):
    (tmp_path / "yarn.lock").write_text("stale")
    write_files(tmp_path, {"yarn.lock": "fresh"})
    assert (tmp_path / "yarn.lock").read_text() == "fresh"


def test_write_files_encodes_utf8(tmp_path):
    write_files(tmp_path, {"packages/cafe/build.js": "console.log('building café');"})
    written = (tmp_path / "packages" / "cafe" / "build.js").read_bytes()
    assert written == "console.log('building café');".encode("utf-8")
