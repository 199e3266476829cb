# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Contents of every file a fixture monorepo is made of."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Mapping, Sequence

DEFAULT_VERSION = "0.1.0"
WORKSPACE_GLOB = "packages/*"

DEFAULT_PIPELINE: Dict[str, List[str]] = {
    "build": ["^build"],
    "test": ["build"],
    "lint": [],
}

TASK_VERBS = {
    "build": "building",
    "test": "testing",
    "lint": "linting",
}

_JS_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

POSIX_SHIM = r"""#!/bin/sh
basedir=$(dirname "$(echo "$0" | sed -e 's,\\,/,g')")

case `uname` in
    *CYGWIN*) basedir=`cygpath -w "$basedir"`;;
esac

if [ -x "$basedir/node" ]; then
  "$basedir/node"  "$basedir/../{tool}/bin/{tool}.js" "$@"
  ret=$?
else
  node  "$basedir/../{tool}/bin/{tool}.js" "$@"
  ret=$?
fi
exit $ret"""

WINDOWS_SHIM = r"""@IF EXIST "%~dp0\node.exe" (
  "%~dp0\node.exe"  "%~dp0\..\{tool}\bin\{tool}.js" %*
) ELSE (
  @SETLOCAL
  @SET PATHEXT=%PATHEXT:;.JS;=;%
  node  "%~dp0\..\{tool}\bin\{tool}.js" %*
)"""


def _js_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _js_key(value: str) -> str:
    if _JS_IDENTIFIER_RE.match(value):
        return value
    return _js_string(value)


def root_manifest(name: str, tool_name: str, tool_root: str, tasks: Iterable[str]) -> dict:
    return {
        "name": name,
        "version": DEFAULT_VERSION,
        "private": True,
        "workspaces": [WORKSPACE_GLOB],
        "scripts": {task: f"{tool_name} {task}" for task in tasks},
        "devDependencies": {
            tool_name: tool_root,
        },
    }


def pipeline_config(pipeline: Mapping[str, Sequence[str]]) -> str:
    """Render ``module.exports = { pipeline: ... }`` for the orchestrator config."""
    lines = ["module.exports = {", "  pipeline: {"]
    entries = []
    for task, deps in pipeline.items():
        rendered = ", ".join(_js_string(dep) for dep in deps)
        entries.append(f"    {_js_key(task)}: [{rendered}]")
    lines.append(",\n".join(entries))
    lines.extend(["  }", "};"])
    return "\n".join(line for line in lines if line) + "\n"


def posix_shim(tool_name: str) -> str:
    return POSIX_SHIM.replace("{tool}", tool_name)


def windows_shim(tool_name: str) -> str:
    return WINDOWS_SHIM.replace("{tool}", tool_name)


def task_script(name: str, task: str) -> str:
    verb = TASK_VERBS.get(task, f"running {task}")
    return f"console.log({_js_string(f'{verb} {name}')});"


def package_manifest(name: str, tasks: Iterable[str], internal_deps: Iterable[str] = ()) -> dict:
    return {
        "name": name,
        "version": DEFAULT_VERSION,
        "scripts": {task: f"node ./{task}.js" for task in tasks},
        "dependencies": {dep: "*" for dep in internal_deps},
    }
