# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Write fixture files under a root directory."""

from __future__ import annotations

import json
import logging
import os
import stat
from pathlib import Path
from typing import Any, List, Mapping

logger = logging.getLogger(__name__)

EXECUTABLE_MODE = stat.S_IXUSR | stat.S_IRUSR | stat.S_IROTH


def render_contents(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2)


def write_files(root: Path, files: Mapping[str, Any], executable: bool = False) -> List[str]:
    written: List[str] = []
    for relative, contents in files.items():
        full_path = root / relative
        full_path.parent.mkdir(parents=True, exist_ok=True)
        # Executable files are written without the owner write bit.
        if full_path.exists() and not os.access(full_path, os.W_OK):
            os.chmod(full_path, stat.S_IRUSR | stat.S_IWUSR)
        full_path.write_text(render_contents(contents), encoding="utf-8")
        if executable:
            os.chmod(full_path, EXECUTABLE_MODE)
        logger.debug("wrote %s%s", full_path, " (executable)" if executable else "")
        written.append(relative)
    return written
