# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Console logging for the monorepo_fixture package."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "monorepo_fixture"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Stdout is left alone because the CLI prints fixture paths there.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated calls (tests, nested CLIs) must not stack handlers.
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(handler)
    return logger
