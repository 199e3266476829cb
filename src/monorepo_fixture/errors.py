# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT


class MonorepoFixtureError(RuntimeError):
    """Raised when a fixture cannot be built from the given inputs."""
