# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

from monorepo_fixture.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
