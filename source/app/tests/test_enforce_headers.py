# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from itertools import islice
from pathlib import Path
from typing import Final

from pytest import mark

source_root: Final = Path(__file__).parent.parent
excluded_dirs: Final = frozenset({".tox", ".mypy_cache", "__pycache__"})

optional_shebang: Final = "#!/usr/bin/env python"
license_header: Final = [
    "# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.",
    "# SPDX-License-Identifier: Apache-2.0",
]


def python_sources(root: Path) -> list[Path]:
    return sorted(
        path
        for path in root.rglob("*.py")
        if path.stat().st_size > 0
        and excluded_dirs.isdisjoint(path.relative_to(root).parts)
    )


def leading_lines(path: Path) -> list[str]:
    with open(path) as f:
        lines = [line.strip() for line in islice(f, len(license_header) + 1)]
    if lines and lines[0] == optional_shebang:
        lines = lines[1:]
    return lines[: len(license_header)]


def test_every_package_is_scanned() -> None:
    scanned = {path.parent.name for path in python_sources(source_root)}
    assert {"cron_dialect", "cron", "model", "observability", "util", "tests"} <= (
        scanned
    )


@mark.parametrize(
    "path",
    python_sources(source_root),
    ids=lambda path: str(path.relative_to(source_root)),
)
def test_source_has_license_header(path: Path) -> None:
    assert leading_lines(path) == license_header, f"{path} has no license header"
