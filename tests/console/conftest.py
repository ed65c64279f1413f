"""Shared fixtures for reader, report and CLI tests."""
from __future__ import annotations

import pytest

TEXTBOOK = """\
# PERT example: 1 -> 3 -> 5 is critical
5 5
3 2 4 1 2
1 3
2 3
1 4
3 5
4 5
"""

TEXTBOOK_REPORT = """\
9 3 1

1: 1 3 5

Task\tEC\tLC\tSlack
1\t3\t3\t0
2\t2\t3\t1
3\t7\t7\t0
4\t4\t7\t3
5\t9\t9\t0"""


@pytest.fixture
def textbook_text() -> str:
    return TEXTBOOK


@pytest.fixture
def textbook_file(tmp_path):
    path = tmp_path / "textbook.txt"
    path.write_text(TEXTBOOK, encoding="utf-8")
    return path


@pytest.fixture
def cyclic_file(tmp_path):
    path = tmp_path / "cyclic.txt"
    path.write_text("2 2\n1 1\n1 2\n2 1\n", encoding="utf-8")
    return path


@pytest.fixture
def textbook_report() -> str:
    return TEXTBOOK_REPORT
