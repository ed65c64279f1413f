"""Tests for the PERT network reader."""
from __future__ import annotations

import io

import pytest

from pert_lite.io.reader import MalformedInputError, read_graph, read_graph_file


class TestReadGraph:
    def test_with_comment(self, textbook_text: str) -> None:
        g = read_graph(textbook_text)
        assert g.activity_count == 5
        assert [n.duration for n in g.activities()] == [3, 2, 4, 1, 2]
        assert [n.node_id for n in g.successors(1)] == [3, 4, 6]
        assert g.is_bracketed

    def test_without_comment(self) -> None:
        g = read_graph("2 1\n4 5\n1 2\n")
        assert g.activity_count == 2
        assert [n.node_id for n in g.successors(1)] == [2, 3]

    def test_tokens_split_anyhow(self) -> None:
        g = read_graph("2\n1 4\n5 1\n2")
        assert [n.duration for n in g.activities()] == [4, 5]
        assert g.arc_count == 1 + 2 * 2 + 1

    def test_comment_drops_rest_of_line(self) -> None:
        g = read_graph("  #  3 3 3 ignored\n1 0\n7\n")
        assert g.activity_count == 1
        assert g.node(1).duration == 7

    def test_hash_glued_to_token(self) -> None:
        g = read_graph("#nodes\n1 0 2")
        assert g.node(1).duration == 2

    def test_trailing_tokens_ignored(self) -> None:
        g = read_graph("1 0 2 99 100")
        assert g.activity_count == 1

    def test_empty_project(self) -> None:
        g = read_graph("0 0")
        assert g.activity_count == 0
        assert len(g) == 2


class TestMalformedInput:
    @pytest.mark.parametrize(
        "text, match",
        [
            ("", "node count"),
            ("# only a comment", "node count"),
            ("3", "arc count"),
            ("x 1", "integer node count"),
            ("2 1 4", "duration of node 2"),
            ("2 1 4 five 1 2", "integer duration of node 2"),
            ("2 1 4 5 1", "head of arc 1"),
            ("2 2 4 5 1 2", "tail of arc 2"),
            ("-1 0", "Node count must be non-negative"),
            ("1 -1 3", "Arc count must be non-negative"),
            ("1 0 -3", "Duration of node 1 must be non-negative"),
            ("2 1 1 1 1 3", "refers to node 3"),
            ("2 1 1 1 0 2", "refers to node 0"),
            ("1 0 2.5", "integer duration"),
            ("1 0 1_000", "integer duration"),
            ("1 0 \u0665", "integer duration"),
            ("1 0 5-", "integer duration"),
        ],
    )
    def test_rejected(self, text: str, match: str) -> None:
        with pytest.raises(MalformedInputError, match=match):
            read_graph(text)

    def test_explicit_plus_sign_accepted(self) -> None:
        g = read_graph("+1 0 +5")
        assert g.node(1).duration == 5

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            read_graph("nope")

    def test_token_index(self) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            read_graph("2 1 4 x")
        assert exc_info.value.token_index == 3


class TestReadGraphFile:
    def test_from_path(self, textbook_file) -> None:
        g = read_graph_file(textbook_file)
        assert g.activity_count == 5

    def test_from_str_path(self, textbook_file) -> None:
        g = read_graph_file(str(textbook_file))
        assert g.activity_count == 5

    def test_from_stream(self, textbook_text: str) -> None:
        g = read_graph_file(io.StringIO(textbook_text))
        assert g.activity_count == 5

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(OSError):
            read_graph_file(tmp_path / "missing.txt")

    def test_invalid_utf8_file(self, tmp_path) -> None:
        path = tmp_path / "binary.txt"
        path.write_bytes(b"1 0\n\xff\xfe\n")
        with pytest.raises(MalformedInputError, match="not valid UTF-8") as exc_info:
            read_graph_file(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_invalid_utf8_stream(self) -> None:
        stream = io.TextIOWrapper(io.BytesIO(b"1 0 \xff"), encoding="utf-8")
        with pytest.raises(MalformedInputError, match="not valid UTF-8"):
            read_graph_file(stream)
