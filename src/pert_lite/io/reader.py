"""Reader for the whitespace-separated PERT network format.

Layout (tokens may be split across lines any way you like):

    [# comment line]
    N M
    d1 d2 ... dN
    u1 v1
    ...
    uM vM

If the first token starts with '#', the rest of that line is a comment
and N follows on the next line.  d_i is the duration of activity i and
each (u, v) pair is an arc u -> v between activities 1..N.  Tokens
after the last arc are ignored.

The reader adds the synthetic source and sink before returning, so the
graph is ready for analyze().
"""
from __future__ import annotations

import logging
import os
import re
from typing import Iterator, TextIO

from pert_lite.graph.network import PertGraph

log = logging.getLogger(__name__)

_INT_TOKEN = re.compile(r"[-+]?[0-9]+")


class MalformedInputError(ValueError):
    """Raised when the input cannot be read as a PERT network."""

    def __init__(self, message: str, token_index: int | None = None) -> None:
        self.token_index = token_index
        if token_index is not None:
            message = f"{message} (token {token_index})"
        super().__init__(message)


def _strip_comment(text: str) -> str:
    body = text.lstrip()
    if not body.startswith("#"):
        return body
    newline = body.find("\n")
    return "" if newline < 0 else body[newline + 1:]


class _Tokens:
    """Integer cursor over the token list."""

    __slots__ = ("_tokens", "_pos")

    def __init__(self, tokens: list[str]) -> None:
        self._tokens = tokens
        self._pos = 0

    def next_int(self, what: str) -> int:
        if self._pos >= len(self._tokens):
            raise MalformedInputError(
                f"Unexpected end of input, expected {what}", self._pos
            )
        tok = self._tokens[self._pos]
        # int() alone would also take "1_000" and non-ASCII digits
        if not _INT_TOKEN.fullmatch(tok):
            raise MalformedInputError(
                f"Expected integer {what}, got {tok!r}", self._pos
            )
        self._pos += 1
        return int(tok)

    def leftover(self) -> int:
        return len(self._tokens) - self._pos


def _iter_arcs(tokens: _Tokens, n: int, m: int) -> Iterator[tuple[int, int]]:
    for i in range(m):
        u = tokens.next_int(f"tail of arc {i + 1}")
        v = tokens.next_int(f"head of arc {i + 1}")
        for end in (u, v):
            if not 1 <= end <= n:
                raise MalformedInputError(
                    f"Arc {i + 1} ({u},{v}) refers to node {end}, "
                    f"expected 1..{n}"
                )
        yield u, v


def read_graph(text: str) -> PertGraph:
    """Build a bracketed PertGraph from the textual format."""
    tokens = _Tokens(_strip_comment(text).split())

    n = tokens.next_int("node count")
    m = tokens.next_int("arc count")
    if n < 0:
        raise MalformedInputError(f"Node count must be non-negative, got {n}")
    if m < 0:
        raise MalformedInputError(f"Arc count must be non-negative, got {m}")

    graph = PertGraph(n)
    for node_id in range(1, n + 1):
        duration = tokens.next_int(f"duration of node {node_id}")
        if duration < 0:
            raise MalformedInputError(
                f"Duration of node {node_id} must be non-negative, got {duration}"
            )
        graph.set_duration(node_id, duration)

    for u, v in _iter_arcs(tokens, n, m):
        graph.add_arc(u, v)

    if tokens.leftover():
        log.debug("Ignoring %d trailing token(s)", tokens.leftover())

    graph.connect_source_and_sink()
    log.debug("Read %r", graph)
    return graph


def read_graph_file(source: str | os.PathLike[str] | TextIO) -> PertGraph:
    """Read a network from a path or an open text stream.

    OSError from opening the file propagates unchanged; undecodable
    bytes raise MalformedInputError.
    """
    try:
        if isinstance(source, (str, os.PathLike)):
            with open(source, encoding="utf-8") as fh:
                text = fh.read()
        else:
            text = source.read()
    except UnicodeDecodeError as exc:
        raise MalformedInputError("Input is not valid UTF-8") from exc
    return read_graph(text)
