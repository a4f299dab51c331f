"""Host list parsing for commands that target one or more machines.

Hosts are taken from piped standard input when there is any, otherwise from
the positional command-line arguments.
"""

from __future__ import annotations

import io
import os
import stat
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

import structlog

from gru.exceptions import NoHostsError

logger = structlog.get_logger()

DEFAULT_CHUNK_SIZE = 4096

# Unicode White_Space characters plus list separators.
_LATIN1_DELIMITERS = frozenset(" \t\n\v\f\r\u0085\u00a0,;|")
_HIGH_DELIMITERS = frozenset("\u1680\u2028\u2029\u202f\u205f\u3000")


def is_delimiter(ch: str) -> bool:
    """Report whether ``ch`` separates host names.

    Delimiters are white space (the ASCII controls tab through carriage
    return, space, U+0085, U+00A0 and the Unicode space separators) and the
    characters ``,``, ``;`` and ``|``.
    """
    if ch <= "\u00ff":
        return ch in _LATIN1_DELIMITERS
    if "\u2000" <= ch <= "\u200a":
        return True
    return ch in _HIGH_DELIMITERS


def scan_words(data: str, at_eof: bool) -> tuple[int, str | None]:
    """Split function returning the next delimiter-separated word in ``data``.

    Args:
        data: Buffered text not yet consumed.
        at_eof: Whether ``data`` ends the input.

    Returns:
        ``(advance, token)`` where ``advance`` is the number of characters
        consumed. ``token`` is None when more data is needed to finish a word,
        or when ``data`` held nothing but delimiters. A token is never empty.
    """
    start = 0
    length = len(data)
    while start < length and is_delimiter(data[start]):
        start += 1

    for i in range(start, length):
        if is_delimiter(data[i]):
            return i + 1, data[start:i]

    if at_eof and length > start:
        return length, data[start:]

    # Request more data.
    return start, None


def iter_words(stream: TextIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """Yield each word of ``stream``, reading it in chunks.

    Args:
        stream: Text stream to tokenize.
        chunk_size: Number of characters to read at a time.
    """
    buffer = ""
    at_eof = False
    while True:
        if not at_eof:
            chunk = stream.read(chunk_size)
            if chunk:
                buffer += chunk
            else:
                at_eof = True

        while buffer:
            advance, token = scan_words(buffer, at_eof)
            buffer = buffer[advance:]
            if token is None:
                break
            yield token

        if at_eof and not buffer:
            return


def is_input_from_pipe(stream: TextIO | None = None) -> bool:
    """Return True when ``stream`` (stdin by default) carries piped input.

    Pipes and redirected regular files count as piped. Character
    devices, which include terminals and ``/dev/null``, do not. Streams with
    no file descriptor are piped unless they report being a terminal.
    """
    stream = stream if stream is not None else sys.stdin
    if stream is None or stream.closed:
        return False
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (AttributeError, OSError):
        return not stream.isatty()
    return not stat.S_ISCHR(mode)


def _tolerant(stream: TextIO) -> TextIO:
    """Replace undecodable input instead of failing on it."""
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors="replace")
    return stream


def parse_hosts(args: Sequence[str], stdin: TextIO | None = None) -> list[str]:
    """Resolve the hosts a command should run against.

    If stdin is piped, its words are the hosts and ``args`` are ignored. Bytes
    that are not valid in the stream's encoding become U+FFFD and are part of
    a word.
    Otherwise ``args`` are returned as given.

    Raises:
        NoHostsError: If stdin is not piped and ``args`` is empty.
    """
    stream = stdin if stdin is not None else sys.stdin
    if is_input_from_pipe(stream):
        hosts = list(iter_words(_tolerant(stream)))
        logger.debug("Read hosts from stdin", count=len(hosts))
        return hosts

    if not args:
        raise NoHostsError()
    return list(args)
