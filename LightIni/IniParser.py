from __future__ import annotations

import io
import logging
from typing import Iterable, Iterator, Union

from .LineClassifier import DEFAULT_COMMENT_PREFIX, classify, validate_comment_prefix
from .utils.exceptions import IniHandlerError, IniIOError, IniSyntaxError
from .utils.line_models import Comment, Invalid, Option, Section

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def _noop(text: str) -> None:
    pass


class IniParser:
    """Event-driven INI parser.

    Reads a source line by line and calls section(), option() or comment() on the
    handler for every recognized line. The parser keeps no semantic state: which
    section is active, duplicates and unknown names are the handler's business.
    The first syntax, handler or I/O error stops the parse; calls already made
    on the handler are not undone.
    """

    def __init__(self, handler, comment_prefix: str = DEFAULT_COMMENT_PREFIX):
        for name in ("section", "option"):
            if not callable(getattr(handler, name, None)):
                raise TypeError(f"INI handler must provide a callable {name}()")
        self._handler = handler
        self._comment_prefix = validate_comment_prefix(comment_prefix)

    @property
    def comment_prefix(self) -> str:
        return self._comment_prefix

    def parse_buffered(self, source: Iterable[Union[str, bytes]]) -> None:
        """Parse a line-oriented source: a text file, io.StringIO or any iterable of lines."""
        if isinstance(source, (str, bytes)):
            raise TypeError("parse_buffered() expects an iterable of lines, use parse_string() for in-memory content")
        handler = self._handler
        on_comment = getattr(handler, "comment", None) or _noop
        line_number = 0
        for raw_line in self._read_lines(source):
            line_number += 1
            line = raw_line.rstrip()
            kind = classify(line, self._comment_prefix)
            if isinstance(kind, Invalid):
                logger.debug("Syntax error on line %d: %s", line_number, kind.reason)
                raise IniSyntaxError(line_number, kind.line, kind.reason)
            try:
                if isinstance(kind, Section):
                    handler.section(kind.name)
                elif isinstance(kind, Option):
                    handler.option(kind.key, kind.value)
                elif isinstance(kind, Comment):
                    on_comment(kind.text)
            except Exception as e:
                logger.debug("Handler rejected line %d: %s", line_number, e)
                raise IniHandlerError(e, line_number) from e
        logger.debug("Parsed %d lines", line_number)

    def parse(self, source) -> None:
        """Parse a readable stream.

        Text streams are read as they are. Anything else is taken as a binary
        stream whose lines are decoded as UTF-8 one at a time, so lines before
        an undecodable one still reach the handler. A raw stream gets a
        BufferedReader that is detached afterwards so the caller's stream stays open.
        """
        if isinstance(source, io.RawIOBase):
            buffered = io.BufferedReader(source)
            try:
                self.parse_buffered(buffered)
            finally:
                buffered.detach()
        else:
            self.parse_buffered(source)

    def parse_file(self, path) -> None:
        """Parse the named file, opened read-only and closed on every exit path."""
        logger.debug("Parsing %s", path)
        try:
            f = open(path, "rb")
        except OSError as e:
            raise IniIOError(e) from e
        with f:
            self.parse(f)

    def parse_string(self, content: Union[str, bytes]) -> None:
        """Parse in-memory content; bytes are decoded as UTF-8."""
        if isinstance(content, bytes):
            self.parse(io.BytesIO(content))
        else:
            self.parse_buffered(io.StringIO(content))

    @staticmethod
    def _read_lines(source: Iterable[Union[str, bytes]]) -> Iterator[str]:
        lines = iter(source)
        while True:
            try:
                line = next(lines)
            except StopIteration:
                return
            except (OSError, UnicodeDecodeError) as e:
                raise IniIOError(e) from e
            if isinstance(line, bytes):
                try:
                    line = line.decode(ENCODING)
                except UnicodeDecodeError as e:
                    raise IniIOError(e) from e
            yield line
