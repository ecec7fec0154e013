"""Line preprocessor that keeps or drops blocks for the PC or XBOX target."""

from __future__ import annotations

import io
from typing import TextIO

from .log import get_logger
from .strutil import trim_string

__all__ = ["MAX_PARSER_STATES", "ParserSyntaxError", "Parser"]

MAX_PARSER_STATES = 4

_IF_PC = "#if PC"
_IF_XBOX = "#if XBOX"
_ELSE = "#else"
_ENDIF = "#endif"


class ParserSyntaxError(ValueError):
    """A directive in the input is malformed or unbalanced."""

    def __init__(self, message: str, context: str, line_number: int) -> None:
        super().__init__(f"Syntax error at line {line_number} - {message}")
        self.message = message
        self.context = context
        self.line_number = line_number


class Parser:
    """Processes ``#if PC``, ``#if XBOX``, ``#else`` and ``#endif`` directives."""

    def __init__(self, compile_for_pc: bool = True) -> None:
        self.compile_for_pc = compile_for_pc
        self._states = [True] + [False] * (MAX_PARSER_STATES - 1)
        self._index = 0

    def _fail(self, message: str, context: str, line_number: int) -> ParserSyntaxError:
        logger = get_logger()
        logger.error(f"Syntax error at line {line_number} - {message}")
        logger.error(context)
        return ParserSyntaxError(message, context, line_number)

    def process(self, source: str | TextIO, out: TextIO | None = None) -> str:
        """Filter ``source`` and return the kept text, also writing it to ``out``.

        Raises :class:`ParserSyntaxError` on a bad directive.
        """
        text = source if isinstance(source, str) else source.read()
        self._states = [True] + [False] * (MAX_PARSER_STATES - 1)
        self._index = 0

        buffer = io.StringIO()
        line_number = 0
        for line_number, line in enumerate(text.split("\n"), start=1):
            if line:
                self._statement(line, buffer, line_number)
            elif self._states[self._index]:
                buffer.write("\n")

        if self._index != 0:
            raise self._fail(
                "#if found without matching #endif at the end of the file", "EOF", line_number
            )

        result = buffer.getvalue()
        if out is not None:
            out.write(result)
        return result

    def _statement(self, line: str, out: io.StringIO, line_number: int) -> None:
        stmt = trim_string(line)
        if not stmt:
            out.write(line + "\n")
            return

        if stmt.startswith("#"):
            if stmt in (_IF_PC, _IF_XBOX):
                if self._index == MAX_PARSER_STATES - 1:
                    raise self._fail("stack overflow", line, line_number)
                self._index += 1
                pc = stmt == _IF_PC
                self._states[self._index] = self.compile_for_pc if pc else not self.compile_for_pc
            elif stmt == _ELSE:
                self._states[self._index] = not self._states[self._index]
            elif stmt == _ENDIF:
                if self._index == 0:
                    raise self._fail("#endif found without matching #if", line, line_number)
                if self._index == MAX_PARSER_STATES - 1:
                    raise self._fail("stack overflow", line, line_number)
                self._index -= 1
            else:
                raise self._fail("statement is invalid", line, line_number)
        elif self._states[self._index]:
            out.write(line + "\n")