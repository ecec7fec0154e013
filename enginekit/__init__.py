"""Standard toolkit for game engines: strings, CRC-32, arguments, logging, math, parsing, timing, files and threads."""

__version__ = "0.1.0"
__all__ = ["args", "crc32", "files", "log", "mathutil", "parser", "strutil", "system", "timer"]