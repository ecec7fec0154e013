"""Command line option cache: default arguments and ``-option`` groups."""

from __future__ import annotations

from .strutil import tokenize

__all__ = ["AppArgs"]


class AppArgs:
    """Collects arguments given on a command line.

    Tokens before the first ``-option`` are default arguments. Each token
    starting with ``-`` opens an option, and the tokens after it, up to the
    next option, are that option's arguments. Option lookups ignore case.
    """

    def __init__(self, options: str = "") -> None:
        self._options: dict[str, list[str]] = {}
        self._default_args: list[str] = []
        if options:
            self.append(options)

    def _store(self, option: str, args: list[str]) -> None:
        self._options.setdefault(option, []).extend(args)

    def append(self, options: str) -> None:
        """Parse a space separated option string and merge it in."""
        option = ""
        args: list[str] = []
        for token in tokenize(options):
            if token.startswith("-"):
                if option:
                    self._store(option, args)
                    args = []
                option = token
            elif option:
                args.append(token)
            else:
                self._default_args.append(token)
        if option:
            self._store(option, args)

    def _find(self, option: str) -> str | None:
        search = option.upper()
        for name in sorted(self._options):
            if name.upper() == search:
                return name
        return None

    def has_option(self, option: str) -> bool:
        """Return whether ``option`` was given, ignoring case."""
        return self._find(option) is not None

    def __call__(self, option: str) -> bool:
        return self.has_option(option)

    def __contains__(self, option: object) -> bool:
        return isinstance(option, str) and self.has_option(option)

    def option_args(self, option: str) -> list[str]:
        """Return the arguments given to ``option``; empty if it is absent."""
        name = self._find(option)
        if name is None:
            return []
        return list(self._options[name])

    def default_args(self) -> list[str]:
        """Return the arguments that came before any option."""
        return list(self._default_args)

    def is_empty(self) -> bool:
        """Return whether nothing at all has been recorded."""
        return not self._options and not self._default_args

    def list_options(self) -> list[str]:
        """Return the option names as given, in sorted order."""
        return sorted(self._options)