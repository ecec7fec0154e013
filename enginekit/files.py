"""Named file databases rooted under a common base path."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from typing import Iterable

from .log import get_logger

__all__ = [
    "FILE_SEPARATOR",
    "FileHandle",
    "FileDatabase",
    "FileSystemManager",
    "file_is_up_to_date",
    "find_file_in_path",
]

FILE_SEPARATOR = "/"


def _forward_slashes(path: str) -> str:
    return path.replace("\\", FILE_SEPARATOR)


def _matches(name: str, pattern: str) -> bool:
    # "*.*" matches every name, dotted or not, as the classic wildcard does.
    if pattern in ("*.*", "*"):
        return True
    return fnmatchcase(name.lower(), pattern.lower())


class FileHandle:
    """A file name relative to a :class:`FileDatabase`."""

    def __init__(self, filename: str = "", database: "FileDatabase | None" = None) -> None:
        self._filename = filename
        self._database = database
        self._absolute_filename = ""
        if database is not None:
            self._absolute_filename = _forward_slashes(
                database.absolute_path + FILE_SEPARATOR + filename
            )

    @property
    def filename(self) -> str:
        """The name relative to the database."""
        return self._filename

    @filename.setter
    def filename(self, filename: str) -> None:
        self._filename = filename
        if self._database is not None:
            self._absolute_filename = self._database.absolute_path + FILE_SEPARATOR + filename
        self._absolute_filename = _forward_slashes(self._absolute_filename)

    @property
    def database(self) -> "FileDatabase | None":
        """The database the name is relative to."""
        return self._database

    @database.setter
    def database(self, database: "FileDatabase | None") -> None:
        self._database = database
        if database is not None and self._filename:
            self._absolute_filename = database.absolute_path + FILE_SEPARATOR + self._filename
        self._absolute_filename = _forward_slashes(self._absolute_filename)

    @property
    def absolute_filename(self) -> str:
        """The full path, always with forward slashes."""
        return self._absolute_filename

    def is_valid(self) -> bool:
        """Return whether the handle has a database and a name."""
        if self._database is None:
            return False
        return bool(self._absolute_filename) and bool(self._filename)

    def exists(self) -> bool:
        """Return whether the file exists and can be read."""
        path = self._absolute_filename
        return bool(path) and os.path.isfile(path) and os.access(path, os.R_OK)

    def timestamp(self) -> int:
        """Return the modification time in whole seconds.

        Raises :class:`FileNotFoundError` if the file does not exist.
        """
        return int(os.stat(self._absolute_filename).st_mtime)

    def __str__(self) -> str:
        return self._absolute_filename

    def __repr__(self) -> str:
        return f"FileHandle({self._filename!r}, {self._absolute_filename!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileHandle):
            return NotImplemented
        return (
            self._filename == other._filename
            and self._absolute_filename == other._absolute_filename
            and self._database is other._database
        )

    def __hash__(self) -> int:
        return hash((self._filename, self._absolute_filename))


def file_is_up_to_date(src: FileHandle, dest: FileHandle) -> bool:
    """Return whether both files exist and ``dest`` is no older than ``src``."""
    if not dest.exists() or not src.exists():
        return False
    return dest.timestamp() - src.timestamp() >= 0


def find_file_in_path(base_path: str, filename: str) -> tuple[str, str] | None:
    """Search ``base_path`` depth first for ``filename``, ignoring case.

    ``base_path`` should end with a separator. Directories whose names start
    with a dot are not descended into. Returns ``(absolute_filename,
    relative_path)`` where the relative path ends with ``/`` when not empty,
    or ``None`` if nothing matches.
    """
    return _find_in_path(base_path, filename, "")


def _find_in_path(base_path: str, filename: str, relative: str) -> tuple[str, str] | None:
    try:
        with os.scandir(base_path or ".") as entries:
            listing = sorted((entry.name, entry.is_dir()) for entry in entries)
    except OSError:
        return None
    wanted = filename.lower()
    for name, is_dir in listing:
        if is_dir and not name.startswith("."):
            found = _find_in_path(
                base_path + name + FILE_SEPARATOR,
                filename,
                relative + name + FILE_SEPARATOR,
            )
            if found is not None:
                return found
        elif name.lower() == wanted:
            return base_path + name, relative
    return None


class FileDatabase:
    """A directory, relative to a base path, whose files can be listed and found."""

    def __init__(self, path: str, base_path: str = "") -> None:
        self._path = path
        self._absolute_path = base_path
        if path:
            self._absolute_path += FILE_SEPARATOR + path

    @property
    def path(self) -> str:
        """The path relative to the base path."""
        return self._path

    @property
    def absolute_path(self) -> str:
        """The base path joined with the relative path."""
        return self._absolute_path

    def _find_files(self, wildcard: str) -> list[FileHandle]:
        names = sorted(os.listdir(self._absolute_path))
        matched = [name for name in names if _matches(name, wildcard)]
        if not matched and not _matches(".", wildcard):
            raise FileNotFoundError(f"no entries match {wildcard!r}")
        return [
            FileHandle(name, self)
            for name in matched
            if not os.path.isdir(os.path.join(self._absolute_path, name))
        ]

    def list_files(self, wildcard: str | Iterable[str] = "*.*") -> list[FileHandle]:
        """Return handles for the files matching one wildcard or several.

        Failures are logged and leave the affected wildcard out.
        """
        logger = get_logger()
        if isinstance(wildcard, str):
            try:
                return self._find_files(wildcard)
            except OSError:
                logger.error("Failed to find files in path: ", self._absolute_path)
                return []
        files: list[FileHandle] = []
        for pattern in wildcard:
            try:
                files.extend(self._find_files(pattern))
            except OSError:
                logger.error(
                    "Failed to find ", pattern, " files in path: ", self._absolute_path
                )
        return files

    def _find_paths(self, path: str, recursive: bool) -> list[str]:
        names = sorted(os.listdir(path))
        found = [
            path + FILE_SEPARATOR + name
            for name in names
            if os.path.isdir(os.path.join(path, name))
        ]
        if recursive:
            nested: list[str] = []
            for sub in found:
                nested.extend(self._find_paths(sub, recursive))
            found.extend(nested)
        return found

    def list_paths(self, recursive: bool = False) -> list[str]:
        """Return the sub-directories; with ``recursive`` all of them, level first."""
        try:
            return self._find_paths(self._absolute_path, recursive)
        except OSError:
            get_logger().error("Failed to find paths in path: ", self._absolute_path)
            return []

    def make_file_handle(self, filename: str) -> FileHandle:
        """Return a handle for ``filename`` in this database."""
        return FileHandle(filename, self)

    def find_file_handle(self, filename: str) -> FileHandle:
        """Return a handle for ``filename``, searching sub-directories if needed.

        If the file is nowhere to be found, the handle for the root is returned.
        """
        handle = FileHandle(filename, self)
        if handle.exists():
            return handle
        found = find_file_in_path(self._absolute_path + FILE_SEPARATOR, filename)
        if found is not None:
            handle = FileHandle(found[1] + filename, self)
        return handle

    def __repr__(self) -> str:
        return f"FileDatabase({self._path!r}, {self._absolute_path!r})"


class FileSystemManager:
    """Holds a base path and the named databases beneath it."""

    def __init__(self) -> None:
        self._path = ""
        self._databases: dict[str, FileDatabase] = {}

    @property
    def base_path(self) -> str:
        """The normalised base path, without a trailing separator."""
        return self._path

    def set_base_path(self, base_path: str, from_curr_dir: bool = True) -> None:
        """Set the base path, relative to the working directory by default.

        Backslashes become forward slashes and ``..`` segments are folded.
        """
        path = base_path
        if from_curr_dir:
            path = os.getcwd() + FILE_SEPARATOR + base_path
        segments = _forward_slashes(path).split(FILE_SEPARATOR)
        stack: list[str] = []
        for segment in segments[:-1]:
            if segment == "..":
                if stack:
                    stack.pop()
            else:
                stack.append(segment)
        if segments[-1]:
            stack.append(segments[-1])
        self._path = FILE_SEPARATOR.join(stack)

    def add_database(self, name: str, path: str) -> FileDatabase:
        """Add a database under ``name`` (case-insensitive).

        Raises :class:`ValueError` if the name is already taken.
        """
        key = name.lower()
        if key in self._databases:
            raise ValueError(f"file database {name!r} already exists")
        if path.endswith(FILE_SEPARATOR):
            path = path[:-1]
        database = FileDatabase(path, self._path)
        self._databases[key] = database
        return database

    def __call__(self, name: str) -> FileDatabase | None:
        """Return the database called ``name``, or ``None``."""
        return self._databases.get(name.lower())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._databases