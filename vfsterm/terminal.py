"""An interactive shell over an in-memory directory tree."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from typing import TextIO

from vfsterm.directory import Directory
from vfsterm.rcfile import RCFile

DEFAULT_ROOT = "V/"
CLOSED_MESSAGE = "      [terminal  closed] \n"
PROMPT = "[input] "

_INT_PREFIX = re.compile(r"[+-]?\d+")


class PathNotFoundError(LookupError):
    """Raised when a directory path does not lead to an existing directory."""

    def __init__(self, message: str = "ERROR: Path doesn't exist!") -> None:
        super().__init__(message)


def _parse_int(token: str) -> int:
    """Leading integer of ``token``, or 0 when there is none."""
    match = _INT_PREFIX.match(token)
    return int(match.group()) if match else 0


class Terminal:
    """A shell over a directory tree whose entries are named by full paths.

    Directory paths end with ``/`` and start with the root name. File paths
    that start with the root name are absolute; any other file path is taken
    relative to the current directory.
    """

    def __init__(
        self,
        root_name: str = DEFAULT_ROOT,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.root_name = root_name
        self._root = Directory(root_name)
        self._cursor = self._root
        self._out = sys.stdout if out is None else out
        self._err = sys.stderr if err is None else err

    # ----- file commands -----

    def read(self, path: str, position: int) -> str:
        """Print and return the character at ``position`` of a file."""
        directory, full_path = self._resolve_file(path, self._cursor)
        char = self._existing_file(directory, full_path).read(position)
        self._out.write(f"\n{char}\n")
        return char

    def write(self, path: str, position: int, char: str) -> None:
        """Put ``char`` at ``position`` of a file."""
        directory, full_path = self._resolve_file(path, self._cursor)
        self._existing_file(directory, full_path).write(position, char)

    def touch(self, path: str) -> None:
        """Create a file if it is missing and touch it on disk."""
        directory, full_path = self._resolve_file(path, self._cursor)
        directory.register_file(full_path)
        RCFile.touch(full_path)

    def copy(self, src_path: str, target_path: str) -> None:
        """Copy the content of one file into another, creating the target.

        A relative target is resolved in the directory the source was found in.
        """
        if not self._is_valid_file(src_path):
            raise ValueError("ERROR: Wrong Source File!")
        if not self._is_valid_file(target_path):
            raise ValueError("ERROR: Wrong Target File!")
        src_dir, src_full = self._resolve_file(src_path, self._cursor)
        if not src_dir.file_exists(src_full):
            raise FileNotFoundError("ERROR: Source File Doesn't Exist!")
        source = src_dir.get_file(src_full)
        target_dir, target_full = self._resolve_file(target_path, src_dir)
        target_dir.register_file(target_full)
        RCFile.copy(source, target_dir.get_file(target_full))

    def remove(self, path: str) -> None:
        """Remove a file; a missing file is ignored."""
        directory, full_path = self._resolve_file(path, self._cursor)
        directory.remove_file(full_path)

    def move(self, src_path: str, target_path: str) -> None:
        """Copy a file to a new place, then remove the source."""
        try:
            self.copy(src_path, target_path)
        finally:
            self.remove(src_path)

    def cat(self, path: str) -> str:
        """Print and return the content of a file."""
        directory, full_path = self._resolve_file(path, self._cursor)
        content = self._existing_file(directory, full_path).cat()
        self._out.write(f"{content}\n")
        return content

    def wc(self, path: str) -> str:
        """Print and return the line, word and character counts of a file."""
        directory, full_path = self._resolve_file(path, self._cursor)
        summary = str(self._existing_file(directory, full_path).wc())
        self._out.write(f"{summary}\n")
        return summary

    def ln(self, src_path: str, link_name: str) -> None:
        """Add ``link_name`` as another name for an existing file."""
        if not self._is_valid_file(src_path):
            raise ValueError("ERROR: Wrong Source File!")
        if not self._is_valid_file(link_name):
            raise ValueError("ERROR: Wrong Link Name!")
        src_dir, src_full = self._resolve_file(src_path, self._cursor)
        if not src_dir.file_exists(src_full):
            raise FileNotFoundError("ERROR: Source File Doesn't Exist!")
        source = src_dir.get_file(src_full)
        link_dir, link_full = self._resolve_file(link_name, self._cursor)
        if link_dir.file_exists(link_full):
            raise FileExistsError("ERROR: Link name already exists!")
        link_dir.link_file(link_full, source)

    # ----- directory commands -----

    def mkdir(self, path: str) -> None:
        """Create a directory; the current directory becomes its parent."""
        if not self._is_valid_dir(path):
            raise ValueError("ERROR: Not a Valid Path!")
        parent = self._enter(self._parent_of(path))
        parent.mkdir(path)

    def chdir(self, path: str) -> None:
        """Change the current directory; on failure it becomes the root."""
        if not self._is_valid_dir(path):
            raise ValueError("ERROR: Not a Valid Path!")
        self._enter(path)

    def rmdir(self, path: str) -> None:
        """Remove a directory; the current directory becomes its parent."""
        if path == self.root_name:
            raise ValueError("ERROR: Cannot remove root directory!")
        if not self._is_valid_dir(path):
            raise ValueError("ERROR: Not a Valid Path!")
        parent = self._enter(self._parent_of(path))
        parent.rmdir(path)

    def ls(self, path: str) -> str:
        """Print and return the listing of a directory."""
        listing = self._find_dir(path).ls()
        self._out.write(listing)
        return listing

    def lproot(self) -> str:
        """Print and return the breadth-first listing of the whole tree."""
        listing = self._root.lproot()
        self._out.write(listing)
        return listing

    def pwd(self) -> str:
        """Print and return the current directory."""
        name = self._cursor.pwd()
        self._out.write(f"{name}\n")
        return name

    # ----- command line -----

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the line ends the session."""
        if line == "exit":
            self._out.write(CLOSED_MESSAGE)
            return False
        tokens = line.split()
        cmd = tokens[0] if tokens else ""
        args = [*tokens[1:], "", "", ""]
        try:
            match cmd:
                case "read":
                    self.read(args[0], _parse_int(args[1]))
                case "write":
                    self.write(args[0], _parse_int(args[1]), args[2][:1])
                case "touch":
                    self.touch(args[0])
                case "copy":
                    self.copy(args[0], args[1])
                case "remove":
                    self.remove(args[0])
                case "move":
                    self.move(args[0], args[1])
                case "cat":
                    self.cat(args[0])
                case "wc":
                    self.wc(args[0])
                case "ln":
                    self.ln(args[0], args[1])
                case "mkdir":
                    self.mkdir(args[0])
                case "chdir":
                    self.chdir(args[0])
                case "rmdir":
                    self.rmdir(args[0])
                case "ls":
                    self.ls(args[0])
                case "lproot":
                    self.lproot()
                case "pwd":
                    self.pwd()
                case _:
                    self._out.write(f"Unknown command: {cmd}\n")
        except IndexError as exc:
            self._out.write(f"{exc}\n")
        except (ValueError, LookupError, OSError) as exc:
            self._err.write(f"{exc}\n")
        return True

    def start(self, lines: Iterable[str] | None = None) -> None:
        """Prompt for and run commands until ``exit`` or the input ends."""
        source = iter(sys.stdin if lines is None else lines)
        while True:
            self._out.write(PROMPT)
            self._out.flush()
            try:
                line = next(source)
            except StopIteration:
                break
            if not self.execute(line.rstrip("\n")):
                break

    # ----- helpers -----

    def _is_valid_dir(self, path: str) -> bool:
        return path.endswith("/") and path.startswith(self.root_name)

    @staticmethod
    def _is_valid_file(path: str) -> bool:
        return bool(path) and not path.endswith("/")

    def _is_absolute(self, path: str) -> bool:
        return path.startswith(self.root_name)

    @staticmethod
    def _parent_of(path: str) -> str:
        """Path of the directory holding ``path``, including its final slash."""
        return path[: path.rfind("/", 0, len(path) - 1) + 1]

    def _find_dir(self, dir_path: str) -> Directory:
        parts = dir_path.split("/")
        if len(parts) > 1 and parts[-1] == "":
            parts.pop()
        head, *rest = parts
        if f"{head}/" != self.root_name:
            raise PathNotFoundError()
        current = self._root
        for part in rest:
            following = current.chdir(f"{current.name}{part}/")
            if following is None:
                raise PathNotFoundError()
            current = following
        return current

    def _enter(self, dir_path: str) -> Directory:
        """Make ``dir_path`` current; on failure the root becomes current."""
        try:
            self._cursor = self._find_dir(dir_path)
        except PathNotFoundError:
            self._cursor = self._root
            raise
        return self._cursor

    def _resolve_file(self, path: str, base: Directory) -> tuple[Directory, str]:
        """Directory that holds ``path`` and the file's full name in it."""
        if not self._is_valid_file(path):
            raise ValueError("ERROR: Wrong file Path!")
        if self._is_absolute(path):
            return self._find_dir(self._parent_of(path)), path
        return base, base.name + path

    @staticmethod
    def _existing_file(directory: Directory, full_path: str) -> RCFile:
        if not directory.file_exists(full_path):
            raise FileNotFoundError("ERROR: File Doesn't Exist!")
        return directory.get_file(full_path)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive shell on standard input."""
    parser = argparse.ArgumentParser(
        prog="vfsterm", description="Shell over an in-memory file system."
    )
    parser.parse_args(argv)
    Terminal().start()
    return 0