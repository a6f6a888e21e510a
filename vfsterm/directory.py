"""Nodes of an in-memory directory tree."""

from __future__ import annotations

from collections import deque

from vfsterm.rcfile import RCFile

PARENT = ".."


class Directory:
    """A directory holding files and subdirectories keyed by their full names.

    Every subdirectory keeps a ``..`` entry that refers back to its parent.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._files: dict[str, RCFile] = {}
        self._dirs: dict[str, Directory] = {}

    def mkdir(self, name: str) -> Directory:
        """Create (or replace) the subdirectory ``name`` and return it."""
        old = self._dirs.get(name)
        if old is not None and name != PARENT:
            old._dispose()
        child = Directory(name)
        child._dirs[PARENT] = self
        self._dirs[name] = child
        return child

    def chdir(self, name: str) -> Directory | None:
        """Return the subdirectory ``name``, or ``None`` if there is none."""
        return self._dirs.get(name)

    def rmdir(self, name: str) -> None:
        """Remove the subdirectory ``name`` and everything below it."""
        removed = self._dirs.pop(name, None)
        if removed is not None and name != PARENT:
            removed._dispose()

    def _entries(self) -> list[str]:
        return [*self._files, *(d for d in self._dirs if d != PARENT)]

    def ls(self) -> str:
        """Listing of this directory: its name, then its files and subdirectories."""
        return f"{self.name}:\n" + "".join(f"{e} " for e in self._entries()) + "\n"

    def lproot(self) -> str:
        """Breadth-first listing of the tree with each file's reference count."""
        out: list[str] = []
        queue: deque[Directory] = deque([self])
        while queue:
            current = queue.popleft()
            out.append(f"{current.name}:\n")
            queue.extend(d for key, d in current._dirs.items() if key != PARENT)
            out.extend(f"{key} {f.ref_count()}\n" for key, f in current._files.items())
        return "".join(out)

    def pwd(self) -> str:
        """Name of this directory."""
        return self.name

    def link_file(self, name: str, file: RCFile) -> None:
        """Add ``name`` as another handle onto ``file``; an existing name is kept."""
        if name not in self._files:
            self._files[name] = file.share()

    def register_file(self, name: str) -> None:
        """Add a new empty file ``name``; an existing name is kept."""
        if name not in self._files:
            self._files[name] = RCFile(name)

    def remove_file(self, name: str) -> None:
        """Remove ``name`` if present, releasing its handle."""
        removed = self._files.pop(name, None)
        if removed is not None:
            removed.release()

    def file_exists(self, name: str) -> bool:
        return name in self._files

    def dir_exists(self, name: str) -> bool:
        return name in self._dirs

    def get_file(self, name: str) -> RCFile:
        """Return the file ``name``; raises KeyError if absent."""
        return self._files[name]

    def get_dir(self, name: str) -> Directory:
        """Return the subdirectory ``name``; raises KeyError if absent."""
        return self._dirs[name]

    def _dispose(self) -> None:
        for key, child in self._dirs.items():
            if key != PARENT:
                child._dispose()
        for handle in self._files.values():
            handle.release()
        self._files.clear()
        self._dirs.clear()

    def __repr__(self) -> str:
        return f"Directory({self.name!r})"