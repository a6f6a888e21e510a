"""Reference-counted in-memory file handles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class _Descriptor:
    """Storage shared by every handle that refers to the same file."""

    ref_count: int = 1
    content: str = ""


@dataclass(frozen=True)
class WordCount:
    """Line, word and character totals of a file."""

    lines: int
    words: int
    chars: int
    name: str

    def __str__(self) -> str:
        return f"{self.lines} {self.words} {self.chars} {self.name}"


class RCFile:
    """A named handle onto file content that is shared and reference counted.

    ``share`` hands out another handle onto the same content and raises the
    count; ``release`` gives a handle up and lowers it.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._desc = _Descriptor()
        self._released = False

    @classmethod
    def _attach(cls, name: str, desc: _Descriptor) -> RCFile:
        handle = cls.__new__(cls)
        handle.name = name
        handle._desc = desc
        handle._released = False
        desc.ref_count += 1
        return handle

    def share(self) -> RCFile:
        """Return a new handle onto the same content."""
        self._check_live()
        return RCFile._attach(self.name, self._desc)

    def release(self) -> None:
        """Give this handle up, dropping one reference to the content."""
        self._check_live()
        self._released = True
        self._desc.ref_count -= 1

    def ref_count(self) -> int:
        """Number of live handles onto this content."""
        return self._desc.ref_count

    def read(self, index: int) -> str:
        """Return the character at ``index``."""
        content = self._desc.content
        if index < 0 or index >= len(content):
            raise IndexError("ERROR: Read index out of range")
        return content[index]

    def write(self, index: int, char: str) -> None:
        """Put ``char`` at ``index``; an index one past the end appends."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("a single character is required")
        content = self._desc.content
        if index < 0 or index > len(content):
            raise IndexError("ERROR: Write index out of range")
        self._desc.content = content[:index] + char + content[index + 1:]

    def cat(self) -> str:
        """Return the whole content."""
        return self._desc.content

    def wc(self) -> WordCount:
        """Count lines, words and characters (newlines not counted)."""
        lines = self._desc.content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return WordCount(
            lines=len(lines),
            words=sum(len(line.split()) for line in lines),
            chars=sum(len(line) for line in lines),
            name=self.name,
        )

    @staticmethod
    def touch(name: str) -> None:
        """Create ``name`` on disk, emptying it if it already exists.

        A path that cannot be opened is silently ignored.
        """
        try:
            with open(name, "w", encoding="utf-8"):
                pass
        except OSError:
            pass

    @staticmethod
    def copy(source: RCFile, destination: RCFile) -> None:
        """Replace the content of ``destination`` with that of ``source``."""
        destination._desc.content = source._desc.content

    def _check_live(self) -> None:
        if self._released:
            raise ValueError(f"handle to {self.name!r} was already released")

    def __repr__(self) -> str:
        return f"RCFile({self.name!r}, refs={self.ref_count()})"