# vfsterm

vfsterm is a virtual file system that lives entirely in memory, with a small
interactive shell for working with it. It holds a tree of directories and
files. Files are reference counted, so one file can be hard-linked under
several names.

## Installation

```
pip install .
```

## Interactive use

```
vfsterm
```

This opens a prompt (`[input] `) on a file system whose root is `V/`. Type
`exit` to leave. The shell also stops when standard input ends.

### Paths

- Directory paths must end in `/` and begin with the root name, for example
  `V/docs/`.
- A file path that begins with the root name is absolute, for example
  `V/docs/a.txt`. Any other file path is relative to the current directory.
  A relative `a.txt` in `V/docs/` names `V/docs/a.txt`.
- Entries are stored and listed under their full names. A listing of `V/`
  therefore shows `V/b.txt` and not `b.txt`.

### Commands

| Command | Meaning |
| --- | --- |
| `touch PATH` | create a file if it is missing (see the note below) |
| `write PATH POS CHAR` | put a character at a position; writing one past the end appends |
| `read PATH POS` | print the character at a position |
| `cat PATH` | print the file's contents |
| `wc PATH` | print the line, word and character counts, then the file's name |
| `copy SRC DST` | copy the contents, creating the target file if it is missing |
| `move SRC DST` | copy, then remove the source |
| `remove PATH` | remove a file entry; a missing file is ignored |
| `ln SRC LINK` | add a second name for the same file; fails if `LINK` exists |
| `mkdir DIR/` | create a directory |
| `chdir DIR/` | change the current directory |
| `rmdir DIR/` | remove a directory and everything below it; the root cannot be removed |
| `ls DIR/` | list a directory's files and subdirectories |
| `lproot` | list the whole tree breadth-first, with each file's reference count |
| `pwd` | print the current directory |

Some commands have side effects on the shell and on disk:

- After `mkdir` and `rmdir`, the parent of the named directory becomes the
  current directory.
- If `chdir` fails, the current directory becomes the root.
- A relative `copy` target is resolved in the directory where the source was
  found.
- `touch` also opens the file with the same path on the real disk, relative
  to the working directory, and empties it. A path there that cannot be
  opened is silently skipped.

Errors are printed as `ERROR: ...` messages, and the shell keeps running.
Read and write positions out of range are reported on standard output. All
other errors are reported on standard error.

### Example session

```
[input] mkdir V/docs/
[input] touch V/docs/a.txt
[input] write V/docs/a.txt 0 h
[input] ln V/docs/a.txt V/b.txt
[input] lproot
V/:
V/b.txt 2
V/docs/:
V/docs/a.txt 2
[input] exit
      [terminal  closed] 
```

## Library use

```python
import io
from vfsterm.terminal import Terminal

out = io.StringIO()
term = Terminal("V/", out=out)
term.mkdir("V/docs/")
term.touch("V/docs/notes")
term.write("V/docs/notes", 0, "x")
term.cat("V/docs/notes")   # returns "x" and writes "x\n" to out
print(out.getvalue())
```

`Terminal` methods return what they print: `read`, `cat`, `wc`, `ls`,
`lproot` and `pwd`. On failure they raise exceptions instead of printing
messages. The possible exceptions are `ValueError`, `IndexError`,
`FileNotFoundError`, `FileExistsError`, and
`vfsterm.terminal.PathNotFoundError` for a directory that does not exist.

`Terminal.execute(line)` runs one command line and reports errors the way the
shell does. It returns `False` for `exit`. `Terminal.start(lines)` runs an
iterable of lines, or standard input when none is given, until it reaches
`exit`.

The shell is built on two classes that you can also use directly:

- `vfsterm.directory.Directory` is a tree node.
- `vfsterm.rcfile.RCFile` is a shared, reference-counted file handle. It
  offers `share`, `release`, `ref_count`, `read`, `write`, `cat` and `wc`.

## Limitations

File contents exist only in memory for the life of the process. Nothing is
saved or loaded between sessions. Apart from the `touch` side effect described
above, the package does not read or write real files.