# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file, and its output goes to the second command. The second command
writes to an output file. Running

```
pipex infile "grep foo" "wc -l" outfile
```

works like the shell line

```
< infile grep foo | wc -l > outfile
```

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

```
pipex FILE1 CMD1 CMD2 FILE2
```

- `FILE1` is opened for reading and becomes the standard input of `CMD1`.
- `FILE2` is created or truncated with mode `0666`, less the umask, and receives
  the standard output of `CMD2`.
- Each command is split on spaces. A run of spaces counts as one separator.
  There is no quoting, escaping or other shell syntax.
- A command name that contains `/` is used as it is, and the file must exist.
  Any other name is looked up in the directories of the first environment
  variable whose name begins with `PATH`. The first directory that holds an
  executable file of that name wins. If none does, the name is run relative to
  the current directory.

If the number of arguments is wrong, `pipex` prints a usage line on standard
error and exits with status 1. Otherwise it waits for both commands and exits
with status 0, whatever their own exit statuses are.

Each side of the pipe reports its own errors on standard error, and the other
side still runs. The errors are:

- an input or output file that cannot be opened (`FILE: reason`)
- an empty command (`: permission denied:`)
- a command that contains only spaces, or one that cannot be found or started
  (`NAME: command not found`)
- a path with `/` that does not exist (`no such file or directory: PATH`)

## Library use

The modules of the package can also be used on their own.

- `pipex.cli`:
  - `run_pipeline(infile, cmd1, cmd2, outfile, env=None)` runs the pipeline.
    It uses `os.environ` when `env` is omitted, and returns a tuple of the two
    commands' exit statuses. A command that could not be started counts as 1.
  - `build_argv(arg)` splits a command string. It raises `PermissionError` for
    an empty string and `CommandNotFoundError` for one made only of spaces.
  - `main(argv=None)` is the command-line entry point.
- `pipex.paths`:
  - `resolve_command(cmd, env)` returns the path to run for a command name.
  - `search_dirs(env)` returns the directories from the environment, or `None`.
  - `has_slash_path(cmd)` reports whether a name contains a slash. It raises
    `NoSuchFileError` if the name has a slash and the file is missing.
- `pipex.strings`: `atoi`, `itoa`, `split`, `strchr`, `strrchr`, `strdup`,
  `striteri`, `strjoin`, `strlcat`, `strlcpy`, `strlen`, `strmapi`, `strncmp`,
  `strnstr`, `strtrim` and `substr`. Searches return an index or `None`.
  `strlcat` and `strlcpy` return the resulting string together with the length
  the full result would have needed.
- `pipex.memory`: `bzero`, `calloc`, `memset`, `memcpy`, `memmove`, `memchr` and
  `memcmp`, working on `bytearray` and other buffers.
- `pipex.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper` and `to_lower`. Each takes a character code or a one-character
  string.
- `pipex.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`, which
  write to a text stream.
- `pipex.linkedlist`: `Node` and `LinkedList`. A `LinkedList` has
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `iterate` and `map`,
  and supports `len()` and iteration.

```python
import os
from pipex.cli import run_pipeline

statuses = run_pipeline("input.txt", "sort", "uniq -c", "counts.txt", dict(os.environ))
```

## Limits

`pipex` connects exactly two commands. It has no support for longer pipelines,
here-documents, appending to the output file, or quoting in command strings.

## Running the tests

```
pytest
```