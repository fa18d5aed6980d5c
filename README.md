# pipex

`pipex` takes an input file, one or more commands and an output file. These
are the same arguments a shell pipeline `< file1 cmd1 | cmd2 > file2` would
use. The command checks that the input file can be read. It checks that the
output file can be written, and creates it with mode 0644 if it is not yet
writable. It then looks up each command in the directories listed in `PATH`.

## Installation

```
pip install .
```

## Command line

```
pipex file1 cmd1 cmd2 [cmd3 ...] file2
```

For example:

```
pipex input.txt cat wc output.txt
```

The command prints its results in this order:

1. `Files are accessible`, or the problem found followed by `Access: KO!`.
   A problem with the files does not stop the run.
2. `Argc: N`, where N counts the program name and all its arguments.
3. One `Path:` line for each command. A command that is not found in `PATH`
   is shown as `(null)`.

With fewer than four arguments it prints a usage line and exits with status 1.
If `PATH` is missing or does not start with `/`, it prints
`Error: corrupted env variable` and exits with status 0 without looking up any
command.

## What it does not do

`pipex` only checks files and resolves command paths. It does not run the
commands and does not connect them with pipes. It reads nothing from the
input file and writes nothing to the output file, apart from creating the
output file when it is needed.

## Library

The steps the command takes can also be called from Python, through
`pipex.cli`:

- `check_files(infile, outfile)` checks both files. It raises `AccessError`
  (a subclass of `OSError`) when one of them cannot be used.
- `path_candidates(environ=None)` returns the directories in `PATH`, with empty
  entries dropped. It reads `os.environ` when no mapping is given. It raises
  `EnvironmentPathError` (a subclass of `LookupError`) when `PATH` is missing
  or does not start with `/`.
- `command_names(commands)` puts a `/` in front of each command name.
- `find_path(candidates, command)` returns the first `directory + command` that
  is executable, or `None`.
- `resolve_paths(candidates, commands)` calls `find_path` for every command.
- `main(argv=None)` runs the whole command and returns its exit status.

The package also provides these helper modules:

- `pipex.chars`: ASCII character tests and case changes: `is_alnum`,
  `is_alpha`, `is_digit`, `is_ascii`, `is_print`, `is_char`, `to_lower` and
  `to_upper`. Each one takes a one-character string or an integer code.
- `pipex.search`: `strncmp`, `strnstr`, `strchr`, `memchr` and `memcmp`.
  Positions are returned as indices, or `None` when nothing is found.
- `pipex.strutils`: `atoi`, `itoa`, `split`, `trim`, `substr`, `join` and
  `map_indexed`.
- `pipex.lines`: `LineReader(fd, buffer_size=10)` reads lines from a raw file
  descriptor, `buffer_size` bytes at a time. Each line keeps its trailing
  newline. `readline()` returns `None` at the end of the data, and iterating
  over the reader yields every remaining line. `read_lines(fd, buffer_size=10)`
  is a generator that does the same.
- `pipex.formatting`: `format` and `printf` accept the conversions
  `%s %d %i %u %x %X %p %c %%`. `printf` writes to a stream, standard output by
  default, and returns the number of characters written. The module also has
  `put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd`, which write to a
  file descriptor.

```python
from pipex.formatting import format
from pipex.strutils import split

split("/usr/bin:/bin", ":")         # ['/usr/bin', '/bin']
format("%x %X %p", 255, 255, 0)     # 'ff FF (nil)'
```

## Tests

```
pip install .[test]
pytest
```