"""Command-line entry point: check the files and resolve command paths."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import Iterable, Optional, Sequence

from pipex.formatting import printf
from pipex.strutils import join, split

__all__ = [
    "AccessError",
    "EnvironmentPathError",
    "check_files",
    "path_candidates",
    "command_names",
    "find_path",
    "resolve_paths",
    "main",
]

USAGE = "Usage: ./pipex file1 cmd1 cmd2 file2\n"


class AccessError(OSError):
    """An input or output file cannot be used."""


class EnvironmentPathError(LookupError):
    """The environment carries no usable absolute PATH."""


def check_files(infile: str, outfile: str) -> None:
    """Ensure ``infile`` is readable and ``outfile`` exists and is writable.

    The output file is created (mode 0644) when it is not yet writable.
    Raises AccessError describing the first problem found.
    """
    if not os.access(infile, os.R_OK):
        raise AccessError(f"Can't access {infile}")
    if os.access(outfile, os.W_OK):
        return
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT, 0o644)
    except OSError:
        pass
    else:
        os.close(fd)
    if not os.access(outfile, os.F_OK):
        raise AccessError(f"Can't create {outfile}")
    if not os.access(outfile, os.W_OK):
        raise AccessError(f"Can't write on {outfile} file")


def path_candidates(environ: Optional[Mapping[str, str]] = None) -> list[str]:
    """Return the directories of an absolute PATH, empty entries dropped."""
    env = os.environ if environ is None else environ
    value = env.get("PATH")
    if not value or not value.startswith("/"):
        raise EnvironmentPathError("Error: corrupted env variable")
    return split(value, ":")


def command_names(commands: Iterable[str]) -> list[str]:
    """Prefix every command with a slash, ready to append to a directory."""
    return [join("/", command) for command in commands]


def find_path(candidates: Iterable[str], command: str) -> Optional[str]:
    """Return the first ``directory + command`` that is executable, or None."""
    for directory in candidates:
        path = join(directory, command)
        if os.access(path, os.X_OK):
            return path
    return None


def resolve_paths(candidates: Sequence[str], commands: Iterable[str]) -> list[Optional[str]]:
    """Resolve every command against the candidate directories."""
    return [find_path(candidates, command) for command in commands]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command with ``argv`` excluding the program name."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        printf(USAGE)
        return 1
    infile, outfile = args[0], args[-1]
    try:
        check_files(infile, outfile)
    except AccessError as exc:
        print(exc)
        print("Access: KO!")
    else:
        print("Files are accessible")
    try:
        candidates = path_candidates()
    except EnvironmentPathError as exc:
        printf("%s\n", str(exc))
        return 0
    printf("\nArgc: %d\n", len(args) + 1)
    commands = command_names(args[1:-1])
    for path in resolve_paths(candidates, commands):
        printf("Path: %s\n", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())