"""Commands the shell runs itself, and the launching of external programs."""

from __future__ import annotations

import os
import stat
import subprocess
import sys
from collections.abc import Sequence
from enum import Enum
from typing import IO, Any, TextIO

from .chars import isalpha, isdigit
from .cstr import atoi
from .environment import Environment

__all__ = [
    "ShellExit",
    "cd",
    "echo",
    "pwd",
    "export",
    "unset",
    "env_command",
    "exit_command",
    "find_path",
    "run_external",
    "run_local",
]

_STATUS_MASK = 0xFF
_DEFAULT_BIN_DIR = "/usr/bin/"


class ShellExit(Exception):
    """Raised by ``exit``: the shell should stop with ``code``."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code & _STATUS_MASK


class _Identifier(Enum):
    NAME_ONLY = "name"
    ASSIGNMENT = "assignment"
    INVALID = "invalid"


def _stdout(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def _stderr(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stderr


def cd(args: Sequence[str], env: Environment, stderr: TextIO | None = None) -> int:
    """Change directory to ``args[1]``, or to $HOME when no argument is given."""
    err = _stderr(stderr)
    if len(args) < 2:
        home = env.getenv("HOME")
        try:
            if home is None:
                raise FileNotFoundError("HOME")
            os.chdir(home)
        except OSError:
            err.write("Error: HOME does not exist in the environment\n")
            return 1
        return 0
    if len(args) > 2:
        err.write(" too many arguments\n")
        return 1
    try:
        os.chdir(args[1])
    except OSError:
        err.write(f"cd: {args[1]}: No such file or directory\n")
        return 1
    return 0


def echo(args: Sequence[str], stdout: TextIO | None = None) -> int:
    """Print the arguments separated by spaces; ``-n`` first drops the newline."""
    words = list(args[1:])
    newline = True
    if words and words[0] == "-n":
        newline = False
        words = words[1:]
    _stdout(stdout).write(" ".join(words) + ("\n" if newline else ""))
    return 0


def pwd(stdout: TextIO | None = None) -> int:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError:
        return 1
    _stdout(stdout).write(f"{cwd}\n")
    return 0


def _classify(arg: str) -> _Identifier:
    pos = 0
    while pos < len(arg) and isalpha(arg[pos]):
        pos += 1
    if arg.startswith("="):
        return _Identifier.INVALID
    if pos == len(arg):
        return _Identifier.NAME_ONLY
    if arg[pos] == "=":
        return _Identifier.ASSIGNMENT
    return _Identifier.INVALID


def export(
    args: Sequence[str],
    env: Environment,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Define or export variables; with no arguments, print the export table.

    Names are made of ASCII letters only. Processing stops at the first
    invalid identifier.
    """
    if len(args) == 1:
        _stdout(stdout).write(env.format_export())
        return 0
    for arg in args[1:]:
        if env.has(arg, exported=True):
            env.remove([arg.partition("=")[0]])
        kind = _classify(arg)
        if kind is _Identifier.ASSIGNMENT:
            env.add_env(arg)
            env.add_export(arg)
        elif kind is _Identifier.NAME_ONLY:
            env.add_export(arg + "=")
        else:
            _stderr(stderr).write(" not a valid identifier\n")
            return 1
    return 0


def unset(args: Sequence[str], env: Environment) -> int:
    """Remove the named variables from the environment and the export table."""
    if len(args) > 1:
        env.remove(args[1:])
    return 0


def env_command(
    env: Environment, stdout: TextIO | None = None, stderr: TextIO | None = None
) -> int:
    """Print the environment; without PATH the command is not found."""
    if not env.has("PATH"):
        _stderr(stderr).write(" command not found\n")
        return 127
    _stdout(stdout).write(env.format_env())
    return 0


def _is_numeric(text: str) -> bool:
    return all(isdigit(c) or c in "+-" for c in text)


def exit_command(
    args: Sequence[str],
    last_status: int,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Leave the shell by raising ShellExit.

    The code is the last status unless that is zero and a numeric argument
    is given. A non-numeric argument gives code 2. With more than one
    argument nothing happens and 1 is returned.
    """
    err = _stderr(stderr)
    code = last_status & _STATUS_MASK
    argument = args[1] if len(args) > 1 else None
    if argument is not None and not _is_numeric(argument):
        err.write(" numeric argument required\n")
        code = 2
    if len(args) > 2:
        err.write(" too many arguments\n")
        return 1
    if argument is not None and not code:
        code = atoi(argument) & _STATUS_MASK
    _stdout(stdout).write("exit\n")
    raise ShellExit(code)


def find_path(cmd: str, env: Environment) -> str | None:
    """Resolve a command name to the path that will be executed.

    Absolute paths are used as they are; other names are looked up in
    /usr/bin, and only when PATH is set.
    """
    if cmd.startswith("/"):
        return cmd
    if env.getenv("PATH") is None:
        return None
    return _DEFAULT_BIN_DIR + cmd


def _usable_fd(stream: Any) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _child_env(env: Environment) -> dict[str, str]:
    return dict(entry.partition("=")[::2] for entry in env.env_entries)


def _output_target(stream: IO[Any] | None) -> tuple[Any, IO[Any] | None]:
    """Where a child writes, and the stream to copy captured output into."""
    if stream is None:
        return None, None
    fd = _usable_fd(stream)
    if fd is None:
        return subprocess.PIPE, stream
    stream.flush()
    return fd, None


def _spawn(
    argv: Sequence[str],
    executable: str,
    env: Environment,
    stdin: IO[Any] | None,
    stdout: IO[Any] | None,
    stderr: IO[Any] | None,
) -> int:
    kwargs: dict[str, Any] = {}
    if stdin is not None:
        fd = _usable_fd(stdin)
        if fd is None:
            data = stdin.read()
            kwargs["input"] = data.encode() if isinstance(data, str) else data
        else:
            kwargs["stdin"] = fd
    out_target, out_copy = _output_target(stdout)
    err_target, err_copy = _output_target(stderr)
    completed = subprocess.run(
        list(argv),
        executable=executable,
        env=_child_env(env),
        stdout=out_target,
        stderr=err_target,
        check=False,
        **kwargs,
    )
    for captured, stream in ((completed.stdout, out_copy), (completed.stderr, err_copy)):
        if stream is not None and captured:
            stream.write(captured.decode("utf-8", errors="replace"))
    code = completed.returncode
    return code & _STATUS_MASK if code >= 0 else 0


def run_external(
    args: Sequence[str],
    env: Environment,
    stdin: IO[Any] | None = None,
    stdout: IO[Any] | None = None,
    stderr: IO[Any] | None = None,
) -> int:
    """Run a program found by find_path and return its exit status."""
    err = _stderr(stderr)
    path = find_path(args[0], env)
    if path is None:
        err.write(" command not found\n")
        return 127
    try:
        return _spawn(args, path, env, stdin, stdout, stderr)
    except OSError:
        err.write(" command not found\n")
        return 127


def _diagnose(target: str, stderr: TextIO) -> int:
    try:
        info = os.stat(target)
    except OSError:
        stderr.write(" No such file or directory\n")
        return 127
    mode = info.st_mode
    executable = (
        mode & stat.S_IXUSR
        or (mode & stat.S_IXGRP and os.getegid() == info.st_gid)
        or mode & stat.S_IXOTH
    )
    if executable:
        stderr.write(" Is a directory")
    else:
        stderr.write(" Permission denied\n")
    return 126


def run_local(
    args: Sequence[str],
    env: Environment,
    stdin: IO[Any] | None = None,
    stdout: IO[Any] | None = None,
    stderr: IO[Any] | None = None,
) -> int:
    """Run ``./program`` from the current directory and return its exit status."""
    err = _stderr(stderr)
    target = args[0][2:]
    if not target:
        err.write(" permission denied: ./\n")
        return 126
    try:
        return _spawn(args, os.path.join(".", target), env, stdin, stdout, stderr)
    except OSError:
        return _diagnose(target, err)