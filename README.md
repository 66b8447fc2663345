# minishell

Building blocks for a small command shell. The package can split a command
line into words and operators, expand variables, and keep the environment and
export tables. It also provides the shell's builtin commands and launches
external programs.

## Installation

```
pip install .
```

## Modules

- `minishell.lexer`
  - `tokenize(line, env, last_status=0)` splits a line into tokens.
    - Blanks (space and tab) separate words.
    - `|`, `<`, `>`, `<<` and `>>` are tokens of their own.
    - Single quotes keep their text literally.
    - Double quotes keep their text but expand `$NAME` and `$?`.
    - An unclosed quote raises `ValueError`.
  - `is_blank(c)` tells whether a character separates words.
- `minishell.environment`
  - `Environment` holds the environment list, kept in insertion order, and the
    export table, kept sorted. Its methods:
    - `getenv(name)`
    - `has(arg, exported=False)`
    - `remove(names)`
    - `add_env(entry)`
    - `add_export(entry)`
    - `format_env()`
    - `format_export()`
  - `sorted_entries(entries)` sorts entries by character code.
- `minishell.builtins`
  - Builtin commands: `cd`, `echo` (with `-n`), `pwd`, `export`, `unset`,
    `env_command` and `exit_command`.
    - `exit_command` raises `ShellExit`, and its `code` attribute holds the
      exit status.
  - `find_path(cmd, env)` resolves a command name:
    - an absolute path is used as it is;
    - any other name is looked up as `/usr/bin/<name>`, and only when `PATH`
      is set.
  - `run_external(args, env, ...)` runs a program found by `find_path` and
    returns its exit status.
  - `run_local(args, env, ...)` runs `./program` and returns its exit status.
- `minishell.printf`
  - `format(template, *args)` renders the conversions
    `%c %s %p %d %i %u %x %X %%`.
  - `printf(template, *args, stream=None)` writes the result and returns its
    length.
- `minishell.cstr` holds string helpers with fixed edge-case behaviour:
  `atoi`, `itoa`, `split`, `strtrim`, `strnstr`, `strncmp`, `strcmp`,
  `substr`, `strchr` and `strrchr`.
- `minishell.chars` holds ASCII classification and case mapping: `isalpha`,
  `isalnum`, `isdigit`, `isprint`, `isascii`, `tolower` and `toupper`.

## Example

```python
import io
from minishell.environment import Environment
from minishell.lexer import tokenize
from minishell.builtins import echo, export, exit_command, ShellExit
from minishell.printf import format

env = Environment(["PATH=/usr/bin", "HOME=/tmp", "NAME=world"])
assert tokenize('echo "hello $NAME" | cat > out.txt', env) == [
    "echo", "hello world", "|", "cat", ">", "out.txt",
]
assert tokenize("echo $?", env, 3) == ["echo", "3"]

out = io.StringIO()
assert echo(["echo", "-n", "hi"], out) == 0 and out.getvalue() == "hi"

export(["export", "GREETING=hello"], env)
assert env.getenv("GREETING") == "hello"

try:
    exit_command(["exit", "3"], 0, io.StringIO(), io.StringIO())
except ShellExit as stop:
    assert stop.code == 3

assert format("%d %x %p", -1, 255, 0) == "-1 ff (nil)"
```

## What it does not do

The package has no interactive prompt and no command to start. Its parts do
not yet add up to a shell:

- It splits pipelines and redirection operators into tokens but does not run
  them. Nothing connects commands with pipes.
- Nothing opens files for `<`, `>` or `>>`.
- Nothing reads here-documents for `<<`.
- There is no read-evaluate loop that puts the tokenizer and the builtins
  together.

## Running the tests

```
pip install .[test]
pytest
```