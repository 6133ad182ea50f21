# pypipex

`pypipex` connects a chain of commands the way a shell pipeline does: the
first command reads from an input file, each command's output feeds the next,
and the last command writes into an output file.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Usage

Pipeline mode, like `< infile cmd1 | cmd2 | ... > outfile`:

```
pypipex infile "grep a" "wc -l" outfile
```

At least two commands are required. The output file is opened first (created
if needed, truncated), then the input file.

Here-document mode, like `cmd1 << LIMITER | cmd2 | ... >> outfile`:

```
pypipex here_doc LIMITER "cat" "wc -l" outfile
```

The output file is created if needed and appended to. At least two commands
are required. Lines are read from standard input, each after a `heredoc> `
prompt on standard output, until a line equal to `LIMITER` or the end of
input; the limiter line is not passed on.

### Commands

Each command argument is split on spaces. The first word is looked up in the
directories of `PATH`; a name starting with `./` is run directly if it is
executable. Before anything runs, command arguments are checked: empty
arguments, absolute paths (`/...`) and names starting with `.` but not `./`
(including `../`) are rejected.

### Errors and exit status

Bad arguments, a rejected command, or an input or output file that cannot be
opened print a message starting with `Error:` on standard error, and the
program exits with status 1.

A command that cannot be found or started is reported on standard error
(`Error: command not found: ...`); the command after it reads empty input,
and the remaining commands still run. The exit statuses of the commands do
not change the program's own exit status, which is 0 once the pipeline has
been set up.

## Library use

```python
from pypipex.pipeline import run_pipeline, run_here_doc

statuses = run_pipeline("infile", ["grep a", "wc -l"], "outfile")
```

- `pypipex.pipeline.run_pipeline(infile, commands, outfile, env=None)` and
  `run_here_doc(limiter, commands, outfile, env=None, stdin=None, prompt_out=None)`
  return the exit status of each command in order; a command that could not
  be started counts as 1. `env` defaults to `os.environ`.
- `pypipex.pipeline.open_file(path, mode)` opens a file with an `OpenMode`
  (`APPEND`, `TRUNCATE`, `READ`) and returns its descriptor.
- `pypipex.paths.find_command(name, env=None)` resolves a command name,
  `path_directories(env=None)` lists the `PATH` directories, and
  `check_commands(commands)` applies the argument checks above.
- `pypipex.heredoc.read_heredoc(limiter, stdin=None, prompt_out=None)`
  collects here-document text from a stream.
- Setup failures raise `pypipex.paths.PipexError`.

The `pypipex.libft` sub-package holds small helpers:

- `chars`: ASCII classification (`is_alpha`, `is_digit`, ...), `to_upper`,
  `to_lower`, `atoi`, `itoa`.
- `memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`,
  `calloc` on byte buffers.
- `strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`,
  `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`,
  `strdup`.
- `lists`: `LinkedList` and `Node`.
- `output`: `put_char`, `put_str`, `put_endl`, `put_nbr` to a file descriptor.
- `lines`: `LineReader`, which reads a file descriptor line by line.

## Limitations

Commands are split on single spaces only: there is no quoting, no globbing,
no variable expansion and no redirection inside a command argument. The tool
runs on POSIX systems.