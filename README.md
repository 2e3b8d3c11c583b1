# hshell

A small command shell. It reads commands line by line, splits each line into
words on spaces, tabs and newlines, looks the program up through the
directories in `PATH` and runs it as a child process, waiting for it to
finish.

## Installing

```
pip install .
```

## Using the shell

The `hsh` command starts the shell on standard input:

```
$ hsh
($) ls -l /tmp
($) exit
```

When standard input is a terminal the shell prints the prompt `($) ` before
each line and runs interactively. Otherwise it reads commands without a
prompt:

```
$ echo "ls /" | hsh
```

Behaviour:

- Blank lines are ignored.
- A command whose name contains a `/` is run from that path as given; any
  other name is searched for in each directory of `PATH`, and the first
  executable `dir/name` is used.
- A command that cannot be found is reported on standard error as
  `./hsh: 1: <name>: not found`. In interactive mode the shell carries on; in
  non-interactive mode it stops with exit status 127.
- A program that is found but cannot be started is reported on standard
  error as `<name>: <reason>`.
- `exit` ends an interactive session with status 0. In non-interactive mode
  `exit` is ignored and reading continues. Any argument to `exit` is ignored
  by the shell.
- At end of input the shell stops with status 0.

## Using it as a library

- `hshell.tokenizer.split_line(line)` splits a command line into words.
- `hshell.pathsearch`:
  - `get_path_env(environ=None)` returns `PATH` from a mapping (default
    `os.environ`).
  - `path_directories(path)` lists the non-empty directories of a
    colon-separated path.
  - `find_path(command, path=None)` returns the first executable
    `dir/command`, or `None`.
  - `search_in_path(command, path=None)` does the same, but checks a name
    containing `/` directly.
  - `get_command_path(args, path=None)` returns `args[0]` as is when it
    contains `/`, otherwise searches `PATH`.
  - `locate_files(names, path=None)` returns `(name, full_path)` pairs, with
    `None` where the name exists in no directory; it raises `LookupError`
    when no path is given and `PATH` is unset.
- `hshell.envtools` works on any mapping, `os.environ` by default:
  `getenv(name, environ=None)`, `setenv(name, value, overwrite=True,
  environ=None)`, `unsetenv(name, environ=None)` and
  `format_environment(environ=None)`, which returns `NAME=VALUE` lines.
  `setenv` and `unsetenv` raise `ValueError` for invalid names.
- `hshell.fileops`: `copy_file(src, dest)` copies a file, creating the
  destination with mode 0755 or truncating it, and raises `OSError` on
  failure; `stat_report(paths)` yields `"<path>: FOUND"` or
  `"<path>: NOT FOUND"`.
- `hshell.builtins`: `parse_exit_status(text)` accepts only ASCII digits and
  raises `IllegalNumberError` otherwise; `handle_exit(args)` raises
  `ShellExit` carrying the parsed status.
- `hshell.executor.Executor(interactive=None, environ=None, stderr=None)`
  runs parsed commands with `execute(args)`, keeps `last_status`, and starts
  programs with `run_program(path, args)`.
- `hshell.cli.run_shell(stream=None, executor=None, interactive=None,
  stdout=None)` runs the read-and-execute loop over any text stream and
  returns the final status.

## What it does not do

The shell has no quoting, escaping, variable expansion, globbing, pipes,
redirection, command separators or job control. Its only built-in is `exit`;
there is no `cd`, `env`, `setenv` or `unsetenv` command, although the
environment helpers above are available to Python code.

## Running the tests

```
pip install ".[test]"
pytest
```