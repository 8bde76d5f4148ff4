# externkit

A small project management tool. It keeps per-project environment
variables in a `.externkit` directory, offers a thin SQLite helper for
Python code, can bootstrap pip into an interpreter, and ships a
nano-like terminal text editor.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Set up the project directory in the current working directory:

```
externkit init
```

This creates `.externkit/` with a `.gitignore` (containing `*`) and an
empty `environment_variables.json`. An existing `.externkit/` is left
untouched. The `env` commands require it to exist in the current
directory; without it they print a message asking you to run
`externkit init`.

Manage environment variables:

```
externkit env add API_URL http://localhost:8000
externkit env update API_URL http://localhost:9000
externkit env delete API_URL
```

`add` refuses a name that already exists; use `update` for that.
`update` and `delete` refuse names that do not exist. Empty names or
values are refused. Each outcome is printed in colour: green on success,
yellow when the name's existence is the problem, red for invalid input.

Download the pip bootstrap script and run it with a given interpreter
(defaults to `python`):

```
externkit get_pip --python-path python3
```

The script is written to `get_pip_temp.py` in the current directory,
run, and removed again.

Open the terminal editor, optionally on a file:

```
externkit edit notes.txt
```

Keys: `^S` save (asks for a file name if the buffer has none), `^O` open
another file, `^X` exit (asks whether to save a modified buffer), arrow
keys, Home/End, Enter, Backspace, Delete, Tab.

`externkit --version` prints the version. Running `externkit` with no
arguments prints the help to standard error.

## Library use

Read a variable, preferring the real process environment and falling
back to the project's stored variables in
`.externkit/environment_variables.json`:

```python
from externkit.env import get

url = get("API_URL")
```

`externkit.env` also provides `load_env_vars`, `save_env_vars`,
`add_env_var`, `update_env_var` and `delete_env_var`, each taking an
optional `path` to the JSON file. The changing functions raise
`EnvVarError`; its `warning` attribute is true when the refusal concerns
whether the name exists. A missing or malformed file loads as an empty
dict.

`externkit.project.init_project(root=".")` creates the project
directory under `root` and returns its path.

Work with a SQLite database:

```python
from externkit.sqlite_client import SqliteClient

db = SqliteClient("app.db")
db.create_table("users", [("id", "INTEGER PRIMARY KEY"), ("name", "TEXT")])
db.insert("users", ["name"], ["alice"])
print(db.select("users", ["id", "name"], None))   # [(1, 'alice')]
print(db.select("users", ["name"], "id = 1"))     # ['alice']
db.update("users", "name = 'bob'", "id = 1")      # returns rows changed
db.delete("users", "id = 1")                      # returns rows removed
db.close()
```

`SqliteClient` works in autocommit mode, can be shared between threads,
and can be used as a context manager that closes the connection on exit.
Queries with a single result column return plain values; queries with
several columns return tuples. Parameters passed to `query` and `insert`
are bound as text; non-string values are bound as empty strings. Table
names, column lists and clauses are inserted into the SQL as given.
Database errors are raised as `RuntimeError`.

The editor's pieces are usable on their own: `externkit.buffer.Editor`
holds the lines and cursor, `externkit.display` renders it with ANSI
escape sequences, `externkit.input.InputHandler` applies `Key` presses,
and `externkit.session.start_editor(filename=None)` runs it in the
terminal.

## Limitations

- There is no command to list or show stored variables; read them with
  `externkit.env.get` or `load_env_vars`.
- The editor has no search, undo or horizontal scrolling: lines wider
  than the terminal are cut off on screen.