# practiceapps

Four small, self-contained applications in one package:

- `practiceapps.notes` and `practiceapps.notes_cli`: an interactive note
  keeper that stores notes with a category in a JSON file and a plain-text log.
- `practiceapps.tasks`: a task executor that runs timed jobs in parallel threads.
- `practiceapps.pokeclient`: fetches Pokémon data from a web API and caches it on disk.
- `practiceapps.pokedb` and `practiceapps.pokeapi`: a small HTTP API that
  stores Pokémon in a database table.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Note keeper

```
practiceapps-notes [--json-path PATH] [--text-path PATH]
```

`--json-path` defaults to `static/saved_notes.json` and `--text-path` to
`static/saved_notes.txt`. Saved notes are loaded from the JSON file at start;
if it does not exist, the program says so and starts empty.

The program then prompts for one of these commands (case-insensitive;
anything else, or an id that does not start with a number, is reported as
wrong input):

| Command  | What it does                                                        |
|----------|---------------------------------------------------------------------|
| `add`    | asks for the note text, category name and category description     |
| `show`   | lists the notes in memory, then the lines of the text log          |
| `search` | lists notes whose content matches the given regular expression     |
| `remove` | removes the note with the given id from memory                     |
| `edit`   | replaces the content and/or category of the note with the given id |
| `clear`  | drops all notes from memory and empties the text log               |
| `exit`   | quits (end of input quits as well)                                 |

The same features are available from Python:

```python
from practiceapps.notes import Category, NoteManager

manager = NoteManager("saved_notes.json", "saved_notes.txt")
note = manager.add_note("Buy milk", Category("shopping", "things to buy"))
manager.search_notes("milk")          # -> [note]
manager.edit_note(note.id, content="Buy oat milk")
manager.remove_note(note.id)          # -> True
```

Behaviour worth knowing:

- `add_note` raises `ValueError` unless the content, category name and
  category description are all non-empty. It appends the note to the JSON
  file and a line `<content> : Category: <name> - <description>` to the text log.
- Note ids keep increasing across runs: notes loaded from the JSON file
  advance the counter past the highest saved id.
- `edit_note` keeps any field given as an empty string, raises `KeyError`
  for an unknown id, and rewrites the JSON file from the notes in memory.
- `remove_note` and `clear_notes` change only the notes in memory (and, for
  `clear_notes`, the text log); the JSON file is left as it is until the
  next `add_note` or `edit_note`.
- `manager_choice_from_string` turns a command name into a `ManagerChoice`,
  raising `ValueError` for unknown names.

## Task executor

```
practiceapps-tasks
```

Runs a demonstration: one task (`Email backup`) on its own, a greeting from
a separate thread, then three tasks (`Compression`, `Sync`, `Encryption`)
started together by an `Executor`. Each task sleeps for its duration in
seconds and reports when it starts and finishes.

```python
from practiceapps.tasks import Executor, Task

executor = Executor()
executor.add_task(Task("Backup", priority=1, duration=2))
executor.process_tasks()
```

`Task` exposes `name`, `priority` and `duration` as properties. Setting
`name` stores it with a `[modified] ` prefix; setting a negative `priority`
or a `duration` of zero or less raises `ValueError`. `Task` and `Executor`
accept an `output` stream, and `Task` a `sleep` function, in place of
standard output and `time.sleep`.

## Pokémon cache client

```
practiceapps-pokeclient [NAME] [--cache-dir DIR] [--base-url URL]
```

Downloads the data for `NAME` (default `pikachu`) from
`<base-url>v2/pokemon/<name>` and saves the response body to
`<cache-dir>/<name>.json` (default directory `cache`), creating the directory
when needed. From Python, `fetch_pokemon(name, cache_dir, base_url, session)`
returns the path written and raises `FetchError` (with `status_code`) for any
response other than HTTP 200; the command prints that error instead. The
`PokemonType` and `Stat` dataclasses describe parts of the API's answer.

## Pokémon HTTP API

```
practiceapps-pokeapi [--database PATH] [--host HOST] [--port PORT]
                     [--frontend-dir DIR] [--docs-dir DIR]
```

Defaults: an SQLite database file `pokedb.sqlite3`, host `0.0.0.0`, port
`8080`, frontend directory `frontend`, docs directory `docs`.
The server answers these `GET` routes:

| Route                      | Response                                                  |
|----------------------------|-----------------------------------------------------------|
| `/`                        | a plain text greeting                                     |
| `/hello?name=...`          | `{"message": "Hello, <name>"}` (default `stranger`)       |
| `/create-table?name=...`   | creates the table; 400 when `name` is missing or not a plain identifier |
| `/add-pokemon`             | JSON body with `name`, `type` (strings) and `level` (integer); 400 when the `pokemons` table is missing or the body is invalid |
| `/docs`                    | `index.html` from the frontend directory (empty if absent) |
| `/docs/static/<file>`      | static files from the frontend directory                  |
| `/openapi.yaml`            | `openapi.yaml` from the docs directory; 500 when it cannot be read |

The application can also be built directly with
`practiceapps.pokeapi.create_app(database, frontend_dir, docs_dir)`, where
`database` is a `practiceapps.pokedb.PokeBase`.

`PokeBase` takes either the path of an SQLite file or an already open DB-API
connection; any connection other than `sqlite3` is driven with PostgreSQL
syntax (`%s` placeholders, `SERIAL` keys, `to_regclass`). Its methods
`execute_query`, `init_table`, `add_pokemon` and `table_exists` report
database errors through the `logging` module and return `False` rather than
raising. It can be used as a context manager, which closes the connection.

## What is not included

- No frontend page or OpenAPI description ships with the package; `/docs`
  and `/openapi.yaml` serve only what is placed in the configured directories.
- No PostgreSQL driver is bundled: the command always uses SQLite, and a
  PostgreSQL connection must be opened by the caller and passed to `PokeBase`.
- `/add-pokemon` reports success once the body is valid and the table exists;
  a failed insert is only logged.