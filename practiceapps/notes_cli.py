"""Interactive command loop for the notes manager."""

from __future__ import annotations

import argparse
import re
import sys

from practiceapps.notes import (
    DEFAULT_JSON_PATH,
    DEFAULT_TEXT_PATH,
    Category,
    ManagerChoice,
    NoteManager,
    manager_choice_from_string,
)

_MENU = "\nCommands: add, show, search, remove, edit, clear, exit\n> "
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_id(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"Not a note id: {text!r}")
    return int(match.group(1))


def run(manager: NoteManager, input_func=input, output=None) -> None:
    """Read commands through ``input_func`` until exit or end of input."""
    output = sys.stdout if output is None else output

    def say(text: str) -> None:
        output.write(f"{text}\n")

    def ask(message: str) -> str:
        say(message)
        return input_func()

    while True:
        output.write(_MENU)
        try:
            command = input_func().strip()
            choice = manager_choice_from_string(command)
            match choice:
                case ManagerChoice.EXIT:
                    say("Closing program. Bye")
                    return
                case ManagerChoice.ADD:
                    content = ask("Enter note")
                    name = ask("Enter category name")
                    description = ask("Enter category description")
                    try:
                        manager.add_note(content, Category(name, description))
                    except ValueError:
                        say("Note is empty or too small")
                case ManagerChoice.SEARCH:
                    output.write("Enter note to search for: ")
                    pattern = input_func()
                    try:
                        found = manager.search_notes(pattern)
                    except re.error:
                        say(f"Invalid search pattern: {pattern}")
                        continue
                    for note in found:
                        say(f"Note: {note} is present in notes")
                    if not found:
                        say(f"Word {pattern} is not present in notes")
                case ManagerChoice.SHOW:
                    for line in manager.show_notes():
                        say(line)
                case ManagerChoice.CLEAR:
                    manager.clear_notes()
                    say("All notes cleared")
                case ManagerChoice.REMOVE:
                    raw = ask("Enter note id to remove: ")
                    say(f"ID to removal : {raw}")
                    manager.remove_note(_parse_id(raw))
                case ManagerChoice.EDIT:
                    raw = ask("Enter note id to edit: ")
                    say(f"ID to edit : {raw}")
                    note_id = _parse_id(raw)
                    note = manager.notes.get(note_id)
                    if note is None:
                        say(f"Note with id: {note_id} not found")
                        continue
                    say(f"Current note {note}")
                    content = ask("Enter new content")
                    name = ask("Enter new category name (leave empty to keep current): ")
                    description = ask(
                        "Enter new category description (leave empty to keep current): "
                    )
                    manager.edit_note(note_id, content, name, description)
                    say("Note updated")
        except EOFError:
            return
        except ValueError:
            say("Wrong input given")


def main(argv=None) -> int:
    """Start the interactive notes manager."""
    parser = argparse.ArgumentParser(description="Keep notes with categories.")
    parser.add_argument("--json-path", default=str(DEFAULT_JSON_PATH))
    parser.add_argument("--text-path", default=str(DEFAULT_TEXT_PATH))
    args = parser.parse_args(argv)

    manager = NoteManager(args.json_path, args.text_path)
    if not manager.loaded_from_file:
        print("No saved JSON notes found in files")
    run(manager, input, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())