"""Notes kept in memory and persisted to a JSON file and a plain-text log."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

DEFAULT_JSON_PATH = Path("static/saved_notes.json")
DEFAULT_TEXT_PATH = Path("static/saved_notes.txt")


class ManagerChoice(Enum):
    """Commands understood by the notes manager."""

    ADD = "add"
    SHOW = "show"
    SEARCH = "search"
    CLEAR = "clear"
    REMOVE = "remove"
    EDIT = "edit"
    EXIT = "exit"


def manager_choice_from_string(option: str) -> ManagerChoice:
    """Return the command named by ``option``, ignoring case."""
    try:
        return ManagerChoice[option.upper()]
    except KeyError:
        raise ValueError("Invalid option given") from None


@dataclass
class Category:
    """A named category with a description."""

    name: str = ""
    description: str = ""

    def __str__(self) -> str:
        return f"Category: {self.name} - {self.description}"

    def to_json(self) -> dict:
        return {"name": self.name, "description": self.description}

    @classmethod
    def from_json(cls, data: dict) -> Category:
        return cls(data["name"], data["description"])


@dataclass
class Note:
    """A single note with an identifier, its text and a category."""

    id: int
    content: str
    category: Category = field(default_factory=Category)

    def __str__(self) -> str:
        return f"Note: ID: {self.id}: Content:{self.content} - {self.category}"

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "content": self.content,
            "category": self.category.to_json(),
        }

    @classmethod
    def from_json(cls, data: dict) -> Note:
        return cls(int(data["id"]), data["content"], Category.from_json(data["category"]))


class NoteManager:
    """Keeps notes in memory and mirrors them to a JSON file and a text log."""

    def __init__(self, json_path=DEFAULT_JSON_PATH, text_path=DEFAULT_TEXT_PATH):
        self.json_path = Path(json_path)
        self.text_path = Path(text_path)
        self.notes: dict[int, Note] = {}
        self.next_id = 0
        self.loaded_from_file = False
        try:
            text = self.json_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        for item in json.loads(text) if text.strip() else []:
            self._register(Note.from_json(item))
        self.loaded_from_file = True

    def _register(self, note: Note) -> None:
        self.notes[note.id] = note
        self.next_id = max(self.next_id, note.id + 1)

    def _read_saved(self) -> list:
        try:
            text = self.json_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return json.loads(text) if text.strip() else []

    def _write_json(self, items: list) -> None:
        self.json_path.parent.mkdir(parents=True, exist_ok=True)
        self.json_path.write_text(
            json.dumps(items, indent=4, sort_keys=True, ensure_ascii=False),
            encoding="utf-8",
        )

    def add_note(self, content: str, category: Category) -> Note:
        """Create a note, append it to both files and return it."""
        if not content or not category.name or not category.description:
            raise ValueError("Note is empty or too small")
        note = Note(self.next_id, content, replace(category))
        self._register(note)

        saved = self._read_saved()
        saved.append(note.to_json())
        self._write_json(saved)

        self.text_path.parent.mkdir(parents=True, exist_ok=True)
        with self.text_path.open("a", encoding="utf-8") as log:
            log.write(f"{content} : {category}\n")
        return note

    def show_notes(self) -> list[str]:
        """Return display lines for the notes in memory and in the text log."""
        lines = ["------------ Notes ------------"]
        lines.extend(str(note) for note in self.notes.values())
        lines.append("Reading from file")
        try:
            with self.text_path.open(encoding="utf-8") as log:
                lines.extend(f"File note: {line}" for line in log.read().splitlines())
        except FileNotFoundError:
            lines.append(f"Unable to open file {self.text_path}")
        return lines

    def clear_notes(self) -> None:
        """Forget the notes in memory and empty the text log."""
        self.notes.clear()
        self.text_path.parent.mkdir(parents=True, exist_ok=True)
        self.text_path.write_text("", encoding="utf-8")

    def search_notes(self, pattern: str) -> list[Note]:
        """Return the notes whose content contains a match for ``pattern``."""
        regex = re.compile(f".*{pattern}.*")
        return [note for note in self.notes.values() if regex.fullmatch(note.content)]

    def remove_note(self, note_id: int) -> bool:
        """Remove a note from memory; return whether it existed."""
        return self.notes.pop(note_id, None) is not None

    def edit_note(self, note_id: int, content: str = "", category_name: str = "",
                  category_description: str = "") -> Note:
        """Update the non-empty fields of a note and rewrite the JSON file."""
        try:
            note = self.notes[note_id]
        except KeyError:
            raise KeyError(f"Note with id: {note_id} not found") from None
        if content:
            note.content = content
        if category_name or category_description:
            note.category = Category(
                category_name or note.category.name,
                category_description or note.category.description,
            )
        self._write_json([item.to_json() for item in self.notes.values()])
        return note