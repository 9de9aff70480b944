import json

import pytest

from practiceapps.notes import (
    Category,
    ManagerChoice,
    Note,
    NoteManager,
    manager_choice_from_string,
)


@pytest.fixture
def manager(tmp_path):
    return NoteManager(tmp_path / "notes.json", tmp_path / "notes.txt")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("add", ManagerChoice.ADD),
        ("SHOW", ManagerChoice.SHOW),
        ("Search", ManagerChoice.SEARCH),
        ("clear", ManagerChoice.CLEAR),
        ("remove", ManagerChoice.REMOVE),
        ("eDiT", ManagerChoice.EDIT),
        ("exit", ManagerChoice.EXIT),
    ],
)
def test_choice_from_string(text, expected):
    assert manager_choice_from_string(text) is expected


@pytest.mark.parametrize("text", ["", "delete", "adds"])
def test_choice_from_string_invalid(text):
    with pytest.raises(ValueError, match="Invalid option given"):
        manager_choice_from_string(text)


def test_category_round_trip():
    category = Category("work", "office tasks")
    assert Category.from_json(category.to_json()) == category


def test_note_round_trip():
    note = Note(7, "call back", Category("phone", "calls"))
    assert Note.from_json(note.to_json()) == note


def test_note_str():
    note = Note(0, "hello", Category("a", "b"))
    assert str(note) == "Note: ID: 0: Content:hello - Category: a - b"


def test_category_from_json_missing_key():
    with pytest.raises(KeyError):
        Category.from_json({"name": "x"})


def test_new_manager_without_file(manager):
    assert manager.notes == {}
    assert manager.loaded_from_file is False


def test_add_note_assigns_increasing_ids(manager):
    first = manager.add_note("one", Category("c", "d"))
    second = manager.add_note("two", Category("c", "d"))
    assert second.id == first.id + 1
    assert list(manager.notes) == [first.id, second.id]


def test_add_note_writes_text_log(manager, tmp_path):
    note = manager.add_note("hello", Category("a", "b"))
    assert note.content == "hello"
    assert note.category == Category("a", "b")
    assert (tmp_path / "notes.txt").read_text(encoding="utf-8") == "hello : Category: a - b\n"


def test_add_note_persists_and_reloads(manager, tmp_path):
    note = manager.add_note("hello", Category("a", "b"))
    reloaded = NoteManager(tmp_path / "notes.json", tmp_path / "notes.txt")
    assert reloaded.loaded_from_file is True
    assert reloaded.notes == {note.id: note}
    assert reloaded.next_id == note.id + 1


def test_json_file_holds_note_objects(manager, tmp_path):
    note = manager.add_note("hello", Category("a", "b"))
    data = json.loads((tmp_path / "notes.json").read_text(encoding="utf-8"))
    assert data == [note.to_json()]


def test_next_id_follows_largest_loaded(tmp_path):
    path = tmp_path / "notes.json"
    saved = [Note(5, "x", Category("a", "b")).to_json(), Note(2, "y", Category("a", "b")).to_json()]
    path.write_text(json.dumps(saved), encoding="utf-8")
    manager = NoteManager(path, tmp_path / "notes.txt")
    added = manager.add_note("z", Category("a", "b"))
    assert added.id == 6


@pytest.mark.parametrize(
    "content, category",
    [("", Category("a", "b")), ("text", Category("", "b")), ("text", Category("a", ""))],
)
def test_add_note_rejects_empty(manager, content, category):
    with pytest.raises(ValueError):
        manager.add_note(content, category)
    assert manager.notes == {}


def test_search_notes(manager):
    milk = manager.add_note("buy milk", Category("home", "shopping"))
    manager.add_note("fix bike", Category("home", "repairs"))
    assert manager.search_notes("milk") == [milk]
    assert manager.search_notes("car") == []


def test_search_notes_uses_regex(manager):
    notes = [manager.add_note(text, Category("c", "d")) for text in ("cat", "cot", "dog")]
    assert manager.search_notes("c.t") == notes[:2]


def test_remove_note(manager):
    note = manager.add_note("temp", Category("c", "d"))
    assert manager.remove_note(note.id) is True
    assert note.id not in manager.notes
    assert manager.remove_note(note.id) is False


def test_clear_notes_empties_memory_and_log(manager, tmp_path):
    manager.add_note("one", Category("c", "d"))
    manager.clear_notes()
    assert manager.notes == {}
    assert (tmp_path / "notes.txt").read_text(encoding="utf-8") == ""


def test_show_notes_lists_memory_and_log(manager):
    note = manager.add_note("one", Category("c", "d"))
    lines = manager.show_notes()
    assert str(note) in lines
    assert "File note: one : " + str(note.category) in lines


def test_show_notes_without_log(manager, tmp_path):
    lines = manager.show_notes()
    assert lines[-1] == f"Unable to open file {tmp_path / 'notes.txt'}"


def test_edit_note_updates_non_empty_fields(manager, tmp_path):
    note = manager.add_note("old", Category("name", "desc"))
    edited = manager.edit_note(note.id, "new", "", "other desc")
    assert edited.content == "new"
    assert edited.category == Category("name", "other desc")
    reloaded = NoteManager(tmp_path / "notes.json", tmp_path / "notes.txt")
    assert reloaded.notes[note.id] == edited


def test_edit_note_keeps_everything_when_empty(manager):
    note = manager.add_note("old", Category("name", "desc"))
    before = Note.from_json(note.to_json())
    assert manager.edit_note(note.id) == before


def test_edit_missing_note(manager):
    with pytest.raises(KeyError):
        manager.edit_note(42, "x")