import json
import logging

from string_analyzer.analyzer import analyze_string, compute_sha256
from string_analyzer.schemas import StringRecord
from string_analyzer.store import StringStore


def make_record(value):
    return StringRecord(
        id=compute_sha256(value),
        value=value,
        properties=analyze_string(value),
        created_at="2025-01-01T00:00:00.000Z",
    )


def test_missing_file_starts_empty(tmp_path, caplog):
    store = StringStore(str(tmp_path / "absent.json"))
    with caplog.at_level(logging.INFO):
        store.load()
    assert len(store) == 0
    assert "No database file found" in caplog.text


def test_malformed_file_starts_empty_and_logs(tmp_path, caplog):
    path = tmp_path / "strings.json"
    path.write_text("{not json", encoding="utf-8")
    store = StringStore(str(path))
    with caplog.at_level(logging.ERROR):
        store.load()
    assert len(store) == 0
    assert "Failed to load string database" in caplog.text


def test_non_array_file_starts_empty(tmp_path):
    path = tmp_path / "strings.json"
    path.write_text('{"value": "x"}', encoding="utf-8")
    store = StringStore(str(path))
    store.load()
    assert len(store) == 0


def test_save_writes_whole_collection_in_order(tmp_path):
    path = tmp_path / "nested" / "strings.json"
    store = StringStore(str(path))
    store.add(make_record("level"))
    store.add(make_record("hello world"))
    store.save()

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert [r["value"] for r in raw] == ["level", "hello world"]
    assert raw[0]["properties"]["character_frequency_map"] == {"l": 2, "e": 2, "v": 1}
    assert not (tmp_path / "nested" / "strings.json.tmp").exists()

    reloaded = StringStore(str(path))
    reloaded.load()
    assert [r.value for r in reloaded] == ["level", "hello world"]


def test_lookup_and_remove(tmp_path):
    store = StringStore(str(tmp_path / "strings.json"))
    store.add(make_record("a"))
    store.add(make_record("b"))
    assert store.index_of("b") == 1
    assert store.index_of("c") == -1
    assert store.find("a").value == "a"
    assert store.find("c") is None
    assert store.exists("b")

    removed = store.remove_at(0)
    assert removed.value == "a"
    assert [r.value for r in store] == ["b"]


def test_snapshot_is_a_copy(tmp_path):
    store = StringStore(str(tmp_path / "strings.json"))
    store.add(make_record("a"))
    snap = store.snapshot()
    store.add(make_record("b"))
    assert len(snap) == 1
    assert len(store) == 2
