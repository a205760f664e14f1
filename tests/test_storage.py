"""Tests for flat-file task storage."""

from datetime import datetime

import pytest

from task_tracker.exceptions import StorageFormatError
from task_tracker.parser import parse_deadline, parse_event, parse_todo
from task_tracker.storage import Storage, TaskStoreFormat
from task_tracker.task import Deadline, Event, ToDo


def _same_task(a, b):
    return (
        type(a) is type(b)
        and a.get_name() == b.get_name()
        and a.status() == b.status()
        and a.time_fields() == b.time_fields()
    )


class TestTaskStoreFormat:
    """Test conversion between tasks and stored records."""

    def test_round_trip(self, sample_tasks):
        """Test that every kind of task survives being stored."""
        for task in sample_tasks:
            restored = TaskStoreFormat.from_store_line(TaskStoreFormat.to_store_line(task))
            assert _same_task(task, restored)

    def test_round_trip_of_parsed_tasks(self):
        """Test that parsed tasks survive being stored."""
        tasks = [
            parse_todo("todo borrow book"),
            parse_deadline("deadline return book /by 2019-10-15 1800"),
            parse_event("event meeting /from 2019-10-15 1400 /to 2019-10-16 1600"),
        ]
        for task in tasks:
            assert _same_task(task, TaskStoreFormat.from_store_line(task.store_string()))

    def test_name_containing_delimiter(self):
        """Test that names may contain the field delimiter."""
        deadline = Deadline(name="a/@/b", by=datetime(2020, 1, 2, 3, 4))
        restored = TaskStoreFormat.from_store_line(deadline.store_string())
        assert restored.name == "a/@/b"
        assert restored.due() == datetime(2020, 1, 2, 3, 4)

    def test_from_store_line(self):
        task = TaskStoreFormat.from_store_line("E/@/1/@/camp/@/2019-10-15 0900/@/2019-10-18 1700")

        assert isinstance(task, Event)
        assert task.status() is True
        assert task.start == datetime(2019, 10, 15, 9, 0)
        assert task.end == datetime(2019, 10, 18, 17, 0)

    @pytest.mark.parametrize("line", [
        "T/@/0",
        "T/@/0/@/",
        "T/@/1/@/   ",
        "D/@/0/@//@/2019-10-15 1800",
        "E/@/0/@/ /@/2019-10-15 1400/@/2019-10-15 1600",
        "X/@/0/@/mystery",
        "T/@/2/@/read book",
        "D/@/0/@/return book",
        "D/@/0/@/return book/@/2019-13-40 1800",
        "E/@/0/@/meeting/@/2019-10-15 1400",
        "E/@/0/@/meeting/@/2019-10-15 1600/@/2019-10-15 1400",
    ])
    def test_invalid_records(self, line):
        """Test that malformed records are reported."""
        with pytest.raises(StorageFormatError):
            TaskStoreFormat.from_store_line(line)


class TestStorage:
    """Test reading and writing the data file."""

    def test_missing_file_is_empty(self, config):
        assert Storage(config).load() == []

    def test_save_and_load(self, config, sample_tasks):
        """Test saving tasks and loading them back."""
        storage = Storage(config)
        storage.save(sample_tasks)

        loaded = storage.load()
        assert len(loaded) == len(sample_tasks)
        for original, restored in zip(sample_tasks, loaded):
            assert _same_task(original, restored)

    def test_file_contents(self, config):
        storage = Storage(config)
        storage.save([ToDo(name="read book", done=True)])
        assert storage.path.read_text(encoding="utf-8") == "T/@/1/@/read book\n"

    def test_creates_missing_directories(self, tmp_path):
        from task_tracker.config import ConfigModel

        config = ConfigModel(data_dir=str(tmp_path / "nested" / "dir"))
        Storage(config).save([ToDo(name="read book")])
        assert config.get_data_path().exists()

    def test_corrupted_lines_are_skipped(self, config, caplog):
        """Test that one bad record does not lose the others."""
        path = config.get_data_path()
        path.write_text(
            "T/@/0/@/read book\n"
            "garbage\n"
            "\n"
            "D/@/1/@/return book/@/2019-10-15 1800\n",
            encoding="utf-8",
        )

        with caplog.at_level("WARNING"):
            tasks = Storage(config).load()

        assert [t.name for t in tasks] == ["read book", "return book"]
        assert "Skipping line 2" in caplog.text

    def test_undecodable_lines_are_skipped(self, config, caplog):
        """Test that bytes which are not UTF-8 do not stop loading."""
        config.get_data_path().write_bytes(
            b"T/@/0/@/read book\n\xff\xfe bad\nT/@/0/@/ok\n"
        )

        with caplog.at_level("WARNING"):
            tasks = Storage(config).load()

        assert [t.name for t in tasks] == ["read book", "ok"]
        assert "not valid UTF-8" in caplog.text
