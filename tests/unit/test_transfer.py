from datetime import datetime
from pathlib import Path

import pytest

from scheduler_studio.core.data import DataPersistence, EventModel, transferItem
from scheduler_studio.core.types_and_enums import DeletingError, WritingError
from scheduler_studio.core.utils import FileIO


A = EventModel("A", datetime(2024, 1, 1))
B = EventModel("B", datetime(2024, 1, 2))


class RecordingDelegate:
    def __init__(self):
        self.calls = []

    def didDeleteItem(self, persistence, item):
        self.calls.append(item)


@pytest.fixture
def stores(tmp_path: Path):
    source = DataPersistence(EventModel, "schedules.plist", directory=str(tmp_path))
    destination = DataPersistence(EventModel, "completedEvents.plist", directory=str(tmp_path))
    source.createItem(A)
    source.createItem(B)
    return source, destination


def test_transfer_moves_item(stores) -> None:
    source, destination = stores

    moved = transferItem(source, destination, 0)

    assert moved == A
    assert source.loadItems() == [B]
    assert destination.loadItems() == [A]


def test_transfer_does_not_notify_source_delegate(stores) -> None:
    source, destination = stores
    delegate = RecordingDelegate()
    source.setDelegate(delegate)

    transferItem(source, destination, 1)

    assert delegate.calls == []
    assert source.signalsBlocked() is False


def test_failed_destination_write_leaves_source(stores, monkeypatch) -> None:
    source, destination = stores

    def failing(data, filepath):
        raise OSError("read-only")

    monkeypatch.setattr(FileIO, "writeAtomic", failing)

    with pytest.raises(WritingError):
        transferItem(source, destination, 0)

    assert source.items == [A, B]
    assert destination.items == []


def test_failed_source_delete_takes_copy_back(stores, monkeypatch) -> None:
    source, destination = stores
    real_write = FileIO.writeAtomic

    def fail_source(data, filepath):
        if filepath == source.path:
            raise OSError("locked")
        real_write(data, filepath)

    monkeypatch.setattr(FileIO, "writeAtomic", fail_source)

    with pytest.raises(DeletingError):
        transferItem(source, destination, 0)

    assert source.items == [A, B]
    assert destination.loadItems() == []


def test_transfer_invalid_index(stores) -> None:
    source, destination = stores

    with pytest.raises(IndexError):
        transferItem(source, destination, 5)

    assert destination.items == []


def test_transfer_negative_index_writes_nothing(stores) -> None:
    source, destination = stores

    with pytest.raises(IndexError):
        transferItem(source, destination, -1)

    assert source.loadItems() == [A, B]
    assert destination.loadItems() == []
