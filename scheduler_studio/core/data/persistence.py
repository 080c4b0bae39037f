import os
import weakref
from typing import Iterable, Protocol

from PySide6.QtCore import Signal

from .base_store import BaseStore
from .codecs import ContainerCodec, PropertyListCodec
from .records import Writeable
from scheduler_studio.core.types_and_enums import (
    DataPersistenceError, DecodingError, DeletingError, EncodingError, NoContentsAtPath, WritingError
)
from scheduler_studio.core.utils import FileIO, global_logger


class DataPersistenceDelegate(Protocol):
    def didDeleteItem(self, persistence: "DataPersistence", item: Writeable):
        ...


class DataPersistence(BaseStore):
    """
    An ordered list of one record type, mirrored to a single container file.

    Every mutation rewrites the whole container before the new list is kept in
    memory, so a failed write leaves the store exactly as it was.
    """
    itemDeleted = Signal(object, object)  # (store, removed item)

    def __init__(self, record_type: type, filename: str, codec: ContainerCodec = None,
                 directory: str = None, delegate: DataPersistenceDelegate = None, parent=None):
        if not issubclass(record_type, Writeable):
            raise TypeError(f"{record_type.__name__} must implement toDict() and fromDict()")

        super().__init__(filename, parent)
        self.record_type = record_type
        self.codec = codec or PropertyListCodec()
        self._directory = directory
        self._items: list = []
        self._delegate_ref: weakref.ref | None = None

        if delegate is not None:
            self.setDelegate(delegate)

    @property
    def filename(self) -> str:
        return self.store_name

    @property
    def path(self) -> str:
        return FileIO.getPath(self.store_name, self._directory)

    # Delegate

    def delegate(self) -> DataPersistenceDelegate | None:
        return self._delegate_ref() if self._delegate_ref is not None else None

    def setDelegate(self, delegate: DataPersistenceDelegate | None):
        """
        Registers the one object told about deletions, replacing any previous one.
        The store only keeps a weak reference, pass None to clear.
        """
        previous = self.delegate()
        if previous is not None:
            self.itemDeleted.disconnect(previous.didDeleteItem)

        if delegate is None:
            self._delegate_ref = None
            return

        self._delegate_ref = weakref.ref(delegate)
        self.itemDeleted.connect(delegate.didDeleteItem)

    # Container I/O

    def serialize(self, items: list = None) -> list:
        if items is None:
            items = self._items
        try:
            return [item.toDict() for item in items]
        except (AttributeError, TypeError, ValueError) as e:
            raise EncodingError(f"Could not serialize items for '{self.filename}': {e}") from e

    def deserialize(self, data: list):
        try:
            items = [self.record_type.fromDict(entry) for entry in data]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DecodingError(f"Could not decode {self.record_type.__name__} from '{self.filename}': {e}") from e
        self._items = items

    def _saveItems(self, items: list):
        """Writes items as the whole container. Raises EncodingError or WritingError."""
        data = self.codec.encode(self.serialize(items))
        try:
            FileIO.writeAtomic(data, self.path)
        except OSError as e:
            raise WritingError(f"Could not write '{self.path}': {e}") from e

    def _tryLoad(self) -> bool:
        try:
            self.loadItems()
            return True
        except DataPersistenceError as e:
            global_logger.logError(f"Could not reload '{self.filename}': {e}", source=self.filename)
            return False

    # Create

    def createItem(self, item: Writeable):
        """
        Reloads from disk, appends the item and persists the whole list.

        Raises:
            EncodingError: If the items could not be serialized.
            WritingError: If the container could not be written. Nothing is appended.
        """
        self._tryLoad()
        new_items = self._items + [item]
        self._saveItems(new_items)
        self._items = new_items

    # Read

    def loadItems(self) -> list:
        """
        Replaces the in-memory items with the container's contents. A missing
        file is not an error, the current items are returned unchanged.

        Raises:
            NoContentsAtPath: If the file exists but could not be read.
            DecodingError: If the contents are not a valid list of records.
        """
        path = self.path
        if os.path.exists(path):
            try:
                raw = FileIO.readBytes(path)
            except OSError as e:
                raise NoContentsAtPath(path) from e
            self.deserialize(self.codec.decode(raw))
        return list(self._items)

    @property
    def items(self) -> list:
        return list(self._items)

    # Reordering

    def synchronize(self, items: Iterable[Writeable]):
        """Takes items as the new order. Saving is best effort and never raises."""
        self._items = list(items)
        try:
            self._saveItems(self._items)
        except DataPersistenceError as e:
            global_logger.logError(f"Could not synchronize '{self.filename}': {e}", source=self.filename)

    # Update

    def update(self, old_item: Writeable, new_item: Writeable) -> bool:
        """Replaces the first item equal to old_item. Returns False if none matched or saving failed."""
        try:
            index = self._items.index(old_item)
        except ValueError:
            return False
        return self.updateAt(new_item, index)

    def updateAt(self, item: Writeable, index: int) -> bool:
        """
        Replaces the item at index and persists.

        Raises:
            IndexError: If index is not a position in the store.
        """
        self.checkIndex(index)
        new_items = list(self._items)
        new_items[index] = item
        try:
            self._saveItems(new_items)
        except DataPersistenceError as e:
            global_logger.logError(f"Could not update '{self.filename}': {e}", source=self.filename)
            return False

        self._items = new_items
        return True

    # Delete

    def deleteItem(self, index: int) -> Writeable:
        """
        Removes the item at index, persists, then tells the delegate.

        Raises:
            IndexError: If index is not a position in the store.
            DeletingError: If the container could not be written. The item is kept
                and the delegate is not called.
        """
        self.checkIndex(index)
        new_items = list(self._items)
        deleted_item = new_items.pop(index)
        try:
            self._saveItems(new_items)
        except (WritingError, EncodingError) as e:
            raise DeletingError(f"Could not delete item {index} from '{self.filename}': {e}") from e

        self._items = new_items
        self.itemDeleted.emit(self, deleted_item)
        return deleted_item

    def hasItemBeenSaved(self, item: Writeable) -> bool:
        if not self._tryLoad():
            return False
        return item in self._items

    def removeAll(self):
        if not self._tryLoad():
            return

        self._items = []
        try:
            self._saveItems(self._items)
        except DataPersistenceError as e:
            global_logger.logError(f"Could not clear '{self.filename}': {e}", source=self.filename)

    def checkIndex(self, index: int):
        """Raises IndexError unless index is a position in the store, negatives included."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"Index {index} out of range for '{self.filename}' ({len(self._items)} items)")

    def __contains__(self, item):
        return item in self._items

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))
