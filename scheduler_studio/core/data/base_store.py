from PySide6.QtCore import QObject


class BaseStore(QObject):
    """
    Base for stores that mirror a list of records to one container file.
    store_name is that file's name and never changes; subclasses map records
    to plain data in serialize() and back in deserialize(), codecs handle bytes.
    """
    def __init__(self, store_name: str, parent=None):
        super().__init__(parent)
        # Fixed for the store's lifetime, this is the container's file name
        self._store_name = store_name

    @property
    def store_name(self) -> str:
        return self._store_name

    def serialize(self, items: list = None) -> list:
        """
        Converts records into plain Python types (dicts, lists, strings, ints)
        ready for a container codec. Defaults to the store's own items.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement serialize()")

    def deserialize(self, data: list):
        """Takes decoded container data and rebuilds the store's items from it."""
        raise NotImplementedError(f"{self.__class__.__name__} must implement deserialize()")
