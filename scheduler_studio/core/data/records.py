from typing import Protocol, runtime_checkable


@runtime_checkable
class Writeable(Protocol):
    """
    What a record type needs before a DataPersistence store will hold it.
    The store never looks inside a record; it only serializes and compares them,
    so records also need a structural __eq__ (dataclasses provide one).
    """

    def toDict(self) -> dict:
        """Plain container-safe types only (str, int, float, bool, list, dict)."""
        ...

    @classmethod
    def fromDict(cls, data: dict) -> "Writeable":
        ...
