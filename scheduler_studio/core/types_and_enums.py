from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class LogLevel(Enum):
    ERROR = auto()
    INFO = auto()
    WARN = auto()

@dataclass
class LogPacket:
    parts: Tuple[object, ...]
    level: LogLevel = LogLevel.INFO
    source: str = "System"

@dataclass
class LogErrorPacket:
    message: str
    traceback: str | None
    source: str


class DataPersistenceError(Exception):
    """Base class for every failure raised by a data persistence store."""
    pass

class EncodingError(DataPersistenceError):
    """Raised when the items cannot be serialized into the container format."""
    pass

class DecodingError(DataPersistenceError):
    """Raised when stored bytes exist but do not parse as a list of records."""
    pass

class WritingError(DataPersistenceError):
    """Raised when the container could not be written to disk."""
    pass

class DeletingError(DataPersistenceError):
    """Raised when the collection could not be persisted after a removal."""
    pass

class NoContentsAtPath(DataPersistenceError):
    """Raised when a container file exists but its contents cannot be read."""
    def __init__(self, path: str):
        super().__init__(f"No readable contents at '{path}'")
        self.path = path
