from scheduler_studio.core.data import (
    DataPersistence, DataPersistenceDelegate, EventModel, Schedule, CompletedEvents,
    PropertyListCodec, transferItem
)
from .core.types_and_enums import (
    DataPersistenceError, EncodingError, DecodingError, WritingError, DeletingError, NoContentsAtPath, LogLevel
)
from scheduler_studio.core.utils import global_logger

__all__ = [
    'DataPersistence',
    'DataPersistenceDelegate',
    'EventModel',
    'Schedule',
    'CompletedEvents',
    'PropertyListCodec',
    'transferItem',
    'DataPersistenceError',
    'EncodingError',
    'DecodingError',
    'WritingError',
    'DeletingError',
    'NoContentsAtPath',
    'LogLevel',
    'global_logger'
]
