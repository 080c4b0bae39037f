from .records import Writeable
from .event_model import EventModel
from .codecs import ContainerCodec, PropertyListCodec
from .persistence import DataPersistence, DataPersistenceDelegate
from .completed_events import CompletedEvents
from .transfer import transferItem
from .schedule import Schedule

__all__ = [
    'Writeable',
    'EventModel',
    'ContainerCodec',
    'PropertyListCodec',
    'DataPersistence',
    'DataPersistenceDelegate',
    'CompletedEvents',
    'transferItem',
    'Schedule'
]
