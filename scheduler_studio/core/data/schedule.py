from datetime import datetime

from PySide6.QtCore import QObject, Signal

from .completed_events import CompletedEvents
from .event_model import EventModel
from .persistence import DataPersistence
from .transfer import transferItem
from scheduler_studio.core.types_and_enums import DataPersistenceError
from scheduler_studio.core.utils import global_logger


class Schedule(QObject):
    loaded = Signal(bool) # Succeeded
    eventAdded = Signal(EventModel)
    eventCompleted = Signal(EventModel)

    SCHEDULES_FILENAME = "schedules.plist"
    COMPLETED_FILENAME = "completedEvents.plist"

    def __init__(self, directory: str = None, parent=None):
        super().__init__(parent)
        self.events = DataPersistence(EventModel, self.SCHEDULES_FILENAME, directory=directory, parent=self)
        self.completed = CompletedEvents(self.COMPLETED_FILENAME, directory=directory, parent=self)

        # Deleted events land in the archive
        self.events.setDelegate(self.completed)

    def load(self) -> bool:
        try:
            self.events.loadItems()
        except DataPersistenceError as e:
            global_logger.logError(f"Could not load events: {e}", source=self.events.filename)
            self.loaded.emit(False)
            return False

        succeeded = self.completed.load()
        self.loaded.emit(succeeded)
        return succeeded

    def addEvent(self, name_or_model: str | EventModel, date: datetime = None) -> EventModel:
        """Creates an event and saves it. EncodingError and WritingError propagate."""
        if isinstance(name_or_model, EventModel):
            event = name_or_model
        else:
            event = EventModel(name=name_or_model, date=date or datetime.now())

        self.events.createItem(event)
        self.eventAdded.emit(event)
        return event

    def editEvent(self, old_event: EventModel, new_event: EventModel) -> bool:
        return self.events.update(old_event, new_event)

    def removeEvent(self, index: int) -> EventModel:
        """Deletes an event, the archive picks it up through the delegate."""
        return self.events.deleteItem(index)

    def completeEvent(self, index: int) -> EventModel:
        """Moves an event into the archive, writing the archive before the schedule."""
        event = transferItem(self.events, self.completed.persistence, index)
        self.completed.load()
        self.eventCompleted.emit(event)
        return event

    def reorder(self, events: list[EventModel]):
        self.events.synchronize(events)

    def __len__(self):
        return len(self.events)

    def __iter__(self):
        return iter(self.events)
