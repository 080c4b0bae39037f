from PySide6.QtCore import QObject, Signal

from .event_model import EventModel
from .persistence import DataPersistence
from scheduler_studio.core.types_and_enums import DataPersistenceError, LogLevel
from scheduler_studio.core.utils import global_logger


class CompletedEvents(QObject):
    """
    Archive of events removed from the schedule.
    Acts as the schedule store's delegate and keeps its own container.
    """
    changed = Signal()

    def __init__(self, filename: str, directory: str = None, parent=None):
        super().__init__(parent)
        self.persistence = DataPersistence(EventModel, filename, directory=directory, parent=self)
        self.events: list[EventModel] = []

    def load(self) -> bool:
        try:
            self.events = self.persistence.loadItems()
        except DataPersistenceError as e:
            global_logger.logError(f"Could not load completed events: {e}", source=self.persistence.filename)
            return False

        self.changed.emit()
        return True

    def didDeleteItem(self, persistence: DataPersistence, item):
        if not isinstance(item, self.persistence.record_type):
            global_logger.log(f"Ignoring deleted {type(item).__name__} from '{persistence.filename}'",
                              level=LogLevel.WARN, source=self.persistence.filename)
            return

        try:
            self.persistence.createItem(item)
        except DataPersistenceError as e:
            global_logger.logError(f"Could not archive '{item.name}': {e}", source=self.persistence.filename)

        self.load()

    def deleteEvent(self, index: int) -> EventModel:
        """Removes an archived event for good. DeletingError propagates."""
        removed = self.persistence.deleteItem(index)
        self.events = self.persistence.items
        self.changed.emit()
        return removed

    def __len__(self):
        return len(self.events)

    def __iter__(self):
        return iter(self.events)
