from scheduler_studio.core.types_and_enums import DataPersistenceError, DeletingError
from scheduler_studio.core.utils import global_logger

from .persistence import DataPersistence


def transferItem(source: DataPersistence, destination: DataPersistence, index: int):
    """
    Moves the item at index from source to destination.

    The destination is written first, the source item is only deleted once that
    succeeded. If the delete then fails, the copy is taken back out of the destination.
    Source signals are blocked during the delete so its delegate does not archive
    the item a second time.

    Raises:
        IndexError: If index is not a position in source. Nothing is written.
        EncodingError, WritingError: If the destination could not be written. Source is untouched.
        DeletingError: If the source could not be written. Destination is restored.
    """
    source.checkIndex(index)
    item = source[index]
    destination.createItem(item)

    was_blocked = source.blockSignals(True)
    try:
        source.deleteItem(index)
    except DeletingError:
        _takeBack(destination, item)
        raise
    finally:
        source.blockSignals(was_blocked)

    return item


def _takeBack(destination: DataPersistence, item):
    last_index = len(destination) - 1
    while last_index >= 0 and destination[last_index] != item:
        last_index -= 1
    if last_index < 0:
        return

    was_blocked = destination.blockSignals(True)
    try:
        destination.deleteItem(last_index)
    except DataPersistenceError as e:
        global_logger.logError(f"Could not undo transfer into '{destination.filename}': {e}",
                               source=destination.filename)
    finally:
        destination.blockSignals(was_blocked)
