from datetime import datetime, timedelta

from scheduler_studio import Schedule, DataPersistenceError, global_logger
from scheduler_studio.core.types_and_enums import LogErrorPacket


def printPacket(packet):
    if isinstance(packet, LogErrorPacket):
        print(f"[{packet.source}] ERROR: {packet.message}")
    else:
        print(f"[{packet.source}]", *packet.parts)


if __name__ == "__main__":
    # Nothing listens to the logger by default, route it to stdout
    global_logger.log_emitted.connect(printPacket)

    # Files land in $SCHEDULER_DOCUMENTS_DIR, or ./Documents when unset
    schedule = Schedule()
    schedule.load()

    tomorrow = datetime.now() + timedelta(days=1)
    schedule.addEvent("Standup", tomorrow.replace(hour=9, minute=0, second=0, microsecond=0))
    schedule.addEvent("Design review", tomorrow.replace(hour=14, minute=0, second=0, microsecond=0))

    print("Scheduled:", *schedule, sep="\n  ")

    # Deleting goes through the delegate, completing moves the event in two steps
    try:
        schedule.removeEvent(0)
        schedule.completeEvent(0)
    except DataPersistenceError as e:
        print("Could not archive:", e)

    print("Completed:", *schedule.completed, sep="\n  ")
