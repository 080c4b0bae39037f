from traceback import format_exc
from PySide6.QtCore import QObject, Signal

from scheduler_studio.core.types_and_enums import LogLevel, LogPacket, LogErrorPacket


class _AppLogger(QObject):
    """
    Process-wide log channel. Stores report the failures they swallow here
    (best-effort saves, reloads, archive writes) tagged with their file name;
    nothing is printed unless something connects to log_emitted.
    """
    log_emitted = Signal(object) # LogPacket or LogErrorPacket

    def log(self, *args, level: LogLevel= LogLevel.INFO, source: str= "System"):
        """
        Sends a structured log packet to whoever is listening.
        Args:
            args: The objects to be printed in the log.
            level: The log level to display at.
            source: The store or component the packet came from.
        """
        payload = LogPacket(parts=args, level=level, source=source)
        self.log_emitted.emit(payload)

    def logError(self, error_msg, include_trace=True, source: str= "System"):
        """
        Sends a structured error packet to whoever is listening.
        Args:
            error_msg: The error message.
            include_trace: If the trace should be captured.
            source: The store or component the packet came from.
        """
        trace = None
        if include_trace:
            trace = format_exc()

            # format_exc outside an except block gives "NoneType: None"
            if not trace or trace.strip() == "NoneType: None":
                trace = None

        payload = LogErrorPacket(message=error_msg, traceback=trace, source=source)
        self.log_emitted.emit(payload)

global_logger = _AppLogger()
