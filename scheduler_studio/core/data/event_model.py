from dataclasses import dataclass
from datetime import datetime


@dataclass
class EventModel:
    name: str
    date: datetime

    def toDict(self):
        # ISO strings keep microseconds and tzinfo, plist dates do not
        return {"name": self.name, "date": self.date.isoformat()}

    @classmethod
    def fromDict(cls, data: dict):
        name = data["name"]
        if not isinstance(name, str):
            raise TypeError(f"Event name must be a string, got {type(name).__name__}")
        return cls(name=name, date=datetime.fromisoformat(data["date"]))

    def __str__(self):
        return f"{self.name} ({self.date})"
