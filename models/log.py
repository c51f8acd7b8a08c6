from utils.db import logs_col
from utils.errors import DecodeFailure

# Stored / JSON field order
FIELDS = ("room", "course", "class", "student", "participantId", "email", "timestamp", "action")

# Shown instead of a timestamp that is not RFC3339
PARSE_FAILURE_MARKER = "Falha no parser"


class LogRecord:

    @staticmethod
    def collection():
        return logs_col()

    def __init__(self, room="", course="", class_name="", student="", participant_id="",
                 email="", timestamp="", action=""):
        self.room = room
        self.course = course
        self.class_name = class_name  # "class" in the store
        self.student = student
        self.participant_id = participant_id
        self.email = email
        self.timestamp = timestamp
        self.action = action  # "join" | "leave" | ...

    # Build from a stored document; missing or null fields read as ""
    @classmethod
    def from_document(cls, document):
        values = []
        for field in FIELDS:
            value = document.get(field)
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise DecodeFailure(field, value)
            values.append(value)
        return cls(*values)

    def to_dict(self):
        return {
            "room": self.room,
            "course": self.course,
            "class": self.class_name,
            "student": self.student,
            "participantId": self.participant_id,
            "email": self.email,
            "timestamp": self.timestamp,
            "action": self.action,
        }

    # Same order as utils.csv_export.CSV_HEADER
    def to_csv_row(self):
        return [
            self.room,
            self.course,
            self.class_name,
            self.student,
            self.participant_id,
            self.email,
            self.timestamp,
            self.action,
        ]

    def __repr__(self):
        return f"<LogRecord {self.email or self.student!r} {self.action!r} at {self.timestamp!r}>"
