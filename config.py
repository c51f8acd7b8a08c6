"""
config.py
-----------------
Settings for the log view service, read once from the environment.
Loaded into Flask with app.config.from_object(Config).
"""

import os
import re

_PORT_RE = re.compile(r"[0-9]+")


def _read_port(value):
    # Accept both "8080" and the ":8080" listen-address form
    value = (value or "").strip()
    if value.startswith(":"):
        value = value[1:]
    if _PORT_RE.fullmatch(value):
        return int(value)
    return None


class Config:
    MONGO_URI = os.getenv("URI_MONGODB", "mongodb://localhost:27017")
    DATABASE = os.getenv("DATABASE", "jitsilog")
    COLLECTION = os.getenv("COLLECTION", "logs")

    PORT = _read_port(os.getenv("PORT"))
    DEFAULT_PORT = 8080

    TIMEZONE = os.getenv("TIMEZONE", "America/Sao_Paulo")
    DEBUG_LOGGING = os.getenv("DEBUG") == "true"

    # Only connection establishment is bounded
    MONGO_TIMEOUT_MS = 10000
