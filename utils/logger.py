"""
utils/logger.py
-----------------
Logging setup: JSON lines on stdout, one object per record, carrying the
caller location and any structured fields passed through `extra`.
"""

import json
import logging
import sys
from datetime import datetime, timezone

# Attributes every LogRecord has; anything else came in through `extra`
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):

    def format(self, record):
        entry = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "msg": record.getMessage(),
            "logger": record.name,
            "func": f"{record.module}.{record.funcName}",
            "line": record.lineno,
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def setup_logging(debug=False):
    """
    Route the root logger to stdout with the JSON formatter.
    DEBUG level when `debug` is set, INFO otherwise.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_log_view", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    handler._log_view = True
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    return root
