import logging
from datetime import datetime

from flask import Blueprint, abort, current_app, make_response, request

from models.log import LogRecord
from utils.csv_export import render_csv
from utils.errors import LogViewError
from utils.log_finder import find_logs
from utils.query import export_query

logger = logging.getLogger(__name__)

export_bp = Blueprint("export", __name__, url_prefix="/v1")


@export_bp.route("/csv")
def export_csv():
    """Every log at or after `ts`, newest first, as a CSV attachment."""
    timestamp = request.args.get("ts")
    if timestamp is None:
        abort(404)

    now = datetime.now().astimezone().isoformat(timespec="seconds")

    try:
        records = find_logs(LogRecord.collection(), export_query(timestamp),
                            current_app.config["TZINFO"])
        body = render_csv(records)
    except LogViewError as e:
        logger.info("Failed to get logs!", extra={"ts": timestamp, "error": str(e)})
        body = render_csv([], error=e)

    resp = make_response(body)
    resp.headers["Content-Type"] = "text/csv"
    resp.headers["Content-Disposition"] = f"attachment; filename=presence-logger.{now}.csv"
    return resp
