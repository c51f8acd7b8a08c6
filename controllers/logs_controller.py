import logging

from flask import Blueprint, abort, current_app, jsonify, request

from models.log import LogRecord
from utils.errors import LogViewError
from utils.log_finder import find_logs
from utils.query import build_query

logger = logging.getLogger(__name__)

logs_bp = Blueprint("logs", __name__, url_prefix="/v1/logs")


def _search(dimension, value=None):
    """
    Run one search and answer with a JSON list. Any failure is logged and
    answered with a null body, still 200.
    """
    try:
        query = build_query(dimension, value, request.args.get("size"), request.args.get("skip"))
        records = find_logs(LogRecord.collection(), query, current_app.config["TZINFO"])
    except LogViewError as e:
        logger.info("Failed to get logs!", extra={"dimension": dimension, "error": str(e)})
        return jsonify(None)
    return jsonify([record.to_dict() for record in records])


def _required(name):
    # The match value is part of the route: no value, no route
    value = request.args.get(name)
    if value is None:
        abort(404)
    return value


# Latest logs, no filter
@logs_bp.route("/last")
def latest_logs():
    return _search("latest")


@logs_bp.route("/course")
def search_course():
    return _search("course", _required("id"))


@logs_bp.route("/class")
def search_class():
    return _search("class", _required("id"))


@logs_bp.route("/room")
def search_room():
    return _search("room", _required("id"))


# Search by participant email
@logs_bp.route("/student")
def search_student():
    return _search("student", _required("email"))
