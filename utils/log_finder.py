"""
utils/log_finder.py
-----------------
Runs a LogQuery against the logs collection: one count to clamp the
window, one find sorted by newest timestamp first.
"""

import logging

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from models.log import LogRecord, PARSE_FAILURE_MARKER
from utils.errors import DecodeFailure, StoreUnavailable, TimestampParseFailure
from utils.timefmt import localize_timestamp

logger = logging.getLogger(__name__)


def find_logs(collection, query, tz):
    """
    Return the LogRecords matching `query`, newest first, with each
    timestamp rendered in `tz`.

    Raises StoreUnavailable when the count or the find fails and
    DecodeFailure when a document is not a log record. A timestamp that
    does not parse is replaced by PARSE_FAILURE_MARKER and the record kept.
    """
    try:
        total = collection.count_documents(query.filter)
    except PyMongoError as e:
        logger.info("Error on count of the documents",
                    extra={"operation": "count_documents", "error": str(e)})
        raise StoreUnavailable("count_documents", e) from e

    window = query.window.clamp(total)
    logger.debug("Dataset row max: %d", total)
    logger.debug("Dataset row limit %d", window.limit)
    logger.debug("Dataset row skip %d", window.skip)

    records = []
    try:
        cursor = (
            collection.find(query.filter)
            .sort("timestamp", DESCENDING)
            .skip(window.skip)
            .limit(window.limit)
        )
        for document in cursor:
            records.append(_decode(document, tz))
    except PyMongoError as e:
        logger.info("Error on finding the documents",
                    extra={"operation": "find", "error": str(e)})
        raise StoreUnavailable("find", e) from e

    logger.debug("Data retrieved", extra={"count": len(records)})
    return records


def _decode(document, tz):
    try:
        record = LogRecord.from_document(document)
    except DecodeFailure as e:
        logger.info("Error on decoding the document",
                    extra={"operation": "decode", "error": str(e), "id": document.get("_id")})
        raise

    try:
        record.timestamp = localize_timestamp(record.timestamp, tz)
    except TimestampParseFailure as e:
        logger.info("Failed to parse ISO8601",
                    extra={"operation": "localize", "error": str(e)})
        record.timestamp = PARSE_FAILURE_MARKER
    return record
