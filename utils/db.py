"""
utils/db.py
-----------------
This module initializes and manages the MongoDB connection
for the entire Flask application.
"""

import logging

from flask import current_app
from flask_pymongo import PyMongo

logger = logging.getLogger(__name__)

# Create a global MongoDB instance
mongo = PyMongo()


def init_db_connection(app):
    """
    Initialize MongoDB connection with Flask app.
    Reads MONGO_URI, DATABASE and COLLECTION from the app config.
    The client connects lazily, on the first query.
    """
    timeout = app.config["MONGO_TIMEOUT_MS"]
    mongo.init_app(
        app,
        connectTimeoutMS=timeout,
        serverSelectionTimeoutMS=timeout,
    )

    logger.info(
        "Database Connection Info",
        extra={
            "URI": app.config["MONGO_URI"],
            "Database": app.config["DATABASE"],
            "Collection": app.config["COLLECTION"],
        },
    )
    return mongo


# Collection shortcut, resolved against the current app's config
logs_col = lambda: mongo.cx[current_app.config["DATABASE"]][current_app.config["COLLECTION"]]
