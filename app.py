import logging
import socket

from flask import Flask, request
from flask_cors import CORS

from config import Config
from utils.db import init_db_connection
from utils.errors import ConfigurationError
from utils.logger import setup_logging
from utils.timefmt import load_timezone

# Import controllers
from controllers.system_controller import system_bp
from controllers.logs_controller import logs_bp
from controllers.export_controller import export_bp

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("access")


def _resolve_hostname():
    try:
        return socket.gethostname()
    except OSError as e:
        raise ConfigurationError(f"Failed to get hostname: {e}") from e


def create_app(config=Config):
    app = Flask(__name__)               # Initialize Flask app
    app.config.from_object(config)      # Load configuration from Config class
    setup_logging(app.config["DEBUG_LOGGING"])
    logger.debug("presence-log-view init")

    # Resolved once; a failure here stops the process
    app.config["TZINFO"] = load_timezone(app.config["TIMEZONE"])
    app.config["HOSTNAME"] = _resolve_hostname()
    if app.config["PORT"] is None:
        logger.info("Port variable is missing or in wrong format, using default: %d",
                    app.config["DEFAULT_PORT"])
        app.config["PORT"] = app.config["DEFAULT_PORT"]

    init_db_connection(app)             # Initialize MongoDB connection
    app.json.sort_keys = False          # Keep record fields in stored order

    # Register Blueprint
    app.register_blueprint(system_bp)
    app.register_blueprint(logs_bp)
    app.register_blueprint(export_bp)

    CORS(app)
    app.after_request(_log_access)

    logger.info("Listening at %d", app.config["PORT"])
    logger.info("Using %s as timezone", app.config["TIMEZONE"])
    logger.info("CORS Enabled")
    return app


def _log_access(response):
    access_logger.info(
        '%s "%s %s" %s',
        request.remote_addr, request.method, request.full_path.rstrip("?"), response.status_code,
        extra={"remote": request.remote_addr, "status": response.status_code,
               "agent": request.headers.get("User-Agent")},
    )
    return response


app = create_app()


# Run the app
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["PORT"])
