from flask import Blueprint, current_app

system_bp = Blueprint("system", __name__)

SERVICE_NAME = "presence-log-view"


# Name of this service
@system_bp.route("/")
def index():
    return SERVICE_NAME, 200, {"Content-Type": "text/plain; charset=utf-8"}


# Host name of the machine or container answering, resolved at startup
@system_bp.route("/healthcheck")
def healthcheck():
    hostname = current_app.config["HOSTNAME"]
    return f"Awake and alive from {hostname}", 200, {"Content-Type": "text/plain; charset=utf-8"}
