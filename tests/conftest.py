import mongomock
import pytest

from app import create_app
from config import Config
from utils.db import mongo
from utils.timefmt import load_timezone


class SuiteConfig(Config):
    TESTING = True
    DATABASE = "jitsilog_test"
    COLLECTION = "logs"
    TIMEZONE = "America/Sao_Paulo"
    PORT = 8080
    DEBUG_LOGGING = False


def make_log(**overrides):
    log = {
        "room": "sala-01",
        "course": "calc101",
        "class": "turma-a",
        "student": "Ana Souza",
        "participantId": "ana-7f3c@meet.example.org/abc123",
        "email": "ana@example.org",
        "timestamp": "2021-05-01T10:00:00-03:00",
        "action": "join",
    }
    log.update(overrides)
    return log


@pytest.fixture
def app():
    app = create_app(SuiteConfig)
    # In-memory MongoDB in place of the real client
    mongo.cx = mongomock.MongoClient()
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def collection(app):
    return mongo.cx[SuiteConfig.DATABASE][SuiteConfig.COLLECTION]


@pytest.fixture
def sao_paulo():
    return load_timezone("America/Sao_Paulo")
