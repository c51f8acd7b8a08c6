from datetime import datetime
from unittest.mock import MagicMock

from pymongo.errors import ServerSelectionTimeoutError

from utils.csv_export import CSV_HEADER, ERROR_MESSAGE, render_csv

from conftest import make_log


def _lines(resp):
    return resp.get_data(as_text=True).splitlines()


def test_export_header_and_rows(client, collection):
    collection.insert_many([
        make_log(timestamp="2021-05-01T09:00:00-03:00", action="join"),
        make_log(timestamp="2021-05-01T11:00:00-03:00", action="leave"),
    ])
    resp = client.get("/v1/csv?ts=2021-05-01T00:00:00-03:00")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"

    lines = _lines(resp)
    assert lines[0] == "sala;curso;turma;aluno;jid;email;timestamp;action"
    assert len(lines) == 3
    rows = [line.split(";") for line in lines[1:]]
    assert all(len(row) == 8 for row in rows)
    assert [row[7] for row in rows] == ["leave", "join"]
    assert rows[0][0] == "sala-01"
    assert rows[0][6].startswith("2021-05-01 11:00:00 -0300")


def test_export_only_includes_records_since_ts(client, collection):
    collection.insert_many([
        make_log(timestamp="2021-04-30T23:59:59-03:00", action="old"),
        make_log(timestamp="2021-05-02T08:00:00-03:00", action="new"),
    ])
    lines = _lines(client.get("/v1/csv?ts=2021-05-01"))
    assert [line.split(";")[7] for line in lines[1:]] == ["new"]


def test_export_is_an_attachment(client):
    resp = client.get("/v1/csv?ts=2021-05-01")
    disposition = resp.headers["Content-Disposition"]
    prefix = "attachment; filename=presence-logger."
    assert disposition.startswith(prefix)
    assert disposition.endswith(".csv")
    stamp = datetime.fromisoformat(disposition[len(prefix):-len(".csv")])
    assert stamp.tzinfo is not None
    assert abs((datetime.now(stamp.tzinfo) - stamp).total_seconds()) < 60


def test_export_failure_writes_single_error_row(client, monkeypatch):
    broken = MagicMock()
    broken.count_documents.side_effect = ServerSelectionTimeoutError("no servers")
    monkeypatch.setattr("models.log.logs_col", lambda: broken)
    resp = client.get("/v1/csv?ts=2021-05-01")
    assert resp.status_code == 200
    lines = _lines(resp)
    assert len(lines) == 1
    assert lines[0].startswith(ERROR_MESSAGE + ";")
    assert "no servers" in lines[0]


def test_export_without_ts_is_not_found(client):
    assert client.get("/v1/csv").status_code == 404


def test_render_csv_empty_result_is_header_only():
    assert render_csv([]) == ";".join(CSV_HEADER) + "\n"


def test_render_csv_error_ignores_records():
    assert render_csv(["ignored"], error="boom") == ERROR_MESSAGE + ";boom\n"
