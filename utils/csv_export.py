"""
utils/csv_export.py
-----------------
Semicolon-delimited CSV rendering of log records.
"""

import csv
import io

CSV_HEADER = ["sala", "curso", "turma", "aluno", "jid", "email", "timestamp", "action"]
ERROR_MESSAGE = "Ocorreu um erro ao realizar a requisição"


def render_csv(records, error=None):
    """
    Header plus one row per record. When `error` is set, a single row
    describing it is written instead.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=";", lineterminator="\n")
    if error is not None:
        writer.writerow([ERROR_MESSAGE, str(error)])
    else:
        writer.writerow(CSV_HEADER)
        for record in records:
            writer.writerow(record.to_csv_row())
    return buffer.getvalue()
