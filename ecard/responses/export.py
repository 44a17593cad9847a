"""CSV export of RSVP responses.

Answer keys from ``response_data`` are flattened into their own columns. The column set is
the union of keys in first-seen order over responses sorted oldest first, so exporting the
same data twice yields the same header.
"""

import csv
import io
import json
from collections.abc import Iterable
from typing import Any
from uuid import UUID

from ecard.responses.dtos import ResponseDTO, ResponseExportDTO


def submission_order(response: ResponseDTO) -> tuple[str, str]:
    submitted = response.created_at.isoformat() if response.created_at else ""
    return submitted, str(response.id)


def build_export(event_id: UUID, responses: Iterable[ResponseDTO]) -> ResponseExportDTO:
    ordered = tuple(sorted(responses, key=submission_order))

    data_keys: dict[str, None] = {}
    for response in ordered:
        for key in response.response_data:
            data_keys.setdefault(key, None)

    return ResponseExportDTO(event_id=event_id, data_keys=tuple(data_keys), responses=ordered)


def format_answer(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def format_row(response: ResponseDTO, data_keys: Iterable[str]) -> list[str]:
    return [
        response.respondent_name,
        response.respondent_email or "",
        response.status.value,
        str(response.headcount),
        response.created_at.isoformat() if response.created_at else "",
        *(format_answer(response.response_data.get(key)) for key in data_keys),
    ]


def render_csv(export: ResponseExportDTO) -> str:
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(export.columns)
    for response in export.responses:
        writer.writerow(format_row(response, export.data_keys))
    return output.getvalue()
