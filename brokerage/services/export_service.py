"""Admin export of every client lead as CSV."""

from __future__ import annotations

import csv
import io
import json
from typing import Any, Iterator, Sequence

from sqlalchemy.orm import Session

from brokerage.services import booking_service, inquiry_service, request_service
from brokerage.services.booking_service import BookingKind
from brokerage.types import Record

CSV_DANGEROUS_PREFIXES = ("=", "+", "-", "@")
CLIENT_HEADERS = ("Source", "Name", "Email", "Phone", "Message", "Created At")


def _csv_safe(value: str) -> str:
    if value and value.startswith(CSV_DANGEROUS_PREFIXES):
        return f"'{value}"
    return value


def _serialize_csv_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True)
    return str(value)


def _write_csv_row(values: Sequence[Any]) -> str:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([_csv_safe(_serialize_csv_value(value)) for value in values])
    return output.getvalue()


def _join(*parts: Any) -> str:
    return " | ".join(str(p).strip() for p in parts if p not in (None, ""))


def collect_client_rows(db: Session) -> list[tuple[str, ...]]:
    """One row per lead across every source, newest first."""
    rows: list[tuple[str, str, str, str, str, str]] = []

    def add(source: str, record: Record, message: str) -> None:
        rows.append((
            source,
            record.get("name") or "",
            record.get("email") or "",
            record.get("phone") or "",
            message,
            record.get("createdAt") or "",
        ))

    for item in inquiry_service.list_contact_inquiries(db):
        add("Contact Inquiry", item, item.get("message") or "")
    for item in inquiry_service.list_property_inquiries(db):
        add("Property Inquiry", item, _join(item.get("propertyId"), item.get("message")))
    for item in request_service.list_all_requests(db):
        add(
            "Service Request",
            item,
            _join(item.get("requestType"), item.get("serviceType"), item.get("propertyType"), item.get("message")),
        )
    for item in booking_service.list_bookings(db, BookingKind.INSPECTION):
        add(
            "Inspection Booking",
            item,
            _join(
                item.get("propertyTitle") or item.get("propertyId"),
                _join(item.get("preferredDate"), item.get("preferredTime")).replace(" | ", " "),
                item.get("status"),
            ),
        )
    for item in booking_service.list_bookings(db, BookingKind.CONSULTATION):
        add(
            "Consultation Request",
            item,
            _join(
                item.get("topic") or "Consultation",
                _join(item.get("date"), item.get("time")).replace(" | ", " "),
                item.get("status"),
            ),
        )

    rows.sort(key=lambda row: row[5], reverse=True)
    return rows


def stream_clients_csv(db: Session) -> Iterator[str]:
    """Yield the header then one CSV line per client row."""
    rows = collect_client_rows(db)
    yield _write_csv_row(CLIENT_HEADERS)
    for row in rows:
        yield _write_csv_row(row)
