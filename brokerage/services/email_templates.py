"""HTML bodies for notification emails.

Every builder returns (subject, html). Values coming from submitters are
escaped before interpolation.
"""

from html import escape
from typing import Optional

from brokerage.types import Record

BRAND = "Letify Realty"


def _e(value: object) -> str:
    if value is None or value == "":
        return "N/A"
    return escape(str(value))


def _rows(pairs: list[tuple[str, object]]) -> str:
    return "\n".join(
        f"<p><strong>{label}:</strong> {_e(value)}</p>" for label, value in pairs
    )


def _paragraphs(text: Optional[str]) -> str:
    return "<br>".join(escape(line) for line in (text or "").splitlines())


def _footer(record: Record) -> str:
    return f"<hr>\n<p><small>Received on: {_e(record.get('createdAt'))}</small></p>"


def contact_inquiry(inquiry: Record) -> tuple[str, str]:
    html = f"""
<h2>New Contact Inquiry from {BRAND} Website</h2>
{_rows([("Name", inquiry["name"]), ("Email", inquiry["email"]), ("Phone", inquiry["phone"])])}
<p><strong>Message:</strong></p>
<p>{_paragraphs(inquiry["message"])}</p>
{_footer(inquiry)}
"""
    return f"New Contact Inquiry from {inquiry['name']}", html


def property_inquiry(inquiry: Record, property_record: Optional[Record]) -> tuple[str, str]:
    title = property_record["title"] if property_record else "Unknown Property"
    location = property_record.get("location") if property_record else None
    price = property_record.get("price") if property_record else None
    message = (
        f"<p><strong>Message:</strong></p>\n<p>{_paragraphs(inquiry['message'])}</p>"
        if inquiry.get("message")
        else ""
    )
    html = f"""
<h2>New Property Inquiry from {BRAND} Website</h2>
<h3>Property Details:</h3>
{_rows([("Property", title), ("Location", location), ("Price", price)])}
<hr>
<h3>Inquirer Details:</h3>
{_rows([("Name", inquiry["name"]), ("Email", inquiry["email"]), ("Phone", inquiry["phone"])])}
{message}
{_footer(inquiry)}
"""
    return f"Property Inquiry: {title}", html


def _reservation_pairs(reservation: Record) -> list[tuple[str, object]]:
    pairs: list[tuple[str, object]] = [
        ("Property", reservation.get("propertyTitle") or reservation["propertyId"]),
        ("Property Type", reservation.get("propertyType")),
    ]
    if reservation.get("checkIn") or reservation.get("checkOut"):
        pairs += [("Check-in", reservation.get("checkIn")), ("Check-out", reservation.get("checkOut"))]
    if reservation.get("moveIn"):
        pairs += [("Move-in Date", reservation.get("moveIn")), ("Lease Term", reservation.get("leaseTerm"))]
    pairs += [
        ("Guests", reservation.get("guests")),
        ("Payment Method", reservation.get("paymentMethod")),
        ("Notes", reservation.get("notes")),
    ]
    return pairs


def reservation_staff(reservation: Record) -> tuple[str, str]:
    html = f"""
<h2>New Reservation Request</h2>
{_rows(_reservation_pairs(reservation))}
<hr>
<h3>Guest Details:</h3>
{_rows([("Name", reservation["name"]), ("Email", reservation["email"]), ("Phone", reservation["phone"])])}
{_footer(reservation)}
"""
    title = reservation.get("propertyTitle") or reservation["propertyId"]
    return f"Reservation Request: {title}", html


def reservation_ack(reservation: Record) -> tuple[str, str]:
    html = f"""
<h2>Hi {_e(reservation["name"])},</h2>
<p>We have received your reservation request. Our team will contact you shortly to confirm availability and payment.</p>
{_rows(_reservation_pairs(reservation))}
<p>Best regards,<br>The {BRAND} Team</p>
"""
    return f"We received your reservation request - {BRAND}", html


def _booking_slot(kind: str, booking: Record) -> list[tuple[str, object]]:
    if kind == "inspection":
        return [("Preferred Date", booking.get("preferredDate")), ("Preferred Time", booking.get("preferredTime"))]
    return [
        ("Date", booking.get("date")),
        ("Time", booking.get("time")),
        ("Topic", booking.get("topic")),
    ]


def booking_staff(kind: str, booking: Record) -> tuple[str, str]:
    label = kind.capitalize()
    pairs: list[tuple[str, object]] = []
    if booking.get("propertyId") or booking.get("propertyTitle"):
        pairs.append(("Property", booking.get("propertyTitle") or booking.get("propertyId")))
    pairs += _booking_slot(kind, booking)
    pairs.append(("Notes", booking.get("notes")))
    html = f"""
<h2>New {label} Request</h2>
{_rows(pairs)}
<hr>
<h3>Requester Details:</h3>
{_rows([("Name", booking["name"]), ("Email", booking["email"]), ("Phone", booking["phone"])])}
{_footer(booking)}
"""
    return f"New {label} Request from {booking['name']}", html


def booking_ack(kind: str, booking: Record) -> tuple[str, str]:
    html = f"""
<h2>Hi {_e(booking["name"])},</h2>
<p>Thank you for requesting a {kind}. We will confirm the date and time with you shortly.</p>
{_rows(_booking_slot(kind, booking))}
<p>Best regards,<br>The {BRAND} Team</p>
"""
    return f"Your {kind} request - {BRAND}", html


def booking_status(kind: str, booking: Record) -> tuple[str, str]:
    status = booking.get("status") or "pending"
    confirmed = ""
    if booking.get("confirmedDate") or booking.get("confirmedTime"):
        confirmed = _rows([
            ("Confirmed Date", booking.get("confirmedDate")),
            ("Confirmed Time", booking.get("confirmedTime")),
        ])
    property_line = ""
    if booking.get("propertyTitle"):
        property_line = _rows([("Property", booking.get("propertyTitle"))])
    html = f"""
<h2>Hi {_e(booking["name"])},</h2>
<p>Your {kind} request has been updated.</p>
{property_line}
{_rows([("Status", status.capitalize())])}
{confirmed}
<p>Reply to this email if you need to make any changes.</p>
<p>Best regards,<br>The {BRAND} Team</p>
"""
    return f"Your {kind} request is {status}", html


def service_request(request: Record) -> tuple[str, str]:
    details = _rows([
        ("From", request["email"]),
        ("Service Type", request["serviceType"]),
        ("Property Type", request["propertyType"]),
        ("Property", request.get("propertyId")),
        ("Budget", request.get("budget")),
    ])
    html = f"""
<h2>New {_e(request["requestType"]).capitalize()} Request</h2>
{details}
<p><strong>Message:</strong></p>
<p>{_paragraphs(request["message"])}</p>
{_footer(request)}
"""
    return f"New {request['requestType']} request: {request['serviceType']}", html


def user_message(message: Record) -> tuple[str, str]:
    html = f"""
<h2>New message from {_e(message["email"])}</h2>
<p>{_paragraphs(message["content"])}</p>
{_footer(message)}
"""
    return f"New client message from {message['email']}", html


def admin_message(message: Record) -> tuple[str, str]:
    html = f"""
<h2>You have a new message from {BRAND}</h2>
<p>{_paragraphs(message["content"])}</p>
<p>Sign in to your account to reply.</p>
"""
    return f"New message from {BRAND}", html


def mailing(subject: str, body: str) -> tuple[str, str]:
    html = f"""
<div>{_paragraphs(body)}</div>
<hr>
<p><small>You are receiving this because of the interests saved in your {BRAND} profile.</small></p>
"""
    return subject, html
