"""
Calendar export of the loaded event as an iCalendar (RFC 5545) document.

https://icalendar.readthedocs.io/
"""

from datetime import datetime, timezone
from typing import Optional

from icalendar import Calendar, Event

from src.service.seating.domain.value_object.event_info import EventInfo


PRODUCT_ID = '-//Seating Checkout//Event Export//EN'


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def build_calendar_event(event: EventInfo, *, now: Optional[datetime] = None) -> str:
    """
    Build a single-event calendar for the event.

    Times are written in UTC; a naive datetime is taken as UTC already.
    Escaping, CRLF line endings and folding at 75 octets come from icalendar.
    """
    vevent = Event()
    vevent.add('uid', event.event_id)
    vevent.add('dtstamp', _as_utc(now or datetime.now(timezone.utc)))
    vevent.add('dtstart', _as_utc(event.date_from))
    vevent.add('dtend', _as_utc(event.date_to))
    vevent.add('summary', event.name_pub)
    if event.description:
        vevent.add('description', event.description)
    if event.place:
        vevent.add('location', event.place)
    if event.header_image_url:
        vevent.add('url', event.header_image_url)

    calendar = Calendar()
    calendar.add('prodid', PRODUCT_ID)
    calendar.add('version', '2.0')
    calendar.add('calscale', 'GREGORIAN')
    calendar.add_component(vevent)

    return calendar.to_ical().decode('utf-8')
