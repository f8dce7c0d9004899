from datetime import datetime
from typing import Optional

import attrs


@attrs.frozen
class EventInfo:
    event_id: str
    name_pub: str
    description: str
    currency_iso: str
    date_from: datetime
    date_to: datetime
    header_image_url: Optional[str] = None
    place: str = ''
