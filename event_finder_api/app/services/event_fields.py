"""
Field extraction for raw upstream event records.

Upstream events are deeply nested and any level may be missing.  Each
field is resolved from an ordered list of access paths: the first
path that yields a usable value wins and a broken path simply means
"absent".  Nothing here raises on odd input.

``EventFields`` is the flat result.  ``is_listable`` is the
completeness filter that decides whether a record may appear in the
list view.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Optional, Sequence, Tuple, Union

PathKey = Union[str, int]
Path = Tuple[PathKey, ...]

# Image variant used for the detail page header.
DETAIL_IMAGE_MARKER = "ARTIST_PAGE"

FIRST_VENUE: Path = ("_embedded", "venues", 0)
FIRST_PRICE_RANGE: Path = ("priceRanges", 0)

NAME_PATHS: Sequence[Path] = (("name",),)
ID_PATHS: Sequence[Path] = (("id",),)
LOCAL_DATE_PATHS: Sequence[Path] = (("dates", "start", "localDate"),)
LOCAL_TIME_PATHS: Sequence[Path] = (("dates", "start", "localTime"),)
START_UTC_PATHS: Sequence[Path] = (("dates", "start", "dateTime"),)
PRICE_MIN_PATHS: Sequence[Path] = (FIRST_PRICE_RANGE + ("min",),)
PRICE_MAX_PATHS: Sequence[Path] = (FIRST_PRICE_RANGE + ("max",),)
CURRENCY_PATHS: Sequence[Path] = (FIRST_PRICE_RANGE + ("currency",),)
INFO_PATHS: Sequence[Path] = (("info",), ("description",))
SEATMAP_PATHS: Sequence[Path] = (("seatmap", "staticUrl"),)
URL_PATHS: Sequence[Path] = (("url",),)
VENUE_NAME_PATHS: Sequence[Path] = (FIRST_VENUE + ("name",),)
CITY_PATHS: Sequence[Path] = (FIRST_VENUE + ("city", "name"),)
# State code is preferred over the full state name.
STATE_PATHS: Sequence[Path] = (
    FIRST_VENUE + ("state", "stateCode"),
    FIRST_VENUE + ("state", "name"),
)
ADDRESS_LINE_PATHS: Sequence[Path] = (FIRST_VENUE + ("address", "line1"),)
POSTAL_CODE_PATHS: Sequence[Path] = (FIRST_VENUE + ("postalCode",),)


def dig(record: Any, path: Path) -> Any:
    """Follow ``path`` through nested dicts and lists.

    String keys index mappings and integer keys index lists.  Returns
    ``None`` as soon as a step cannot be taken.
    """
    current = record
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not 0 <= key < len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(key)
        if current is None:
            return None
    return current


def first_present(
    record: Any,
    paths: Sequence[Path],
    clean: Callable[[Any], Any],
) -> Any:
    """Return the first cleaned value found along ``paths``.

    ``clean`` maps a raw value to a usable one or to ``None`` when the
    value should count as absent, in which case the next path is tried.
    """
    for path in paths:
        value = dig(record, path)
        if value is None:
            continue
        value = clean(value)
        if value is not None:
            return value
    return None


def as_string(value: Any) -> Optional[str]:
    """Non-empty strings pass through unchanged."""
    if isinstance(value, str) and value:
        return value
    return None


def as_text(value: Any) -> Optional[str]:
    """Strings are trimmed; blank text is absent."""
    if isinstance(value, str):
        return value.strip() or None
    return None


def as_number(value: Any) -> Optional[Real]:
    """Numbers pass through, including zero.  Booleans are rejected."""
    if isinstance(value, Real) and not isinstance(value, bool):
        return value
    return None


def find_image(images: Any, marker: str = DETAIL_IMAGE_MARKER) -> Optional[str]:
    """Return the URL of the first image whose URL contains ``marker``."""
    if not isinstance(images, list):
        return None
    for image in images:
        url = as_string(dig(image, ("url",)))
        if url is not None and marker in url:
            return url
    return None


@dataclass(frozen=True)
class EventFields:
    """Flat, optional view of one raw upstream event."""

    name: Optional[str] = None
    id: Optional[str] = None
    local_date: Optional[str] = None
    local_time: Optional[str] = None
    start_utc: Optional[str] = None
    price_min: Optional[Real] = None
    price_max: Optional[Real] = None
    currency: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    venue: Optional[str] = None
    address_line: Optional[str] = None
    postal_code: Optional[str] = None
    info: Optional[str] = None
    image: Optional[str] = None
    seatmap: Optional[str] = None
    url: Optional[str] = None

    @property
    def location(self) -> Optional[str]:
        """``"City, ST"``; absent unless both parts resolved."""
        if self.city is None or self.state is None:
            return None
        return f"{self.city}, {self.state}"

    @property
    def address(self) -> Optional[str]:
        """``"line1, postalCode"``; absent unless both parts resolved."""
        if self.address_line is None or self.postal_code is None:
            return None
        return f"{self.address_line}, {self.postal_code}"


def extract_fields(raw: Any) -> EventFields:
    """Resolve every known field of ``raw`` into an ``EventFields``."""
    return EventFields(
        name=first_present(raw, NAME_PATHS, as_string),
        id=first_present(raw, ID_PATHS, as_string),
        local_date=first_present(raw, LOCAL_DATE_PATHS, as_string),
        local_time=first_present(raw, LOCAL_TIME_PATHS, as_string),
        start_utc=first_present(raw, START_UTC_PATHS, as_string),
        price_min=first_present(raw, PRICE_MIN_PATHS, as_number),
        price_max=first_present(raw, PRICE_MAX_PATHS, as_number),
        currency=first_present(raw, CURRENCY_PATHS, as_string),
        city=first_present(raw, CITY_PATHS, as_string),
        state=first_present(raw, STATE_PATHS, as_string),
        venue=first_present(raw, VENUE_NAME_PATHS, as_string),
        address_line=first_present(raw, ADDRESS_LINE_PATHS, as_string),
        postal_code=first_present(raw, POSTAL_CODE_PATHS, as_string),
        info=first_present(raw, INFO_PATHS, as_text),
        image=find_image(dig(raw, ("images",))),
        seatmap=first_present(raw, SEATMAP_PATHS, as_string),
        url=first_present(raw, URL_PATHS, as_string),
    )


def is_listable(fields: EventFields) -> bool:
    """Completeness filter for the list view.

    A record qualifies only when every field the list view shows can
    be filled: identity, local start date and time, UTC start, a price
    range with both bounds, and a first venue with a name, a city and a
    state.
    """
    required = (
        fields.name,
        fields.id,
        fields.local_date,
        fields.local_time,
        fields.start_utc,
        fields.price_min,
        fields.price_max,
        fields.location,
        fields.venue,
    )
    return all(value is not None for value in required)
