from __future__ import annotations

import json
import logging
from enum import IntEnum
from pathlib import Path
from typing import Any, TypeVar

from .model import (
    Address,
    AddressType,
    Contact,
    Email,
    EmailType,
    Event,
    EventType,
    Organization,
    PhoneNumber,
    PhoneType,
)

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=IntEnum)

# ── Field coercion ─────────────────────────────────────────────────────────────
#
# Hosts dump contacts either with enum names ("MOBILE", "work_fax") or with
# the raw platform integers. Anything unrecognised becomes CUSTOM so the
# exporter's label tables fall through to their defaults.


def _kind(enum_cls: type[K], raw: Any, default: K) -> K:
    if raw is None or raw == "":
        return default
    if isinstance(raw, bool):
        return enum_cls(0)
    if isinstance(raw, int):
        try:
            return enum_cls(raw)
        except ValueError:
            logger.debug("Unknown %s value %r, using CUSTOM", enum_cls.__name__, raw)
            return enum_cls(0)
    try:
        return enum_cls[str(raw).strip().upper()]
    except KeyError:
        logger.debug("Unknown %s name %r, using CUSTOM", enum_cls.__name__, raw)
        return enum_cls(0)


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _entries(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    items = data.get(key) or []
    if not isinstance(items, list):
        raise ValueError(f"'{key}' must be a list")
    return [i if isinstance(i, dict) else {"value": i} for i in items]


def contact_from_dict(data: dict[str, Any]) -> Contact:
    """Build a Contact from one JSON object (snake_case keys)."""
    org = data.get("organization")
    organization = None
    if isinstance(org, dict):
        organization = Organization(
            company=_str(org.get("company")),
            job_position=_str(org.get("job_position")),
        )

    thumbnail = data.get("thumbnail")

    return Contact(
        prefix=_str(data.get("prefix")),
        first_name=_str(data.get("first_name")),
        middle_name=_str(data.get("middle_name")),
        surname=_str(data.get("surname")),
        suffix=_str(data.get("suffix")),
        nickname=_str(data.get("nickname")),
        phone_numbers=[
            PhoneNumber(_str(p.get("value")), _kind(PhoneType, p.get("type"), PhoneType.MOBILE))
            for p in _entries(data, "phone_numbers")
        ],
        emails=[
            Email(_str(e.get("value")), _kind(EmailType, e.get("type"), EmailType.HOME))
            for e in _entries(data, "emails")
        ],
        events=[
            Event(_str(e.get("value")), _kind(EventType, e.get("type"), EventType.BIRTHDAY))
            for e in _entries(data, "events")
        ],
        addresses=[
            Address(_str(a.get("value")), _kind(AddressType, a.get("type"), AddressType.HOME))
            for a in _entries(data, "addresses")
        ],
        notes=_str(data.get("notes")),
        organization=organization,
        websites=[_str(w.get("value")) for w in _entries(data, "websites")],
        thumbnail=_str(thumbnail) if thumbnail else None,
    )


# ── Public API ─────────────────────────────────────────────────────────────────

def read_contacts_from_json(path: Path) -> list[Contact]:
    """Load a JSON array of contact objects."""
    raw = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path}: not valid JSON ({exc})") from exc
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of contacts")

    contacts = []
    for i, item in enumerate(data, 1):
        if not isinstance(item, dict):
            raise ValueError(f"{path}: entry #{i} is not an object")
        contacts.append(contact_from_dict(item))
    logger.debug("%s: loaded %d contact(s)", path, len(contacts))
    return contacts
