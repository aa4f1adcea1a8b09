"""TYPE labels for multi-valued vCard fields.

Each mapping is total: anything without an explicit entry falls back to HOME,
including raw integers outside the enum range.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from .model import AddressType, EmailType, PhoneType


class VCardLabel(Enum):
    HOME = ("HOME",)
    WORK = ("WORK",)
    CELL = ("CELL",)
    PREF = ("PREF",)
    MOBILE = ("MOBILE",)
    WORK_FAX = ("WORK", "FAX")
    HOME_FAX = ("HOME", "FAX")
    PAGER = ("PAGER",)

    @property
    def type_params(self) -> list[str]:
        """Values for the TYPE parameter, e.g. ``["WORK", "FAX"]``."""
        return list(self.value)


_PHONE_LABELS: dict[PhoneType, VCardLabel] = {
    PhoneType.MOBILE: VCardLabel.CELL,
    PhoneType.WORK: VCardLabel.WORK,
    PhoneType.MAIN: VCardLabel.PREF,
    PhoneType.WORK_FAX: VCardLabel.WORK_FAX,
    PhoneType.HOME_FAX: VCardLabel.HOME_FAX,
    PhoneType.PAGER: VCardLabel.PAGER,
}

_EMAIL_LABELS: dict[EmailType, VCardLabel] = {
    EmailType.WORK: VCardLabel.WORK,
    EmailType.MOBILE: VCardLabel.MOBILE,
}

_ADDRESS_LABELS: dict[AddressType, VCardLabel] = {
    AddressType.WORK: VCardLabel.WORK,
}


def _lookup(table: dict, kind: Any) -> VCardLabel:
    # IntEnum members hash like their int values, so raw ints hit the table too.
    if isinstance(kind, int):
        return table.get(kind, VCardLabel.HOME)
    return VCardLabel.HOME


def phone_label(kind: Any) -> VCardLabel:
    return _lookup(_PHONE_LABELS, kind)


def email_label(kind: Any) -> VCardLabel:
    return _lookup(_EMAIL_LABELS, kind)


def address_label(kind: Any) -> VCardLabel:
    return _lookup(_ADDRESS_LABELS, kind)
