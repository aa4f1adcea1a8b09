from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

# Kind values mirror the platform address-book constants so a host can pass
# raw integers straight through.


class PhoneType(IntEnum):
    CUSTOM = 0
    HOME = 1
    MOBILE = 2
    WORK = 3
    WORK_FAX = 4
    HOME_FAX = 5
    PAGER = 6
    OTHER = 7
    CALLBACK = 8
    CAR = 9
    COMPANY_MAIN = 10
    ISDN = 11
    MAIN = 12
    OTHER_FAX = 13
    RADIO = 14
    TELEX = 15
    TTY_TDD = 16
    WORK_MOBILE = 17
    WORK_PAGER = 18
    ASSISTANT = 19
    MMS = 20


class EmailType(IntEnum):
    CUSTOM = 0
    HOME = 1
    WORK = 2
    OTHER = 3
    MOBILE = 4


class AddressType(IntEnum):
    CUSTOM = 0
    HOME = 1
    WORK = 2
    OTHER = 3


class EventType(IntEnum):
    CUSTOM = 0
    ANNIVERSARY = 1
    OTHER = 2
    BIRTHDAY = 3


@dataclass(frozen=True)
class PhoneNumber:
    value: str
    type: PhoneType = PhoneType.MOBILE


@dataclass(frozen=True)
class Email:
    value: str
    type: EmailType = EmailType.HOME


@dataclass(frozen=True)
class Event:
    value: str  # "YYYY-MM-DD", or "--MM-DD" when the year is unknown
    type: EventType = EventType.BIRTHDAY


@dataclass(frozen=True)
class Address:
    value: str
    type: AddressType = AddressType.HOME


@dataclass(frozen=True)
class Organization:
    company: str = ""
    job_position: str = ""

    def is_empty(self) -> bool:
        return not self.company and not self.job_position


@dataclass
class Contact:
    prefix: str = ""
    first_name: str = ""
    middle_name: str = ""
    surname: str = ""
    suffix: str = ""
    nickname: str = ""
    phone_numbers: list[PhoneNumber] = field(default_factory=list)
    emails: list[Email] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)
    addresses: list[Address] = field(default_factory=list)
    notes: str = ""
    organization: Organization | None = None
    websites: list[str] = field(default_factory=list)
    thumbnail: bytes | str | None = None  # JPEG bytes, or a reference for the image loader

    def display_name(self) -> str:
        parts = (self.prefix, self.first_name, self.middle_name, self.surname, self.suffix)
        name = " ".join(p.strip() for p in parts if p and p.strip())
        if name:
            return name
        if self.nickname:
            return self.nickname
        if self.organization is not None and self.organization.company:
            return self.organization.company
        if self.emails:
            return self.emails[0].value
        if self.phone_numbers:
            return self.phone_numbers[0].value
        return ""
