from __future__ import annotations

import base64
import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Callable, Iterable

import vobject

from .dates import parse_event_date
from .errors import SerializationError, SinkUnavailableError
from .images import ImageLoader, load_image
from .labels import address_label, email_label, phone_label
from .model import Contact, EventType

logger = logging.getLogger(__name__)

PRODID = "-//vcf-exporter//EN"
SUPPORTED_VERSIONS = ("3.0", "4.0")

SinkOpener = Callable[[], "BinaryIO | None"]
Notifier = Callable[[], None]


class ExportResult(Enum):
    OK = "ok"
    PARTIAL = "partial"
    FAIL = "fail"


@dataclass(frozen=True)
class ExportReport:
    exported: int = 0
    failed: int = 0
    sink_error: str | None = None  # set when nothing durable reached the sink

    @property
    def result(self) -> ExportResult:
        if self.sink_error is not None or self.exported == 0:
            return ExportResult.FAIL
        if self.failed:
            return ExportResult.PARTIAL
        return ExportResult.OK


# ── Per-contact card building ──────────────────────────────────────────────────

def _text(value: str | None) -> str:
    return value or ""


def _add_photo(v: vobject.base.Component, data: bytes, version: str) -> None:
    it = v.add("photo")
    if version == "4.0":
        # RFC 6350 carries inline images as data: URIs, which must not be
        # backslash-escaped, so the value goes out pre-encoded.
        it.value = "data:image/jpeg;base64," + base64.b64encode(data).decode("ascii")
        it.encoded = True
    else:
        it.value = data
        it.encoding_param = "b"
        it.type_param = "JPEG"


def _resolve_thumbnail(thumbnail: bytes | str | None, image_loader: ImageLoader) -> bytes | None:
    if thumbnail is None or thumbnail == "" or thumbnail == b"":
        return None
    if isinstance(thumbnail, (bytes, bytearray)):
        return bytes(thumbnail)
    return image_loader(thumbnail)


def build_vcard(
    contact: Contact,
    image_loader: ImageLoader = load_image,
    version: str = "3.0",
) -> vobject.base.Component:
    """Map one contact onto a vobject vCard component.

    Raises ContactEncodingError (or whatever the image loader raises) when
    the contact cannot be represented.
    """
    v = vobject.vCard()
    v.add("version").value = version
    v.add("prodid").value = PRODID
    v.add("fn").value = contact.display_name()

    # N keeps all five components even when empty.
    v.add("n").value = vobject.vcard.Name(
        family=_text(contact.surname),
        given=_text(contact.first_name),
        additional=_text(contact.middle_name),
        prefix=_text(contact.prefix),
        suffix=_text(contact.suffix),
    )

    if contact.nickname:
        v.add("nickname").value = contact.nickname

    for phone in contact.phone_numbers:
        it = v.add("tel")
        it.value = phone.value
        it.type_paramlist = phone_label(phone.type).type_params

    for email in contact.emails:
        it = v.add("email")
        it.value = email.value
        it.type_paramlist = email_label(email.type).type_params

    for event in contact.events:
        if event.type == EventType.BIRTHDAY:
            prop = "bday"
        elif event.type == EventType.ANNIVERSARY:
            # ANNIVERSARY only exists from vCard 4.0 on
            prop = "anniversary" if version == "4.0" else "x-anniversary"
        else:
            continue
        v.add(prop).value = parse_event_date(event.value).to_vcard(version)

    for address in contact.addresses:
        it = v.add("adr")
        it.value = vobject.vcard.Address(street=_text(address.value))
        it.type_paramlist = address_label(address.type).type_params

    if contact.notes:
        v.add("note").value = contact.notes

    org = contact.organization
    if org is not None and not org.is_empty():
        v.add("org").value = [_text(org.company)]
        v.add("title").value = _text(org.job_position)

    for url in contact.websites:
        v.add("url").value = url

    photo = _resolve_thumbnail(contact.thumbnail, image_loader)
    if photo is not None:
        _add_photo(v, photo, version)

    return v


# ── Sink handling ──────────────────────────────────────────────────────────────

def file_sink(path: Path) -> SinkOpener:
    """Return an opener that creates ``path`` (and its parents) for writing."""
    path = Path(path)

    def _open() -> BinaryIO:
        path.parent.mkdir(parents=True, exist_ok=True)
        return path.open("wb")

    return _open


def _acquire(sink: SinkOpener) -> BinaryIO:
    try:
        stream = sink()
    except OSError as exc:
        raise SinkUnavailableError(f"Cannot open output: {exc}") from exc
    if stream is None:
        raise SinkUnavailableError("Output sink is not available")
    return stream


def _release(stream: BinaryIO) -> str | None:
    try:
        stream.close()
    except OSError as exc:
        logger.error("Closing the output failed: %s", exc)
        return f"Cannot close output: {exc}"
    return None


def _write_blocks(blocks: list[str], stream: BinaryIO) -> None:
    try:
        stream.write("".join(blocks).encode("utf-8"))
        stream.flush()
    except (OSError, ValueError) as exc:
        raise SerializationError(f"Cannot write vCards: {exc}") from exc


# ── Exporter ───────────────────────────────────────────────────────────────────

class VcfExporter:
    """Write a batch of contacts as vCards to a single sink.

    A contact that cannot be encoded is counted as failed and skipped; the
    rest of the batch still goes out. All cards are staged in memory and
    written in one pass, in input order.
    """

    def __init__(
        self,
        image_loader: ImageLoader = load_image,
        notifier: Notifier | None = None,
        version: str = "3.0",
    ) -> None:
        if version not in SUPPORTED_VERSIONS:
            raise ValueError(f"Unsupported vCard version {version!r}; expected one of {SUPPORTED_VERSIONS}")
        self.image_loader = image_loader
        self.notifier = notifier
        self.version = version

    def _notify(self) -> None:
        if self.notifier is None:
            return
        try:
            self.notifier()
        except Exception:
            logger.warning("Export notification failed", exc_info=True)

    def _stage(self, contacts: Iterable[Contact]) -> tuple[list[str], int, int]:
        blocks: list[str] = []
        exported = failed = 0
        for index, contact in enumerate(contacts, 1):
            try:
                blocks.append(build_vcard(contact, self.image_loader, self.version).serialize())
            except Exception as exc:
                failed += 1
                logger.warning("Contact #%d could not be exported: %s", index, exc)
                logger.debug("Failure detail for contact #%d", index, exc_info=True)
                continue
            exported += 1
        return blocks, exported, failed

    def export_contacts(
        self,
        contacts: Iterable[Contact],
        sink: SinkOpener,
        show_exporting_notice: bool = False,
    ) -> ExportReport:
        try:
            stream = _acquire(sink)
        except SinkUnavailableError as exc:
            logger.error("%s", exc)
            return ExportReport(sink_error=str(exc))

        try:
            if show_exporting_notice:
                self._notify()
            blocks, exported, failed = self._stage(contacts)
            try:
                _write_blocks(blocks, stream)
            except SerializationError as exc:
                logger.error("%s", exc)
                report = ExportReport(exported=exported, failed=failed, sink_error=str(exc))
            else:
                report = ExportReport(exported=exported, failed=failed)
        finally:
            close_error = _release(stream)

        if close_error is not None and report.sink_error is None:
            report = dataclasses.replace(report, sink_error=close_error)
        logger.info(
            "Export finished: %d exported, %d failed (%s)",
            report.exported, report.failed, report.result.value,
        )
        return report


def export_to_file(
    contacts: Iterable[Contact],
    path: Path,
    version: str = "3.0",
    image_loader: ImageLoader = load_image,
    notifier: Notifier | None = None,
    show_exporting_notice: bool = False,
) -> ExportReport:
    exporter = VcfExporter(image_loader=image_loader, notifier=notifier, version=version)
    return exporter.export_contacts(contacts, file_sink(path), show_exporting_notice)
