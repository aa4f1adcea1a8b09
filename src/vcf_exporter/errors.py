from __future__ import annotations


class VcfExportError(Exception):
    """Base class for everything the exporter raises on its own."""


class SinkUnavailableError(VcfExportError):
    """The output sink could not be acquired."""


class ContactEncodingError(VcfExportError):
    """A single contact could not be turned into a vCard."""


class ImageLoadError(ContactEncodingError):
    """A thumbnail reference could not be resolved to image bytes."""


class SerializationError(VcfExportError):
    """The batch of vCards could not be written to the sink."""
