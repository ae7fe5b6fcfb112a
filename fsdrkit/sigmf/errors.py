"""Exceptions raised while handling SigMF metadata."""


class SigMFError(Exception):
    """Base class for every SigMF related error."""


class MissingMandatoryField(SigMFError):
    """A field required by the SigMF specification is absent."""

    def __init__(self, field):
        self.field = field
        super().__init__(f"Mandatory field is missing: {field}")


class UnknownDatasetFormat(SigMFError, ValueError):
    """A datatype string does not name any known SigMF dataset format."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown DatasetFormat: {value}")


class BadSampleRate(SigMFError, ValueError):
    """A sample rate is NaN, negative or unreasonably large."""

    def __init__(self):
        super().__init__("Sample rate must be positive and less than 1e250")


class SigMFJsonError(SigMFError, ValueError):
    """Metadata could not be decoded from or encoded to JSON."""

    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"JSON malformed: {detail}")