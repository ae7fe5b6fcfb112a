"""Records that make up SigMF metadata: global info, captures, annotations, extensions."""

from __future__ import annotations

import math
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fsdrkit.sigmf.dataset_format import DatasetFormat
from fsdrkit.sigmf.errors import (
    MissingMandatoryField,
    SigMFJsonError,
    UnknownDatasetFormat,
)


def _as_mapping(data, what):
    if not isinstance(data, Mapping):
        raise SigMFJsonError(f"{what} must be a JSON object")
    return data


def _decode(value, kind, key):
    """Check and convert one decoded JSON value to the field's Python type."""
    if value is None:
        return None
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise SigMFJsonError(f"{key}: expected a non-negative integer")
        return value
    if kind is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SigMFJsonError(f"{key}: expected a number")
        return float(value)
    if kind is DatasetFormat:
        if not isinstance(value, str):
            raise SigMFJsonError(f"{key}: expected a string")
        try:
            return DatasetFormat(value)
        except ValueError:
            raise UnknownDatasetFormat(value) from None
    if kind is uuid.UUID:
        if not isinstance(value, str):
            raise SigMFJsonError(f"{key}: expected a string")
        try:
            return uuid.UUID(value)
        except ValueError as exc:
            raise SigMFJsonError(f"{key}: {exc}") from exc
    if kind is Path:
        if not isinstance(value, str):
            raise SigMFJsonError(f"{key}: expected a string")
        return Path(value)
    if not isinstance(value, kind):
        raise SigMFJsonError(f"{key}: expected a {kind.__name__}")
    return value


def _encode(value):
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (DatasetFormat, uuid.UUID, Path)):
        return str(value)
    return value


def _dump(obj, fields):
    """Serialise the listed fields; optional ones are left out when unset."""
    out = {}
    for attr, key, _kind, always in fields:
        value = getattr(obj, attr)
        if value is None and not always:
            continue
        out[key] = _encode(value)
    return out


def _load(data, fields):
    return {attr: _decode(data.get(key), kind, key) for attr, key, kind, _ in fields}


def _load_list(data, key, loader):
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise SigMFJsonError(f"{key}: expected an array")
    return [loader(item) for item in value]


def _extra(data, known):
    return {key: value for key, value in data.items() if key not in known}


def _keys(fields):
    return {key for _, key, _, _ in fields}


_ANNOTATION_FIELDS = (
    ("sample_start", "core:sample_start", int, True),
    ("sample_count", "core:sample_count", int, False),
    ("freq_lower_edge", "core:freq_lower_edge", float, False),
    ("freq_upper_edge", "core:freq_upper_edge", float, False),
    ("label", "core:label", str, False),
    ("generator", "core:generator", str, False),
    ("comment", "core:comment", str, False),
    ("uuid", "core:uuid", uuid.UUID, False),
)


@dataclass
class Annotation:
    """A described region of a recording."""

    sample_start: int | None = None
    sample_count: int | None = None
    freq_lower_edge: float | None = None
    freq_upper_edge: float | None = None
    label: str | None = None
    generator: str | None = None
    comment: str | None = None
    uuid: uuid.UUID | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self):
        out = _dump(self, _ANNOTATION_FIELDS)
        out.update(self.extra)
        return out

    @classmethod
    def from_dict(cls, data):
        data = _as_mapping(data, "annotation")
        return cls(
            **_load(data, _ANNOTATION_FIELDS),
            extra=_extra(data, _keys(_ANNOTATION_FIELDS)),
        )


_ANTENNA_FIELDS = (
    ("model", "antenna:model", str, False),
    ("type_", "antenna:type", str, False),
)


@dataclass
class AntennaExtension:
    """Fields of the ``antenna`` extension carried in the global object."""

    model: str | None = None
    type_: str | None = None

    def require_model(self):
        if self.model is None:
            raise MissingMandatoryField("model")
        return self.model

    def to_dict(self):
        return _dump(self, _ANTENNA_FIELDS)

    @classmethod
    def from_dict(cls, data):
        data = _as_mapping(data, "antenna")
        return cls(**_load(data, _ANTENNA_FIELDS))


_CAPTURE_FIELDS = (
    ("sample_start", "core:sample_start", int, True),
    ("global_index", "core:global_index", int, False),
    ("frequency", "core:frequency", float, False),
    ("datetime", "core:datetime", str, False),
    ("header_bytes", "core:header_bytes", int, False),
)


@dataclass
class Capture:
    """Parameters of one contiguous capture segment."""

    sample_start: int | None = None
    global_index: int | None = None
    frequency: float | None = None
    datetime: str | None = None
    header_bytes: int | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self):
        out = _dump(self, _CAPTURE_FIELDS)
        out.update(self.extra)
        return out

    @classmethod
    def from_dict(cls, data):
        data = _as_mapping(data, "capture")
        return cls(
            **_load(data, _CAPTURE_FIELDS),
            extra=_extra(data, _keys(_CAPTURE_FIELDS)),
        )


_EXTENSION_FIELDS = (
    ("name", "name", str, True),
    ("version", "version", str, True),
    ("optional", "optional", bool, True),
)


@dataclass
class Extension:
    """Declaration of a SigMF extension used by a recording or collection."""

    name: str
    version: str
    optional: bool

    def to_dict(self):
        return _dump(self, _EXTENSION_FIELDS)

    @classmethod
    def from_dict(cls, data):
        data = _as_mapping(data, "extension")
        values = _load(data, _EXTENSION_FIELDS)
        for attr, value in values.items():
            if value is None:
                raise SigMFJsonError(f"missing field `{attr}`")
        return cls(**values)


_GLOBAL_FIELDS = (
    ("datatype", "core:datatype", DatasetFormat, True),
    ("version", "core:version", str, False),
    ("sample_rate", "core:sample_rate", float, False),
    ("num_channels", "core:num_channels", int, False),
    ("sha512", "core:sha512", str, False),
    ("offset", "core:offset", int, False),
    ("description", "core:description", str, False),
    ("author", "core:author", str, False),
    ("meta_doi", "core:meta_doi", str, False),
    ("data_doi", "core:data_doi", str, False),
    ("recorder", "core:recorder", str, False),
    ("license", "core:license", str, False),
    ("hw", "core:hw", str, False),
    ("collection", "core:collection", str, False),
    ("metadata_only", "core:metadata_only", bool, False),
    ("dataset", "core:dataset", str, False),
    ("trailing_bytes", "core:trailing_bytes", int, False),
)
_GLOBAL_EXTENSIONS_KEY = "core:extensions"


@dataclass
class Global:
    """The ``global`` object of a SigMF description."""

    datatype: DatasetFormat | None = DatasetFormat.CF32_LE
    version: str | None = "1.0.0"
    sample_rate: float | None = None
    num_channels: int | None = None
    sha512: str | None = None
    offset: int | None = None
    description: str | None = None
    author: str | None = None
    meta_doi: str | None = None
    data_doi: str | None = None
    recorder: str | None = None
    license: str | None = None
    hw: str | None = None
    collection: str | None = None
    metadata_only: bool | None = None
    dataset: str | None = None
    trailing_bytes: int | None = None
    extensions: list[Extension] | None = None
    antenna: AntennaExtension = field(default_factory=AntennaExtension)
    extra: dict[str, Any] = field(default_factory=dict)

    def require_version(self):
        if self.version is None:
            raise MissingMandatoryField("version")
        return self.version

    def require_datatype(self):
        if self.datatype is None:
            raise MissingMandatoryField("datatype")
        return self.datatype

    def to_dict(self):
        out = _dump(self, _GLOBAL_FIELDS)
        if self.extensions is not None:
            out[_GLOBAL_EXTENSIONS_KEY] = [ext.to_dict() for ext in self.extensions]
        out.update(self.antenna.to_dict())
        out.update(self.extra)
        return out

    @classmethod
    def from_dict(cls, data):
        data = _as_mapping(data, "global")
        known = _keys(_GLOBAL_FIELDS) | _keys(_ANTENNA_FIELDS) | {_GLOBAL_EXTENSIONS_KEY}
        return cls(
            **_load(data, _GLOBAL_FIELDS),
            extensions=_load_list(data, _GLOBAL_EXTENSIONS_KEY, Extension.from_dict),
            antenna=AntennaExtension.from_dict(data),
            extra=_extra(data, known),
        )