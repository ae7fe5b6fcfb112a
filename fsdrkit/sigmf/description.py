"""SigMF descriptions, collections and recordings, with their builders."""

from __future__ import annotations

import copy
import hashlib
import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fsdrkit.sigmf.errors import BadSampleRate, MissingMandatoryField, SigMFJsonError
from fsdrkit.sigmf.metadata import (
    Annotation,
    Capture,
    Extension,
    Global,
    _as_mapping,
    _dump,
    _extra,
    _keys,
    _load,
    _load_list,
)

_MAX_SAMPLE_RATE = 1e251

_RECORDING_FIELDS = (
    ("name", "name", Path, True),
    ("hash", "hash", str, False),
)


@dataclass
class Recording:
    """A recording referenced by name, with an optional SHA-512 of its data."""

    name: Path | None = None
    hash: str | None = None

    def require_hash(self):
        if self.hash is None:
            raise MissingMandatoryField("hash")
        return self.hash

    def _with_extension(self, extension):
        if self.name is None:
            raise MissingMandatoryField("name")
        self.name = Path(self.name).with_suffix(extension)
        return self.name

    def sigmf_data(self):
        """Switch the name to its ``.sigmf-data`` file and return that path."""
        return self._with_extension(".sigmf-data")

    def sigmf_meta(self):
        """Switch the name to its ``.sigmf-meta`` file and return that path."""
        return self._with_extension(".sigmf-meta")

    def compute_sha512(self):
        """Hex SHA-512 digest of the data file."""
        path = self.sigmf_data()
        digest = hashlib.sha512()
        with open(path, "rb") as data_file:
            for chunk in iter(lambda: data_file.read(65536), b""):
                digest.update(chunk)
        return digest.hexdigest()

    def load_description(self):
        return Description.open(self.sigmf_meta())

    def to_dict(self):
        return _dump(self, _RECORDING_FIELDS)

    @classmethod
    def from_dict(cls, data):
        data = _as_mapping(data, "recording")
        return cls(**_load(data, _RECORDING_FIELDS))


class RecordingBuilder:
    """Build a :class:`Recording` from a base name, filling in its hash."""

    def __init__(self, name):
        self._recording = Recording(name=Path(name))

    def build(self):
        return copy.deepcopy(self._recording)

    def load_description(self):
        """Load the metadata file; return a builder carrying its sha512, and the description."""
        desc = self._recording.load_description()
        new_hash = self._recording.hash
        sha512 = desc.require_global().sha512
        if sha512 is not None:
            new_hash = sha512
        builder = RecordingBuilder(self._recording.name)
        builder._recording.hash = new_hash
        return builder, desc

    def compute_sha512(self):
        """Hash the data file and record the digest."""
        self._recording.hash = self._recording.compute_sha512()
        return self


_COLLECTION_FIELDS = (
    ("version", "core:version", str, True),
    ("description", "core:description", str, False),
    ("author", "core:author", str, False),
    ("collection_doi", "core:collection_doi", str, False),
    ("license", "core:license", str, False),
)
_COLLECTION_EXTENSIONS_KEY = "core:extensions"
_COLLECTION_STREAMS_KEY = "core:streams"


@dataclass
class Collection:
    """The ``collection`` object grouping several recordings."""

    version: str | None = "1.0.0"
    description: str | None = None
    author: str | None = None
    collection_doi: str | None = None
    license: str | None = None
    extensions: list[Extension] | None = None
    streams: list[Recording] | None = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self):
        out = _dump(self, _COLLECTION_FIELDS)
        if self.extensions is not None:
            out[_COLLECTION_EXTENSIONS_KEY] = [ext.to_dict() for ext in self.extensions]
        if self.streams is not None:
            out[_COLLECTION_STREAMS_KEY] = [rec.to_dict() for rec in self.streams]
        out.update(self.extra)
        return out

    @classmethod
    def from_dict(cls, data):
        data = _as_mapping(data, "collection")
        known = _keys(_COLLECTION_FIELDS) | {
            _COLLECTION_EXTENSIONS_KEY,
            _COLLECTION_STREAMS_KEY,
        }
        return cls(
            **_load(data, _COLLECTION_FIELDS),
            extensions=_load_list(data, _COLLECTION_EXTENSIONS_KEY, Extension.from_dict),
            streams=_load_list(data, _COLLECTION_STREAMS_KEY, Recording.from_dict),
            extra=_extra(data, known),
        )


@dataclass
class Description:
    """A whole SigMF metadata document."""

    global_: Global | None = field(default_factory=Global)
    captures: list[Capture] | None = field(default_factory=list)
    annotations: list[Annotation] | None = field(default_factory=list)
    collection: Collection | None = None

    def require_global(self):
        if self.global_ is None:
            raise MissingMandatoryField("global")
        return self.global_

    def require_annotations(self):
        if self.annotations is None:
            raise MissingMandatoryField("annotations")
        return self.annotations

    def require_captures(self):
        if self.captures is None:
            raise MissingMandatoryField("captures")
        return self.captures

    def to_dict(self):
        out = {}
        if self.global_ is not None:
            out["global"] = self.global_.to_dict()
        if self.captures is not None:
            out["captures"] = [cap.to_dict() for cap in self.captures]
        if self.annotations is not None:
            out["annotations"] = [annot.to_dict() for annot in self.annotations]
        if self.collection is not None:
            out["collection"] = self.collection.to_dict()
        return out

    @classmethod
    def from_dict(cls, data):
        data = _as_mapping(data, "description")
        global_ = data.get("global")
        collection = data.get("collection")
        return cls(
            global_=None if global_ is None else Global.from_dict(global_),
            captures=_load_list(data, "captures", Capture.from_dict),
            annotations=_load_list(data, "annotations", Annotation.from_dict),
            collection=None if collection is None else Collection.from_dict(collection),
        )

    def to_json(self, pretty=False):
        if pretty:
            return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SigMFJsonError(str(exc)) from exc
        return cls.from_dict(data)

    def write(self, fp, pretty=False):
        fp.write(self.to_json(pretty))

    @classmethod
    def read(cls, fp):
        return cls.from_json(fp.read())

    def create(self, path, pretty=False):
        """Write the description to a file, replacing any existing one."""
        with open(path, "w", encoding="utf-8") as fp:
            self.write(fp, pretty)

    @classmethod
    def open(cls, path):
        with open(path, encoding="utf-8") as fp:
            return cls.read(fp)


class DescriptionBuilder:
    """Assemble a :class:`Description` step by step."""

    def __init__(self, description=None):
        self.description = Description() if description is None else description

    @classmethod
    def collection(cls):
        return cls(
            Description(
                global_=None,
                captures=None,
                annotations=None,
                collection=Collection(),
            )
        )

    @classmethod
    def from_datatype(cls, datatype):
        return cls(Description(global_=Global(datatype=datatype)))

    @classmethod
    def from_global(cls, global_):
        return cls(Description(global_=global_))

    @classmethod
    def open(cls, path):
        return cls(Description.open(path))

    def sample_rate(self, sample_rate):
        if math.isnan(sample_rate) or not 0.0 <= sample_rate <= _MAX_SAMPLE_RATE:
            raise BadSampleRate()
        self.description.require_global().sample_rate = float(sample_rate)
        return self

    def extension(self, name, version, optional):
        global_ = self.description.require_global()
        new_ext = Extension(name=name, version=version, optional=optional)
        if global_.extensions is None:
            global_.extensions = [new_ext]
        else:
            global_.extensions.append(new_ext)
        return self

    def captures(self, captures):
        self.description.captures = list(captures)
        return self

    def add_stream(self, stream):
        collection = self.description.collection
        if collection is None:
            raise MissingMandatoryField("collection")
        if collection.streams is None:
            raise MissingMandatoryField("streams")
        collection.streams.append(stream)
        return self

    def add_annotation(self, annotation):
        if self.description.annotations is None:
            self.description.annotations = [annotation]
        else:
            self.description.annotations.append(annotation)
        return self

    def build(self):
        return copy.deepcopy(self.description)