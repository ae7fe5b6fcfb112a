"""SigMF dataset formats and a builder to select one from sample properties."""

from __future__ import annotations

import dataclasses
import re
from enum import Enum

from fsdrkit.sigmf.errors import UnknownDatasetFormat

_LABEL = re.compile(r"^([rc])([fiu])(\d+)(?:_(le|be))?$")


class DatasetFormat(Enum):
    """Sample encoding of a SigMF dataset, as named by ``core:datatype``."""

    RF64_LE = "rf64_le"
    RF64_BE = "rf64_be"
    CF64_LE = "cf64_le"
    CF64_BE = "cf64_be"
    RF32_LE = "rf32_le"
    RF32_BE = "rf32_be"
    CF32_LE = "cf32_le"
    CF32_BE = "cf32_be"
    RI32_LE = "ri32_le"
    RI32_BE = "ri32_be"
    CI32_LE = "ci32_le"
    CI32_BE = "ci32_be"
    RI16_LE = "ri16_le"
    RI16_BE = "ri16_be"
    CI16_LE = "ci16_le"
    CI16_BE = "ci16_be"
    RU32_LE = "ru32_le"
    RU32_BE = "ru32_be"
    CU32_LE = "cu32_le"
    CU32_BE = "cu32_be"
    RU16_LE = "ru16_le"
    RU16_BE = "ru16_be"
    CU16_LE = "cu16_le"
    CU16_BE = "cu16_be"
    RI8 = "ri8"
    RU8 = "ru8"
    CI8 = "ci8"
    CU8 = "cu8"

    def _parts(self):
        match = _LABEL.match(self.value)
        return match.group(1), match.group(2), int(match.group(3)), match.group(4)

    def bits(self):
        """Size of one sample in bits (both components for complex formats)."""
        kind, _, width, _ = self._parts()
        return 2 * width if kind == "c" else width

    def size(self):
        """Size of one sample in bytes."""
        return self.bits() // 8

    def is_real(self):
        return self.value.startswith("r")

    def is_complex(self):
        return not self.is_real()

    def is_signed(self):
        return self._parts()[1] in ("f", "i")

    def is_unsigned(self):
        return not self.is_signed()

    def is_little_endian(self):
        return self._parts()[3] == "le"

    def is_big_endian(self):
        return self._parts()[3] == "be"

    def is_float(self):
        return self._parts()[1] == "f"

    def is_integer(self):
        return not self.is_float()

    def is_byte(self):
        return self._parts()[2] == 8

    @classmethod
    def all(cls):
        """Every format, in the canonical listing order."""
        ordered = [member for member in cls if not member.is_byte()]
        ordered += [cls.CI8, cls.CU8, cls.RI8, cls.RU8]
        return tuple(ordered)

    @classmethod
    def parse(cls, text):
        """Parse a datatype label, ignoring case."""
        try:
            return cls(text.lower())
        except (ValueError, AttributeError):
            raise UnknownDatasetFormat(text) from None

    def __str__(self):
        return self.value


class SampleType(Enum):
    """Primitive type of one sample component."""

    U8 = "u8"
    I8 = "i8"
    U16 = "u16"
    I16 = "i16"
    U32 = "u32"
    I32 = "i32"
    F32 = "f32"
    F64 = "f64"


@dataclasses.dataclass(frozen=True)
class DatasetFormatBuilder:
    """Select a :class:`DatasetFormat` from a sample type, complexity and byte order."""

    sample_type: SampleType
    is_complex: bool = False
    is_little_endian: bool = True

    @classmethod
    def complex(cls, sample_type):
        return cls(SampleType(sample_type), is_complex=True, is_little_endian=True)

    @classmethod
    def real(cls, sample_type):
        return cls(SampleType(sample_type), is_complex=False, is_little_endian=True)

    def little_endian(self):
        return dataclasses.replace(self, is_little_endian=True)

    def big_endian(self):
        return dataclasses.replace(self, is_little_endian=False)

    def build(self):
        label = ("c" if self.is_complex else "r") + self.sample_type.value
        if self.sample_type not in (SampleType.U8, SampleType.I8):
            label += "_le" if self.is_little_endian else "_be"
        return DatasetFormat(label)