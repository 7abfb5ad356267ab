"""RISC-V feature detection from ``/proc/cpuinfo``."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import IO, AnyStr

from cpufeat.line_reader import LineReader
from cpufeat.string_view import get_attribute_key_value, index_of, index_of_char, truncate

_STRING_FIELD_SIZE = 64


class RiscvFeature(enum.Enum):
    """RISC-V ISA features; each value is the token looked for in the ISA string.

    The members are in the order the ISA string lists them.
    """

    RV32I = "rv32i"
    RV64I = "rv64i"
    M = "m"
    A = "a"
    F = "f"
    D = "d"
    Q = "q"
    C = "c"
    V = "v"
    ZICSR = "_zicsr"
    ZIFENCEI = "_zifencei"


@dataclass(frozen=True)
class RiscvInfo:
    """Features, vendor and microarchitecture of a RISC-V processor."""

    features: frozenset[RiscvFeature] = field(default_factory=frozenset)
    uarch: str = ""
    vendor: str = ""


def parse_isa(isa: str) -> frozenset[RiscvFeature]:
    """Return the features named in an ISA string such as ``rv64imafdc``.

    Features are searched for in their canonical order; each match consumes
    the string up to its end, so later features are looked for after it.
    """
    found: set[RiscvFeature] = set()
    rest = isa
    for feature in RiscvFeature:
        index = index_of(rest, feature.value)
        if index >= 0:
            found.add(feature)
            rest = rest[index + len(feature.value):]
    return frozenset(found)


def parse_riscv_cpuinfo(stream: IO[AnyStr]) -> RiscvInfo:
    """Build a :class:`RiscvInfo` from the content of a cpuinfo stream."""
    features: frozenset[RiscvFeature] = frozenset()
    uarch = ""
    vendor = ""
    for result in LineReader(stream):
        pair = get_attribute_key_value(result.line)
        if pair is None:
            continue
        key, value = pair
        if key == "isa":
            features = parse_isa(value)
        elif key == "uarch":
            comma = index_of_char(value, ",")
            if comma < 0:
                continue
            vendor = truncate(value[:comma], _STRING_FIELD_SIZE)
            uarch = truncate(value[comma + 1:], _STRING_FIELD_SIZE)
    return RiscvInfo(features=features, uarch=uarch, vendor=vendor)


def get_riscv_info(path: str = "/proc/cpuinfo") -> RiscvInfo:
    """Read ``path`` and describe the processor; empty info if it cannot be read."""
    try:
        with open(path, "rb") as stream:
            return parse_riscv_cpuinfo(stream)
    except OSError:
        return RiscvInfo()