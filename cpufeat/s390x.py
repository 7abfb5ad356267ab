"""s390x feature names and platform strings from ``/proc/cpuinfo``."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import IO, AnyStr

from cpufeat.line_reader import LineReader
from cpufeat.string_view import get_attribute_key_value, parse_positive_number


class S390XFeature(enum.Enum):
    """s390x features; each value is the name the kernel reports."""

    ESAN3 = "esan3"
    ZARCH = "zarch"
    STFLE = "stfle"
    MSA = "msa"
    LDISP = "ldisp"
    EIMM = "eimm"
    DFP = "dfp"
    EDAT = "edat"
    ETF3EH = "etf3eh"
    HIGHGPRS = "highgprs"
    TE = "te"
    VX = "vx"
    VXD = "vxd"
    VXE = "vxe"
    GS = "gs"
    VXE2 = "vxe2"
    VXP = "vxp"
    SORT = "sort"
    DFLT = "dflt"
    VXP2 = "vxp2"
    NNPA = "nnpa"
    PCIMIO = "pcimio"
    SIE = "sie"


@dataclass(frozen=True)
class S390XPlatformStrings:
    """Processor count and platform name of an s390x machine.

    ``num_processors`` is 0 when not reported and ``None`` when the reported
    value is not a number.
    """

    num_processors: int | None = 0
    platform: str = ""


def parse_s390x_cpuinfo(stream: IO[AnyStr], platform: str | None = None) -> S390XPlatformStrings:
    """Build platform strings from a cpuinfo stream and an optional platform name."""
    num_processors: int | None = 0
    for result in LineReader(stream):
        pair = get_attribute_key_value(result.line)
        if pair is None:
            continue
        key, value = pair
        if key == "# processors":
            try:
                num_processors = parse_positive_number(value)
            except ValueError:
                num_processors = None
    return S390XPlatformStrings(num_processors=num_processors, platform=platform or "")


def get_s390x_platform_strings(
    path: str = "/proc/cpuinfo", platform: str | None = None
) -> S390XPlatformStrings:
    """Read ``path``; an unreadable file leaves the processor count at 0."""
    try:
        with open(path, "rb") as stream:
            return parse_s390x_cpuinfo(stream, platform)
    except OSError:
        return S390XPlatformStrings(platform=platform or "")