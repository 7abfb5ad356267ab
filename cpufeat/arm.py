"""32-bit ARM processor features and identification."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class ArmFeature(enum.Enum):
    """32-bit ARM features; each value is the feature's short name."""

    SWP = "swp"
    HALF = "half"
    THUMB = "thumb"
    BIT26 = "26bit"
    FASTMULT = "fastmult"
    FPA = "fpa"
    VFP = "vfp"
    EDSP = "edsp"
    JAVA = "java"
    IWMMXT = "iwmmxt"
    CRUNCH = "crunch"
    THUMBEE = "thumbee"
    NEON = "neon"
    VFPV3 = "vfpv3"
    VFPV3D16 = "vfpv3d16"
    TLS = "tls"
    VFPV4 = "vfpv4"
    IDIVA = "idiva"
    IDIVT = "idivt"
    VFPD32 = "vfpd32"
    LPAE = "lpae"
    EVTSTRM = "evtstrm"
    AES = "aes"
    PMULL = "pmull"
    SHA1 = "sha1"
    SHA2 = "sha2"
    CRC32 = "crc32"


@dataclass(frozen=True)
class ArmInfo:
    """Features and identification registers of a 32-bit ARM processor."""

    features: frozenset[ArmFeature] = field(default_factory=frozenset)
    implementer: int = 0
    architecture: int = 0
    variant: int = 0
    part: int = 0
    revision: int = 0

    def has(self, feature: ArmFeature) -> bool:
        """Tell whether the processor has ``feature``."""
        return feature in self.features