"""LoongArch processor features."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class LoongArchFeature(enum.Enum):
    """LoongArch features; each value is the feature's short name."""

    CPUCFG = "cpucfg"
    LAM = "lam"
    UAL = "ual"
    FPU = "fpu"
    LSX = "lsx"
    LASX = "lasx"
    CRC32 = "crc32"
    COMPLEX = "complex"
    CRYPTO = "crypto"
    LVZ = "lvz"
    LBT_X86 = "lbt_x86"
    LBT_ARM = "lbt_arm"
    LBT_MIPS = "lbt_mips"
    PTW = "ptw"


@dataclass(frozen=True)
class LoongArchInfo:
    """Features of a LoongArch processor."""

    features: frozenset[LoongArchFeature] = field(default_factory=frozenset)

    def has(self, feature: LoongArchFeature) -> bool:
        """Tell whether the processor has ``feature``."""
        return feature in self.features