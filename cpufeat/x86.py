"""x86 processor features, microarchitectures and OS-reported SSE support."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import IO, AnyStr, Callable

from cpufeat.line_reader import LineReader
from cpufeat.string_view import get_attribute_key_value, has_word, index_of_char

VENDOR_GENUINE_INTEL = "GenuineIntel"
VENDOR_AUTHENTIC_AMD = "AuthenticAMD"
VENDOR_HYGON_GENUINE = "HygonGenuine"
VENDOR_CENTAUR_HAULS = "CentaurHauls"
VENDOR_SHANGHAI = "  Shanghai  "

LINUX_CPUINFO_PATH = "/proc/cpuinfo"
FREEBSD_DMESG_PATH = "/var/run/dmesg.boot"


class X86Feature(enum.Enum):
    """x86 features; each value is the feature's short name."""

    FPU = "fpu"
    TSC = "tsc"
    CX8 = "cx8"
    CLFSH = "clfsh"
    MMX = "mmx"
    AES = "aes"
    ERMS = "erms"
    F16C = "f16c"
    FMA4 = "fma4"
    FMA3 = "fma3"
    VAES = "vaes"
    VPCLMULQDQ = "vpclmulqdq"
    BMI1 = "bmi1"
    HLE = "hle"
    BMI2 = "bmi2"
    RTM = "rtm"
    RDSEED = "rdseed"
    CLFLUSHOPT = "clflushopt"
    CLWB = "clwb"
    SSE = "sse"
    SSE2 = "sse2"
    SSE3 = "sse3"
    SSSE3 = "ssse3"
    SSE4_1 = "sse4_1"
    SSE4_2 = "sse4_2"
    SSE4A = "sse4a"
    AVX = "avx"
    AVX_VNNI = "avx_vnni"
    AVX2 = "avx2"
    AVX512F = "avx512f"
    AVX512CD = "avx512cd"
    AVX512ER = "avx512er"
    AVX512PF = "avx512pf"
    AVX512BW = "avx512bw"
    AVX512DQ = "avx512dq"
    AVX512VL = "avx512vl"
    AVX512IFMA = "avx512ifma"
    AVX512VBMI = "avx512vbmi"
    AVX512VBMI2 = "avx512vbmi2"
    AVX512VNNI = "avx512vnni"
    AVX512BITALG = "avx512bitalg"
    AVX512VPOPCNTDQ = "avx512vpopcntdq"
    AVX512_4VNNIW = "avx512_4vnniw"
    AVX512_4VBMI2 = "avx512_4vbmi2"  # alias of avx512_4fmaps in hardware terms
    AVX512_SECOND_FMA = "avx512_second_fma"
    AVX512_4FMAPS = "avx512_4fmaps"
    AVX512_BF16 = "avx512_bf16"
    AVX512_VP2INTERSECT = "avx512_vp2intersect"
    AVX512_FP16 = "avx512_fp16"
    AMX_BF16 = "amx_bf16"
    AMX_TILE = "amx_tile"
    AMX_INT8 = "amx_int8"
    AMX_FP16 = "amx_fp16"
    PCLMULQDQ = "pclmulqdq"
    SMX = "smx"
    SGX = "sgx"
    CX16 = "cx16"
    SHA = "sha"
    POPCNT = "popcnt"
    MOVBE = "movbe"
    RDRND = "rdrnd"
    DCA = "dca"
    SS = "ss"
    ADX = "adx"
    LZCNT = "lzcnt"
    GFNI = "gfni"
    MOVDIRI = "movdiri"
    MOVDIR64B = "movdir64b"
    FS_REP_MOV = "fs_rep_mov"
    FZ_REP_MOVSB = "fz_rep_movsb"
    FS_REP_STOSB = "fs_rep_stosb"
    FS_REP_CMPSB_SCASB = "fs_rep_cmpsb_scasb"
    LAM = "lam"
    UAI = "uai"


class X86Microarchitecture(enum.Enum):
    """Known x86 microarchitectures; each value is the member's name."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return name

    X86_UNKNOWN = enum.auto()
    ZHAOXIN_ZHANGJIANG = enum.auto()
    ZHAOXIN_WUDAOKOU = enum.auto()
    ZHAOXIN_LUJIAZUI = enum.auto()
    ZHAOXIN_YONGFENG = enum.auto()
    INTEL_80486 = enum.auto()
    INTEL_P5 = enum.auto()
    INTEL_LAKEMONT = enum.auto()
    INTEL_CORE = enum.auto()
    INTEL_PNR = enum.auto()
    INTEL_NHM = enum.auto()
    INTEL_ATOM_BNL = enum.auto()
    INTEL_WSM = enum.auto()
    INTEL_SNB = enum.auto()
    INTEL_IVB = enum.auto()
    INTEL_ATOM_SMT = enum.auto()
    INTEL_HSW = enum.auto()
    INTEL_BDW = enum.auto()
    INTEL_SKL = enum.auto()
    INTEL_CCL = enum.auto()
    INTEL_ATOM_GMT = enum.auto()
    INTEL_ATOM_GMT_PLUS = enum.auto()
    INTEL_ATOM_TMT = enum.auto()
    INTEL_KBL = enum.auto()
    INTEL_CFL = enum.auto()
    INTEL_WHL = enum.auto()
    INTEL_CML = enum.auto()
    INTEL_CNL = enum.auto()
    INTEL_ICL = enum.auto()
    INTEL_TGL = enum.auto()
    INTEL_SPR = enum.auto()
    INTEL_ADL = enum.auto()
    INTEL_RCL = enum.auto()
    INTEL_RPL = enum.auto()
    INTEL_KNIGHTS_M = enum.auto()
    INTEL_KNIGHTS_L = enum.auto()
    INTEL_KNIGHTS_F = enum.auto()
    INTEL_KNIGHTS_C = enum.auto()
    INTEL_NETBURST = enum.auto()
    AMD_HAMMER = enum.auto()
    AMD_K10 = enum.auto()
    AMD_K11 = enum.auto()
    AMD_K12 = enum.auto()
    AMD_BOBCAT = enum.auto()
    AMD_PILEDRIVER = enum.auto()
    AMD_STREAMROLLER = enum.auto()
    AMD_EXCAVATOR = enum.auto()
    AMD_BULLDOZER = enum.auto()
    AMD_JAGUAR = enum.auto()
    AMD_PUMA = enum.auto()
    AMD_ZEN = enum.auto()
    AMD_ZEN_PLUS = enum.auto()
    AMD_ZEN2 = enum.auto()
    AMD_ZEN3 = enum.auto()
    AMD_ZEN4 = enum.auto()


class WindowsProcessorFeature(enum.IntEnum):
    """Processor feature codes understood by the Windows feature query."""

    PF_XMMI_INSTRUCTIONS_AVAILABLE = 6
    PF_XMMI64_INSTRUCTIONS_AVAILABLE = 10
    PF_SSE3_INSTRUCTIONS_AVAILABLE = 13
    PF_SSSE3_INSTRUCTIONS_AVAILABLE = 36
    PF_SSE4_1_INSTRUCTIONS_AVAILABLE = 37
    PF_SSE4_2_INSTRUCTIONS_AVAILABLE = 38


@dataclass(frozen=True)
class X86Info:
    """Features and identification of an x86 processor."""

    features: frozenset[X86Feature] = field(default_factory=frozenset)
    family: int = 0
    model: int = 0
    stepping: int = 0
    vendor: str = ""
    brand_string: str = ""

    def has(self, feature: X86Feature) -> bool:
        """Tell whether the processor has ``feature``."""
        return feature in self.features


_LINUX_FLAGS = (
    (X86Feature.SSE, "sse"),
    (X86Feature.SSE2, "sse2"),
    (X86Feature.SSE3, "pni"),
    (X86Feature.SSSE3, "ssse3"),
    (X86Feature.SSE4_1, "sse4_1"),
    (X86Feature.SSE4_2, "sse4_2"),
)

_FREEBSD_FLAGS = (
    (X86Feature.SSE, "SSE"),
    (X86Feature.SSE2, "SSE2"),
    (X86Feature.SSE3, "SSE3"),
    (X86Feature.SSSE3, "SSSE3"),
    (X86Feature.SSE4_1, "SSE4.1"),
    (X86Feature.SSE4_2, "SSE4.2"),
)

_MACOS_SYSCTLS = (
    (X86Feature.SSE, "hw.optional.sse"),
    (X86Feature.SSE2, "hw.optional.sse2"),
    (X86Feature.SSE3, "hw.optional.sse3"),
    (X86Feature.SSSE3, "hw.optional.supplementalsse3"),
    (X86Feature.SSE4_1, "hw.optional.sse4_1"),
    (X86Feature.SSE4_2, "hw.optional.sse4_2"),
)

_WINDOWS_FEATURES = (
    (X86Feature.SSE, WindowsProcessorFeature.PF_XMMI_INSTRUCTIONS_AVAILABLE),
    (X86Feature.SSE2, WindowsProcessorFeature.PF_XMMI64_INSTRUCTIONS_AVAILABLE),
    (X86Feature.SSE3, WindowsProcessorFeature.PF_SSE3_INSTRUCTIONS_AVAILABLE),
    (X86Feature.SSSE3, WindowsProcessorFeature.PF_SSSE3_INSTRUCTIONS_AVAILABLE),
    (X86Feature.SSE4_1, WindowsProcessorFeature.PF_SSE4_1_INSTRUCTIONS_AVAILABLE),
    (X86Feature.SSE4_2, WindowsProcessorFeature.PF_SSE4_2_INSTRUCTIONS_AVAILABLE),
)


def features_from_linux_cpuinfo(stream: IO[AnyStr]) -> frozenset[X86Feature]:
    """Return the SSE features named on the first ``flags`` line of a cpuinfo stream."""
    for result in LineReader(stream):
        pair = get_attribute_key_value(result.line)
        if pair is None:
            continue
        key, value = pair
        if key != "flags":
            continue
        return frozenset(
            feature for feature, flag in _LINUX_FLAGS if has_word(value, flag, " ")
        )
    return frozenset()


def features_from_freebsd_dmesg(stream: IO[AnyStr]) -> frozenset[X86Feature]:
    """Return the SSE features listed on the ``  Features`` lines of a dmesg boot log.

    Such lines look like ``  Features=0x1783fbff<PSE36,MMX,FXSR,SSE,SSE2,HTT>``.
    """
    found: set[X86Feature] = set()
    for result in LineReader(stream):
        line = result.line
        if not line.startswith("  Features"):
            continue
        csv = line
        bracket = index_of_char(csv, "<")
        if bracket >= 0:
            csv = csv[bracket + 1:]
        if csv.endswith(">"):
            csv = csv[:-1]
        found.update(
            feature for feature, flag in _FREEBSD_FLAGS if has_word(csv, flag, ",")
        )
    return frozenset(found)


def features_from_macos_sysctl(sysctl: Callable[[str], bool]) -> frozenset[X86Feature]:
    """Return the SSE features that ``sysctl`` reports as enabled by name."""
    return frozenset(feature for feature, name in _MACOS_SYSCTLS if sysctl(name))


def avx512_preserved_on_macos(sysctl: Callable[[str], bool]) -> bool:
    """Tell whether the OS preserves AVX-512 registers; on macOS this is on demand."""
    return bool(sysctl("hw.optional.avx512f"))


def features_from_windows(
    is_present: Callable[[WindowsProcessorFeature], bool],
) -> frozenset[X86Feature]:
    """Return the SSE features for which ``is_present`` answers true."""
    return frozenset(feature for feature, code in _WINDOWS_FEATURES if is_present(code))


def linux_sse_features(path: str = LINUX_CPUINFO_PATH) -> frozenset[X86Feature]:
    """Read ``path`` as cpuinfo; an unreadable file gives no features."""
    try:
        with open(path, "rb") as stream:
            return features_from_linux_cpuinfo(stream)
    except OSError:
        return frozenset()


def freebsd_sse_features(path: str = FREEBSD_DMESG_PATH) -> frozenset[X86Feature]:
    """Read ``path`` as a dmesg boot log; an unreadable file gives no features."""
    try:
        with open(path, "rb") as stream:
            return features_from_freebsd_dmesg(stream)
    except OSError:
        return frozenset()