# cpufeat

Small, dependency-free parsers that turn what an operating system reports
about its processor into typed Python values.

It reads `/proc/cpuinfo` on RISC-V and s390x, picks the SSE family out of
`/proc/cpuinfo` or `/var/run/dmesg.boot` on x86, and maps macOS `sysctl` and
Windows processor-feature answers onto the same x86 feature set. Feature names
for ARM, LoongArch, s390x and x86, and x86 microarchitecture names, are
available as enums.

## Installation

```
pip install cpufeat
```

## RISC-V

```python
from cpufeat.riscv import RiscvFeature, get_riscv_info, parse_isa

info = get_riscv_info()          # reads /proc/cpuinfo
print(info.vendor, info.uarch)   # e.g. "sifive" "bullet0"

features = parse_isa("rv64imafdc")
assert RiscvFeature.RV64I in features
assert RiscvFeature.V not in features
```

`get_riscv_info(path)` returns an empty `RiscvInfo` when the file cannot be
read. Any text or binary stream can be parsed directly with
`parse_riscv_cpuinfo(stream)`. The `uarch` line is split at its first comma
into vendor and microarchitecture; each is kept to at most 63 characters.

## s390x

```python
from cpufeat.s390x import get_s390x_platform_strings

strings = get_s390x_platform_strings(platform="z15")
print(strings.num_processors, strings.platform)
```

`num_processors` comes from the `# processors` line: it is `0` when the line
is missing or the file cannot be read, and `None` when the value is not a
number. `parse_s390x_cpuinfo(stream, platform)` works on any stream.
`S390XFeature` lists the feature names the kernel reports.

## x86

```python
from cpufeat.x86 import X86Feature, linux_sse_features

features = linux_sse_features()  # reads /proc/cpuinfo
print(X86Feature.SSE4_2 in features)
```

- `features_from_linux_cpuinfo(stream)` reads the first `flags` line
  (`pni` stands for SSE3).
- `features_from_freebsd_dmesg(stream)` reads every `  Features` line of a
  dmesg boot log; `freebsd_sse_features(path)` reads `/var/run/dmesg.boot`.
- `features_from_macos_sysctl(sysctl)` takes a callable that answers a sysctl
  name with true or false; `avx512_preserved_on_macos(sysctl)` asks
  `hw.optional.avx512f`.
- `features_from_windows(is_present)` takes a callable answering a
  `WindowsProcessorFeature` code.

All of them return a `frozenset` of `X86Feature`. `X86Info` holds features,
family, model, stepping, vendor and brand string, with `has(feature)`;
`X86Microarchitecture` names the known microarchitectures.

## ARM and LoongArch

`cpufeat.arm` provides `ArmFeature` and `ArmInfo` (features plus implementer,
architecture, variant, part and revision); `cpufeat.loongarch` provides
`LoongArchFeature` and `LoongArchInfo`. Both info classes have
`has(feature)`.

## Line reader

`cpufeat.line_reader.LineReader` reads a text or binary stream line by line
through a fixed-size buffer (1024 by default). Lines longer than the buffer
are returned truncated with `full_line` set to false, and the rest of such a
line is skipped. The last result has `eof` set to true.

```python
import io
from cpufeat.line_reader import LineReader

reader = LineReader(io.BytesIO(b"a\nb\nc"), 16)
for result in reader:
    print(result.line, result.eof, result.full_line)
```

## String helpers

`cpufeat.string_view` holds the helpers used by the parsers:
`index_of_char`, `index_of`, `has_word`, `trim_whitespace`,
`get_attribute_key_value` (returns `(key, value)` or `None`),
`parse_positive_number` (decimal or `0x` hexadecimal, raising `ValueError`
otherwise) and `truncate`.

```python
from cpufeat.string_view import get_attribute_key_value, has_word

get_attribute_key_value("isa : rv64imafdc")   # ("isa", "rv64imafdc")
has_word("sse sse2 pni", "sse2", " ")         # True
```

## What it does not do

The package only parses text and answers that are handed to it. It does not
execute CPUID or read hardware capability bits, so it does not fill in
`X86Info`, `ArmInfo` or `LoongArchInfo` itself, does not work out an
`X86Microarchitecture` from family and model, and does not detect
`S390XFeature` values. It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```