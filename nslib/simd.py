"""Reporting of the processor family and the SIMD extensions it offers."""

from __future__ import annotations

import enum
import platform
from pathlib import Path
from typing import Iterable


class Architecture(enum.Enum):
    INTEL = "intel"
    ARM = "arm"
    RISCV = "riscv"
    UNKNOWN = "unknown"


_INTEL_FEATURES: tuple[tuple[str, frozenset[str]], ...] = (
    ("sse4.2", frozenset({"sse4_2", "sse4.2"})),
    ("sse4.1", frozenset({"sse4_1", "sse4.1"})),
    ("ssse3", frozenset({"ssse3"})),
    ("sse3", frozenset({"sse3", "pni"})),
    ("sse2", frozenset({"sse2"})),
    ("sse", frozenset({"sse"})),
    ("mmx", frozenset({"mmx"})),
    ("AVX512VL", frozenset({"avx512vl"})),
    ("AVX512BW", frozenset({"avx512bw"})),
    ("AVX512DQ", frozenset({"avx512dq"})),
    ("AVX512CD", frozenset({"avx512cd"})),
    ("AVX512F", frozenset({"avx512f"})),
    ("AVX2", frozenset({"avx2"})),
    ("AVX", frozenset({"avx"})),
    ("FMA", frozenset({"fma"})),
    ("SVML", frozenset({"svml"})),
)

_ARM_FEATURES = (("Neon", frozenset({"neon", "asimd"})),)
_RISCV_FEATURES = (("Riscv", frozenset({"v", "rvv", "vector"})),)

_FEATURE_TABLES = {
    Architecture.INTEL: _INTEL_FEATURES,
    Architecture.ARM: _ARM_FEATURES,
    Architecture.RISCV: _RISCV_FEATURES,
}

_HEADERS = {
    Architecture.INTEL: "\n\tIntel Processor: \n",
    Architecture.ARM: "\n\tARM Processor: \n",
}


def detect_architecture(machine: str | None = None) -> Architecture:
    """Classify a machine name (by default the running one) into a processor family."""
    name = (platform.machine() if machine is None else machine).lower()
    if name in ("x86_64", "amd64", "x64"):
        return Architecture.INTEL
    if name.startswith("arm") or name.startswith("aarch64"):
        return Architecture.ARM
    if name.startswith("riscv"):
        return Architecture.RISCV
    return Architecture.UNKNOWN


def _read_cpu_flags() -> set[str]:
    try:
        text = Path("/proc/cpuinfo").read_text(encoding="utf-8", errors="replace")
    except OSError:
        return set()
    flags: set[str] = set()
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip().lower()
        if key in ("flags", "features"):
            flags.update(value.split())
        elif key == "isa":
            isa = value.strip().lower()
            if isa.startswith("rv") and "v" in isa[4:].split("_")[0]:
                flags.add("v")
    return flags


def supported_features(
    architecture: Architecture | None = None,
    flags: Iterable[str] | None = None,
) -> list[str]:
    """Return the SIMD extensions present, in reporting order.

    ``flags`` are CPU flag names as found in a cpuinfo listing; by default they
    are read from the running system.
    """
    if architecture is None:
        architecture = detect_architecture()
    available = {flag.lower() for flag in (_read_cpu_flags() if flags is None else flags)}
    table = _FEATURE_TABLES.get(architecture, ())
    return [label for label, names in table if names & available]


def describe_simd(
    architecture: Architecture | None = None,
    flags: Iterable[str] | None = None,
) -> str:
    """Return a text report of the processor family and its SIMD extensions."""
    if architecture is None:
        architecture = detect_architecture()
    features = supported_features(architecture, flags)
    header = _HEADERS.get(architecture, "")
    return header + "".join(f"{feature}\n" for feature in features)