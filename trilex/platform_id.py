"""Identify the target platform, architecture and language defaults from predefined macros."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .compiler_id import CompilerInfo, MacroValue, _Macros, identify_compiler


def _any_defined(m: _Macros, *names: str) -> bool:
    return any(name in m for name in names)


_PLATFORMS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("__linux", "__linux__", "linux"), "Linux"),
    (("__MSYS__",), "MSYS"),
    (("__CYGWIN__",), "Cygwin"),
    (("__MINGW32__",), "MinGW"),
    (("__APPLE__",), "Darwin"),
    (("_WIN32", "__WIN32__", "WIN32"), "Windows"),
    (("__FreeBSD__", "__FreeBSD"), "FreeBSD"),
    (("__NetBSD__", "__NetBSD"), "NetBSD"),
    (("__OpenBSD__", "__OPENBSD"), "OpenBSD"),
    (("__sun", "sun"), "SunOS"),
    (("_AIX", "__AIX", "__AIX__", "__aix", "__aix__"), "AIX"),
    (("__hpux", "__hpux__"), "HP-UX"),
    (("__HAIKU__",), "Haiku"),
    (("__BeOS", "__BEOS__", "_BEOS"), "BeOS"),
    (("__QNX__", "__QNXNTO__"), "QNX"),
    (("__tru64", "_tru64", "__TRU64__"), "Tru64"),
    (("__riscos", "__riscos__"), "RISCos"),
    (("__sinix", "__sinix__", "__SINIX__"), "SINIX"),
    (("__UNIX_SV__",), "UNIX_SV"),
    (("__bsdos__",), "BSDOS"),
    (("_MPRAS", "MPRAS"), "MP-RAS"),
    (("__osf", "__osf__"), "OSF1"),
    (("_SCO_SV", "SCO_SV", "sco_sv"), "SCO_SV"),
    (("__ultrix", "__ultrix__", "_ULTRIX"), "ULTRIX"),
    (("__XENIX__", "_XENIX", "XENIX"), "Xenix"),
)

_WATCOM_PLATFORMS: tuple[tuple[str, str], ...] = (
    ("__LINUX__", "Linux"),
    ("__DOS__", "DOS"),
    ("__OS2__", "OS2"),
    ("__WINDOWS__", "Windows3x"),
    ("__VXWORKS__", "VxWorks"),
)


def identify_platform(macros: Mapping[str, MacroValue]) -> str:
    """Return the platform name the macros point to, or "" if it is unknown."""
    m = _Macros(macros)
    for names, platform in _PLATFORMS:
        if _any_defined(m, *names):
            return platform
    if "__WATCOMC__" in m:
        for name, platform in _WATCOM_PLATFORMS:
            if name in m:
                return platform
        return ""
    if "__INTEGRITY" in m:
        return "Integrity178" if "INT_178B" in m else "Integrity"
    if "_ADI_COMPILER" in m:
        return "ADSP"
    return ""


_MSVC_ARCHES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("_M_IA64",), "IA64"),
    (("_M_ARM64EC",), "ARM64EC"),
    (("_M_X64", "_M_AMD64"), "x64"),
    (("_M_IX86",), "X86"),
    (("_M_ARM64",), "ARM64"),
)

_IAR_ARCHES: tuple[tuple[str, str], ...] = (
    ("__ICCARM__", "ARM"),
    ("__ICCRX__", "RX"),
    ("__ICCRH850__", "RH850"),
    ("__ICCRL78__", "RL78"),
    ("__ICCRISCV__", "RISCV"),
    ("__ICCAVR__", "AVR"),
    ("__ICC430__", "MSP430"),
    ("__ICCV850__", "V850"),
    ("__ICC8051__", "8051"),
    ("__ICCSTM8__", "STM8"),
)

_GHS_ARCHES: tuple[tuple[str, str], ...] = (
    ("__PPC64__", "PPC64"),
    ("__ppc__", "PPC"),
    ("__ARM__", "ARM"),
    ("__x86_64__", "x64"),
    ("__i386__", "X86"),
)

_TI_ARCHES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("__TI_ARM__",), "ARM"),
    (("__MSP430__",), "MSP430"),
    (("__TMS320C28XX__",), "TMS320C28x"),
    (("__TMS320C6X__", "_TMS320C6X"), "TMS320C6x"),
)

_TASKING_ARCHES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("__CTC__", "__CPTC__"), "TriCore"),
    (("__CMCS__",), "MCS"),
    (("__CARM__",), "ARM"),
    (("__CARC__",), "ARC"),
    (("__C51__",), "8051"),
    (("__CPCP__",), "PCP"),
)


def _first_of(m: _Macros, table: tuple[tuple[str, str], ...]) -> str:
    return next((arch for name, arch in table if name in m), "")


def _first_of_any(m: _Macros, table: tuple[tuple[tuple[str, ...], str], ...]) -> str:
    return next((arch for names, arch in table if _any_defined(m, *names)), "")


def _msvc_architecture(m: _Macros) -> str:
    arch = _first_of_any(m, _MSVC_ARCHES)
    if arch:
        return arch
    if "_M_ARM" in m:
        level = m["_M_ARM"]
        if level == 4:
            return "ARMV4I"
        if level == 5:
            return "ARMV5I"
        return "ARMV" + m.text("_M_ARM")
    if "_M_MIPS" in m:
        return "MIPS"
    if "_M_SH" in m:
        return "SHx"
    return ""


def identify_architecture(macros: Mapping[str, MacroValue]) -> str:
    """Return the target architecture the macros reveal, or "" where none can be told."""
    m = _Macros(macros)
    if "_WIN32" in m and "_MSC_VER" in m:
        return _msvc_architecture(m)
    if "__WATCOMC__" in m:
        if "_M_I86" in m:
            return "I86"
        if "_M_IX86" in m:
            return "X86"
        return ""
    if _any_defined(m, "__IAR_SYSTEMS_ICC__", "__IAR_SYSTEMS_ICC"):
        return _first_of(m, _IAR_ARCHES)
    if "__ghs__" in m:
        return _first_of(m, _GHS_ARCHES)
    if "__TI_COMPILER_VERSION__" in m:
        return _first_of_any(m, _TI_ARCHES)
    if "__ADSPSHARC__" in m:
        return "SHARC"
    if "__ADSPBLACKFIN__" in m:
        return "Blackfin"
    if "__TASKING__" in m:
        return _first_of_any(m, _TASKING_ARCHES)
    return ""


def language_standard_default(macros: Mapping[str, MacroValue]) -> str:
    """Return the C standard the compiler uses by default: "90" to "23", or ""."""
    m = _Macros(macros)
    if "__STDC__" not in m and "__clang__" not in m:
        if _any_defined(m, "_MSC_VER", "__ibmxl__", "__IBMC__"):
            return "90"
        return ""
    version = m["__STDC_VERSION__"]
    if version > 201710:
        return "23"
    if version >= 201710:
        return "17"
    if version >= 201000:
        return "11"
    if version >= 199901:
        return "99"
    return "90"


def language_extensions_default(macros: Mapping[str, MacroValue]) -> str:
    """Return "ON" if language extensions are enabled by default, otherwise "OFF"."""
    m = _Macros(macros)
    extended = _any_defined(m, "__clang__", "__GNUC__", "__xlC__", "__TI_COMPILER_VERSION__")
    return "ON" if extended and "__STRICT_ANSI__" not in m else "OFF"


@dataclass(frozen=True)
class CompilerReport:
    """Everything learnt about a compiler and its target from its predefined macros."""

    compiler: CompilerInfo
    platform: str
    architecture: str
    standard_default: str
    extensions_default: str
    qnxnto: bool = False
    cray_wrapper: bool = False

    def info_strings(self) -> list[str]:
        """The INFO records describing this compiler, in their fixed order."""
        info = self.compiler
        records = [f"INFO:compiler[{info.compiler_id}]"]
        if info.simulate_id is not None:
            records.append(f"INFO:simulate[{info.simulate_id}]")
        if self.qnxnto:
            records.append("INFO:qnxnto[]")
        if self.cray_wrapper:
            records.append("INFO:compiler_wrapper[CrayPrgEnv]")
        version = info.version_string()
        if version is not None:
            records.append(f"INFO:compiler_version[{version}]")
        if info.version_internal is not None:
            records.append(f"INFO:compiler_version_internal[{info.version_internal}]")
        simulate_version = info.simulate_version_string()
        if simulate_version is not None:
            records.append(f"INFO:simulate_version[{simulate_version}]")
        records.append(f"INFO:platform[{self.platform}]")
        records.append(f"INFO:arch[{self.architecture}]")
        records.append(f"INFO:standard_default[{self.standard_default}]")
        records.append(f"INFO:extensions_default[{self.extensions_default}]")
        return records


def build_report(macros: Mapping[str, MacroValue]) -> CompilerReport:
    """Gather compiler, platform, architecture and language defaults into one report."""
    return CompilerReport(
        compiler=identify_compiler(macros),
        platform=identify_platform(macros),
        architecture=identify_architecture(macros),
        standard_default=language_standard_default(macros),
        extensions_default=language_extensions_default(macros),
        qnxnto="__QNXNTO__" in macros,
        cray_wrapper="__CRAYXT_COMPUTE_LINUX_TARGET" in macros,
    )