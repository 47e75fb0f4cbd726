"""Identify a C compiler, and the version it reports, from its predefined macros."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

MacroValue = Union[int, str, bool, None]

_INT_SUFFIXES = "uUlL"


def _c_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _c_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _c_div(a, b)


def encode_dec(n: int) -> str:
    """Encode ``n`` as eight decimal digit characters, most significant first."""
    return "".join(
        chr(ord("0") + _c_mod(_c_div(n, 10**power), 10)) for power in range(7, -1, -1)
    )


def encode_hex(n: int) -> str:
    """Encode ``n`` as eight nibble characters, each offset from '0'."""
    return "".join(chr(ord("0") + ((n >> shift) & 0xF)) for shift in range(28, -1, -4))


def _int_value(value: MacroValue) -> int:
    if value is None or value is True:
        return 1
    if value is False:
        return 0
    if isinstance(value, int):
        return value
    text = value.strip().rstrip(_INT_SUFFIXES)
    try:
        return int(text, 0)
    except ValueError:
        raise ValueError(f"macro value is not an integer: {value!r}") from None


class _Macros:
    """The defined macros, read the way a preprocessor condition reads them."""

    def __init__(self, macros: Mapping[str, MacroValue]) -> None:
        self._macros = dict(macros)

    def __contains__(self, name: str) -> bool:
        return name in self._macros

    def __getitem__(self, name: str) -> int:
        if name not in self._macros:
            return 0
        return _int_value(self._macros[name])

    def text(self, name: str) -> str:
        value = self._macros[name]
        return "" if value is None else str(value)


@dataclass(frozen=True)
class CompilerInfo:
    """The compiler's identity and version, each component in its eight-character encoding."""

    compiler_id: str
    simulate_id: str | None = None
    version: str | None = None
    version_major: str | None = None
    version_minor: str | None = None
    version_patch: str | None = None
    version_tweak: str | None = None
    version_internal: str | None = None
    simulate_major: str | None = None
    simulate_minor: str | None = None
    simulate_patch: str | None = None
    simulate_tweak: str | None = None

    def version_string(self) -> str | None:
        """The dotted compiler version, or None if the compiler reports none."""
        if self.version is not None:
            return self.version
        return _join_components(
            self.version_major, self.version_minor, self.version_patch, self.version_tweak
        )

    def simulate_version_string(self) -> str | None:
        """The dotted version of the simulated compiler, or None if there is none."""
        return _join_components(
            self.simulate_major, self.simulate_minor, self.simulate_patch, self.simulate_tweak
        )


def _join_components(*components: str | None) -> str | None:
    present: list[str] = []
    for component in components:
        if component is None:
            break
        present.append(component)
    return ".".join(present) if present else None


def _intel_simulation(m: _Macros, fields: dict[str, str]) -> None:
    if "_MSC_VER" in m:
        fields["simulate_id"] = "MSVC"
    if "__GNUC__" in m:
        fields["simulate_id"] = "GNU"
    if "_MSC_VER" in m:
        fields["simulate_major"] = encode_dec(_c_div(m["_MSC_VER"], 100))
        fields["simulate_minor"] = encode_dec(_c_mod(m["_MSC_VER"], 100))
    if "__GNUC__" in m:
        fields["simulate_major"] = encode_dec(m["__GNUC__"])
    elif "__GNUG__" in m:
        fields["simulate_major"] = encode_dec(m["__GNUG__"])
    if "__GNUC_MINOR__" in m:
        fields["simulate_minor"] = encode_dec(m["__GNUC_MINOR__"])
    if "__GNUC_PATCHLEVEL__" in m:
        fields["simulate_patch"] = encode_dec(m["__GNUC_PATCHLEVEL__"])


def _msvc_simulation(m: _Macros, fields: dict[str, str]) -> None:
    if "_MSC_VER" in m:
        fields["simulate_id"] = "MSVC"
        fields["simulate_major"] = encode_dec(_c_div(m["_MSC_VER"], 100))
        fields["simulate_minor"] = encode_dec(_c_mod(m["_MSC_VER"], 100))


def _clang_version(m: _Macros, fields: dict[str, str]) -> None:
    fields["version_major"] = encode_dec(m["__clang_major__"])
    fields["version_minor"] = encode_dec(m["__clang_minor__"])
    fields["version_patch"] = encode_dec(m["__clang_patchlevel__"])


def _vrp(value: int, fields: dict[str, str]) -> None:
    fields["version_major"] = encode_dec(_c_div(value, 100))
    fields["version_minor"] = encode_dec(_c_mod(_c_div(value, 10), 10))
    fields["version_patch"] = encode_dec(_c_mod(value, 10))


def _named_triplet(m: _Macros, fields: dict[str, str], major: str, minor: str, patch: str) -> None:
    fields["version_major"] = encode_dec(m[major])
    fields["version_minor"] = encode_dec(m[minor])
    fields["version_patch"] = encode_dec(m[patch])


_IAR_SMALL_TARGETS = (
    "__ICCAVR__", "__ICCRX__", "__ICCRH850__", "__ICCRL78__", "__ICC430__",
    "__ICCRISCV__", "__ICCV850__", "__ICC8051__", "__ICCSTM8__",
)


def identify_compiler(macros: Mapping[str, MacroValue]) -> CompilerInfo:
    """Work out which compiler defines ``macros`` and the version it reports.

    ``macros`` maps each defined macro to its value: an integer, a string
    holding a number (or, for version-string macros, the text itself), or
    None for a macro defined without a value.
    """
    m = _Macros(macros)
    f: dict[str, str] = {}

    if "__INTEL_COMPILER" in m or "__ICC" in m:
        compiler = "Intel"
        ic = m["__INTEL_COMPILER"]
        if ic < 2021 or ic in (202110, 202111):
            f["version_major"] = encode_dec(_c_div(ic, 100))
            f["version_minor"] = encode_dec(_c_mod(_c_div(ic, 10), 10))
            if "__INTEL_COMPILER_UPDATE" in m:
                f["version_patch"] = encode_dec(m["__INTEL_COMPILER_UPDATE"])
            else:
                f["version_patch"] = encode_dec(_c_mod(ic, 10))
        else:
            f["version_major"] = encode_dec(ic)
            f["version_minor"] = encode_dec(m["__INTEL_COMPILER_UPDATE"])
            f["version_patch"] = encode_dec(0)
        if "__INTEL_COMPILER_BUILD_DATE" in m:
            f["version_tweak"] = encode_dec(m["__INTEL_COMPILER_BUILD_DATE"])
        _intel_simulation(m, f)

    elif ("__clang__" in m and "__INTEL_CLANG_COMPILER" in m) or "__INTEL_LLVM_COMPILER" in m:
        compiler = "IntelLLVM"
        v = m["__INTEL_LLVM_COMPILER"]
        if v < 1000000:
            _vrp(v, f)
        else:
            f["version_major"] = encode_dec(_c_div(v, 10000))
            f["version_minor"] = encode_dec(_c_mod(_c_div(v, 100), 100))
            f["version_patch"] = encode_dec(_c_mod(v, 100))
        _intel_simulation(m, f)

    elif "__PATHCC__" in m:
        compiler = "PathScale"
        f["version_major"] = encode_dec(m["__PATHCC__"])
        f["version_minor"] = encode_dec(m["__PATHCC_MINOR__"])
        if "__PATHCC_PATCHLEVEL__" in m:
            f["version_patch"] = encode_dec(m["__PATHCC_PATCHLEVEL__"])

    elif "__BORLANDC__" in m and "__CODEGEARC_VERSION__" in m:
        compiler = "Embarcadero"
        v = m["__CODEGEARC_VERSION__"]
        f["version_major"] = encode_hex((v >> 24) & 0x00FF)
        f["version_minor"] = encode_hex((v >> 16) & 0x00FF)
        f["version_patch"] = encode_dec(v & 0xFFFF)

    elif "__BORLANDC__" in m:
        compiler = "Borland"
        v = m["__BORLANDC__"]
        f["version_major"] = encode_hex(v >> 8)
        f["version_minor"] = encode_hex(v & 0xFF)

    elif "__WATCOMC__" in m and m["__WATCOMC__"] < 1200:
        compiler = "Watcom"
        w = m["__WATCOMC__"]
        f["version_major"] = encode_dec(_c_div(w, 100))
        f["version_minor"] = encode_dec(_c_mod(_c_div(w, 10), 10))
        if _c_mod(w, 10) > 0:
            f["version_patch"] = encode_dec(_c_mod(w, 10))

    elif "__WATCOMC__" in m:
        compiler = "OpenWatcom"
        w = m["__WATCOMC__"]
        f["version_major"] = encode_dec(_c_div(w - 1100, 100))
        f["version_minor"] = encode_dec(_c_mod(_c_div(w, 10), 10))
        if _c_mod(w, 10) > 0:
            f["version_patch"] = encode_dec(_c_mod(w, 10))

    elif "__SUNPRO_C" in m:
        compiler = "SunPro"
        s = m["__SUNPRO_C"]
        if s >= 0x5100:
            f["version_major"] = encode_hex(s >> 12)
            f["version_minor"] = encode_hex((s >> 4) & 0xFF)
        else:
            f["version_major"] = encode_hex(s >> 8)
            f["version_minor"] = encode_hex((s >> 4) & 0xF)
        f["version_patch"] = encode_hex(s & 0xF)

    elif "__HP_cc" in m:
        compiler = "HP"
        h = m["__HP_cc"]
        f["version_major"] = encode_dec(_c_div(h, 10000))
        f["version_minor"] = encode_dec(_c_mod(_c_div(h, 100), 100))
        f["version_patch"] = encode_dec(_c_mod(h, 100))

    elif "__DECC" in m:
        compiler = "Compaq"
        d = m["__DECC_VER"]
        f["version_major"] = encode_dec(_c_div(d, 10000000))
        f["version_minor"] = encode_dec(_c_mod(_c_div(d, 100000), 100))
        f["version_patch"] = encode_dec(_c_mod(d, 10000))

    elif "__IBMC__" in m and "__COMPILER_VER__" in m:
        compiler = "zOS"
        _vrp(m["__IBMC__"], f)

    elif "__open_xl__" in m and "__clang__" in m:
        compiler = "IBMClang"
        _named_triplet(m, f, "__open_xl_version__", "__open_xl_release__",
                       "__open_xl_modification__")
        f["version_tweak"] = encode_dec(m["__open_xl_ptf_fix_level__"])

    elif "__ibmxl__" in m and "__clang__" in m:
        compiler = "XLClang"
        _named_triplet(m, f, "__ibmxl_version__", "__ibmxl_release__",
                       "__ibmxl_modification__")
        f["version_tweak"] = encode_dec(m["__ibmxl_ptf_fix_level__"])

    elif "__IBMC__" in m and "__COMPILER_VER__" not in m and m["__IBMC__"] >= 800:
        compiler = "XL"
        _vrp(m["__IBMC__"], f)

    elif "__IBMC__" in m and "__COMPILER_VER__" not in m and m["__IBMC__"] < 800:
        compiler = "VisualAge"
        _vrp(m["__IBMC__"], f)

    elif "__NVCOMPILER" in m:
        compiler = "NVHPC"
        f["version_major"] = encode_dec(m["__NVCOMPILER_MAJOR__"])
        f["version_minor"] = encode_dec(m["__NVCOMPILER_MINOR__"])
        if "__NVCOMPILER_PATCHLEVEL__" in m:
            f["version_patch"] = encode_dec(m["__NVCOMPILER_PATCHLEVEL__"])

    elif "__PGI" in m:
        compiler = "PGI"
        f["version_major"] = encode_dec(m["__PGIC__"])
        f["version_minor"] = encode_dec(m["__PGIC_MINOR__"])
        if "__PGIC_PATCHLEVEL__" in m:
            f["version_patch"] = encode_dec(m["__PGIC_PATCHLEVEL__"])

    elif "__clang__" in m and "__cray__" in m:
        compiler = "CrayClang"
        _named_triplet(m, f, "__cray_major__", "__cray_minor__", "__cray_patchlevel__")
        if "__clang_version__" in m:
            f["version_internal"] = m.text("__clang_version__")

    elif "_CRAYC" in m:
        compiler = "Cray"
        f["version_major"] = encode_dec(m["_RELEASE_MAJOR"])
        f["version_minor"] = encode_dec(m["_RELEASE_MINOR"])

    elif "__TI_COMPILER_VERSION__" in m:
        compiler = "TI"
        t = m["__TI_COMPILER_VERSION__"]
        f["version_major"] = encode_dec(_c_div(t, 1000000))
        f["version_minor"] = encode_dec(_c_mod(_c_div(t, 1000), 1000))
        f["version_patch"] = encode_dec(_c_mod(t, 1000))

    elif "__CLANG_FUJITSU" in m:
        compiler = "FujitsuClang"
        _named_triplet(m, f, "__FCC_major__", "__FCC_minor__", "__FCC_patchlevel__")
        if "__clang_version__" in m:
            f["version_internal"] = m.text("__clang_version__")

    elif "__FUJITSU" in m:
        compiler = "Fujitsu"
        if "__FCC_version__" in m:
            f["version"] = m.text("__FCC_version__")
        elif "__FCC_major__" in m:
            _named_triplet(m, f, "__FCC_major__", "__FCC_minor__", "__FCC_patchlevel__")
        if "__fcc_version" in m:
            f["version_internal"] = encode_dec(m["__fcc_version"])
        elif "__FCC_VERSION" in m:
            f["version_internal"] = encode_dec(m["__FCC_VERSION"])

    elif "__ghs__" in m:
        compiler = "GHS"
        if "__GHS_VERSION_NUMBER" in m:
            _vrp(m["__GHS_VERSION_NUMBER"], f)

    elif "__TASKING__" in m:
        compiler = "Tasking"
        v = m["__VERSION__"]
        f["version_major"] = encode_dec(_c_div(v, 1000))
        f["version_minor"] = encode_dec(_c_mod(v, 100))
        f["version_internal"] = encode_dec(v)

    elif "__ORANGEC__" in m:
        compiler = "OrangeC"
        _named_triplet(m, f, "__ORANGEC_MAJOR__", "__ORANGEC_MINOR__",
                       "__ORANGEC_PATCHLEVEL__")

    elif "__TINYC__" in m:
        compiler = "TinyCC"

    elif "__BCC__" in m:
        compiler = "Bruce"

    elif "__SCO_VERSION__" in m:
        compiler = "SCO"

    elif "__ARMCC_VERSION" in m and "__clang__" not in m:
        compiler = "ARMCC"
        a = m["__ARMCC_VERSION"]
        if a >= 1000000:
            f["version_major"] = encode_dec(_c_div(a, 1000000))
            f["version_minor"] = encode_dec(_c_mod(_c_div(a, 10000), 100))
        else:
            f["version_major"] = encode_dec(_c_div(a, 100000))
            f["version_minor"] = encode_dec(_c_mod(_c_div(a, 10000), 10))
        f["version_patch"] = encode_dec(_c_mod(a, 10000))

    elif "__clang__" in m and "__apple_build_version__" in m:
        compiler = "AppleClang"
        _clang_version(m, f)
        _msvc_simulation(m, f)
        f["version_tweak"] = encode_dec(m["__apple_build_version__"])

    elif "__clang__" in m and "__ARMCOMPILER_VERSION" in m:
        compiler = "ARMClang"
        a = m["__ARMCOMPILER_VERSION"]
        f["version_major"] = encode_dec(_c_div(a, 1000000))
        f["version_minor"] = encode_dec(_c_mod(_c_div(a, 10000), 100))
        f["version_patch"] = encode_dec(_c_mod(_c_div(a, 100), 100))
        f["version_internal"] = encode_dec(a)

    elif "__clang__" in m:
        compiler = "Clang"
        _clang_version(m, f)
        _msvc_simulation(m, f)

    elif "__LCC__" in m and ("__GNUC__" in m or "__GNUG__" in m or "__MCST__" in m):
        compiler = "LCC"
        lcc = m["__LCC__"]
        f["version_major"] = encode_dec(_c_div(lcc, 100))
        f["version_minor"] = encode_dec(_c_mod(lcc, 100))
        if "__LCC_MINOR__" in m:
            f["version_patch"] = encode_dec(m["__LCC_MINOR__"])
        if "__GNUC__" in m and "__GNUC_MINOR__" in m:
            f["simulate_id"] = "GNU"
            f["simulate_major"] = encode_dec(m["__GNUC__"])
            f["simulate_minor"] = encode_dec(m["__GNUC_MINOR__"])
            if "__GNUC_PATCHLEVEL__" in m:
                f["simulate_patch"] = encode_dec(m["__GNUC_PATCHLEVEL__"])

    elif "__GNUC__" in m:
        compiler = "GNU"
        f["version_major"] = encode_dec(m["__GNUC__"])
        if "__GNUC_MINOR__" in m:
            f["version_minor"] = encode_dec(m["__GNUC_MINOR__"])
        if "__GNUC_PATCHLEVEL__" in m:
            f["version_patch"] = encode_dec(m["__GNUC_PATCHLEVEL__"])

    elif "_MSC_VER" in m:
        compiler = "MSVC"
        msc = m["_MSC_VER"]
        f["version_major"] = encode_dec(_c_div(msc, 100))
        f["version_minor"] = encode_dec(_c_mod(msc, 100))
        if "_MSC_FULL_VER" in m:
            modulus = 100000 if msc >= 1400 else 10000
            f["version_patch"] = encode_dec(_c_mod(m["_MSC_FULL_VER"], modulus))
        if "_MSC_BUILD" in m:
            f["version_tweak"] = encode_dec(m["_MSC_BUILD"])

    elif "_ADI_COMPILER" in m:
        compiler = "ADSP"
        if "__VERSIONNUM__" in m:
            v = m["__VERSIONNUM__"]
            f["version_major"] = encode_dec((v >> 24) & 0xFF)
            f["version_minor"] = encode_dec((v >> 16) & 0xFF)
            f["version_patch"] = encode_dec((v >> 8) & 0xFF)
            f["version_tweak"] = encode_dec(v & 0xFF)

    elif "__IAR_SYSTEMS_ICC__" in m or "__IAR_SYSTEMS_ICC" in m:
        compiler = "IAR"
        if "__VER__" in m and "__ICCARM__" in m:
            ver = m["__VER__"]
            f["version_major"] = encode_dec(_c_div(ver, 1000000))
            f["version_minor"] = encode_dec(_c_mod(_c_div(ver, 1000), 1000))
            f["version_patch"] = encode_dec(_c_mod(ver, 1000))
            f["version_internal"] = encode_dec(m["__IAR_SYSTEMS_ICC__"])
        elif "__VER__" in m and any(target in m for target in _IAR_SMALL_TARGETS):
            ver = m["__VER__"]
            f["version_major"] = encode_dec(_c_div(ver, 100))
            f["version_minor"] = encode_dec(ver - _c_div(ver, 100) * 100)
            f["version_patch"] = encode_dec(m["__SUBVERSION__"])
            f["version_internal"] = encode_dec(m["__IAR_SYSTEMS_ICC__"])

    elif "__SDCC_VERSION_MAJOR" in m or "SDCC" in m:
        compiler = "SDCC"
        if "__SDCC_VERSION_MAJOR" in m:
            _named_triplet(m, f, "__SDCC_VERSION_MAJOR", "__SDCC_VERSION_MINOR",
                           "__SDCC_VERSION_PATCH")
        else:
            _vrp(m["SDCC"], f)

    elif "__hpux" in m or "__hpua" in m:
        # Too old to identify itself; guess the platform's native compiler.
        compiler = "HP"

    else:
        compiler = ""

    return CompilerInfo(compiler_id=compiler, **f)