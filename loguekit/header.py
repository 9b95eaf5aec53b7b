"""User program header: targets, API versions and the 1 KiB binary header."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum


class Module(IntEnum):
    GLOBAL = 0
    MODFX = 1
    DELFX = 2
    REVFX = 3
    OSC = 4


class Platform(IntEnum):
    PROLOGUE = 1 << 8
    MINILOGUEXD = 2 << 8
    NUTEKTDIGITAL = 3 << 8


class ParamType(IntEnum):
    PERCENT = 0
    PERCENT_BIPOLAR = 1
    SELECT = 2


USER_TARGET_PLATFORM = Platform.MINILOGUEXD
USER_TARGET_PLATFORM_MASK = 0x7F << 8
USER_TARGET_MODULE_MASK = 0x7F

API_1_0_0 = (1 << 16) | (0 << 8) | 0
API_1_1_0 = (1 << 16) | (1 << 8) | 0
USER_API_VERSION = API_1_1_0
USER_API_MAJOR_MASK = 0x7F << 16
USER_API_MINOR_MASK = 0x7F << 8
USER_API_PATCH_MASK = 0x7F

USER_PRG_HEADER_SIZE = 0x400
USER_PRG_SIG_SIZE = 0x84

USER_PRG_MAX_PARAM_COUNT = 6
USER_PRG_PARAM_MIN_LIMIT = -100
USER_PRG_PARAM_MAX_LIMIT = 100

USER_PRG_PARAM_NAME_LEN = 12
USER_PRG_NAME_LEN = 13

_PARAM_STRUCT = struct.Struct(f"<bbB{USER_PRG_PARAM_NAME_LEN + 1}s")
_PARAMS_SIZE = USER_PRG_MAX_PARAM_COUNT * _PARAM_STRUCT.size
_PAD_SIZE = USER_PRG_HEADER_SIZE - 40 - _PARAMS_SIZE
_HEADER_STRUCT = struct.Struct(
    f"<HIIII{USER_PRG_NAME_LEN + 1}sI{_PARAMS_SIZE}s{_PAD_SIZE}xI"
)


def target(platform: int, module: int) -> int:
    """Combined target code for a platform and a module kind."""
    return int(platform) | int(module)


def is_platform_compatible(tgt: int) -> bool:
    """True when the target's platform is one of the known platforms."""
    return (tgt & USER_TARGET_PLATFORM_MASK) in {p.value for p in Platform}


def api_major(version: int) -> int:
    return (version >> 16) & 0x7F


def api_minor(version: int) -> int:
    return (version >> 8) & 0x7F


def api_patch(version: int) -> int:
    return version & 0x7F


def is_api_compatible(api: int) -> bool:
    """Same major version and a minor version no newer than the runtime's."""
    return (api & USER_API_MAJOR_MASK) == (USER_API_VERSION & USER_API_MAJOR_MASK) and (
        api & USER_API_MINOR_MASK
    ) <= (USER_API_VERSION & USER_API_MINOR_MASK)


def _encode_name(name: str, limit: int) -> bytes:
    try:
        raw = name.encode("ascii")
    except UnicodeEncodeError as exc:
        raise ValueError(f"name {name!r} is not ASCII") from exc
    if len(raw) > limit:
        raise ValueError(f"name {name!r} is longer than {limit} characters")
    return raw


def _decode_name(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("ascii", errors="replace")


@dataclass(frozen=True, slots=True)
class ProgramParam:
    """Description of one editable program parameter."""

    min: int = 0
    max: int = 0
    type: ParamType = ParamType.PERCENT
    name: str = ""

    SIZE = _PARAM_STRUCT.size

    def pack(self) -> bytes:
        for bound in (self.min, self.max):
            if not USER_PRG_PARAM_MIN_LIMIT <= bound <= USER_PRG_PARAM_MAX_LIMIT:
                raise ValueError(
                    f"parameter bound {bound} outside "
                    f"[{USER_PRG_PARAM_MIN_LIMIT}, {USER_PRG_PARAM_MAX_LIMIT}]"
                )
        raw = _encode_name(self.name, USER_PRG_PARAM_NAME_LEN)
        return _PARAM_STRUCT.pack(self.min, self.max, int(self.type), raw)

    @classmethod
    def unpack(cls, data: bytes) -> ProgramParam:
        if len(data) < _PARAM_STRUCT.size:
            raise ValueError(
                f"parameter needs {_PARAM_STRUCT.size} bytes, got {len(data)}"
            )
        lo, hi, kind, raw = _PARAM_STRUCT.unpack_from(data)
        return cls(lo, hi, ParamType(kind), _decode_name(raw))


@dataclass(frozen=True, slots=True)
class ProgramHeader:
    """The fixed-size header that starts every user program binary."""

    target: int = 0
    api: int = USER_API_VERSION
    dev_id: int = 0
    prg_id: int = 0
    version: int = 0
    name: str = ""
    params: tuple[ProgramParam, ...] = field(default_factory=tuple)
    load_size: int = 0

    SIZE = _HEADER_STRUCT.size

    @property
    def num_param(self) -> int:
        return len(self.params)

    def pack(self) -> bytes:
        if len(self.params) > USER_PRG_MAX_PARAM_COUNT:
            raise ValueError(
                f"at most {USER_PRG_MAX_PARAM_COUNT} parameters, got {len(self.params)}"
            )
        raw_name = _encode_name(self.name, USER_PRG_NAME_LEN)
        params = b"".join(p.pack() for p in self.params).ljust(_PARAMS_SIZE, b"\0")
        try:
            return _HEADER_STRUCT.pack(
                self.target,
                self.api,
                self.dev_id,
                self.prg_id,
                self.version,
                raw_name,
                self.num_param,
                params,
                self.load_size,
            )
        except struct.error as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def unpack(cls, data: bytes) -> ProgramHeader:
        if len(data) < _HEADER_STRUCT.size:
            raise ValueError(
                f"header needs {_HEADER_STRUCT.size} bytes, got {len(data)}"
            )
        (tgt, api, dev_id, prg_id, version, raw_name, num_param, raw_params,
         load_size) = _HEADER_STRUCT.unpack_from(data)
        if num_param > USER_PRG_MAX_PARAM_COUNT:
            raise ValueError(
                f"header declares {num_param} parameters, "
                f"at most {USER_PRG_MAX_PARAM_COUNT} allowed"
            )
        size = _PARAM_STRUCT.size
        params = tuple(
            ProgramParam.unpack(raw_params[i * size:(i + 1) * size])
            for i in range(num_param)
        )
        return cls(
            tgt, api, dev_id, prg_id, version, _decode_name(raw_name), params, load_size
        )