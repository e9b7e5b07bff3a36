"""Contract ABI types, parameter encoding and method selectors."""

from __future__ import annotations

import base64
import binascii
import json
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from Crypto.Hash import keccak

from .address import AddressError, base58_to_address

_ELEMENTARY_RE = re.compile(r"([a-z]+)([0-9]*)")
_DIM_RE = re.compile(r"[0-9]+")
_DEC_RE = re.compile(r"[+-]?[0-9]+")
_HEX_DIGITS_RE = re.compile(r"[+-]?[0-9a-fA-F]+")
_HEX_BYTES_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")
_WORD = 32


class AbiError(ValueError):
    """Raised when an ABI type or value is invalid."""


@dataclass(frozen=True)
class AbiType:
    """A parsed ABI type.

    ``size`` is the bit width for integers, the byte length for fixed
    bytes and the element count for fixed arrays.
    """

    kind: str
    size: int = 0
    elem: AbiType | None = None

    @property
    def name(self) -> str:
        if self.kind in ("int", "uint"):
            return f"{self.kind}{self.size}"
        if self.kind == "fixed_bytes":
            return f"bytes{self.size}"
        if self.kind == "slice":
            return f"{self.elem.name}[]"
        if self.kind == "array":
            return f"{self.elem.name}[{self.size}]"
        return self.kind

    @property
    def is_dynamic(self) -> bool:
        if self.kind in ("string", "bytes", "slice"):
            return True
        if self.kind == "array":
            return self.elem.is_dynamic
        return False

    @property
    def head_size(self) -> int:
        if not self.is_dynamic and self.kind == "array":
            return self.size * self.elem.head_size
        return _WORD

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Argument:
    """A named, typed method argument."""

    name: str
    type: AbiType
    indexed: bool = False


def parse_type(name: str) -> AbiType:
    """Parse an ABI type name such as ``uint256`` or ``address[2]``."""
    if name.endswith("]"):
        start = name.rfind("[")
        if start <= 0:
            raise AbiError(f"invalid arg type in abi: {name}")
        elem = parse_type(name[:start])
        dim = name[start + 1 : -1]
        if not dim:
            return AbiType("slice", elem=elem)
        if not _DIM_RE.fullmatch(dim):
            raise AbiError(f"invalid arg type in abi: {name}")
        return AbiType("array", int(dim), elem)

    match = _ELEMENTARY_RE.fullmatch(name)
    if not match:
        raise AbiError(f"invalid arg type in abi: {name}")
    base, digits = match.groups()
    if base in ("int", "uint"):
        if not digits:
            raise AbiError(f"unsupported arg type: {name}")
        bits = int(digits)
        if bits == 0 or bits > 256 or bits % 8:
            raise AbiError(f"unsupported arg type: {name}")
        return AbiType(base, bits)
    if base == "bytes":
        if not digits:
            return AbiType("bytes")
        length = int(digits)
        if not 1 <= length <= 32:
            raise AbiError(f"unsupported arg type: {name}")
        return AbiType("fixed_bytes", length)
    if not digits and base in ("bool", "string", "address"):
        return AbiType(base)
    raise AbiError(f"unsupported arg type: {name}")


def load_from_json(text: str) -> list[dict[str, Any]] | None:
    """Load a JSON list of single-entry ``{type: value}`` parameters."""
    if not text:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AbiError(f"invalid parameter JSON: {exc}") from exc
    if not isinstance(data, list) or not all(isinstance(p, dict) for p in data):
        raise AbiError("parameter JSON must be a list of objects")
    return data


def signature(method: str) -> bytes:
    """Return the four-byte selector of a method signature."""
    return keccak.new(digest_bits=256, data=method.encode()).digest()[:4]


def _to_address(value: Any) -> bytes:
    if isinstance(value, str):
        try:
            addr = base58_to_address(value)
        except AddressError as exc:
            raise AbiError(f"invalid address {value}: {exc}") from exc
        return bytes(addr)[-20:]
    if isinstance(value, (bytes, bytearray)) and len(value) in (20, 21):
        return bytes(value)[-20:]
    raise AbiError(f"invalid address {value!r}")


def _to_int(ty: AbiType, value: Any) -> int:
    if isinstance(value, bool):
        raise AbiError(f"invalid {ty.name} value {value!r}")
    if isinstance(value, str):
        if ty.size > 64 and value.startswith("0x"):
            digits, base = value[2:], 16
            valid = _HEX_DIGITS_RE.fullmatch(digits)
        else:
            digits, base = value, 10
            valid = _DEC_RE.fullmatch(digits)
        if not valid:
            raise AbiError(f"invalid {ty.name} value {value!r}")
        value = int(digits, base)
    elif not isinstance(value, int):
        raise AbiError(f"invalid {ty.name} value {value!r}")

    if ty.kind == "uint":
        low, high = 0, (1 << ty.size) - 1
    else:
        low, high = -(1 << (ty.size - 1)), (1 << (ty.size - 1)) - 1
    if not low <= value <= high:
        raise AbiError(f"value {value} out of range for {ty.name}")
    return value


def _to_bytes(ty: AbiType, value: Any) -> bytes:
    if isinstance(value, str):
        if _HEX_BYTES_RE.fullmatch(value):
            data = binascii.unhexlify(value)
        else:
            try:
                data = base64.b64decode(value, validate=True)
            except (binascii.Error, ValueError) as exc:
                raise AbiError(f"invalid bytes value {value!r}: {exc}") from exc
    elif isinstance(value, (bytes, bytearray)):
        data = bytes(value)
    else:
        raise AbiError(f"invalid {ty.name} value {value!r}")
    if ty.kind == "fixed_bytes" and len(data) != ty.size:
        raise AbiError(f"invalid size: {ty.size}/{len(data)}")
    return data


def _coerce(ty: AbiType, value: Any) -> Any:
    if ty.kind in ("slice", "array"):
        if not isinstance(value, (list, tuple)):
            raise AbiError(f"unable to convert array {value!r} to {ty.name}")
        items = [_coerce(ty.elem, item) for item in value]
        if ty.kind == "array" and len(items) != ty.size:
            raise AbiError(f"{ty.name} expects {ty.size} items, got {len(items)}")
        return items
    if ty.kind == "address":
        return _to_address(value)
    if ty.kind in ("int", "uint"):
        return _to_int(ty, value)
    if ty.kind in ("bytes", "fixed_bytes"):
        return _to_bytes(ty, value)
    if ty.kind == "bool":
        if not isinstance(value, bool):
            raise AbiError(f"invalid bool value {value!r}")
        return value
    if ty.kind == "string":
        if not isinstance(value, str):
            raise AbiError(f"invalid string value {value!r}")
        return value
    raise AbiError(f"unsupported type {ty.name}")


def _word(number: int) -> bytes:
    return (number % (1 << 256)).to_bytes(_WORD, "big")


def _pad_right(data: bytes) -> bytes:
    return data + b"\0" * (-len(data) % _WORD)


def _encode_single(ty: AbiType, value: Any) -> bytes:
    if ty.kind in ("int", "uint"):
        return _word(value)
    if ty.kind == "bool":
        return _word(int(value))
    if ty.kind == "address":
        return value.rjust(_WORD, b"\0")
    if ty.kind == "fixed_bytes":
        return _pad_right(value)
    if ty.kind in ("bytes", "string"):
        data = value.encode() if isinstance(value, str) else value
        return _word(len(data)) + _pad_right(data)
    if ty.kind == "slice":
        return _word(len(value)) + _encode_sequence([ty.elem] * len(value), value)
    if ty.kind == "array":
        return _encode_sequence([ty.elem] * len(value), value)
    raise AbiError(f"unsupported type {ty.name}")


def _encode_sequence(types: list[AbiType], values: list[Any]) -> bytes:
    head_size = sum(ty.head_size for ty in types)
    heads: list[bytes] = []
    tails: list[bytes] = []
    offset = head_size
    for ty, value in zip(types, values):
        encoded = _encode_single(ty, value)
        if ty.is_dynamic:
            heads.append(_word(offset))
            tails.append(encoded)
            offset += len(encoded)
        else:
            heads.append(encoded)
    return b"".join(heads) + b"".join(tails)


def get_padded_param(params: Iterable[Mapping[str, Any]]) -> bytes:
    """Encode a list of ``{type: value}`` parameters as ABI call data."""
    types: list[AbiType] = []
    values: list[Any] = []
    for param in params:
        if not isinstance(param, Mapping) or len(param) != 1:
            raise AbiError(f"invalid param {param!r}")
        (type_name, value), = param.items()
        try:
            ty = parse_type(type_name)
        except AbiError as exc:
            raise AbiError(f"invalid param {param!r}: {exc}") from exc
        types.append(ty)
        values.append(_coerce(ty, value))
    return _encode_sequence(types, values)


def pack(method: str, params: Iterable[Mapping[str, Any]]) -> bytes:
    """Return the method selector followed by its encoded parameters."""
    return signature(method) + get_padded_param(params)


def _entries(abi: Any) -> Iterable[Mapping[str, Any]]:
    if isinstance(abi, Mapping):
        return abi.get("entrys", abi.get("entries", ()))
    return abi


def _arguments(abi: Any, method: str, field: str) -> list[Argument]:
    for entry in _entries(abi):
        if entry.get("name") != method:
            continue
        arguments = []
        for item in entry.get(field) or ():
            try:
                ty = parse_type(item["type"])
            except AbiError as exc:
                raise AbiError(f"invalid param {item['type']}: {exc}") from exc
            arguments.append(
                Argument(item.get("name", ""), ty, bool(item.get("indexed", False)))
            )
        return arguments
    raise AbiError("not found")


def get_parser(abi: Any, method: str) -> list[Argument]:
    """Return the output arguments of a method in an ABI."""
    return _arguments(abi, method, "outputs")


def get_inputs_parser(abi: Any, method: str) -> list[Argument]:
    """Return the input arguments of a method in an ABI."""
    return _arguments(abi, method, "inputs")