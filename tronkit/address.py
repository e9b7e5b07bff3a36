"""Tron account addresses and their base58check, hex and base64 forms."""

from __future__ import annotations

import base64
import binascii
import hashlib
import re

from Crypto.Hash import keccak

HASH_LENGTH = 32
ADDRESS_LENGTH = 21
ADDRESS_LENGTH_BASE58 = 34
TRON_BYTE_PREFIX = 0x41

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: position for position, char in enumerate(_ALPHABET)}
_HEX_RE = re.compile(r"[0-9a-fA-F]*")


class AddressError(ValueError):
    """Raised when an address cannot be decoded or built."""


class Address(bytes):
    """The 21-byte address of a Tron account."""

    def hex(self) -> str:  # type: ignore[override]
        """Return the address as a 0x-prefixed hex string."""
        return "0x" + bytes.hex(self)

    def to_bytes(self) -> bytes:
        """Return the raw address bytes."""
        return bytes(self)

    def __str__(self) -> str:
        if not self:
            return ""
        if self[0] == 0:
            return str(int.from_bytes(self, "big"))
        return encode_check(bytes(self))

    def __repr__(self) -> str:
        return f"Address({str(self)!r})"


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def _b58encode(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    leading = len(data) - len(data.lstrip(b"\0"))
    return "1" * leading + "".join(reversed(digits))


def _b58decode(text: str) -> bytes:
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise AddressError(f"invalid base58 character {char!r}") from None
    leading = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\0" * leading + body


def encode_check(data: bytes) -> str:
    """Encode bytes as base58 with a four-byte double-SHA256 checksum."""
    checksum = _sha256(_sha256(data))[:4]
    return _b58encode(bytes(data) + checksum)


def decode_check(text: str) -> bytes:
    """Decode a base58check string and verify its checksum."""
    raw = _b58decode(text)
    if len(raw) < 4:
        raise AddressError("b58 check error")
    payload, checksum = raw[:-4], raw[-4:]
    if _sha256(_sha256(payload))[:4] != checksum:
        raise AddressError("b58 check error")
    return payload


def big_to_address(value: int) -> Address:
    """Build an address from an integer, left-padded with zeros."""
    value = abs(value)
    raw = value.to_bytes((value.bit_length() + 7) // 8, "big") if value else b""
    if len(raw) > ADDRESS_LENGTH:
        raise AddressError(f"integer too large for an address: {len(raw)} bytes")
    return Address(raw.rjust(ADDRESS_LENGTH, b"\0"))


def hex_to_address(text: str) -> Address:
    """Build an address from a hex string, with or without a 0x prefix."""
    if text[:2] in ("0x", "0X"):
        text = text[2:]
    if len(text) % 2:
        text = "0" + text
    if not _HEX_RE.fullmatch(text):
        raise AddressError(f"invalid hex string {text!r}")
    return Address(binascii.unhexlify(text))


def base58_to_address(text: str) -> Address:
    """Decode a base58check Tron address."""
    payload = decode_check(text)
    if len(payload) != ADDRESS_LENGTH:
        raise AddressError(f"invalid address length: {len(payload) + 4}")
    if payload[0] != TRON_BYTE_PREFIX:
        raise AddressError("invalid prefix")
    return Address(payload)


def base64_to_address(text: str) -> Address:
    """Decode a base64 encoded address."""
    try:
        return Address(base64.b64decode(text, validate=True))
    except (binascii.Error, ValueError) as exc:
        raise AddressError(f"invalid base64 address: {exc}") from exc


def pubkey_to_address(public_key: bytes) -> Address:
    """Derive an address from an uncompressed secp256k1 public key.

    Accepts the 64-byte X||Y form or the 65-byte form with a 0x04 prefix.
    """
    key = bytes(public_key)
    if len(key) == 65 and key[0] == 0x04:
        key = key[1:]
    if len(key) != 64:
        raise AddressError(f"invalid public key length: {len(public_key)}")
    digest = keccak.new(digest_bits=256, data=key).digest()
    return Address(bytes([TRON_BYTE_PREFIX]) + digest[-20:])


def scan_address(src: object) -> Address:
    """Build an address from a raw database value."""
    if not isinstance(src, (bytes, bytearray)):
        raise AddressError(f"can't scan {type(src).__name__} into Address")
    if len(src) != ADDRESS_LENGTH:
        raise AddressError(
            f"can't scan bytes of len {len(src)} into Address, want {ADDRESS_LENGTH}"
        )
    return Address(bytes(src))