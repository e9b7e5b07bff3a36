import base64

import pytest

from tronkit.address import (
    Address,
    AddressError,
    base58_to_address,
    base64_to_address,
    big_to_address,
    decode_check,
    encode_check,
    hex_to_address,
    pubkey_to_address,
    scan_address,
)

VALID = "TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1"
OTHER = "TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R"


def test_scan_valid_bytes():
    valid = base58_to_address(VALID)
    scanned = scan_address(valid.to_bytes())
    assert scanned.to_bytes() == valid.to_bytes()


def test_scan_wrong_type():
    with pytest.raises(AddressError):
        scan_address("not a byte slice")


@pytest.mark.parametrize("length", [4, 22])
def test_scan_wrong_length(length):
    with pytest.raises(AddressError):
        scan_address(bytes(length))


def test_base58_round_trip():
    addr = base58_to_address(VALID)
    assert len(addr) == 21
    assert str(addr) == VALID


def test_hex_of_known_address():
    addr = base58_to_address(OTHER)
    assert addr.hex() == "0x41364b03e0815687edaf90b81ff58e496dea7383d7"


def test_hex_to_address_round_trip():
    addr = base58_to_address(OTHER)
    assert hex_to_address(addr.hex()) == addr
    assert str(hex_to_address(addr.hex()[2:])) == OTHER


def test_hex_to_address_invalid():
    with pytest.raises(AddressError):
        hex_to_address("zz")


def test_bad_checksum_rejected():
    corrupted = VALID[:-1] + ("2" if VALID[-1] != "2" else "3")
    with pytest.raises(AddressError):
        base58_to_address(corrupted)


def test_invalid_base58_character():
    with pytest.raises(AddressError):
        decode_check("0OIl")


def test_encode_decode_check_round_trip():
    payload = b"\x41" + bytes(range(20))
    assert decode_check(encode_check(payload)) == payload


def test_empty_address_string():
    assert str(Address(b"")) == ""


def test_big_to_address_pads_and_prints_decimal():
    addr = big_to_address(1)
    assert len(addr) == 21
    assert str(addr) == "1"


def test_big_to_address_round_trip():
    addr = base58_to_address(VALID)
    assert big_to_address(int.from_bytes(addr, "big")) == addr


def test_big_to_address_too_large():
    with pytest.raises(AddressError):
        big_to_address(1 << 200)


def test_base64_round_trip():
    addr = base58_to_address(VALID)
    assert base64_to_address(base64.b64encode(addr).decode()) == addr


def test_base64_invalid():
    with pytest.raises(AddressError):
        base64_to_address("!!!")


def test_pubkey_to_address_generator_point():
    x = bytes.fromhex("79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798")
    y = bytes.fromhex("483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8")
    addr = pubkey_to_address(b"\x04" + x + y)
    assert addr.hex() == "0x417e5f4552091a69125d5dfcb7b8c2659029395bdf"
    assert pubkey_to_address(x + y) == addr


def test_pubkey_wrong_length():
    with pytest.raises(AddressError):
        pubkey_to_address(bytes(33))