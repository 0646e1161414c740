import base64

import pytest

from berrylang.codec import (
    bytes_to_hex,
    decode_base64,
    decoded_length,
    encode_base64,
    encoded_length,
    hex_to_bytes,
)

SAMPLES = [
    b"",
    b"\x00",
    b"ab",
    b"abc",
    b"hello world",
    bytes(range(256)),
    b"\xff\xfe\xfd\xfc",
]


def test_encode_known_value():
    assert encode_base64(b"Man") == "TWFu"


def test_encode_empty():
    assert encode_base64(b"") == ""


@pytest.mark.parametrize("data", SAMPLES)
def test_encode_matches_standard(data):
    assert encode_base64(data) == base64.b64encode(data).decode("ascii")


@pytest.mark.parametrize("data", SAMPLES)
def test_round_trip_base64(data):
    assert decode_base64(encode_base64(data)) == data


@pytest.mark.parametrize("data", SAMPLES)
def test_encoded_length_matches_output(data):
    assert encoded_length(len(data)) == len(encode_base64(data))


@pytest.mark.parametrize("data", SAMPLES)
def test_decoded_length_matches_data(data):
    assert decoded_length(encode_base64(data)) == len(data)


def test_encoded_length_negative():
    with pytest.raises(ValueError):
        encoded_length(-1)


def test_decode_stops_at_invalid_character():
    encoded = encode_base64(b"abc")
    assert decode_base64(encoded + "!" + encode_base64(b"xyz")) == b"abc"


def test_decode_accepts_bytes_input():
    assert decode_base64(encode_base64(b"hello").encode("ascii")) == b"hello"


def test_decode_ignores_lone_trailing_character():
    encoded = encode_base64(b"abc")
    assert decode_base64(encoded + "Q") == b"abc"
    assert decoded_length(encoded + "Q") == 3


def test_decode_unpadded():
    assert decode_base64(encode_base64(b"ab").rstrip("=")) == b"ab"


def test_decode_rejects_wrong_type():
    with pytest.raises(TypeError):
        decode_base64(42)


@pytest.mark.parametrize("data", SAMPLES)
def test_hex_matches_standard(data):
    assert bytes_to_hex(data) == data.hex().upper()


@pytest.mark.parametrize("data", SAMPLES)
def test_hex_round_trip(data):
    assert hex_to_bytes(bytes_to_hex(data)) == data


def test_hex_lower_case_accepted():
    assert hex_to_bytes("abcdef") == bytes.fromhex("abcdef")


def test_hex_odd_digit_ignored():
    assert hex_to_bytes("1234F") == bytes.fromhex("1234")


def test_hex_invalid_digits_are_zero():
    assert hex_to_bytes("zz1g") == bytes.fromhex("0010")


def test_hex_empty():
    assert hex_to_bytes("") == b""
    assert bytes_to_hex(b"") == ""


def test_hex_rejects_wrong_type():
    with pytest.raises(TypeError):
        hex_to_bytes(None)