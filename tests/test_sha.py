import hashlib

import pytest
from hypothesis import given, strategies as st

from sha1ref import (
    INITIAL_STATE,
    MAX_MESSAGE_LENGTH,
    SHA1,
    MessageTooLongError,
    check_message_length,
    compress,
    expand_schedule,
    left_rotate,
    pad,
    sha1,
    sha1_hex,
    sha1_text,
    sha1_words,
    words_to_bytes,
)


KNOWN_ANSWERS = [
    (
        b"The quick brown fox jumps over the lazy dog",
        (0x2FD4E1C6, 0x7A2D28FC, 0xED849EE1, 0xBB76E739, 0x1B93EB12),
    ),
    (
        b"The quick brown fox jumps over the lazy cog",
        (0xDE9F2C7F, 0xD25E1B3A, 0xFAD3E85A, 0x0BD17D9B, 0x100DB4B3),
    ),
    (b"", (0xDA39A3EE, 0x5E6B4B0D, 0x3255BFEF, 0x95601890, 0xAFD80709)),
    (
        b"abcdefghijklmnopqrstuvwxyzabcdefghijklmnopqrstuvwxyz========",
        (0x7822AD26, 0xC3079954, 0x7BCB3D14, 0x9EC98EA5, 0x37EB5761),
    ),
    (b"abc", (0xA9993E36, 0x4706816A, 0xBA3E2571, 0x7850C26C, 0x9CD0D89D)),
    (
        b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
        (0x84983E44, 0x1C3BD26E, 0xBAAE4AA1, 0xF95129E5, 0xE54670F1),
    ),
]


@pytest.mark.parametrize("message, words", KNOWN_ANSWERS)
def test_known_answers(message, words):
    assert sha1_words(message) == words
    assert sha1(message) == words_to_bytes(words)


def test_hex_digests():
    assert sha1_hex(b"") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"
    assert sha1_text("The quick brown fox jumps over the lazy dog") == (
        "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"
    )


@pytest.mark.parametrize("length, blocks", [(0, 1), (55, 1), (56, 2), (63, 2), (64, 2), (65, 2), (119, 2), (120, 3)])
def test_padding_block_counts(length, blocks):
    message = bytes(range(256))[:length] if length <= 256 else b"x" * length
    padded = pad(message)
    assert len(padded) == blocks * 64
    assert padded[:length] == message
    assert padded[length] == 0x80
    assert padded[-8:] == (length * 8).to_bytes(8, "big")
    assert set(padded[length + 1 : -8]) <= {0}


def test_padding_empty_message():
    assert pad(b"") == b"\x80" + b"\x00" * 63


@pytest.mark.parametrize("length", [55, 56, 63, 64, 65])
def test_boundary_lengths_match_hashlib(length):
    message = b"a" * length
    assert sha1(message) == hashlib.sha1(message).digest()


def test_left_rotate():
    assert left_rotate(0x80000000, 1) == 0x00000001
    assert left_rotate(0x12345678, 4) == 0x23456781
    assert left_rotate(0xFFFFFFFF, 30) == 0xFFFFFFFF
    assert left_rotate(0x12345678, 0) == 0x12345678


def test_expand_schedule_abc_block():
    w = expand_schedule(pad(b"abc"))
    assert len(w) == 80
    assert w[0] == 0x61626380
    assert w[1:15] == [0] * 14
    assert w[15] == 0x18
    assert w[16] == 0xC2C4C700
    assert all(0 <= word <= 0xFFFFFFFF for word in w)


def test_expand_schedule_rejects_short_block():
    with pytest.raises(ValueError):
        expand_schedule(b"\x00" * 63)


def test_compress_single_block():
    state = compress(INITIAL_STATE, expand_schedule(pad(b"abc")))
    assert state == (0xA9993E36, 0x4706816A, 0xBA3E2571, 0x7850C26C, 0x9CD0D89D)


def test_compress_validates_shapes():
    with pytest.raises(ValueError):
        compress(INITIAL_STATE[:4], [0] * 80)
    with pytest.raises(ValueError):
        compress(INITIAL_STATE, [0] * 79)


def test_message_length_limit():
    check_message_length(0)
    check_message_length(MAX_MESSAGE_LENGTH)
    with pytest.raises(MessageTooLongError):
        check_message_length(MAX_MESSAGE_LENGTH + 1)
    assert issubclass(MessageTooLongError, ValueError)


def test_rejects_non_bytes():
    with pytest.raises(TypeError):
        sha1("abc")
    with pytest.raises(TypeError):
        sha1(memoryview(bytes(8)).cast("I"))


def test_accepts_bytearray_and_memoryview():
    expected = sha1(b"hello")
    assert sha1(bytearray(b"hello")) == expected
    assert sha1(memoryview(b"hello")) == expected


def test_input_is_not_mutated():
    data = bytearray(b"x" * 100)
    sha1(data)
    assert data == bytearray(b"x" * 100)


def test_sha1_object():
    result = SHA1(b"abc")
    assert result.digest_size == 20
    assert result.block_size == 64
    assert result.name == "sha1"
    assert result.digest() == words_to_bytes(result.words)
    assert result.hexdigest() == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert result == SHA1(bytearray(b"abc"))
    assert result != SHA1(b"abd")
    assert SHA1.hash(b"abc") == result.digest()
    assert SHA1.hexdigest_from(b"abc") == result.hexdigest()
    assert not hasattr(result, "update")


def test_calls_are_independent():
    first = sha1(b"first")
    sha1(b"second" * 50)
    assert sha1(b"first") == first


@given(st.binary(min_size=0, max_size=300))
def test_matches_hashlib(payload: bytes) -> None:
    digest = sha1(payload)
    assert len(digest) == 20
    assert digest == hashlib.sha1(payload).digest()
    assert digest == sha1(payload)
