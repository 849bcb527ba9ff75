from __future__ import annotations
from typing import Iterable, Sequence, Union

from sha1ref.constants import (
	BLOCK_SIZE,
	DIGEST_SIZE,
	INITIAL_STATE,
	MAX_MESSAGE_LENGTH,
	ROUND_CONSTANTS,
	SCHEDULE_LENGTH,
	WORD_MASK,
	State,
)


BufferLike = Union[bytes, bytearray, memoryview]


class MessageTooLongError(ValueError):
	"""Raised when the input bit length cannot be encoded in the 64-bit padding trailer."""


def _to_bytes(data: BufferLike) -> bytes:
	"""Return the input as bytes, raising ``TypeError`` for unsupported types."""

	if isinstance(data, (bytes, bytearray)):
		return bytes(data)

	if isinstance(data, memoryview):
		if data.format not in ("B", "b", "c"):
			raise TypeError("memoryview must be of a byte-oriented format")
		return data.tobytes()

	raise TypeError("data must be bytes-like")


def left_rotate(value: int, count: int) -> int:
	return ((value << count) | (value >> (32 - count))) & WORD_MASK


def check_message_length(length: int) -> None:
	if length < 0:
		raise ValueError("message length cannot be negative")
	if length > MAX_MESSAGE_LENGTH:
		raise MessageTooLongError(
			f"message of {length} bytes exceeds the SHA-1 limit of {MAX_MESSAGE_LENGTH} bytes"
		)


def pad(message: BufferLike) -> bytes:
	"""Append the 0x80 marker, zero fill and 64-bit big-endian bit length.

	The result is always a positive multiple of ``BLOCK_SIZE`` bytes long.
	"""
	message = _to_bytes(message)
	check_message_length(len(message))

	# zero fill brings the length to 56 mod 64, leaving room for the trailer
	padding_needed = (BLOCK_SIZE - 9 - len(message)) % BLOCK_SIZE
	return (
		message
		+ b"\x80"
		+ b"\x00" * padding_needed
		+ (len(message) * 8).to_bytes(8, "big")
	)


def expand_schedule(block: bytes) -> list[int]:
	if len(block) != BLOCK_SIZE:
		raise ValueError("Block size must be exactly 64 bytes")

	w = [0] * SCHEDULE_LENGTH
	for i in range(16):
		w[i] = int.from_bytes(block[i * 4 : (i + 1) * 4], "big")

	for i in range(16, SCHEDULE_LENGTH):
		w[i] = left_rotate(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1)

	return w


def _choose(b: int, c: int, d: int) -> int:
	return (b & c) | ((~b & WORD_MASK) & d)


def _parity(b: int, c: int, d: int) -> int:
	return b ^ c ^ d


def _majority(b: int, c: int, d: int) -> int:
	return (b & c) | (b & d) | (c & d)


# one function per group of 20 rounds, paired with ROUND_CONSTANTS
_ROUND_FUNCTIONS = (_choose, _parity, _majority, _parity)


def compress(state: Sequence[int], schedule: Sequence[int]) -> State:
	"""Fold one block's message schedule into ``state`` and return the new state."""
	if len(state) != 5:
		raise ValueError("State must consist of exactly five words")
	if len(schedule) != SCHEDULE_LENGTH:
		raise ValueError("Message schedule must consist of exactly 80 words")

	a, b, c, d, e = state

	for t in range(SCHEDULE_LENGTH):
		f = _ROUND_FUNCTIONS[t // 20](b, c, d)
		k = ROUND_CONSTANTS[t // 20]

		temp = (left_rotate(a, 5) + f + e + k + schedule[t]) & WORD_MASK
		e = d
		d = c
		c = left_rotate(b, 30)
		b = a
		a = temp

	return (
		(state[0] + a) & WORD_MASK,
		(state[1] + b) & WORD_MASK,
		(state[2] + c) & WORD_MASK,
		(state[3] + d) & WORD_MASK,
		(state[4] + e) & WORD_MASK,
	)


def words_to_bytes(words: Iterable[int]) -> bytes:
	return b"".join(word.to_bytes(4, "big") for word in words)


def sha1_words(data: BufferLike) -> State:
	"""Return the SHA-1 digest for ``data`` as five big-endian 32-bit words."""
	padded = pad(data)

	state = INITIAL_STATE
	for offset in range(0, len(padded), BLOCK_SIZE):
		block = padded[offset : offset + BLOCK_SIZE]
		state = compress(state, expand_schedule(block))

	return state


class SHA1:
	"""Single-shot SHA-1 result with a hashlib-like read interface.

	The digest is computed once, when the object is created; there is no
	``update``.
	"""

	name: str = "sha1"
	block_size: int = BLOCK_SIZE
	digest_size: int = DIGEST_SIZE

	def __init__(self, data: BufferLike = b""):
		self._words = sha1_words(data)

	@property
	def words(self) -> State:
		return self._words

	def digest(self) -> bytes:
		return words_to_bytes(self._words)

	def hexdigest(self) -> str:
		return self.digest().hex()

	def __repr__(self) -> str:
		return f"<SHA1 {self.hexdigest()}>"

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, SHA1):
			return NotImplemented
		return self._words == other._words

	def __hash__(self) -> int:
		return hash(self._words)

	@classmethod
	def hash(cls, data: BufferLike) -> bytes:
		"""Return the SHA-1 digest for ``data`` as raw bytes."""
		return cls(data).digest()

	@classmethod
	def hexdigest_from(cls, data: BufferLike) -> str:
		"""Return the SHA-1 digest for ``data`` as a hex string."""
		return cls(data).hexdigest()


def sha1(data: BufferLike) -> bytes:
	return SHA1.hash(data)


def sha1_hex(data: BufferLike) -> str:
	return SHA1.hexdigest_from(data)


def sha1_text(text: str, encoding: str = "utf-8") -> str:
	data = text.encode(encoding)
	return SHA1(data).hexdigest()
