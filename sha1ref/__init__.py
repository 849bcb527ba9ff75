from sha1ref.constants import BLOCK_SIZE, DIGEST_SIZE, INITIAL_STATE, MAX_MESSAGE_LENGTH
from sha1ref.sha import (
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

__all__ = [
	"BLOCK_SIZE",
	"DIGEST_SIZE",
	"INITIAL_STATE",
	"MAX_MESSAGE_LENGTH",
	"SHA1",
	"MessageTooLongError",
	"check_message_length",
	"compress",
	"expand_schedule",
	"left_rotate",
	"pad",
	"sha1",
	"sha1_hex",
	"sha1_text",
	"sha1_words",
	"words_to_bytes",
]
