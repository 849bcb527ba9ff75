BLOCK_SIZE = 64
DIGEST_SIZE = 20
WORD_MASK = 0xFFFFFFFF
SCHEDULE_LENGTH = 80

# largest input whose bit length still fits the 64-bit length trailer
MAX_MESSAGE_LENGTH = (1 << 61) - 1

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)

State = tuple[int, int, int, int, int]
