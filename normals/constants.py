"""
Bit layout and scaling constants for the packed normal format.

Word layout (32 bits, most significant first):
    bits 31-16: x, unsigned-normalized, 16 bits
    bits 15-1:  y, unsigned-normalized, 15 bits
    bit 0:      sign of z (1 = negative)
"""

WORD_BITS = 32
WORD_BYTES = 4
WORD_MASK = 0xFFFFFFFF

X_BITS = 16
Y_BITS = 15

X_SHIFT = 16
Y_SHIFT = 1

X_SCALE = (1 << X_BITS) - 1  # 65535
Y_SCALE = (1 << Y_BITS) - 1  # 32767

LOW_HALF_MASK = 0x0000FFFF
SIGN_MASK = 0x00000001

# Round-trip acceptance tolerance, per component
DEFAULT_EPSILON = 0.005

DEFAULT_BYTEORDER = "big"
BYTEORDERS = ("big", "little")
