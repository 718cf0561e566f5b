"""
Packed normal codec.

This package stores unit-length 3D direction vectors in a single 32-bit
word and reads them back:
- Mapping primitives between [-1, 1], [0, 1] and integer codes
- Encoder and decoder for single vectors and numpy batches
- Wire serialization with an explicit byte order
- Tolerance-based comparison for round-trip checks
"""

from .mapping import unsigned_normalize, signed_normalize, quantize_15, quantize_16
from .packed_normal import (
    Vector3,
    NormalPacker,
    pack,
    unpack,
    pack_array,
    unpack_array,
    to_bytes,
    from_bytes,
)
from .comparison import float_eq, vector_equals, vectors_close, round_trip_error

__all__ = [
    'unsigned_normalize',
    'signed_normalize',
    'quantize_15',
    'quantize_16',
    'Vector3',
    'NormalPacker',
    'pack',
    'unpack',
    'pack_array',
    'unpack_array',
    'to_bytes',
    'from_bytes',
    'float_eq',
    'vector_equals',
    'vectors_close',
    'round_trip_error',
]
