"""
Round-trip verification of the packed normal codec.

Each test vector is packed, unpacked and compared against the original
within a per-component tolerance. Failures are counted, never raised.
"""

import logging
import numpy as np
from typing import Any, Dict, Sequence

from normals.comparison import vector_equals
from normals.constants import DEFAULT_EPSILON
from normals.packed_normal import NormalPacker, from_bytes, pack, unpack
from .vectors import default_test_vectors

logger = logging.getLogger(__name__)


def format_vector(vector: Sequence[float]) -> str:
    """Format a vector as ``[ x y z ]``."""
    return "[ " + " ".join(f"{float(c):g}" for c in vector) + " ]"


def check_round_trip(normal: Sequence[float], epsilon: float = DEFAULT_EPSILON) -> Dict[str, Any]:
    """
    Pack and unpack a single normal and compare the result.

    Args:
        normal: Unit vector to check
        epsilon: Per-component tolerance

    Returns:
        Dictionary with the input, packed word, output and pass flag
    """
    original = tuple(float(c) for c in normal)
    packed = pack(original)
    decoded = unpack(packed)
    passed = vector_equals(original, decoded, epsilon)

    line = f"{format_vector(original)} --> {packed} --> {format_vector(decoded)}"
    if passed:
        logger.info(f"SUCCESS: {line}")
    else:
        logger.warning(f">>> FAIL: {line}")

    return {
        "input": original,
        "packed": packed,
        "output": tuple(decoded),
        "passed": passed,
    }


def check_wire_format(vectors: np.ndarray, words: Sequence[int], packer: NormalPacker) -> int:
    """
    Check that batch packing through the wire format reproduces per-vector words.

    Args:
        vectors: Array of shape (N, 3)
        words: Words produced by ``pack`` for the same vectors
        packer: Packer carrying the wire byte order

    Returns:
        Number of vectors whose wire round trip disagrees
    """
    expected = np.asarray(words, dtype=np.uint32)
    data = packer.encode_bytes(vectors)
    received = from_bytes(data, packer.byteorder)
    mismatches = int(np.count_nonzero(received != expected))
    if mismatches:
        logger.error(f">>> FAIL: {mismatches} vectors changed through the {packer.byteorder}-endian wire format")
    else:
        logger.info(f"Wire format: {len(data)} bytes for {len(expected)} normals ({packer.byteorder}-endian)")
    return mismatches


def run_verification(config: Dict) -> Dict[str, Any]:
    """
    Run the round-trip check over the default test vectors.

    Args:
        config: Configuration dictionary; reads the ``verification`` section

    Returns:
        Summary with the number of cases, the number of errors and the
        per-case results
    """
    verification_config = config.get("verification", {}) or {}
    epsilon = verification_config.get("epsilon", DEFAULT_EPSILON)
    random_tests = verification_config.get("random_tests", 100)
    seed = verification_config.get("seed")

    if epsilon <= 0:
        raise ValueError("epsilon must be positive")
    if random_tests < 0:
        raise ValueError("random_tests must be non-negative")

    logger.info(f"Running verification with epsilon={epsilon}, random_tests={random_tests}, seed={seed}")
    vectors = default_test_vectors(random_tests, seed)
    results = [check_round_trip(vector, epsilon) for vector in vectors]
    errors = sum(1 for result in results if not result["passed"])
    errors += check_wire_format(vectors, [r["packed"] for r in results], NormalPacker.from_config(config))

    logger.info(f"Errors: {errors}")
    return {
        "total": len(results),
        "errors": errors,
        "epsilon": epsilon,
        "results": results,
    }
