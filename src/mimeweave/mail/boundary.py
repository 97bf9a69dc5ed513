"""Multipart boundary generation.

The outer boundary is a hex digest of a time-based seed. The inner
(multipart/alternative) boundary is the outer one with a fixed prefix, so
both are always distinct without extra randomness.
"""

from __future__ import annotations

import hashlib
import itertools
import time

from mimeweave.mail.exceptions import MailConfigurationError

DEFAULT_BOUNDARY_PREFIX = "bounds"
DEFAULT_BOUNDARY_ALGORITHM = "sha256"
ALTERNATIVE_PREFIX = "sub_"

# Distinguishes messages created within the same clock tick.
_sequence = itertools.count()


def validate_algorithm(algorithm: str) -> str:
    """Return ``algorithm`` if hashlib provides it with a fixed-length digest.

    Raises:
        MailConfigurationError: If the algorithm is unknown or is a
            variable-length (SHAKE) function.
    """
    if algorithm not in hashlib.algorithms_available or algorithm.startswith("shake_"):
        raise MailConfigurationError(f"Unsupported boundary hash algorithm '{algorithm}'")
    return algorithm


def generate_boundary(
    prefix: str = DEFAULT_BOUNDARY_PREFIX,
    algorithm: str = DEFAULT_BOUNDARY_ALGORITHM,
) -> str:
    """Return a fresh hex boundary token.

    Args:
        prefix: Fixed text mixed into the seed.
        algorithm: Any :mod:`hashlib` algorithm with a fixed-length digest.

    Returns:
        Hex-encoded digest of ``"<prefix> <time_ns> <sequence>"``.

    Raises:
        MailConfigurationError: If the algorithm is unknown.

    Examples:
        >>> len(generate_boundary())
        64
        >>> generate_boundary() != generate_boundary()
        True
    """
    validate_algorithm(algorithm)
    seed = f"{prefix} {time.time_ns()} {next(_sequence)}"
    return hashlib.new(algorithm, seed.encode("utf-8")).hexdigest()


def alternative_boundary(boundary: str) -> str:
    """Return the multipart/alternative boundary derived from ``boundary``."""
    return ALTERNATIVE_PREFIX + boundary


__all__ = [
    "ALTERNATIVE_PREFIX",
    "DEFAULT_BOUNDARY_ALGORITHM",
    "DEFAULT_BOUNDARY_PREFIX",
    "alternative_boundary",
    "generate_boundary",
    "validate_algorithm",
]
