"""Seeding helpers for reproducible grid generation.

Usage:
    # Auto-generate seed if not provided
    seed = ensure_seed(user_seed)

    # Create a seeded numpy RNG for the generator
    rng = get_rng(seed)
"""

import secrets

import numpy as np

# Exclusive upper bound for generated seeds
MAX_SEED = 2**32


def generate_seed() -> int:
    """Generate a cryptographically random seed.

    Returns
    -------
        A random integer in [0, 2^32)
    """
    return secrets.randbelow(MAX_SEED)


def ensure_seed(seed: int | None = None) -> int:
    """Ensure a seed is available, generating one if not provided.

    Args:
        seed: User-provided seed, or None to auto-generate

    Returns
    -------
        The provided seed or a newly generated one
    """
    if seed is not None:
        return seed
    return generate_seed()


def get_rng(seed: int) -> np.random.Generator:
    """Create a seeded numpy random number generator.

    Args:
        seed: Seed for the generator

    Returns
    -------
        A numpy Generator instance
    """
    return np.random.default_rng(seed)
