"""Pytest configuration and fixtures for wsprcodex tests.

This module provides shared fixtures and configuration for the test suite.
"""

import random

import pytest

# Fixed seed for reproducible tests
# This ensures default message IDs and random payloads are the
# same across test runs
RANDOM_SEED = 42


@pytest.fixture(autouse=True)
def seed_random():
    """Seed the random number generator for reproducible tests.

    This fixture runs automatically before each test so the codec's
    default message IDs, which come from the process-wide random
    module, are deterministic.
    """
    random.seed(RANDOM_SEED)
    yield


def random_payload(length: int) -> bytes:
    """Random payload of ``length`` bytes whose last byte is never zero."""
    body = bytes(random.randrange(256) for _ in range(length - 1))
    return body + bytes([random.randrange(1, 256)])


@pytest.fixture
def make_payload():
    """Factory for random payloads that survive trailing-zero trimming."""
    return random_payload
