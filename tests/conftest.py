"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def shared_buffer() -> bytearray:
    """12-byte backing buffer holding the bytes 0..11."""
    return bytearray(range(12))


@pytest.fixture
def buffer_like() -> dict[str, Any]:
    """Buffer-like object as emitted by other serializers."""
    return {"type": "Buffer", "data": [0, 255, 16]}
