"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def small_expressions() -> list[str]:
    """Typical short calculator inputs."""
    return [
        "1+2",
        "(1-2)*3/4",
        "  34+ 6 + 99 ",
        "((12 * 3) - (4 / 2)) + 1000",
        "width * height / 2",
    ]


@pytest.fixture
def large_expression() -> str:
    """Generate a long expression (~100KB)."""
    terms = [f"({i} + x{'y' * (i % 5)}) * {i * 7}" for i in range(4000)]
    return " - ".join(terms)
