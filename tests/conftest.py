"""Shared fixtures: substitute terminals and captured output streams."""

import io

import pytest

from termprogress.config import reset_config
from termprogress.terminal import CapabilityResolver, StaticCapabilitySource

GREEN = "\x1b[32m"

BASIC_STRINGS = {
    'el': '<CE>',
    'cuu1': '<UP>',
    'cr': '<BOL>',
}


class FlushCountingStream(io.StringIO):
    """StringIO that counts flush() calls."""

    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


def make_source(width=80, height=24, xn=True, strings=None):
    numbers = {}
    if width is not None:
        numbers['cols'] = width
    if height is not None:
        numbers['lines'] = height
    return StaticCapabilitySource(
        numbers=numbers,
        flags={'xenl': xn},
        strings=BASIC_STRINGS if strings is None else strings,
    )


@pytest.fixture(autouse=True)
def _default_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def stream():
    return FlushCountingStream()


@pytest.fixture
def make_resolver():
    """Factory for resolvers over a StaticCapabilitySource; closed on teardown."""
    created = []

    def factory(**kwargs):
        resolver = CapabilityResolver(source=make_source(**kwargs))
        created.append(resolver)
        return resolver

    yield factory

    for resolver in created:
        resolver.close()
