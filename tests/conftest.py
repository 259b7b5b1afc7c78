"""Pytest fixtures shared across the test suite.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket
from pathlib import Path

import pytest

from neighbourhood_match.application.catalogue import load_catalogue
from neighbourhood_match.domain.neighbourhoods import CatalogueRecord
from neighbourhood_match.infrastructure import LocalFileSystem
from tests.fakes import InMemoryFileSystem
from tests.support.errors import NetworkIsolationError
from tests.support.neighbourhoods import REFERENCE_CATALOGUE_PATH

# =============================================================================
# Network Isolation - Block all socket connections in tests
# =============================================================================


def _blocked_socket_connect(self: socket.socket, *args: object, **kwargs: object) -> None:
    """Raise an error if any test tries to make a real network connection."""
    _ = (self, kwargs)
    raise NetworkIsolationError(str(args))


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch: pytest.MonkeyPatch) -> None:
    """Block all network access in tests."""
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)


@pytest.fixture
def in_memory_fs() -> InMemoryFileSystem:
    """Provide an in-memory filesystem for tests."""
    return InMemoryFileSystem()


@pytest.fixture(scope="session")
def reference_catalogue() -> tuple[CatalogueRecord, ...]:
    """The shipped eight-neighbourhood catalogue."""
    return load_catalogue(path=Path(REFERENCE_CATALOGUE_PATH), fs=LocalFileSystem())
