"""Mock providers for testing."""

from .mail import MockMailProvider
from .persistence import MockPersistenceProvider
from .realtime import MockRealtimeProvider
from .reputation import MockReputationProvider
from .container import build_test_container

__all__ = [
    "MockMailProvider",
    "MockPersistenceProvider",
    "MockRealtimeProvider",
    "MockReputationProvider",
    "build_test_container",
]
