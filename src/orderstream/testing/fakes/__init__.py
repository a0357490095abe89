"""Testing fakes – in-memory doubles for kernel ports."""
from orderstream.kernel.time import FrozenClock
from orderstream.testing.fakes.channel_registry import InMemoryChannelRegistry, PublishCall
from orderstream.testing.fakes.clock import FAKE_NOW, FakeClock

__all__ = ["FAKE_NOW", "FakeClock", "FrozenClock", "InMemoryChannelRegistry", "PublishCall"]
