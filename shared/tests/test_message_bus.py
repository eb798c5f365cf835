from dataclasses import dataclass

from shared.application.message_bus import MessageBus
from shared.domain.base import DomainEvent


@dataclass
class SomethingHappened(DomainEvent):
    value: int


def test_every_handler_receives_the_event():
    bus = MessageBus()
    seen = []
    bus.register_event_handler(SomethingHappened, lambda e: seen.append(("a", e.value)))
    bus.register_event_handler(SomethingHappened, lambda e: seen.append(("b", e.value)))

    bus.publish_events([SomethingHappened(value=3)])

    assert seen == [("a", 3), ("b", 3)]


def test_failing_handler_does_not_stop_others():
    bus = MessageBus()
    seen = []

    def broken(event):
        raise RuntimeError("mail server down")

    bus.register_event_handler(SomethingHappened, broken)
    bus.register_event_handler(SomethingHappened, lambda e: seen.append(e.value))

    bus.publish_events([SomethingHappened(value=1), SomethingHappened(value=2)])

    assert seen == [1, 2]


def test_duplicate_registration_is_ignored():
    bus = MessageBus()

    def handler(event):
        pass

    bus.register_event_handler(SomethingHappened, handler)
    bus.register_event_handler(SomethingHappened, handler)

    assert bus.handlers_for(SomethingHappened) == [handler]


def test_event_serialization():
    event = SomethingHappened(value=5)
    data = event.to_dict()
    assert data["event_type"] == "SomethingHappened"
    assert data["aggregate_id"] is None
