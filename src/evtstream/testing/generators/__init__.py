"""Testing generators – property-based testing strategies."""
from evtstream.testing.generators.strategies import event_name_strategy, incoming_event_strategy

__all__ = ["event_name_strategy", "incoming_event_strategy"]
