"""Decoding – helpers for predicates and encoders."""
from evtstream.decoding.decoders import (
    DEFAULT_DATA_FIELD,
    data_predicate,
    decoder,
    field,
    name_predicate,
)

__all__ = [
    "DEFAULT_DATA_FIELD",
    "data_predicate",
    "decoder",
    "field",
    "name_predicate",
]
