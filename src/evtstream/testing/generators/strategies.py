"""Testing generators – Hypothesis strategies for incoming payloads.

Requires the ``hypothesis`` package (``pip install "evtstream[test]"``).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

_NAME_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def event_name_strategy() -> "SearchStrategy[str]":
    """Non-empty, letters-only event names such as ``"Click"``."""
    import hypothesis.strategies as st

    return st.text(alphabet=_NAME_ALPHABET, min_size=1, max_size=12)


def incoming_event_strategy(
    names: Sequence[str] | None = None,
    *,
    name_field: str = "eventName",
    data_field: str = "eventData",
) -> "SearchStrategy[dict[str, Any]]":
    """Well-formed incoming payloads.

    Event names are drawn from *names* when given, otherwise from
    :func:`event_name_strategy`. The data object maps short keys to small
    JSON scalars.

    Example::

        @given(incoming_event_strategy(["Click", "View"]))
        def test_submission_is_recorded(payload): ...
    """
    import hypothesis.strategies as st

    name_st = st.sampled_from(list(names)) if names else event_name_strategy()
    scalar_st = st.one_of(
        st.none(),
        st.booleans(),
        st.integers(min_value=-1000, max_value=1000),
        st.text(max_size=8),
    )
    data_st = st.dictionaries(st.text(alphabet="abcdefxyz", min_size=1, max_size=4), scalar_st, max_size=4)
    return st.builds(
        lambda name, data: {name_field: name, data_field: data},
        name_st,
        data_st,
    )


__all__ = ["event_name_strategy", "incoming_event_strategy"]
