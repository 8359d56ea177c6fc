"""Unit tests for the stream error hierarchy and error_to_string."""

from __future__ import annotations

import json

import pytest

from evtstream import StreamEngine
from evtstream.kernel.errors import (
    BaseError,
    DecodeError,
    RegistrationError,
    StreamError,
    TriggerError,
    UnknownEventError,
    error_to_string,
)


def _engine() -> StreamEngine:
    return StreamEngine.create({})


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]
        assert isinstance(err.__cause__, ValueError)

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed == {"code": "oops", "message": "oops", "detail": {"x": 1}}


class TestStreamErrors:
    @pytest.mark.parametrize(
        "error, code",
        [
            (StreamError("s"), "stream_error"),
            (UnknownEventError("Ghost"), "unknown_event"),
            (DecodeError("bad"), "decode_error"),
            (RegistrationError("r"), "invalid_registration"),
        ],
    )
    def test_codes(self, error: StreamError, code: str) -> None:
        assert error.code == code
        assert isinstance(error, StreamError)

    def test_unknown_event_carries_name(self) -> None:
        err = UnknownEventError("Ghost")
        assert err.name == "Ghost"
        assert err.detail == {"event_name": "Ghost"}

    def test_trigger_error_is_decode_error(self) -> None:
        err = TriggerError("Click", "bad x", engine=_engine())
        assert isinstance(err, DecodeError)
        assert err.code == "trigger_failed"
        assert err.to_dict()["detail"] == {"matcher": "Click"}

    def test_trigger_error_wrap_keeps_cause(self) -> None:
        original = DecodeError("bad x")
        engine = _engine()
        err = TriggerError.wrap("Click", original, engine)
        assert err.details == "bad x"
        assert err.cause is original
        assert err.engine is engine

    def test_trigger_error_wrap_foreign_exception(self) -> None:
        err = TriggerError.wrap("Click", RuntimeError("kaput"), _engine())
        assert err.details == "kaput"


class TestErrorToString:
    def test_unknown_event(self) -> None:
        assert error_to_string(UnknownEventError("Ghost")) == "Unknown event: Ghost"

    def test_decode_error(self) -> None:
        assert error_to_string(DecodeError("missing x")) == "Decode error: missing x"

    def test_trigger_error(self) -> None:
        err = TriggerError("Click", "missing x", engine=_engine())
        assert error_to_string(err) == "Trigger 'Click' failed: missing x"

    def test_other_base_error_uses_message(self) -> None:
        assert error_to_string(RegistrationError("bad registration")) == "bad registration"

    def test_plain_exception(self) -> None:
        assert error_to_string(ValueError("v")) == "v"

    def test_empty_message_falls_back_to_type_name(self) -> None:
        assert error_to_string(KeyError()) == "KeyError"

    def test_broken_str_never_raises(self) -> None:
        class Broken(Exception):
            def __str__(self) -> str:
                raise RuntimeError("no")

        assert error_to_string(Broken()) == "Broken"
