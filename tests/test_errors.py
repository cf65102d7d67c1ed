import pytest

from pixelite.errors import (
    AmbiguousLengthError,
    DecodeError,
    ErrorCode,
    FileReadError,
    InvalidInputTypeError,
    InvalidLengthError,
    NetworkError,
    PixeliteError,
    UnsupportedSourceError,
)


@pytest.mark.parametrize(
    "cls,code",
    [
        (DecodeError, ErrorCode.DECODE_FAILED),
        (InvalidLengthError, ErrorCode.INVALID_LENGTH),
        (AmbiguousLengthError, ErrorCode.AMBIGUOUS_LENGTH),
        (NetworkError, ErrorCode.NETWORK_ERROR),
        (FileReadError, ErrorCode.FILE_READ_FAILED),
        (UnsupportedSourceError, ErrorCode.UNSUPPORTED_SOURCE),
    ],
)
def test_error_codes(cls, code):
    err = cls("boom")
    assert isinstance(err, PixeliteError)
    assert err.code is code
    assert err.message == "boom"
    assert dict(err.details) == {}
    assert err.cause is None


def test_length_errors_are_decode_failures():
    assert issubclass(AmbiguousLengthError, InvalidLengthError)
    assert issubclass(InvalidLengthError, DecodeError)


def test_details_are_read_only_and_copied():
    source = {"url": "http://example.com/a.png"}
    err = NetworkError("fetch failed", source)
    source["url"] = "changed"

    assert err.details["url"] == "http://example.com/a.png"
    with pytest.raises(TypeError):
        err.details["url"] = "x"  # type: ignore[index]


def test_cause_is_chained():
    original = OSError("disk gone")
    err = FileReadError("read failed", {"path": "/x"}, cause=original)
    assert err.cause is original
    assert err.__cause__ is original


def test_to_dict():
    err = UnsupportedSourceError("nope", {"received_type": "object"})
    assert err.to_dict() == {
        "code": "UNSUPPORTED_SOURCE",
        "message": "nope",
        "details": {"received_type": "object"},
    }


def test_invalid_input_type_is_a_type_error_outside_taxonomy():
    err = InvalidInputTypeError("bad", environment="server", received_type="Image")
    assert isinstance(err, TypeError)
    assert not isinstance(err, PixeliteError)
    assert err.environment == "server"
    assert err.received_type == "Image"
