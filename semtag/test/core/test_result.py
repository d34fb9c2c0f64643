"""Tests for semtag.core.result module."""

import pytest

from semtag.core.result import Err, Ok
from semtag.version.dialects import CANONICAL, GIT_PORCELAIN
from semtag.version.errors import IllegalVersionError
from semtag.version.model import Release


def test_ok_equality() -> None:
    assert Ok(Release(1, 0, 0)) == Ok(Release(1, 0, 0))
    assert Ok(Release(1, 0, 0)) != Err(Release(1, 0, 0))


def test_repr() -> None:
    assert repr(Ok("1.0.0")) == "Ok('1.0.0')"
    assert repr(Err("bad")) == "Err('bad')"


def test_frozen() -> None:
    result = Ok(1)
    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]


def test_matches_ok() -> None:
    match CANONICAL.parse_result("2.0.0"):
        case Ok(version):
            assert version == Release(2, 0, 0)
        case Err(error):
            pytest.fail(f"unexpected error: {error}")


def test_matches_err() -> None:
    match GIT_PORCELAIN.parse_result("2.0.0"):
        case Ok(version):
            pytest.fail(f"unexpected version: {version}")
        case Err(error):
            assert isinstance(error, IllegalVersionError)
