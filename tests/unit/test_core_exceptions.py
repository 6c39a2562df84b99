"""Unit tests for the yap error type."""

import errno

import pytest
import yaml
from yap.core.exceptions import ErrorKind, YapError


def test_password_not_found_message():
    err = YapError(ErrorKind.PASSWORD_NOT_FOUND, "github")
    assert str(err) == "Key named github not found in this vault"
    assert err.kind is ErrorKind.PASSWORD_NOT_FOUND
    assert err.detail == "github"


def test_bad_config_key_message():
    assert str(YapError(ErrorKind.BAD_CONFIG_KEY, "colour")) == "Config key colour does not exist"


@pytest.mark.parametrize(
    "kind, crypto",
    [
        (ErrorKind.ENTROPY_FAILURE, True),
        (ErrorKind.AUTHENTICATION_FAILURE, True),
        (ErrorKind.MALFORMED_INPUT, False),
        (ErrorKind.IO, False),
        (ErrorKind.PASSWORD_NOT_FOUND, False),
    ],
)
def test_is_crypto(kind, crypto):
    assert YapError(kind).is_crypto is crypto


def test_every_kind_renders_a_message():
    for kind in ErrorKind:
        assert str(YapError(kind, "x"))


def test_from_os_error():
    exc = FileNotFoundError(errno.ENOENT, "No such file or directory", "/nope")
    err = YapError.from_os_error(exc)
    assert err.kind is ErrorKind.IO
    assert str(err).startswith("IO Error:")
    assert "/nope" in str(err)


def test_from_yaml_error():
    with pytest.raises(yaml.YAMLError) as exc_info:
        yaml.safe_load("key: [unclosed")
    err = YapError.from_yaml_error(exc_info.value)
    assert err.kind is ErrorKind.SERIALIZATION


def test_from_unicode_error():
    with pytest.raises(UnicodeDecodeError) as exc_info:
        b"\xff".decode("utf-8")
    err = YapError.from_unicode_error(exc_info.value)
    assert err.kind is ErrorKind.UTF8


def test_repr_names_kind():
    assert repr(YapError(ErrorKind.INVALID_NAME, "../x")) == "YapError(INVALID_NAME, '../x')"
