"""Tests for the failure taxonomy and translate_failures."""

import logging

import pytest

from zurichat.core.failures import (
    AuthFailure,
    Failure,
    InputFailure,
    NetworkFailure,
    RateLimitFailure,
    ServerFailure,
    UnknownFailure,
    translate_failures,
)


class TestFailures:
    """Failure attributes and string forms."""

    def test_str_with_status_code(self):
        failure = InputFailure("name is required", status_code=422)

        assert str(failure) == "InputFailure (422): name is required"
        assert failure.status_code == 422

    def test_str_without_status_code(self):
        assert str(NetworkFailure()) == "NetworkFailure: Unable to reach the server"

    def test_defaults(self):
        assert AuthFailure().status_code == 401
        assert ServerFailure().status_code == 500
        assert RateLimitFailure(retry_after=3).retry_after == 3

    def test_unknown_failure_carries_message(self):
        failure = UnknownFailure(error_message="'NoneType' object is not subscriptable")

        assert isinstance(failure, Failure)
        assert failure.error_message == "'NoneType' object is not subscriptable"
        assert failure.message == failure.error_message
        assert failure.status_code is None


class TestTranslateFailures:
    """The translate_failures decorator."""

    @pytest.mark.asyncio
    async def test_result_passes_through(self):
        @translate_failures("echo")
        async def echo(value):
            return value

        assert await echo("org-1") == "org-1"

    @pytest.mark.asyncio
    async def test_failure_is_reraised_unchanged(self):
        failure = AuthFailure("token expired")

        @translate_failures("fetch")
        async def fetch():
            raise failure

        with pytest.raises(AuthFailure) as exc_info:
            await fetch()

        assert exc_info.value is failure

    @pytest.mark.asyncio
    async def test_other_exception_is_wrapped(self):
        @translate_failures("fetch")
        async def fetch():
            raise ValueError("bad payload")

        with pytest.raises(UnknownFailure) as exc_info:
            await fetch()

        assert exc_info.value.error_message == "bad payload"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_wraps_preserves_name(self):
        @translate_failures("fetch")
        async def fetch_organization_info():
            """Docstring."""

        assert fetch_organization_info.__name__ == "fetch_organization_info"
        assert fetch_organization_info.__doc__ == "Docstring."


class TestFailureLogging:
    """Log records written by translate_failures."""

    @pytest.mark.asyncio
    async def test_unexpected_error_logged_with_traceback(self, caplog):
        @translate_failures("fetch_organization_info")
        async def fetch():
            raise KeyError("_id")

        with caplog.at_level(logging.INFO, logger="zurichat"):
            with pytest.raises(UnknownFailure):
                await fetch()

        [record] = caplog.records
        assert record.levelno == logging.ERROR
        assert record.getMessage() == "Unexpected error in fetch_organization_info"
        assert record.exc_info[0] is KeyError
        assert record.operation == "fetch_organization_info"
        assert record.error_type == "KeyError"
        assert record.file.rsplit(":", 1)[0].endswith("failures.py")

    @pytest.mark.asyncio
    async def test_recognized_failure_logged_as_warning(self, caplog):
        @translate_failures("join_organization")
        async def join():
            raise AuthFailure("token expired")

        with caplog.at_level(logging.INFO, logger="zurichat"):
            with pytest.raises(AuthFailure):
                await join()

        [record] = caplog.records
        assert record.levelno == logging.WARNING
        assert record.exc_info is None
        assert record.operation == "join_organization"
