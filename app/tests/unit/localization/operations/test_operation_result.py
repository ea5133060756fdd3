"""Unit tests for OperationResult and OperationStatus."""

import pytest

from localization.operations import OperationResult, OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    def test_operation_status_success(self):
        assert OperationStatus.SUCCESS.value == "success"

    def test_operation_status_transient_error(self):
        assert OperationStatus.TRANSIENT_ERROR.value == "transient_error"

    def test_operation_status_permanent_error(self):
        assert OperationStatus.PERMANENT_ERROR.value == "permanent_error"


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()
        assert result.status == OperationStatus.SUCCESS
        assert result.message == "ok"
        assert result.is_success

    def test_success_factory_with_data(self):
        data = {"greeting": "Hi"}
        result = OperationResult.success(data=data, message="Namespace loaded")
        assert result.data == data
        assert result.message == "Namespace loaded"

    def test_error_factory_with_error_code(self):
        result = OperationResult.error(
            OperationStatus.PERMANENT_ERROR, "Bad config", error_code="invalid"
        )
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "invalid"
        assert not result.is_success

    def test_transient_error(self):
        result = OperationResult.transient_error(
            "Resolver failed", error_code="namespace_load_failed"
        )
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "namespace_load_failed"
        assert result.data is None

    def test_permanent_error(self):
        result = OperationResult.permanent_error("Nope")
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code is None


@pytest.mark.unit
class TestOperationResultHelpers:
    def test_from_exception(self):
        result = OperationResult.from_exception(
            RuntimeError("boom"),
            error_code="namespace_load_failed",
            message='Namespace "common" failed to load',
        )
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.message == 'Namespace "common" failed to load: boom'
        assert result.error_code == "namespace_load_failed"

    def test_from_exception_without_message(self):
        result = OperationResult.from_exception(ValueError("bad"), error_code="x")
        assert result.message == "bad"

    def test_is_retryable(self):
        assert OperationResult.transient_error("later").is_retryable
        assert not OperationResult.permanent_error("never").is_retryable
        assert not OperationResult.success().is_retryable
