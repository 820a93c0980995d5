"""Unit tests for run_with_retry."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from commenttree.config import RetrySettings
from commenttree.domain.error import TransientStorageError
from commenttree.persistence.retry import run_with_retry

# No sleeping between attempts
POLICY = RetrySettings(attempts=3, initial_delay=0, max_delay=0)


def _transient() -> OperationalError:
    return OperationalError("SELECT 1", {}, ConnectionResetError("reset"))


class Flaky:
    """Operation failing with the given errors before succeeding."""

    def __init__(self, *errors: Exception) -> None:
        self.errors = list(errors)
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.errors:
            raise self.errors.pop(0)
        return "ok"


class TestRunWithRetry:
    """Tests for run_with_retry function."""

    @pytest.mark.asyncio
    async def test_success_first_try(self):
        operation = Flaky()

        assert await run_with_retry(operation, POLICY, "op") == "ok"
        assert operation.calls == 1

    @pytest.mark.asyncio
    async def test_recovers_from_transient_errors(self):
        """Transient failures are retried and cleanup runs after each one."""
        operation = Flaky(_transient(), _transient())
        rollbacks = []

        async def rollback() -> None:
            rollbacks.append(True)

        result = await run_with_retry(operation, POLICY, "op", on_failure=rollback)

        assert result == "ok"
        assert operation.calls == 3
        assert len(rollbacks) == 2

    @pytest.mark.asyncio
    async def test_succeeds_on_final_attempt(self):
        """The last allowed attempt still returns its result."""
        operation = Flaky(_transient(), _transient())

        assert await run_with_retry(operation, POLICY, "op") == "ok"
        assert operation.calls == POLICY.attempts

    @pytest.mark.asyncio
    async def test_gives_up_after_attempts(self):
        """Exhausted retries surface as TransientStorageError."""
        operation = Flaky(_transient(), _transient(), _transient())

        with pytest.raises(TransientStorageError) as exc_info:
            await run_with_retry(operation, POLICY, "find_by_id")

        assert exc_info.value.operation == "find_by_id"
        assert exc_info.value.attempts == 3
        assert isinstance(exc_info.value.__cause__, OperationalError)
        assert operation.calls == 3

    @pytest.mark.asyncio
    async def test_non_transient_errors_are_not_retried(self):
        """Integrity errors propagate on the first failure."""
        error = IntegrityError("INSERT", {}, Exception("fk"))
        operation = Flaky(error)

        with pytest.raises(IntegrityError):
            await run_with_retry(operation, POLICY, "insert")

        assert operation.calls == 1
