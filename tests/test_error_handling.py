"""
Tests for error handling policies and adapter.
"""

import logging
import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treefind.aio import (
    AsyncFileSystemAdapter,
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
    DirectoryEntry,
    ErrorHandlingAdapter,
    FailFastPolicy,
    create_resilient_adapter,
)


class TestErrorPolicies:
    """Test individual error policy behaviors."""

    @pytest.mark.asyncio
    async def test_fail_fast_policy(self):
        """FailFastPolicy should re-raise any error."""
        policy = FailFastPolicy()

        with pytest.raises(PermissionError):
            await policy.handle(PermissionError("Access denied"), "list_entries", "/test")

        with pytest.raises(PermissionError):
            policy.handle_sync(PermissionError("Access denied"), "list_entries", "/test")

    @pytest.mark.asyncio
    async def test_continue_on_errors_policy(self, caplog):
        """ContinueOnErrorsPolicy should return an empty listing and log."""
        policy = ContinueOnErrorsPolicy()

        with caplog.at_level(logging.WARNING, logger="treefind"):
            result = await policy.handle(
                PermissionError("Access denied"), "list_entries", "/test"
            )

        assert result == []
        assert policy.skipped_paths == ["/test"]
        assert "Skipping inaccessible path '/test'" in caplog.text

    @pytest.mark.asyncio
    async def test_continue_on_errors_quiet(self, caplog):
        policy = ContinueOnErrorsPolicy(verbose=False)

        with caplog.at_level(logging.WARNING, logger="treefind"):
            await policy.handle(OSError("gone"), "list_entries", "/test")

        assert caplog.records == []
        assert len(policy.errors) == 1

    @pytest.mark.asyncio
    async def test_non_permission_errors_are_logged_with_method(self, caplog):
        policy = ContinueOnErrorsPolicy()

        with caplog.at_level(logging.WARNING, logger="treefind"):
            await policy.handle(NotADirectoryError("not a dir"), "list_entries", "/f")

        assert "Error in list_entries for '/f'" in caplog.text

    @pytest.mark.asyncio
    async def test_unknown_methods_default_to_none(self):
        policy = CollectErrorsPolicy()
        assert await policy.handle(ValueError("boom"), "get_stats", None) is None
        assert policy.skipped_paths == []

    @pytest.mark.asyncio
    async def test_collect_errors_policy(self):
        """CollectErrorsPolicy should collect all errors."""
        policy = CollectErrorsPolicy()

        await policy.handle(PermissionError("Access denied"), "list_entries", "/test1")
        policy.handle_sync(FileNotFoundError("missing"), "list_entries", Mock(path="/test2"))

        assert len(policy.errors) == 2
        assert policy.skipped_paths == ["/test1", "/test2"]

        stats = policy.get_statistics()
        assert stats['total_errors'] == 2
        assert stats['permission_errors'] == 1
        assert stats['os_errors'] == 2
        assert stats['skipped_paths'] == 2


class TestErrorHandlingAdapter:
    """Test the proxying adapter."""

    @pytest.mark.asyncio
    async def test_successful_calls_pass_through(self):
        base = Mock()
        base.list_entries = AsyncMock(return_value=[DirectoryEntry('a', False)])
        adapter = ErrorHandlingAdapter(base, FailFastPolicy())

        assert await adapter.list_entries("/x") == [DirectoryEntry('a', False)]
        base.list_entries.assert_awaited_once_with("/x")

    @pytest.mark.asyncio
    async def test_async_failure_goes_to_policy(self):
        base = Mock()
        base.list_entries = AsyncMock(side_effect=PermissionError("denied"))
        policy = CollectErrorsPolicy()
        adapter = ErrorHandlingAdapter(base, policy)

        assert await adapter.list_entries("/locked") == []
        assert policy.errors[0]['path'] == "/locked"
        assert policy.errors[0]['method'] == "list_entries"

    @pytest.mark.asyncio
    async def test_fail_fast_propagates(self, tmp_path):
        adapter = create_resilient_adapter(AsyncFileSystemAdapter(), strict=True)

        with pytest.raises(FileNotFoundError):
            await adapter.list_entries(str(tmp_path / "missing"))

    @pytest.mark.asyncio
    async def test_resilient_adapter_absorbs_real_failure(self, tmp_path):
        adapter = create_resilient_adapter(AsyncFileSystemAdapter(), verbose=False)

        assert await adapter.list_entries(str(tmp_path / "missing")) == []
        assert isinstance(adapter.get_policy(), ContinueOnErrorsPolicy)

    def test_sync_failure_goes_to_policy(self):
        base = Mock()
        base.list_entries = Mock(side_effect=OSError("sync failure"))
        adapter = ErrorHandlingAdapter(base, CollectErrorsPolicy())

        assert adapter.list_entries("/x") == []

    def test_attributes_pass_through(self):
        base = AsyncFileSystemAdapter(follow_symlinks=True)
        adapter = ErrorHandlingAdapter(base)

        assert adapter.follow_symlinks is True
        assert adapter.get_base_adapter() is base
        assert isinstance(adapter.get_policy(), ContinueOnErrorsPolicy)

    def test_set_policy(self):
        adapter = ErrorHandlingAdapter(AsyncFileSystemAdapter())
        policy = FailFastPolicy()
        adapter.set_policy(policy)
        assert adapter.get_policy() is policy
        assert "FailFastPolicy" in repr(adapter)

    @pytest.mark.asyncio
    async def test_context_manager_closes_base(self):
        base = AsyncFileSystemAdapter()
        base.close = AsyncMock()

        async with ErrorHandlingAdapter(base) as adapter:
            assert adapter.get_base_adapter() is base

        base.close.assert_awaited_once()
