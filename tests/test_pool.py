"""Tests for BufferPool rental and release."""

import logging

import pytest

from stringseq.errors import BufferReleasedError
from stringseq.pool import BufferPool, get_shared_pool
from stringseq.stringbuilder import StringBuilder


class TestRent:
    """Rentals release on every exit path."""

    def test_rent_yields_live_builder(self) -> None:
        pool = BufferPool()
        with pool.rent(64) as sb:
            assert isinstance(sb, StringBuilder)
            assert not sb.released
            assert sb.capacity >= 64

    def test_released_on_normal_exit(self) -> None:
        pool = BufferPool()
        with pool.rent(64) as sb:
            sb.append("x")
        assert sb.released
        assert pool.available == 1

    def test_released_on_error(self) -> None:
        pool = BufferPool()
        with pytest.raises(ValueError), pool.rent(64) as sb:
            sb.append("partial")
            raise ValueError("boom")
        assert sb.released
        assert pool.available == 1

    def test_explicit_release_inside_block_not_repeated(self) -> None:
        pool = BufferPool()
        with pool.rent(64) as sb:
            sb.append("x")
            assert sb.to_string_and_release() == "x"
        assert pool.available == 1

    def test_reused_storage_is_empty(self) -> None:
        pool = BufferPool()
        with pool.rent(16) as sb:
            sb.append("leftover")
        with pool.rent(16) as again:
            assert again is not sb
            assert len(again) == 0
            assert again.build() == ""
        assert pool.stats()["reused"] == 1

    def test_reused_builder_keeps_larger_capacity(self) -> None:
        pool = BufferPool()
        with pool.rent(16) as sb:
            sb.append("x" * 1000)
        with pool.rent(16) as again:
            assert again.capacity >= 1000


class TestRetention:
    """What the pool keeps."""

    def test_max_retained(self) -> None:
        pool = BufferPool(max_retained=2)
        builders = [pool.acquire(16) for _ in range(3)]
        for sb in builders:
            sb.release()
        stats = pool.stats()
        assert stats["available"] == 2
        assert stats["dropped"] == 1

    def test_oversized_builder_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        pool = BufferPool(max_retained_capacity=64)
        with caplog.at_level(logging.DEBUG, logger="stringseq.pool"), pool.rent(16) as sb:
            sb.append("x" * 100)
        assert pool.available == 0
        assert pool.stats()["dropped"] == 1
        assert "Dropping builder" in caplog.text

    def test_stats_counts(self) -> None:
        pool = BufferPool()
        with pool.rent(16):
            pass
        with pool.rent(16):
            pass
        stats = pool.stats()
        assert stats["rented"] == 2
        assert stats["created"] == 1
        assert stats["reused"] == 1

    def test_clear(self) -> None:
        pool = BufferPool()
        with pool.rent(16):
            pass
        pool.clear()
        assert pool.available == 0


def test_shared_pool_is_singleton() -> None:
    assert get_shared_pool() is get_shared_pool()
    assert isinstance(get_shared_pool(), BufferPool)


class TestRentalOwnership:
    """A released builder never affects whoever rents the storage next."""

    def test_exit_after_early_release_leaves_next_renter_live(self) -> None:
        pool = BufferPool()
        with pool.rent(16) as sb:
            assert sb.to_string_and_release() == ""
            other = pool.acquire(16)
        assert not other.released
        other.append("still mine")
        assert other.to_string_and_release() == "still mine"
        assert pool.available == 1

    def test_stale_handle_cannot_write_into_next_rental(self) -> None:
        pool = BufferPool()
        with pool.rent(16) as sb:
            sb.append("first")
        with pool.rent(16) as again:
            again.append("second")
            with pytest.raises(BufferReleasedError):
                sb.append("stale")
            with pytest.raises(BufferReleasedError):
                sb.release()
            assert again.build() == "second"

    def test_storage_returned_once_per_rental(self) -> None:
        pool = BufferPool()
        with pool.rent(16) as sb:
            sb.to_string_and_release()
        with pool.rent(16):
            pass
        assert pool.available == 1
        assert pool.stats()["dropped"] == 0
