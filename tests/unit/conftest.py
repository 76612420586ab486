from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

from hotel_booking.booking.domain.entity import Booking, Room
from hotel_booking.booking.domain.service import BookingManager
from hotel_booking.booking.infrastructure import (
    InMemoryBookingRepository,
    InMemoryRoomRepository,
)

TODAY = date(2024, 1, 1)


def days_from_today(days: int) -> date:
    return TODAY + timedelta(days=days)


@pytest.fixture
def today():
    """全テスト共通の「今日」"""
    return TODAY


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def make_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        start: int | None = 1,
        end: int | None = 2,
        is_active: bool = True,
        customer_id: int = 1,
        room_id: int = 0,
        booking_id: int = 0,
    ) -> Booking:
        return Booking(
            id=booking_id,
            start_date=days_from_today(start) if start is not None else None,
            end_date=days_from_today(end) if end is not None else None,
            is_active=is_active,
            customer_id=customer_id,
            room_id=room_id,
        )

    return _factory


@pytest.fixture
def room_repository():
    """2部屋の客室カタログ"""
    return InMemoryRoomRepository(
        [Room(id=1, description="A"), Room(id=2, description="B")]
    )


@pytest.fixture
def booking_repository(make_booking):
    """両室とも today+10 〜 today+20 が予約済み"""
    return InMemoryBookingRepository(
        [
            make_booking(start=10, end=20, customer_id=1, room_id=1, booking_id=1),
            make_booking(start=10, end=20, customer_id=2, room_id=2, booking_id=2),
        ]
    )


@pytest.fixture
def booking_manager(booking_repository, room_repository, today):
    return BookingManager(
        booking_repository=booking_repository,
        room_repository=room_repository,
        today=lambda: today,
    )
