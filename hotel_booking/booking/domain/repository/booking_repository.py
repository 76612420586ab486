from abc import abstractmethod

from hotel_booking.booking.domain.entity.booking import Booking
from hotel_booking.shared.domain import Repository


class BookingRepository(Repository[Booking, int]):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全予約を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: int) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def add(self, booking: Booking) -> None:
        """予約を追加する（ID が 0 の場合は採番する）"""
        raise NotImplementedError
