from abc import abstractmethod

from hotel_booking.booking.domain.entity.room import Room
from hotel_booking.shared.domain import Repository


class RoomRepository(Repository[Room, int]):
    """客室レポジトリのインターフェース"""

    @abstractmethod
    def find_all(self) -> list[Room]:
        """全客室を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, room_id: int) -> Room | None:
        """客室IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def add(self, room: Room) -> None:
        """客室を追加する"""
        raise NotImplementedError
