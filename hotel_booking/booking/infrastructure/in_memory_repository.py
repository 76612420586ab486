from hotel_booking.booking.domain.entity import Booking, Room
from hotel_booking.booking.domain.repository import BookingRepository, RoomRepository
from hotel_booking.shared.domain.exception import DuplicateResourceException


class InMemoryRoomRepository(RoomRepository):
    """メモリ上のリストを使用した RoomRepository の実装（テスト・ローカル用）"""

    def __init__(self, rooms: list[Room] | None = None) -> None:
        self._rooms: list[Room] = []
        for room in rooms or []:
            self.add(room)

    def find_all(self) -> list[Room]:
        return list(self._rooms)

    def find_by_id(self, room_id: int) -> Room | None:
        return next((room for room in self._rooms if room.id == room_id), None)

    def add(self, room: Room) -> None:
        if self.find_by_id(room.id) is not None:
            raise DuplicateResourceException(f"Room already exists: {room.id}")
        self._rooms.append(room)


class InMemoryBookingRepository(BookingRepository):
    """メモリ上のリストを使用した BookingRepository の実装（テスト・ローカル用）"""

    def __init__(self, bookings: list[Booking] | None = None) -> None:
        self._bookings: list[Booking] = []
        for booking in bookings or []:
            self.add(booking)

    def find_all(self) -> list[Booking]:
        return list(self._bookings)

    def find_by_id(self, booking_id: int) -> Booking | None:
        return next((b for b in self._bookings if b.id == booking_id), None)

    def add(self, booking: Booking) -> None:
        if booking.is_transient():
            booking.assign_id(self._next_id())
        elif self.find_by_id(booking.id) is not None:
            raise DuplicateResourceException(f"Booking already exists: {booking.id}")
        self._bookings.append(booking)

    def _next_id(self) -> int:
        return max((b.id for b in self._bookings), default=0) + 1
