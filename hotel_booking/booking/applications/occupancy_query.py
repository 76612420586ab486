from datetime import date

from hotel_booking.booking.domain.service import NO_ROOM_AVAILABLE, BookingManager


class OccupancyQueryService:
    """空室・満室状況の照会ユースケース"""

    def __init__(self, booking_manager: BookingManager) -> None:
        self._booking_manager = booking_manager

    def fully_occupied_dates(self, start_date: date, end_date: date) -> list[date]:
        return self._booking_manager.get_fully_occupied_dates(start_date, end_date)

    def available_room(self, start_date: date, end_date: date) -> int | None:
        """空いている部屋IDを返す（無ければ None）"""
        room_id = self._booking_manager.find_available_room(start_date, end_date)
        if room_id == NO_ROOM_AVAILABLE:
            return None
        return room_id
