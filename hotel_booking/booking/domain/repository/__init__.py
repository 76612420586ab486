from .booking_repository import BookingRepository
from .room_repository import RoomRepository

__all__ = ["BookingRepository", "RoomRepository"]
