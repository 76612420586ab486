from .entity import Booking, Room
from .repository import BookingRepository, RoomRepository
from .service import NO_ROOM_AVAILABLE, BookingManager
from .value_object import StayPeriod

__all__ = [
    "Booking",
    "Room",
    "StayPeriod",
    "BookingRepository",
    "RoomRepository",
    "BookingManager",
    "NO_ROOM_AVAILABLE",
]
