from .booking_manager import NO_ROOM_AVAILABLE, BookingManager

__all__ = ["BookingManager", "NO_ROOM_AVAILABLE"]
