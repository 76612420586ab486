from .booking_models import BookingRequest, BookingResult
from .create_booking import CreateBookingService
from .occupancy_query import OccupancyQueryService

__all__ = [
    "BookingRequest",
    "BookingResult",
    "CreateBookingService",
    "OccupancyQueryService",
]
