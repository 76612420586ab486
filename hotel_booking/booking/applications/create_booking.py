from hotel_booking.booking.applications.booking_models import (
    BookingRequest,
    BookingResult,
)
from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.domain.service import BookingManager

CONFLICT_MESSAGE = (
    "The booking could not be created. All rooms are occupied. "
    "Please try another period."
)


class CreateBookingService:
    """予約作成のユースケース"""

    def __init__(self, booking_manager: BookingManager) -> None:
        self._booking_manager = booking_manager

    def create(self, request: BookingRequest) -> BookingResult:
        """予約を作成する

        InvalidArgumentException（過去日など）は呼び出し元へそのまま送出する。
        """
        booking = Booking(
            start_date=request.start_date,
            end_date=request.end_date,
            customer_id=request.customer_id,
        )

        if not self._booking_manager.create_booking(booking):
            return BookingResult(status="conflict", message=CONFLICT_MESSAGE)

        return BookingResult(
            status="created",
            booking_id=booking.id,
            room_id=booking.room_id,
            start_date=booking.start_date,
            end_date=booking.end_date,
        )
