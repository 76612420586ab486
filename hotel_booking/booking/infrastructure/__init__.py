from .dynamodb_booking_repository import DynamoDBBookingRepository
from .dynamodb_room_repository import DynamoDBRoomRepository
from .in_memory_repository import InMemoryBookingRepository, InMemoryRoomRepository

__all__ = [
    "DynamoDBBookingRepository",
    "DynamoDBRoomRepository",
    "InMemoryBookingRepository",
    "InMemoryRoomRepository",
]
