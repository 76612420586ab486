from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.domain.repository import BookingRepository
from hotel_booking.booking.infrastructure.dynamodb_table import (
    METADATA_SK,
    get_table,
    scan_entities,
)
from hotel_booking.shared.domain.exception import DuplicateResourceException

COUNTER_KEY = {"PK": "COUNTER#BOOKING", "SK": METADATA_SK}


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table = get_table(table_name)

    def find_all(self) -> list[Booking]:
        """全予約を取得する（ID 昇順）"""
        items = scan_entities(self.table, "BOOKING")
        bookings = [self._to_entity(item) for item in items]
        return sorted(bookings, key=lambda booking: booking.id)

    def find_by_id(self, booking_id: int) -> Booking | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": METADATA_SK},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def add(self, booking: Booking) -> None:
        """予約をDBに保存する（ID 未採番の場合はカウンタから採番）"""
        booking_id = self._next_id() if booking.is_transient() else booking.id

        item = {
            "PK": f"BOOKING#{booking_id}",
            "SK": METADATA_SK,
            "entity_type": "BOOKING",
            "booking_id": booking_id,
            "start_date": _iso(booking.start_date),
            "end_date": _iso(booking.end_date),
            "is_active": booking.is_active,
            "customer_id": booking.customer_id,
            "room_id": booking.room_id,
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking_id}"
                )
            raise

        if booking.is_transient():
            booking.assign_id(booking_id)

    def _next_id(self) -> int:
        """アトミックカウンタで予約IDを採番する"""
        response = self.table.update_item(
            Key=COUNTER_KEY,
            UpdateExpression="ADD #value :one",
            ExpressionAttributeNames={"#value": "current_value"},
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )
        return int(response["Attributes"]["current_value"])

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=int(item["booking_id"]),
            start_date=item.get("start_date"),
            end_date=item.get("end_date"),
            is_active=bool(item.get("is_active", True)),
            customer_id=int(item.get("customer_id", 0)),
            room_id=int(item.get("room_id", 0)),
        )


def _iso(value) -> str | None:
    return value.isoformat() if value is not None else None
