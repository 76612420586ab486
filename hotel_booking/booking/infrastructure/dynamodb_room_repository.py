from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from hotel_booking.booking.domain.entity import Room
from hotel_booking.booking.domain.repository import RoomRepository
from hotel_booking.booking.infrastructure.dynamodb_table import (
    METADATA_SK,
    get_table,
    scan_entities,
)
from hotel_booking.shared.domain.exception import DuplicateResourceException


class DynamoDBRoomRepository(RoomRepository):
    """DynamoDBを使用したRoomRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table = get_table(table_name)

    def find_all(self) -> list[Room]:
        """全客室を取得する（ID 昇順）"""
        items = scan_entities(self.table, "ROOM")
        rooms = [self._to_entity(item) for item in items]
        return sorted(rooms, key=lambda room: room.id)

    def find_by_id(self, room_id: int) -> Room | None:
        """客室IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"ROOM#{room_id}", "SK": METADATA_SK},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def add(self, room: Room) -> None:
        """客室をDBに保存する"""
        item = {
            "PK": f"ROOM#{room.id}",
            "SK": METADATA_SK,
            "entity_type": "ROOM",
            "room_id": room.id,
            "description": room.description,
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Room already exists: {room.id}")
            raise

    def _to_entity(self, item: dict) -> Room:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Room(id=int(item["room_id"]), description=item.get("description", ""))
