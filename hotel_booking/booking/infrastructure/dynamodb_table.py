import os

import boto3
from boto3.dynamodb.conditions import Attr

METADATA_SK = "METADATA"


def get_table(table_name: str | None = None):
    """DynamoDB テーブルを取得する（未指定時は環境変数 TABLE_NAME）"""
    name = table_name or os.getenv("TABLE_NAME")
    if not name:
        raise ValueError("TABLE_NAME is not configured")
    return boto3.resource("dynamodb").Table(name)


def scan_entities(table, entity_type: str) -> list[dict]:
    """entity_type で絞り込んで全件スキャンする（ページングを辿る）"""
    kwargs: dict = {"FilterExpression": Attr("entity_type").eq(entity_type)}
    items: list[dict] = []
    while True:
        response = table.scan(**kwargs)
        items.extend(response.get("Items", []))
        last_evaluated_key = response.get("LastEvaluatedKey")
        if not last_evaluated_key:
            return items
        kwargs["ExclusiveStartKey"] = last_evaluated_key
