from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError


@pytest.fixture
def mock_table():
    """boto3 の DynamoDB テーブルをモックに差し替える"""
    with patch("hotel_booking.booking.infrastructure.dynamodb_table.boto3") as boto3:
        table = MagicMock()
        boto3.resource.return_value.Table.return_value = table
        yield table


@pytest.fixture
def client_error():
    def _factory(code: str, operation: str = "PutItem") -> ClientError:
        return ClientError({"Error": {"Code": code, "Message": code}}, operation)

    return _factory
