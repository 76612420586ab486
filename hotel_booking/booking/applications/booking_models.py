from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class BookingRequest(BaseModel):
    """予約作成リクエストモデル"""

    start_date: date = Field(
        ...,
        description="開始日（YYYY-MM-DD形式）",
        examples=["2024-01-01"],
    )
    end_date: date = Field(
        ...,
        description="終了日（YYYY-MM-DD形式）",
        examples=["2024-01-03"],
    )
    customer_id: int = Field(default=0, ge=0, description="顧客ID")
    room_id: int = Field(
        default=0,
        ge=0,
        description="部屋ID（指定しても BookingManager が割り当て直す）",
    )

    @model_validator(mode="after")
    def check_period(self) -> BookingRequest:
        if self.end_date <= self.start_date:
            raise ValueError("End date must be after start date")
        return self


class BookingResult(BaseModel):
    """予約作成結果モデル"""

    status: Literal["created", "conflict"]
    booking_id: int | None = None
    room_id: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    message: str | None = None
