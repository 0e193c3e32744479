"""Expense data models."""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from decimal import Decimal


class ExpenseCreate(BaseModel):
    """Expense create request model. The store assigns id and created_at."""

    expense_name: str = Field(..., min_length=1, description="What the money was spent on")
    expense_desc: Optional[str] = Field(None, description="Optional description")
    expense_amount: float = Field(..., description="Expense amount")
    expense_emoji: str = Field(..., description="Emoji shown next to the expense")
    expense_ts: datetime = Field(..., description="When the expense happened")
    user_id: str = Field(..., description="Owner of the expense")
    group_id: Optional[str] = Field(None, description="Optional group the expense belongs to")

    model_config = ConfigDict(extra='forbid')


class Expense(ExpenseCreate):
    """Expense row as stored."""

    model_config = ConfigDict(extra='allow', from_attributes=True)

    # Rows written by other clients are returned as stored
    expense_name: str = Field(..., description="What the money was spent on")
    id: Optional[int] = None
    created_at: Optional[datetime] = None


class DailyExpenseSummary(BaseModel):
    """Expenses of one calendar day and their total."""

    total_amount: Decimal
    expenses: List[Expense]


class DateRangeEcho(BaseModel):
    """Echo of a requested date range. Range filtering is not implemented."""

    from_date: str = Field(..., alias='fromDate')
    to_date: str = Field(..., alias='toDate')

    model_config = ConfigDict(populate_by_name=True)
