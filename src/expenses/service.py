"""Expense service for recording and querying expenses."""

from typing import Any
from datetime import date
from decimal import Decimal
import logging

from pydantic import ValidationError as PydanticValidationError

from shared.supabase_client import SupabaseTable
from shared.validators import day_window
from shared.exceptions import ValidationError
from expenses.models import DailyExpenseSummary, Expense, ExpenseCreate

logger = logging.getLogger(__name__)

TIMESTAMP_COLUMN = 'expense_ts'


class ExpenseService:
    """Service for managing expenses."""

    def __init__(self, expenses_table: SupabaseTable):
        """
        Initialize expense service.

        Args:
            expenses_table: Table wrapper bound to the caller's client
        """
        self.expenses_table = expenses_table

    def create_expense(self, data: Any) -> ExpenseCreate:
        """
        Validate and insert one expense.

        Args:
            data: Expense payload from the request body

        Returns:
            The validated expense that was inserted

        Raises:
            ValidationError: If the payload is not a valid expense
            StoreError: If the insert fails
        """
        if not isinstance(data, dict):
            raise ValidationError("expense must be a JSON object")

        try:
            expense = ExpenseCreate.model_validate(data)
        except PydanticValidationError as e:
            fields = sorted({'.'.join(str(part) for part in err['loc']) for err in e.errors()})
            raise ValidationError(f"Invalid expense fields: {', '.join(fields)}")

        self.expenses_table.insert(expense.model_dump(mode='json'))

        logger.info(f"Created expense '{expense.expense_name}' for user {expense.user_id}")
        return expense

    def get_daily_summary(self, day: date) -> DailyExpenseSummary:
        """
        Get all expenses of one calendar day and their total.

        Args:
            day: Calendar day to summarise

        Returns:
            Summary with total_amount and the matching expenses
        """
        start, end = day_window(day)
        rows = self.expenses_table.select_between(TIMESTAMP_COLUMN, start, end)

        expenses = [Expense.model_validate(row) for row in rows]
        total_amount = sum(
            (Decimal(str(expense.expense_amount)) for expense in expenses),
            Decimal('0')
        )

        logger.info(f"Found {len(expenses)} expenses between {start} and {end}")

        return DailyExpenseSummary(total_amount=total_amount, expenses=expenses)
