#!/usr/bin/env python3
"""
Seed data script for testing the expense function.
Creates sample expenses for a user through the same service the function uses,
so the store's row-level security applies exactly as it does for requests.
"""

import os
import sys
from datetime import datetime, timedelta, timezone
import random

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from shared.config import Settings
from shared.exceptions import ExpenseTrackerException
from shared.supabase_client import SupabaseTable, create_scoped_client
from expenses.service import ExpenseService


SAMPLE_EXPENSES = [
    ('Coffee', '☕', (2.5, 6.0)),
    ('Lunch', '🍜', (8.0, 20.0)),
    ('Groceries', '🛒', (15.0, 120.0)),
    ('Taxi', '🚕', (7.0, 40.0)),
    ('Cinema', '🎬', (9.0, 25.0)),
    ('Books', '📚', (10.0, 45.0)),
    ('Pharmacy', '💊', (4.0, 30.0)),
]


def build_expenses(user_id, num_expenses=20, days=14, group_id=None):
    """Build sample expense payloads spread over the last few days."""
    expenses = []
    now = datetime.now(timezone.utc)

    for _ in range(num_expenses):
        name, emoji, (low, high) = random.choice(SAMPLE_EXPENSES)
        expense_ts = now - timedelta(
            days=random.randint(0, days),
            hours=random.randint(0, 23),
            minutes=random.randint(0, 59)
        )

        expenses.append({
            'expense_name': name,
            'expense_desc': None,
            'expense_amount': round(random.uniform(low, high), 2),
            'expense_emoji': emoji,
            'expense_ts': expense_ts.replace(microsecond=0).isoformat(),
            'user_id': user_id,
            'group_id': group_id
        })

    return expenses


def seed_expenses(service, expenses):
    """Insert expenses one by one, stopping at the first failure."""
    print(f"Creating {len(expenses)} sample expenses...")

    for expense in expenses:
        service.create_expense(expense)

    print(f"Created {len(expenses)} expenses")
    return expenses


def main():
    """Main function."""
    print("=" * 50)
    print("Expense Function - Seed Data Script")
    print("=" * 50)

    try:
        settings = Settings.from_env()
    except ExpenseTrackerException as e:
        print(f"Error: {e.message}")
        sys.exit(1)

    print(f"\nSupabase project: {settings.supabase_url}")
    print(f"Expenses table: {settings.expenses_table}")

    # Get user ID
    user_id = input("\nEnter user ID (auth.users id) to seed data for: ").strip()
    if not user_id:
        print("Error: User ID is required")
        sys.exit(1)

    # Get access token for that user
    access_token = input("Enter the user's access token (JWT): ").strip()
    if not access_token:
        print("Error: Access token is required")
        sys.exit(1)

    # Get number of expenses
    num_expenses = input("Enter number of expenses to create (default: 20): ").strip()
    num_expenses = int(num_expenses) if num_expenses else 20

    group_id = input("Enter group ID (optional): ").strip() or None

    client = create_scoped_client(settings, f"Bearer {access_token}")
    service = ExpenseService(SupabaseTable(client, settings.expenses_table))

    print("\nSeeding expenses...")
    try:
        expenses = seed_expenses(service, build_expenses(user_id, num_expenses, group_id=group_id))
    except ExpenseTrackerException as e:
        print(f"Error: {e.message}")
        sys.exit(1)

    print("\n" + "=" * 50)
    print("Data seeding complete!")
    print("=" * 50)
    print(f"\nCreated {len(expenses)} expenses for user: {user_id}")


if __name__ == '__main__':
    main()
