"""Integration tests for the expense function against a stubbed PostgREST API."""

import pytest
import json
import httpx
import respx
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from expenses import handler as expense_handler
from shared.response import GENERIC_ERROR_MESSAGE

SUPABASE_URL = 'https://project.supabase.co'
# Local development anon key; only its JWT shape matters here
ANON_KEY = (
    'eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.'
    'eyJpc3MiOiJzdXBhYmFzZS1kZW1vIiwicm9sZSI6ImFub24iLCJleHAiOjE5ODM4MTI5OTZ9.'
    'CRXP1A7WOeoJeXxjNni43kdQwgnWNReilDMblYTn_I0'
)
AUTHORIZATION = 'Bearer user-access-token'


@pytest.fixture
def supabase_env(monkeypatch):
    """Point the function at a fake Supabase project."""
    monkeypatch.setenv('SUPABASE_URL', SUPABASE_URL)
    monkeypatch.setenv('SUPABASE_ANON_KEY', ANON_KEY)
    monkeypatch.delenv('EXPENSES_TABLE', raising=False)
    expense_handler.get_handler.cache_clear()
    yield
    expense_handler.get_handler.cache_clear()


@pytest.fixture
def postgrest():
    """Mock the PostgREST endpoint of the project."""
    with respx.mock(base_url=f"{SUPABASE_URL}/rest/v1", assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def sample_expense():
    return {
        'expense_name': 'Groceries',
        'expense_desc': 'Weekly shop',
        'expense_amount': 45.67,
        'expense_emoji': '🛒',
        'expense_ts': '2024-01-15T10:00:00',
        'user_id': 'user123',
        'group_id': None
    }


def make_event(method, body=None, query=None):
    return {
        'httpMethod': method,
        'path': '/expense',
        'headers': {'Authorization': AUTHORIZATION, 'Content-Type': 'application/json'},
        'queryStringParameters': query,
        'body': body,
        'isBase64Encoded': False
    }


class TestExpenseFlow:
    """Integration tests for create and read."""

    def test_create_expense_end_to_end(self, supabase_env, postgrest, sample_expense):
        """Test that one row is posted with the caller's credentials."""
        route = postgrest.post('/expenses').mock(return_value=httpx.Response(201, json=[]))

        response = expense_handler.lambda_handler(
            make_event('POST', body=json.dumps({'expense': sample_expense})), None
        )

        assert response['statusCode'] == 201
        assert response['body'] == ''
        assert route.call_count == 1

        request = route.calls.last.request
        assert request.headers['authorization'] == AUTHORIZATION
        assert request.headers['apikey'] == ANON_KEY
        assert 'return=minimal' in request.headers['prefer']
        assert json.loads(request.content) == sample_expense

    def test_create_expense_rejected_by_policy(self, supabase_env, postgrest, sample_expense):
        """Test that a row-level security rejection becomes the generic 500."""
        postgrest.post('/expenses').mock(return_value=httpx.Response(403, json={
            'code': '42501',
            'details': None,
            'hint': None,
            'message': 'new row violates row-level security policy for table "expenses"'
        }))

        response = expense_handler.lambda_handler(
            make_event('POST', body=json.dumps({'expense': sample_expense})), None
        )

        assert response['statusCode'] == 500
        assert json.loads(response['body']) == {'error': GENERIC_ERROR_MESSAGE}

    def test_create_expense_store_unreachable(self, supabase_env, postgrest, sample_expense):
        postgrest.post('/expenses').mock(side_effect=httpx.ConnectError("connection refused"))

        response = expense_handler.lambda_handler(
            make_event('POST', body=json.dumps({'expense': sample_expense})), None
        )

        assert response['statusCode'] == 500

    def test_read_specific_date_end_to_end(self, supabase_env, postgrest):
        """Test the day window sent to PostgREST and the summed total."""
        rows = [
            {
                'id': 1,
                'expense_name': 'Coffee',
                'expense_desc': None,
                'expense_amount': 3.5,
                'expense_emoji': '☕',
                'expense_ts': '2024-01-15T08:15:00+00:00',
                'user_id': 'user123',
                'group_id': None,
                'created_at': '2024-01-15T08:15:02+00:00'
            },
            {
                'id': 2,
                'expense_name': 'Dinner',
                'expense_desc': 'Birthday',
                'expense_amount': 42.25,
                'expense_emoji': '🍝',
                'expense_ts': '2024-01-15T20:00:00+00:00',
                'user_id': 'user123',
                'group_id': 'friends',
                'created_at': '2024-01-15T21:00:00+00:00'
            }
        ]
        route = postgrest.get('/expenses').mock(return_value=httpx.Response(200, json=rows))

        response = expense_handler.lambda_handler(
            make_event('GET', query={'specificDate': '01-15-2024'}), None
        )

        assert response['statusCode'] == 200
        body = json.loads(response['body'])
        assert body['total_amount'] == 45.75
        assert [expense['expense_name'] for expense in body['expenses']] == ['Coffee', 'Dinner']

        request = route.calls.last.request
        assert request.headers['authorization'] == AUTHORIZATION
        assert request.url.params['select'] == '*'
        assert request.url.params.get_list('expense_ts') == [
            'gte.2024-01-15T00:00:00',
            'lte.2024-01-15T23:59:59'
        ]

    def test_read_specific_date_empty_day(self, supabase_env, postgrest):
        postgrest.get('/expenses').mock(return_value=httpx.Response(200, json=[]))

        response = expense_handler.lambda_handler(
            make_event('GET', query={'specificDate': '02-29-2024'}), None
        )

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'total_amount': 0, 'expenses': []}

    def test_read_date_range_does_not_query(self, supabase_env, postgrest):
        route = postgrest.get('/expenses')

        response = expense_handler.lambda_handler(
            make_event('GET', query={'fromDate': '01-01-2024', 'toDate': '01-31-2024'}), None
        )

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'fromDate': '01-01-2024', 'toDate': '01-31-2024'}
        assert route.call_count == 0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
