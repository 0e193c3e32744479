"""Supabase utilities and helper functions."""

import logging
from typing import Any, Dict, List

import httpx
from postgrest.exceptions import APIError
from postgrest.types import ReturnMethod
from supabase import Client, create_client
from supabase.client import ClientOptions

from .config import Settings
from .exceptions import StoreError

logger = logging.getLogger(__name__)


def create_scoped_client(settings: Settings, authorization: str) -> Client:
    """
    Create a Supabase client acting with the caller's credentials.

    The Authorization header is forwarded unchanged so the store's
    row-level security policies decide what the caller may read and write.

    Args:
        settings: Function settings
        authorization: Raw Authorization header of the inbound request

    Returns:
        Supabase client scoped to this request
    """
    options = ClientOptions(headers={'Authorization': authorization})
    return create_client(settings.supabase_url, settings.supabase_anon_key, options=options)


class SupabaseTable:
    """Supabase table wrapper with the operations the function needs."""

    def __init__(self, client: Client, table_name: str):
        """
        Initialize table wrapper.

        Args:
            client: Scoped Supabase client
            table_name: Name of the table
        """
        self.client = client
        self.table_name = table_name

    def insert(self, row: Dict[str, Any]) -> None:
        """
        Insert one row into the table.

        Args:
            row: Column values of the new row

        Raises:
            StoreError: If the store rejects the row or cannot be reached
        """
        try:
            self.client.table(self.table_name).insert(
                row, returning=ReturnMethod.minimal
            ).execute()
        except APIError as e:
            logger.error(f"Error inserting row into {self.table_name}: {e.message}")
            raise StoreError(f"Failed to insert row: {e.message}")
        except httpx.HTTPError as e:
            logger.error(f"Error reaching store for insert: {e}")
            raise StoreError(f"Failed to insert row: {str(e)}")

    def select_between(
        self,
        column: str,
        start: str,
        end: str,
        columns: str = '*'
    ) -> List[Dict[str, Any]]:
        """
        Select rows whose column lies within [start, end], both ends inclusive.

        Args:
            column: Column to filter on
            start: Lower bound
            end: Upper bound
            columns: Columns to return (default: all)

        Returns:
            Matching rows

        Raises:
            StoreError: If the query fails or the store cannot be reached
        """
        try:
            response = (
                self.client.table(self.table_name)
                .select(columns)
                .gte(column, start)
                .lte(column, end)
                .execute()
            )
        except APIError as e:
            logger.error(f"Error querying {self.table_name}: {e.message}")
            raise StoreError(f"Failed to query rows: {e.message}")
        except httpx.HTTPError as e:
            logger.error(f"Error reaching store for query: {e}")
            raise StoreError(f"Failed to query rows: {str(e)}")

        return response.data or []
