"""
Hosted backend endpoint constants and configuration.

This module contains the Supabase REST (PostgREST) paths and headers used by
the backend client. Centralizing these values makes it easy to swap tables or
API versions.
"""


class SupabaseEndpoints:
    """Supabase REST endpoint paths."""

    REST_BASE = "/rest/v1"
    TABLE = f"{REST_BASE}/{{table}}"

    @classmethod
    def table(cls, table: str) -> str:
        """
        Get the REST endpoint for a table.

        Args:
            table: Table name

        Returns:
            Endpoint path
        """
        return cls.TABLE.format(table=table)

    @staticmethod
    def eq(value) -> str:
        """PostgREST equality filter value."""
        return f"eq.{value}"

    @staticmethod
    def in_(values) -> str:
        """PostgREST membership filter value."""
        return f"in.({','.join(str(v) for v in values)})"


class APIConstants:
    """General API configuration constants."""

    # HTTP Headers
    CONTENT_TYPE_JSON = "application/json"
    PREFER_RETURN_REPRESENTATION = "return=representation"
    PREFER_COUNT_EXACT = "count=exact"
    CONTENT_RANGE = "content-range"
