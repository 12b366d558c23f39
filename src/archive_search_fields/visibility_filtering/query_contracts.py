"""Query field resolution entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryFieldsRequest:
    """Input contract for resolving the fields of one query."""

    index_type: str
    privileged: bool = False
    template_id: str | None = None


@dataclass(frozen=True)
class QueryFields:
    """Resolved field lists for one query."""

    index_type: str
    template_id: str | None
    cultures: tuple[str, ...]
    all_fields: tuple[str, ...]
    hidden_fields: tuple[str, ...]
    visible_fields: tuple[str, ...]

    def as_query_fields(self) -> list[str]:
        """Fields for a query-string query's field restriction."""
        return list(self.visible_fields)
