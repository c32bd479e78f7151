from typing import Any, List, Tuple

from app.database import placeholder


class QueryBuilder:
    """
    Accumulates filter conditions and their parameters side by side.

    Every call that adds a parameter also renders the placeholder for it, so
    placeholder ``i`` in the statement text always refers to ``params[i - 1]``.

    Example:
        builder = QueryBuilder("SELECT * FROM properties")
        builder.where("city LIKE {}", "%Boston%")
        limit = builder.bind(10)
        sql, params = builder.build(f"LIMIT {limit}")
    """

    def __init__(self, base_sql: str):
        self.base_sql = base_sql
        self.conditions: List[str] = []
        self.params: List[Any] = []

    def bind(self, value: Any) -> str:
        """Appends ``value`` to the parameter list and returns its placeholder."""
        self.params.append(value)
        return placeholder(len(self.params))

    def where(self, template: str, value: Any) -> "QueryBuilder":
        """Adds a condition; ``{}`` in ``template`` becomes the placeholder of ``value``."""
        self.conditions.append(template.format(self.bind(value)))
        return self

    def build(self, tail: str = "") -> Tuple[str, List[Any]]:
        parts = [self.base_sql.strip()]
        if self.conditions:
            parts.append("WHERE " + " AND ".join(self.conditions))
        if tail:
            parts.append(tail.strip())
        return "\n".join(parts), list(self.params)
