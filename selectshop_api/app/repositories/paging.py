"""
repositories/paging.py
----------------------
Page requests and page results for the list queries.

``PageRequest`` carries a 0-based page index, a page size and a sort
order, and renders the ``ORDER BY ... LIMIT ... OFFSET`` tail of a
query.  Sort fields are matched against an allow-list because the
column name is interpolated into the SQL text.
"""

import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

from ..core.exceptions import ValidationError
from ..core.messages import ErrorCode

T = TypeVar("T")

# LIMIT and OFFSET are SQLite 64-bit integers.
MAX_ROW_INDEX = 2**63 - 1

# API sort names (camelCase, snake_case and the legacy short forms) to
# product columns.
SORT_COLUMNS = {
    "id": "id",
    "title": "title",
    "link": "link",
    "lowestPrice": "lowest_price",
    "lowest_price": "lowest_price",
    "lprice": "lowest_price",
    "myPrice": "my_price",
    "my_price": "my_price",
    "myprice": "my_price",
    "createdAt": "created_at",
    "created_at": "created_at",
    "modifiedAt": "modified_at",
    "modified_at": "modified_at",
}


@dataclass(frozen=True)
class PageRequest:
    page: int
    size: int
    sort_by: str = "id"
    ascending: bool = True

    @classmethod
    def of(cls, page: int, size: int, sort_by: str = "id", ascending: bool = True) -> "PageRequest":
        """Validate and build a request.

        Raises ``ValidationError`` for a negative page, a size below 1,
        a window past ``MAX_ROW_INDEX`` or a sort field outside
        ``SORT_COLUMNS``.
        """
        if page < 0 or size < 1 or (page + 1) * size > MAX_ROW_INDEX:
            raise ValidationError(ErrorCode.INVALID_PAGE)
        if sort_by not in SORT_COLUMNS:
            raise ValidationError(ErrorCode.INVALID_SORT_FIELD, field=sort_by)
        return cls(page=page, size=size, sort_by=sort_by, ascending=ascending)

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def direction(self) -> str:
        return "ASC" if self.ascending else "DESC"

    def order_clause(self, alias: str = "") -> str:
        """``ORDER BY`` for this request.

        Rows that tie on the sort column are ordered by id in the same
        direction, so consecutive pages never repeat or skip a row.
        """
        prefix = f"{alias}." if alias else ""
        column = SORT_COLUMNS[self.sort_by]
        order = f"{prefix}{column} {self.direction}"
        if column != "id":
            order += f", {prefix}id {self.direction}"
        return f" ORDER BY {order}"

    def limit_clause(self) -> str:
        return f" LIMIT {int(self.size)} OFFSET {int(self.offset)}"


@dataclass
class Page(Generic[T]):
    """One window of a sorted result plus the totals needed to page on."""

    items: List[T] = field(default_factory=list)
    page: int = 0
    size: int = 0
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)
