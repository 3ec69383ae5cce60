"""
Offset pagination over SQLAlchemy queries
"""
import math
from dataclasses import dataclass, field
from typing import Any, List
from sqlalchemy.orm import Query


@dataclass
class Page:
    """A slice of a query result plus the totals needed to render a pager"""
    content: List[Any] = field(default_factory=list)
    number: int = 0
    size: int = 12
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1 if self.total_elements else 0
        return math.ceil(self.total_elements / self.size)

    def map(self, func) -> "Page":
        return Page([func(item) for item in self.content], self.number, self.size, self.total_elements)

    def to_dict(self) -> dict:
        return {
            "content": self.content,
            "number": self.number,
            "size": self.size,
            "total_elements": self.total_elements,
            "total_pages": self.total_pages,
        }


def paginate(query: Query, page: int, size: int) -> Page:
    """Run a count plus one LIMIT/OFFSET fetch; a negative page is treated as 0"""
    page = max(page, 0)
    total = query.order_by(None).count()
    content = query.offset(page * size).limit(size).all()
    return Page(content=content, number=page, size=size, total_elements=total)
