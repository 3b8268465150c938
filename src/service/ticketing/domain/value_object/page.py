import math
from typing import Generic, List, TypeVar

import attrs


T = TypeVar('T')


@attrs.frozen
class PageRequest:
    page: int
    page_size: int
    search: str = ''

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@attrs.frozen
class Page(Generic[T]):
    items: List[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total / self.page_size)
