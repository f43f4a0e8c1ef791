"""Pagination primitives: a page request and the page it produces."""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class PageRequest:
    """A request for one zero-based page of a result set.

    Attributes:
        page: Zero-based page number.
        size: Maximum number of elements on the page.
    """

    page: int = 0
    size: int = 20

    def __post_init__(self):
        if self.page < 0:
            raise ValueError(f"Page index must not be negative, got {self.page}")
        if self.size < 1:
            raise ValueError(f"Page size must be at least 1, got {self.size}")

    @classmethod
    def of(cls, page: int, size: int) -> "PageRequest":
        return cls(page=page, size=size)

    @property
    def offset(self) -> int:
        """Number of elements skipped before this page."""
        return self.page * self.size

    def next(self) -> "PageRequest":
        return PageRequest(page=self.page + 1, size=self.size)

    def previous(self) -> "PageRequest":
        """Request for the page before this one; the first page stays first."""
        return PageRequest(page=max(self.page - 1, 0), size=self.size)


@dataclass
class Page(Generic[T]):
    """One slice of a larger result set.

    Attributes:
        content: Elements on this page.
        request: The PageRequest that produced this page.
        total_elements: Size of the whole result set, not just this page.
    """

    content: List[T] = field(default_factory=list)
    request: PageRequest = field(default_factory=PageRequest)
    total_elements: int = 0

    @property
    def number(self) -> int:
        return self.request.page

    @property
    def size(self) -> int:
        return self.request.size

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.request.size)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def map(self, converter: Callable[[T], R]) -> "Page[R]":
        """Return a page with every element converted, keeping the paging data."""
        return Page(
            content=[converter(item) for item in self.content],
            request=self.request,
            total_elements=self.total_elements,
        )

    def __iter__(self):
        return iter(self.content)
