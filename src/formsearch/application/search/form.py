"""Application search – SearchForm base class.

A search form is a dataclass whose criterion fields are declared with
:func:`~formsearch.application.search.criteria.criterion`. The record type
being searched is the generic parameter::

    @dataclass
    class OrderSearch(SearchForm[Order]):
        customer_zip: int | None = criterion("Order.order_customer.customer_address.zip_code")

    form = OrderSearch(customer_zip=56545, sort_field="tx_number", sort_dir="desc")

Construction validates every declared path and the sort field, so a form
with a broken declaration can never be instantiated.
"""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Generic, TypeVar, get_args, get_origin

from formsearch.application.pagination import PageRequest, Sort, SortDirection
from formsearch.application.search.compiler import CriteriaCompiler
from formsearch.application.search.criteria import CriterionField, declared_criteria
from formsearch.application.search.meaningful import is_meaningful
from formsearch.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["SearchForm"]

logger = get_logger(__name__)

_SORT_DIR = "sort_dir"


@dataclasses.dataclass
class SearchForm(Generic[T]):
    """Base class for search forms over records of type ``T``.

    ``sort_dir`` only accepts ``"asc"`` / ``"desc"`` (any case) and stores the
    lower-cased value; any other assignment is ignored and the previous value
    kept.
    """

    record_type: ClassVar[type[Any] | None] = None

    page_size: int = 10
    current_page: int = 1
    page_count: int = 10
    sort_field: str = ""
    sort_dir: str = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in cls.__dict__.get("__orig_bases__", ()):
            origin = get_origin(base)
            if isinstance(origin, type) and issubclass(origin, SearchForm):
                args = get_args(base)
                if args and isinstance(args[0], type):
                    cls.record_type = args[0]

    def __post_init__(self) -> None:
        self.searched_type()
        self.validate()

    @classmethod
    def searched_type(cls) -> type[Any]:
        """The record type named by the generic parameter.

        Raises:
            TypeError: the form class does not subclass ``SearchForm[RecordType]``.
        """
        if cls.record_type is None:
            raise TypeError(f"{cls.__name__} must subclass SearchForm[RecordType] to name the searched type")
        return cls.record_type

    def __setattr__(self, name: str, value: Any) -> None:
        if name == _SORT_DIR:
            direction = SortDirection.parse(value)
            if direction is None:
                if value:
                    logger.debug("sort_dir_rejected", value=value, kept=self.sort_dir)
                return
            value = direction.value
        super().__setattr__(name, value)

    # Paging -------------------------------------------------------------

    @property
    def skip(self) -> int:
        return max(0, (self.current_page - 1) * self.page_size)

    @property
    def take(self) -> int:
        return max(0, self.page_size)

    @property
    def max_rows(self) -> int:
        """Ceiling up to which the total count is computed exactly."""
        return max(0, self.page_count * self.page_size)

    @property
    def sort(self) -> Sort | None:
        """The requested sort, or ``None`` unless both field and direction are set."""
        if not self.sort_field.strip() or not self.sort_dir:
            return None
        return Sort(self.sort_field.strip(), SortDirection(self.sort_dir))

    @property
    def page_request(self) -> PageRequest:
        return PageRequest(
            page=self.current_page,
            size=self.page_size,
            sort=self.sort,
            max_rows=self.max_rows,
        )

    # Criteria -----------------------------------------------------------

    @classmethod
    def criteria(cls) -> tuple[CriterionField, ...]:
        return declared_criteria(cls)

    def active_criteria(self) -> list[CriterionField]:
        """Criteria whose current value will constrain a search."""
        return [
            field
            for field in self.criteria()
            if is_meaningful(field.value_type, getattr(self, field.name))
        ]

    def compiler(self) -> CriteriaCompiler[T]:
        return CriteriaCompiler(self.searched_type())

    def validate(self) -> None:
        """Re-check every declared path and the current sort field."""
        self.compiler().validate(self)
