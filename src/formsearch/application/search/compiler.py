"""Application search – CriteriaCompiler.

Folds every meaningful criterion of a search form into one conjunctive
specification. A criterion whose value is not meaningful (``None``, blank
text, a negative number, ``datetime.min``...) contributes nothing.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from formsearch.application.search.criteria import CriterionField, declared_criteria
from formsearch.application.search.meaningful import meaningful_rule
from formsearch.application.search.paths import PathResolver, ResolvedPath
from formsearch.application.search.predicates import PredicateBuilder
from formsearch.kernel.errors import InvalidSortFieldError, SearchError
from formsearch.kernel.specification import AlwaysSatisfied, BaseSpecification
from formsearch.observability.logging import get_logger

if TYPE_CHECKING:
    from formsearch.application.search.form import SearchForm

T = TypeVar("T")

__all__ = ["SORT_FIELD", "CriteriaCompiler"]

SORT_FIELD = "sort_field"

logger = get_logger(__name__)


class CriteriaCompiler(Generic[T]):
    """Validate search forms over *record_type* and compile their criteria."""

    def __init__(
        self,
        record_type: type[T],
        *,
        resolver: PathResolver | None = None,
        builder: PredicateBuilder[T] | None = None,
    ) -> None:
        self._record_type = record_type
        self._resolver = resolver or PathResolver(record_type)
        self._builder = builder or PredicateBuilder(self._resolver)

    @property
    def record_type(self) -> type[T]:
        return self._record_type

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    # Validation ----------------------------------------------------------

    def sort_path(self, sort_field: str) -> ResolvedPath:
        """Resolve *sort_field*; it must reach a single value per record."""
        resolved = self._resolver.resolve(sort_field)
        if resolved.crosses_collection:
            raise InvalidSortFieldError(sort_field)
        return resolved

    def validate(self, form: "SearchForm[T]") -> None:
        """Check every declared criterion path and the current sort field.

        Raises the first failure, tagged with the offending form field name
        (``sort_field`` for the sort field).
        """
        try:
            for field in declared_criteria(type(form)):
                self._resolve_for(field.name, field.target_path)
            sort_field = (form.sort_field or "").strip()
            if sort_field:
                self._resolve_for(SORT_FIELD, sort_field, sort=True)
        except SearchError as exc:
            logger.warning("search_form_invalid", form=form, field=exc.field_name, code=exc.code)
            raise

    def invalid_field(self, form: "SearchForm[T]") -> str | None:
        """Name of the first form field whose path does not resolve, if any."""
        try:
            self.validate(form)
        except SearchError as exc:
            return exc.field_name
        return None

    def _resolve_for(self, field_name: str, path: str, *, sort: bool = False) -> ResolvedPath:
        try:
            return self.sort_path(path) if sort else self._resolver.resolve(path)
        except SearchError as exc:
            exc.with_field(field_name)
            raise

    # Compilation ---------------------------------------------------------

    def criterion_test(self, field: CriterionField, value: Any) -> BaseSpecification[T] | None:
        """The test for one criterion, or ``None`` when *value* is not meaningful."""
        try:
            if not meaningful_rule(field.value_type)(value):
                return None
            return self._builder.build_for(field, value)
        except SearchError as exc:
            exc.with_field(field.name)
            raise

    def compile(self, form: "SearchForm[T]") -> BaseSpecification[T]:
        """AND together the tests of every meaningful criterion on *form*.

        With no meaningful criteria the result matches every record. Any
        failure aborts the whole compilation; nothing is partially applied.
        """
        combined: BaseSpecification[T] = AlwaysSatisfied()
        for field in declared_criteria(type(form)):
            test = self.criterion_test(field, getattr(form, field.name))
            if test is None:
                logger.debug("criterion_skipped", field=field.name)
                continue
            logger.debug("criterion_applied", field=field.name, path=field.target_path)
            combined = combined & test
        return combined
