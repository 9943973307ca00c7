"""Application search – SearchEngine Protocol and CriteriaSearchEngine."""
from __future__ import annotations

import itertools
import time
from typing import Any, Callable, Generic, Iterable, Iterator, Protocol, Sequence, TypeVar, runtime_checkable

from formsearch.application.search.compiler import CriteriaCompiler
from formsearch.application.search.form import SearchForm
from formsearch.application.search.result import SearchResult
from formsearch.config.settings import SearchSettings
from formsearch.kernel.specification import read_member
from formsearch.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["CriteriaSearchEngine", "SearchEngine"]

logger = get_logger(__name__)


@runtime_checkable
class SearchEngine(Protocol[T]):
    def search(self, form: SearchForm[T], records: Iterable[T] | None = None) -> SearchResult[T]: ...


def _sort_key(segments: Sequence[str]) -> Callable[[Any], tuple[bool, Any]]:
    # None sorts before every value ascending, after every value descending
    def key(record: Any) -> tuple[bool, Any]:
        value = read_member(record, segments)
        return value is not None, value

    return key


class CriteriaSearchEngine(Generic[T]):
    """Filter, sort and page records according to a :class:`SearchForm`.

    *records* is an optional default source used when ``search``/``query``
    are called without one. Sources may be lazy: records are pulled only as
    far as the requested page and the exact-count ceiling need.
    """

    def __init__(
        self,
        records: Iterable[T] | None = None,
        *,
        settings: SearchSettings | None = None,
    ) -> None:
        self._records = records
        self._settings = settings or SearchSettings()
        self._compilers: dict[type, CriteriaCompiler[Any]] = {}

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    def compiler_for(self, form: SearchForm[T]) -> CriteriaCompiler[T]:
        record_type = form.searched_type()
        compiler = self._compilers.get(record_type)
        if compiler is None:
            compiler = self._compilers[record_type] = CriteriaCompiler(record_type)
        return compiler

    def validate(self, form: SearchForm[T]) -> None:
        """Validate *form* without searching."""
        self.compiler_for(form).validate(form)

    def _source(self, records: Iterable[T] | None) -> Iterable[T]:
        source = records if records is not None else self._records
        if source is None:
            raise ValueError("No records to search: pass records or construct the engine with a source")
        return source

    def query(self, form: SearchForm[T], records: Iterable[T] | None = None) -> Iterator[T]:
        """Filtered and sorted records, without paging.

        All validation and compilation happens before any record is read.
        Without a sort the result stays lazy and keeps source order.
        """
        source = self._source(records)
        compiler = self.compiler_for(form)
        compiler.validate(form)
        predicate = compiler.compile(form)

        sort = form.sort
        key = _sort_key(compiler.sort_path(sort.field).segments) if sort is not None else None

        filtered = filter(predicate, source)
        if sort is None:
            return filtered
        return iter(sorted(filtered, key=key, reverse=sort.descending))

    def search(self, form: SearchForm[T], records: Iterable[T] | None = None) -> SearchResult[T]:
        """Return the requested page of matching records and a total count.

        The total is exact when at most ``form.max_rows`` records match;
        otherwise it is ``form.max_rows`` and the result is flagged ``capped``.
        """
        t0 = time.monotonic()
        request = form.page_request
        take = min(request.limit, self._settings.max_page_size)
        rows = self.query(form, records)

        # one pass: enough rows for the page and to tell whether max_rows is exceeded
        window = list(itertools.islice(rows, max(request.offset + take, request.max_rows + 1)))
        items = window[request.offset: request.offset + take]
        capped = len(window) > request.max_rows
        total = request.max_rows if capped else len(window)

        took_ms = int((time.monotonic() - t0) * 1000)
        logger.info(
            "search_completed",
            form=form,
            returned=len(items),
            total=total,
            capped=capped,
            took_ms=took_ms,
        )
        return SearchResult(
            items=items,
            total=total,
            page=request.page,
            page_size=take,
            capped=capped,
            took_ms=took_ms,
        )
