"""Application search – declarative search forms compiled into predicates."""
from formsearch.application.search.compiler import CriteriaCompiler
from formsearch.application.search.criteria import Criterion, CriterionField, criterion, declared_criteria
from formsearch.application.search.form import SearchForm
from formsearch.application.search.meaningful import is_meaningful, meaningful_rule
from formsearch.application.search.paths import PathResolver, ResolvedPath
from formsearch.application.search.predicates import PredicateBuilder
from formsearch.application.search.result import SearchResult
from formsearch.application.search.service import CriteriaSearchEngine, SearchEngine
from formsearch.kernel.specification import Comparison, Quantifier

__all__ = [
    "Comparison",
    "CriteriaCompiler",
    "CriteriaSearchEngine",
    "Criterion",
    "CriterionField",
    "PathResolver",
    "PredicateBuilder",
    "Quantifier",
    "ResolvedPath",
    "SearchEngine",
    "SearchForm",
    "SearchResult",
    "criterion",
    "declared_criteria",
    "is_meaningful",
    "meaningful_rule",
]
