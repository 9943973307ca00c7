"""
formsearch – declarative search forms compiled into record predicates.

Import path convention::

    from formsearch.application.search import SearchForm, criterion, Comparison
    from formsearch.application.search import CriteriaSearchEngine
    from formsearch.kernel.errors import UnknownMemberError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
