"""
Triple Filters - decide which triples are observed and followed
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional, Set
from urllib.parse import urlparse

from .rdf import Triple, TermKind, Uri


class TripleFilter(ABC):
    """Base interface for all triple filters

    Filters are pure: a rejected triple is neither observed nor followed.
    """

    @abstractmethod
    def matches(self, triple: Triple) -> bool:
        """Return True if the triple is eligible"""
        pass

    def __call__(self, triple: Triple) -> bool:
        return self.matches(triple)


class AcceptAll(TripleFilter):
    """Accept every triple"""

    def matches(self, triple: Triple) -> bool:
        return True


class FunctionFilter(TripleFilter):
    """Wrap a plain predicate function"""

    def __init__(self, func: Callable[[Triple], bool]):
        self.func = func

    def matches(self, triple: Triple) -> bool:
        return bool(self.func(triple))


class ObjectKindFilter(TripleFilter):
    """Accept triples whose object is one of the given kinds"""

    def __init__(self, *kinds: TermKind):
        self.kinds = set(kinds)

    def matches(self, triple: Triple) -> bool:
        return triple.object.kind in self.kinds


class PredicateFilter(TripleFilter):
    """Accept (or, with ``exclude``, reject) triples by predicate URI"""

    def __init__(self, predicates: Iterable, exclude: bool = False):
        self.predicates: Set[str] = {str(p) for p in predicates}
        self.exclude = exclude

    def matches(self, triple: Triple) -> bool:
        listed = str(triple.predicate) in self.predicates
        return not listed if self.exclude else listed


class DomainFilter(TripleFilter):
    """Restrict URI objects to allowed hosts

    Triples with a literal or blank object always pass. An empty
    ``allowed_domains`` allows every host that is not blocked.
    """

    def __init__(self, allowed_domains: Optional[Iterable[str]] = None,
                 blocked_domains: Optional[Iterable[str]] = None):
        self.allowed_domains = {d.lower() for d in (allowed_domains or ())}
        self.blocked_domains = {d.lower() for d in (blocked_domains or ())}

    def matches(self, triple: Triple) -> bool:
        if not isinstance(triple.object, Uri):
            return True

        domain = urlparse(triple.object.value).netloc.lower()
        if domain in self.blocked_domains:
            return False
        if self.allowed_domains and domain not in self.allowed_domains:
            return False
        return True


class _AllOf(TripleFilter):
    def __init__(self, filters):
        self.filters = [as_filter(f) for f in filters]

    def matches(self, triple: Triple) -> bool:
        return all(f.matches(triple) for f in self.filters)


class _AnyOf(TripleFilter):
    def __init__(self, filters):
        self.filters = [as_filter(f) for f in filters]

    def matches(self, triple: Triple) -> bool:
        return any(f.matches(triple) for f in self.filters)


class _Not(TripleFilter):
    def __init__(self, inner):
        self.inner = as_filter(inner)

    def matches(self, triple: Triple) -> bool:
        return not self.inner.matches(triple)


def all_of(*filters) -> TripleFilter:
    """Accept a triple only if every filter accepts it"""
    return _AllOf(filters)


def any_of(*filters) -> TripleFilter:
    """Accept a triple if at least one filter accepts it"""
    return _AnyOf(filters)


def negate(triple_filter) -> TripleFilter:
    return _Not(triple_filter)


def as_filter(obj) -> TripleFilter:
    """Coerce None, a filter or a predicate function into a TripleFilter"""
    if obj is None:
        return AcceptAll()
    if isinstance(obj, TripleFilter):
        return obj
    if callable(obj):
        return FunctionFilter(obj)
    raise TypeError(f"Cannot use {type(obj).__name__} as a triple filter")
