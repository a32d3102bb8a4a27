"""
Exception taxonomy for the ontology walker
"""

from typing import List, Tuple


class OntowalkError(Exception):
    """Base class for all walker errors"""


class TermTypeMismatch(OntowalkError, TypeError):
    """A term was extracted as a kind it does not have"""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"bad cast: expected {expected.value} term, got {actual.value}")


class MalformedTerm(OntowalkError, ValueError):
    """The decoder produced a term outside the uri/literal/blank alphabet"""

    def __init__(self, node):
        self.node = node
        super().__init__(f"bad rdf data: unsupported term {type(node).__name__} {node!r}")


class FetchFailed(OntowalkError):
    """A document could not be retrieved or decoded"""

    def __init__(self, identifier: str, reason: str, status_code: int = None):
        self.identifier = identifier
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"{identifier}: {reason}")


class ObserverErrors(OntowalkError):
    """One or more observers of an isolating aggregate failed"""

    def __init__(self, identifier: str, failures: List[Tuple[object, BaseException]]):
        self.identifier = identifier
        self.failures = failures
        names = ", ".join(type(observer).__name__ for observer, _ in failures)
        super().__init__(f"{len(failures)} observer(s) failed at {identifier}: {names}")
