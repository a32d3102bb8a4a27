from dataclasses import dataclass

from .term import Term, make_term


@dataclass(frozen=True)
class Triple:
    """A (subject, predicate, object) statement asserted by a document"""
    subject: Term
    predicate: Term
    object: Term

    @classmethod
    def from_nodes(cls, subject, predicate, obj) -> "Triple":
        """Build a triple from three rdflib nodes"""
        return cls(make_term(subject), make_term(predicate), make_term(obj))

    def __str__(self) -> str:
        return f"{self.subject} {self.predicate} {self.object}"
