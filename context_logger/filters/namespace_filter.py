"""
Namespace filter

Enables or disables output by logger namespace using a comma-separated
pattern expression such as ``"api,db:*,-db:verbose"``.
"""

from enum import Enum
from typing import NamedTuple, Optional, Tuple

from context_logger.core.log_entry import LogEntry
from context_logger.filters.base_filter import BaseFilter

WILDCARD = "*"
EXCLUDE_PREFIX = "-"


class TermKind(Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


class MatchType(Enum):
    EXACT = "exact"
    PREFIX = "prefix"


class NamespaceTerm(NamedTuple):
    """One compiled term of a pattern expression."""

    kind: TermKind
    match: MatchType
    value: str

    def matches(self, namespace: str) -> bool:
        if self.match is MatchType.PREFIX:
            return namespace.startswith(self.value)
        return namespace == self.value


def compile_term(raw: str) -> Optional[NamespaceTerm]:
    """
    Compile a single term, or return None for an empty/malformed one.

    Only a trailing ``*`` acts as a wildcard; anywhere else it is taken
    literally.
    """
    term = raw.strip()
    kind = TermKind.INCLUDE
    if term.startswith(EXCLUDE_PREFIX):
        kind = TermKind.EXCLUDE
        term = term[len(EXCLUDE_PREFIX):].strip()

    if not term:
        return None

    if term.endswith(WILDCARD):
        return NamespaceTerm(kind, MatchType.PREFIX, term[:-len(WILDCARD)])
    return NamespaceTerm(kind, MatchType.EXACT, term)


def compile_patterns(
    expression: Optional[str]
) -> Tuple[Tuple[NamespaceTerm, ...], Tuple[NamespaceTerm, ...]]:
    """
    Split a pattern expression into (inclusions, exclusions).

    Term order is preserved within each tuple.
    """
    includes = []
    excludes = []
    for raw in (expression or "").split(","):
        term = compile_term(raw)
        if term is None:
            continue
        if term.kind is TermKind.EXCLUDE:
            excludes.append(term)
        else:
            includes.append(term)
    return tuple(includes), tuple(excludes)


class NamespaceFilter(BaseFilter):
    """
    Filter log entries based on their namespace.

    A namespace is enabled when it matches at least one inclusion term
    (or there are none) and matches no exclusion term. The expression
    is compiled once, at construction.
    """

    def __init__(self, patterns: Optional[str] = None):
        """
        Initialize namespace filter.

        Args:
            patterns: Pattern expression. None or empty enables every
                      namespace.

        Example:
            # Everything under "api" except one noisy child
            filter = NamespaceFilter("api*,-api:health")

            # Only the database logger
            filter = NamespaceFilter("db")
        """
        self.patterns = patterns
        self.includes, self.excludes = compile_patterns(patterns)

    def is_enabled(self, namespace: str) -> bool:
        """
        Check whether output for ``namespace`` is enabled.

        Args:
            namespace: Namespace to check

        Returns:
            True if enabled, False otherwise
        """
        namespace = namespace or ""
        if self.includes and not any(t.matches(namespace) for t in self.includes):
            return False
        return not any(t.matches(namespace) for t in self.excludes)

    def should_log(self, entry: LogEntry) -> bool:
        """Check the entry's namespace."""
        return self.is_enabled(entry.namespace)

    def __repr__(self) -> str:
        """String representation."""
        return f"NamespaceFilter(patterns={self.patterns!r})"
