"""
Namespace pattern compilation and matching.

An enable-string is a list of patterns separated by commas and/or
whitespace. Each pattern is either positive or negated with a leading
``-``:

    DEBUG="api:*,-api:internal"

    api:public     enabled   (matches api:*)
    api:internal   disabled  (negation wins, regardless of order)
    billing        disabled  (no positive match)

``*`` matches any run of characters (including none). Everything else
matches literally, and every pattern is anchored to the whole name.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple


# Tokens are separated by any mix of whitespace and commas
_SPLIT_RE = re.compile(r'[\s,]+')


@dataclass(frozen=True)
class Matcher:
    """A single compiled pattern.

    Keeps the source text alongside the regex so a PatternSet can be
    serialized back without reverse-engineering regex strings.
    """
    pattern: str
    regex: re.Pattern

    def matches(self, name: str) -> bool:
        return self.regex.fullmatch(name) is not None


def compile_matcher(pattern: str) -> Matcher:
    """Translate a glob-like pattern into an anchored Matcher."""
    body = '.*?'.join(re.escape(part) for part in pattern.split('*'))
    return Matcher(pattern=pattern, regex=re.compile(body, re.DOTALL))


@dataclass(frozen=True)
class PatternSet:
    """Compiled positive and negative matchers for one enable-string.

    Immutable: reconfiguration builds a new PatternSet and swaps it in.
    """
    positives: Tuple[Matcher, ...] = ()
    negatives: Tuple[Matcher, ...] = ()

    def is_enabled(self, name: str) -> bool:
        return is_namespace_enabled(self, name)

    def to_string(self) -> str:
        """Serialize back to a canonical enable-string.

        Positives come first as bare patterns, negatives follow with
        their ``-`` prefix restored.
        """
        parts = [m.pattern for m in self.positives]
        parts.extend('-' + m.pattern for m in self.negatives)
        return ','.join(parts)

    def __bool__(self) -> bool:
        return bool(self.positives or self.negatives)


def compile_patterns(namespaces: Optional[str]) -> PatternSet:
    """Compile an enable-string into a PatternSet.

    Args:
        namespaces: Raw enable-string. None or a non-string compiles to
            the empty set (everything disabled).

    Returns:
        PatternSet with positives and negatives in declaration order.
    """
    if not isinstance(namespaces, str):
        return PatternSet()

    positives = []
    negatives = []
    for token in _SPLIT_RE.split(namespaces):
        if not token:
            continue
        if token[0] == '-':
            negatives.append(compile_matcher(token[1:]))
        else:
            positives.append(compile_matcher(token))

    return PatternSet(positives=tuple(positives), negatives=tuple(negatives))


def is_namespace_enabled(patterns: PatternSet, name: str) -> bool:
    """Decide whether ``name`` is enabled under ``patterns``.

    Names ending in ``*`` are always enabled. Otherwise negatives are
    checked before positives, so a negation always wins.
    """
    if name.endswith('*'):
        return True

    for matcher in patterns.negatives:
        if matcher.matches(name):
            return False

    for matcher in patterns.positives:
        if matcher.matches(name):
            return True

    return False
