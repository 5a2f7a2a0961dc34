"""
Sortable Name Module

This module rewrites free-form personal and organizational names into a form that
alphabetizes by family name, and pairs it with a collation-aware comparator.

## Overview

The core functionality is provided by the `SortableNames` class, which runs each name
through a short pipeline:

1. **Whitespace Normalization**: Collapses runs of whitespace and tightens commas
2. **Preformatted Check**: Names already written "Surname, Given" pass through untouched
3. **Organization Check**: Names containing an organization word keep their word order,
   apart from a leading article moving to the end
4. **Honorific Removal**: A single leading title ("Dr.", "Sir") is dropped
5. **Surname First**: The last non-suffix token moves to the front, suffixes stay at the end

## Configuration

Four independent lists of regular-expression fragments drive the pipeline. Each defaults
to the constants in `sortable_names.names_data` and can be replaced or extended:

```python
from sortable_names.names import SortableNames, SortableNamesConfig
from sortable_names.names_data import DEFAULT_HONORIFICS

sortable = SortableNames(SortableNamesConfig(honorifics=DEFAULT_HONORIFICS + ("Representative",)))
sortable.get_sortable("Representative Shirley Chisholm")
# Returns: "Chisholm, Shirley"
```

An empty sequence disables a category entirely. Fragments are compiled once per
configuration into composite patterns; an invalid fragment raises
`SortableNamesConfigError` from the constructor.

## Usage Examples

```python
from sortable_names.names import get_sortable, sort_names

get_sortable("William Shakespeare")                   # "Shakespeare, William"
get_sortable("Sir Richard Francis Burton")            # "Burton, Richard Francis"
get_sortable("Martin Luther King Jr.")                # "King, Martin Luther, Jr"
get_sortable("The Environmental Protection Agency")   # "Environmental Protection Agency, The"
get_sortable("Homer")                                 # "Homer"

[entry.sortable for entry in sort_names(["Rubén Darío", "Homer"])]
# Returns: ["Darío, Rubén", "Homer"]
```

## Edge Cases

- Honorifics are only removed from the very start of the name. "Walter Lord Jr." keeps
  "Lord" as its surname.
- When every token of a person name is a suffix ("Jr. III"), the first token is used as
  the surname and the rest stay suffixes.
- Empty or whitespace-only input returns an empty string.

## Thread Safety

Configurations and compiled rules are immutable. A single `SortableNames` instance can be
shared across threads.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple

from sortable_names.collation import collation_key, compare
from sortable_names.names_data import (
    DEFAULT_ARTICLES,
    DEFAULT_HONORIFICS,
    DEFAULT_NAME_SUFFIXES,
    DEFAULT_ORG_WORDS,
)


# ════════════════════════════════════════════════════════════════════════════════
# COMPILED REGEX PATTERNS
# ════════════════════════════════════════════════════════════════════════════════

_COMMA_SPACING_PATTERN = re.compile(r" ?, ?")


# ════════════════════════════════════════════════════════════════════════════════
# ERRORS AND RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


class SortableNamesConfigError(ValueError):
    """Raised when a configured fragment list does not compile into a valid pattern."""

    def __init__(self, category: str, fragments: Tuple[str, ...], error: re.error):
        self.category = category
        self.fragments = fragments
        super().__init__(f"invalid {category} fragments {list(fragments)!r}: {error}")


@dataclass(frozen=True)
class SortedName:
    """A raw name paired with its sortable form."""

    name: str
    sortable: str


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class SortableNamesConfig:
    """Immutable rule lists. Omitted or None lists use the defaults, empty lists disable a rule."""

    articles: Tuple[str, ...] = DEFAULT_ARTICLES
    org_words: Tuple[str, ...] = DEFAULT_ORG_WORDS
    honorifics: Tuple[str, ...] = DEFAULT_HONORIFICS
    name_suffixes: Tuple[str, ...] = DEFAULT_NAME_SUFFIXES

    def __post_init__(self) -> None:
        # Accept any sequence but store tuples so the config stays hashable
        for field in fields(self):
            value = getattr(self, field.name)
            if value is None:
                value = field.default
            if isinstance(value, str):
                raise TypeError(f"{field.name} must be a sequence of fragments, not a single string")
            object.__setattr__(self, field.name, tuple(value))

    @classmethod
    def create_default(cls) -> "SortableNamesConfig":
        """Factory method for the built-in rule lists."""
        return cls()

    def with_articles(self, articles: Sequence[str]) -> "SortableNamesConfig":
        return replace(self, articles=tuple(articles))

    def with_org_words(self, org_words: Sequence[str]) -> "SortableNamesConfig":
        return replace(self, org_words=tuple(org_words))

    def with_honorifics(self, honorifics: Sequence[str]) -> "SortableNamesConfig":
        return replace(self, honorifics=tuple(honorifics))

    def with_name_suffixes(self, name_suffixes: Sequence[str]) -> "SortableNamesConfig":
        return replace(self, name_suffixes=tuple(name_suffixes))


@dataclass(frozen=True)
class CompiledRules:
    """Composite patterns built from a configuration. None means the rule is disabled."""

    article_pattern: Optional[re.Pattern[str]]
    org_pattern: Optional[re.Pattern[str]]
    honorific_pattern: Optional[re.Pattern[str]]
    suffix_pattern: Optional[re.Pattern[str]]


def _alternation(fragments: Tuple[str, ...], before: str = "", after: str = "") -> str:
    """Join fragments into one alternation, grouping each so inner alternatives stay scoped."""
    return "|".join(f"{before}(?:{fragment}){after}" for fragment in fragments)


def _compile(category: str, fragments: Tuple[str, ...], pattern: str, flags: int = 0) -> Optional[re.Pattern[str]]:
    if not fragments:
        return None
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        logging.error(f"Failed to compile {category} fragments {list(fragments)}: {e}")
        raise SortableNamesConfigError(category, fragments, e) from e


@lru_cache(maxsize=128)
def compile_rules(config: SortableNamesConfig) -> CompiledRules:
    """Build the composite patterns for a configuration, memoized per configuration."""
    return CompiledRules(
        article_pattern=_compile(
            "articles",
            config.articles,
            rf"^(?P<article>{_alternation(config.articles)}) (?P<rest>.+)$",
            re.IGNORECASE,
        ),
        org_pattern=_compile(
            "org_words",
            config.org_words,
            _alternation(config.org_words, before=r"\b", after=r"\b"),
        ),
        honorific_pattern=_compile(
            "honorifics",
            config.honorifics,
            rf"^(?:{_alternation(config.honorifics)})\.?\s+",
        ),
        suffix_pattern=_compile(
            "name_suffixes",
            config.name_suffixes,
            _alternation(config.name_suffixes, after=r"\.?"),
        ),
    )


# ════════════════════════════════════════════════════════════════════════════════
# CONFIGURATION-FREE HELPERS
# ════════════════════════════════════════════════════════════════════════════════


def normalize_whitespace(name: str) -> str:
    """
    Remove leading, trailing and duplicate interior whitespace, and write every
    comma as ", ".
    """
    return _COMMA_SPACING_PATTERN.sub(", ", " ".join(name.split()))


def is_preformatted(name: str) -> bool:
    """True if the first word ends with a comma, i.e. the name already reads "Surname, Given"."""
    end_of_first_word = name.find(" ")

    # Single word names
    if end_of_first_word == -1:
        return False

    return name[end_of_first_word - 1] == ","


# ════════════════════════════════════════════════════════════════════════════════
# MAIN SORTABLE NAMES CLASS
# ════════════════════════════════════════════════════════════════════════════════


class SortableNames:
    """Rewrites full names so they sort alphabetically by last name."""

    default_articles = DEFAULT_ARTICLES
    default_org_words = DEFAULT_ORG_WORDS
    default_honorifics = DEFAULT_HONORIFICS
    default_name_suffixes = DEFAULT_NAME_SUFFIXES

    compare = staticmethod(compare)

    def __init__(self, config: Optional[SortableNamesConfig] = None):
        self._config = config or SortableNamesConfig.create_default()
        self._rules = compile_rules(self._config)

    @property
    def config(self) -> SortableNamesConfig:
        return self._config

    def is_organization(self, name: str) -> bool:
        """True if any configured organization word appears as a whole word."""
        if self._rules.org_pattern is None:
            return False
        return self._rules.org_pattern.search(name) is not None

    def is_suffix(self, name_part: str) -> bool:
        if self._rules.suffix_pattern is None:
            return False
        return self._rules.suffix_pattern.fullmatch(name_part) is not None

    def strip_honorific(self, name: str) -> str:
        """Remove one leading honorific such as "Mr." or "Dr"."""
        if self._rules.honorific_pattern is None:
            return name
        return self._rules.honorific_pattern.sub("", name, count=1)

    def move_article_to_end(self, name: str) -> str:
        """Move a leading article to the end: "The Foo Agency" becomes "Foo Agency, The"."""
        if self._rules.article_pattern is None:
            return name
        match = self._rules.article_pattern.match(name)
        if match is None:
            return name
        return f"{match.group('rest')}, {match.group('article')}"

    def move_last_name_to_start(self, name: str) -> str:
        """
        Put the last name first, keeping suffixes such as "Jr." and "Ph.D" at the end.

        Returns the name as "Last, First Middle, Suffix, Suffix" with periods removed
        from the suffixes.
        """
        name_parts = name.replace(",", "").split()
        if not name_parts:
            return ""

        last_name_index = next(
            (i for i in range(len(name_parts) - 1, -1, -1) if not self.is_suffix(name_parts[i])),
            None,
        )
        if last_name_index is None:
            logging.debug(f"Every token of '{name}' is a suffix, using the first as the last name")
            last_name_index = 0

        given_names = name_parts[:last_name_index]
        suffixes = name_parts[last_name_index + 1 :]

        sections = [name_parts[last_name_index]]
        if given_names:
            sections.append(" ".join(given_names))
        if suffixes:
            sections.append(", ".join(suffixes).replace(".", ""))

        return normalize_whitespace(", ".join(sections))

    def get_sortable(self, name: str) -> str:
        """
        Main API method: convert a name to a form sortable by last name.

        Returns "Last, First Middle LastPrefix, Suffix" for people, the name with any
        leading article moved to the end for organizations, and the normalized input
        for names that are already sorted.
        """
        sortable_name = normalize_whitespace(name)

        if is_preformatted(sortable_name):
            return sortable_name

        if self.is_organization(sortable_name):
            return self.move_article_to_end(sortable_name)

        sortable_name = self.strip_honorific(sortable_name)
        return self.move_last_name_to_start(sortable_name)

    def sort_names(self, names: Iterable[str]) -> List[SortedName]:
        """Pair each name with its sortable form and order the pairs by the sortable form."""
        entries = [SortedName(name=name, sortable=self.get_sortable(name)) for name in names]
        return sorted(entries, key=lambda entry: collation_key(entry.sortable))


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global instance for module-level functions
_global_sortable: Optional[SortableNames] = None


def _get_global_sortable() -> SortableNames:
    """Get or create the default-configured instance."""
    global _global_sortable
    if _global_sortable is None:
        _global_sortable = SortableNames()
    return _global_sortable


def get_sortable(name: str) -> str:
    """
    Module-level convenience function using the default rule lists.

    Args:
        name: Input name string

    Returns:
        The name in sortable form
    """
    return _get_global_sortable().get_sortable(name)


def sort_names(names: Iterable[str]) -> List[SortedName]:
    """Sort names by their sortable form using the default rule lists."""
    return _get_global_sortable().sort_names(names)
