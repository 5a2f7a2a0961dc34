# ═════════════════════════════════════════════════════════════════════════════════
# DEFAULT RULE LISTS
# ═════════════════════════════════════════════════════════════════════════════════
#
# Four independent lists of regular-expression fragments drive classification
# and rewriting:
# 1. ARTICLES: leading words moved to the end of organization names
# 2. ORG_WORDS: whole words that mark a name as an organization
# 3. HONORIFICS: leading titles removed from person names
# 4. NAME_SUFFIXES: trailing qualifiers kept at the end of person names
#
# Fragments are combined into composite patterns, never matched one by one, so
# each fragment is wrapped in a non-capturing group before joining. Honorifics
# and suffixes get an optional trailing period appended automatically.
# ═════════════════════════════════════════════════════════════════════════════════

from typing import Iterable, Tuple

# Layer 1: ARTICLES - anchored to the start of the name, matched case-insensitively
DEFAULT_ARTICLES: Tuple[str, ...] = (
    "An?",
    "The",
    "Ye",
)

# Layer 2: ORG_WORDS - each fragment is placed between word boundaries
DEFAULT_ORG_WORDS: Tuple[str, ...] = (
    r"Academ(?:y|ies)",
    r"Agenc(?:y|ies)",
    r"Clubs?",
    r"Co\.?",
    r"Collectives?",
    r"Colleges?",
    r"Committees?",
    r"Compan(?:y|ies)",
    r"Corporations?",
    r"Councils?",
    r"Entertainment",
    r"Foundations?",
    r"Games",
    r"Governments?",
    r"Groups?",
    r"Inc\.?",
    r"Industr(?:y|ies)",
    r"Institutes?",
    r"Leagues?",
    r"Librar(?:y|ies)",
    r"Media",
    r"National",
    r"Networks?",
    r"Offices?",
    r"Schools?",
    r"Societ(?:y|ies)",
    r"Software",
    r"Studios?",
    r"Teams?",
    r"Universit(?:y|ies)",
)

# Layer 3: HONORIFICS - case-sensitive, "Mr" also matches "Mr."
DEFAULT_HONORIFICS: Tuple[str, ...] = (
    r"M(?:[ia]ste)?r",
    r"Mrs",
    r"M(?:is)?s",
    r"Mx",
    r"D(?:octo)?r",
    r"Prof(?:essor)?",
    r"Rev(?:erend)?",
    r"Sire?",
    r"Dame",
    r"Lord",
    r"Lady",
)

# Layer 4: NAME_SUFFIXES - whole-token matches, "Jr" also matches "Jr."
DEFAULT_NAME_SUFFIXES: Tuple[str, ...] = (
    r"J(?:unio)?r",
    r"S(?:enio)?r",
    # Roman numerals I through XXXVIII
    r"(?=[XVI])(X{0,3})(I[XV]|V?I{0,3})",
    # Educational and professional credentials
    r"B\.?Ed",
    r"B\.?F\.?A",
    r"B\.?S",
    r"B\.?Sc",
    r"B\.?T",
    r"B\.?Tech",
    r"C\.?Eng",
    r"C\.?F\.?A",
    r"C\.?I\.?S\.?A",
    r"C\.?I\.?S\.?S\.?P",
    r"C\.?I\.?S\.?M",
    r"C\.?P\.?A",
    r"C\.?P\.?L",
    r"C\.?S\.?A",
    r"D\.?B\.?A",
    r"D\.?D\.?S",
    r"D\.?M\.?D",
    r"D\.?Min",
    r"D\.?Phil",
    r"D\.?V\.?M",
    r"Ed\.?D",
    r"Eng\.?D",
    r"Esq(?:uire)?",
    r"J\.?D",
    r"M\.?B\.?A",
    r"M\.?D",
    r"M\.?Eng",
    r"M\.?F\.?A",
    r"M\.?L",
    r"M\.?L\.?A",
    r"M\.?S",
    r"M\.?Sc",
    r"M\.?S\.?W",
    r"P\.?Eng",
    r"Pharm\.?D",
    r"Ph\.?D",
    r"P\.?M\.?P",
    r"R\.?N",
    # Dotted forms only; the bare letters are plausible all-caps surnames
    r"A\.B",
    r"B\.A",
    r"B\.E",
    r"C\.A",
    r"D\.O",
    r"M\.A",
    r"M\.E",
    r"P\.E",
)


# ═════════════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═════════════════════════════════════════════════════════════════════════════════


def _assert_no_duplicate_fragments(list_name: str, fragments: Iterable[str]) -> None:
    """Validate that no fragment appears twice within a single default list."""
    seen = set()
    for fragment in fragments:
        if fragment in seen:
            raise ValueError(f"Duplicate fragment in {list_name}: {fragment}")
        seen.add(fragment)


_assert_no_duplicate_fragments("DEFAULT_ARTICLES", DEFAULT_ARTICLES)
_assert_no_duplicate_fragments("DEFAULT_ORG_WORDS", DEFAULT_ORG_WORDS)
_assert_no_duplicate_fragments("DEFAULT_HONORIFICS", DEFAULT_HONORIFICS)
_assert_no_duplicate_fragments("DEFAULT_NAME_SUFFIXES", DEFAULT_NAME_SUFFIXES)
