"""Slug generator service.

Generates kebab-case slugs from role names. Handles unicode normalization,
punctuation runs, and camelCase or acronym word boundaries.
"""

import re
import unicodedata

# Acronym followed by a capitalized word, capitalized or lowercase word,
# bare acronym, or digit run.
WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def split_words(text: str) -> list[str]:
    """Split text into words on punctuation and case boundaries.

    Examples:
        >>> split_words("Love Raider")
        ['Love', 'Raider']
        >>> split_words("HTTPServer")
        ['HTTP', 'Server']
    """
    normalized = unicodedata.normalize("NFKD", text)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")
    return WORD_PATTERN.findall(ascii_text)


def kebab_case(text: str) -> str:
    """Convert text to a lowercase, hyphen-joined slug.

    Args:
        text: The text to convert (typically a role name).

    Returns:
        Kebab-case slug. Empty when the text has no letters or digits.

    Examples:
        >>> kebab_case("Love Raider")
        'love-raider'
        >>> kebab_case("fooBar")
        'foo-bar'
        >>> kebab_case("__Team  Lead__")
        'team-lead'
    """
    return "-".join(word.lower() for word in split_words(text))
