"""
Method name inflection

Converts between the naming conventions found in PDF engine APIs
(FPDF style PascalCase, ReportLab camelCase, fpdf2 snake_case).
"""

import re


def camelize(word: str) -> str:
    """Convert 'multi_cell' to 'MultiCell'."""
    return re.sub(r'(?:^|_)(.)', lambda m: m.group(1).upper(), word)


def lcfirst(word: str) -> str:
    return word[:1].lower() + word[1:]


def underscore(word: str) -> str:
    """Convert 'MultiCell' to 'multi_cell' and 'SetXY' to 'set_xy'."""
    word = re.sub(r'([A-Z\d]+)([A-Z][a-z])', r'\1_\2', word)
    word = re.sub(r'([a-z\d])([A-Z])', r'\1_\2', word)
    return word.lower()


def words_to_upper(word: str, sep: str = '_') -> str:
    """Uppercase the first letter of each word, keeping separators ('set_font' -> 'Set_Font')."""
    return sep.join(part[:1].upper() + part[1:] for part in word.split(sep))


def alternative_names(name: str) -> list[str]:
    """
    Get the alternative spellings of a method name, in lookup order.

    Args:
        name: Method name as requested by the caller

    Returns:
        PascalCase, camelCase, snake_case and words-to-upper spellings,
        without duplicates and without the name itself
    """
    candidates = [
        camelize(name),
        lcfirst(camelize(name)),
        underscore(name),
        words_to_upper(name),
    ]

    alternatives = []
    for candidate in candidates:
        if candidate != name and candidate not in alternatives:
            alternatives.append(candidate)
    return alternatives
