"""
Input Sanitization Module

Cleans user-supplied text before it is stored, and folds names into the
comparison key used for duplicate checks and search.
"""

import re
import unicodedata

CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')
# Same as CONTROL_CHARS but keeps newlines and tabs
CONTROL_CHARS_MULTILINE = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def normalize_name(text):
    """
    Fold text for case- and accent-insensitive comparison.

    "Crème Fraîche", "creme fraiche" and "  CREME   FRAICHE " all fold to
    the same key.

    Args:
        text: The text to fold (can be None)

    Returns:
        Folded string
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Decompose and drop combining marks (accents)
    decomposed = unicodedata.normalize('NFKD', text)
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))

    return re.sub(r'\s+', ' ', stripped.casefold()).strip()


def sanitize_name(name, max_length=200):
    """
    Sanitize a record name for storage.

    Args:
        name: The name to sanitize (can be None)
        max_length: Maximum allowed length (default 200)

    Returns:
        Sanitized name, empty string if nothing is left after cleaning
    """
    if not name:
        return ''

    if not isinstance(name, str):
        name = str(name)

    # Remove control characters and null bytes
    name = CONTROL_CHARS.sub('', name)

    # Collapse multiple spaces
    name = re.sub(r'\s+', ' ', name).strip()

    if len(name) > max_length:
        name = name[:max_length].rstrip()

    return name


def sanitize_text(text, max_length=10000):
    """
    Sanitize free text (summaries, quantities) on a single line.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = CONTROL_CHARS.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_instructions(instructions, max_length=50000):
    """
    Sanitize recipe instructions.

    Preserves newlines for formatting.
    """
    if not instructions:
        return ''

    if not isinstance(instructions, str):
        instructions = str(instructions)

    instructions = CONTROL_CHARS_MULTILINE.sub('', instructions).strip()

    if len(instructions) > max_length:
        instructions = instructions[:max_length]

    return instructions
