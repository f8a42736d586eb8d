import re

DECORATIVE_SYMBOLS = re.compile(r'[👍⭐🔥💯]')


def normalize_keyword(text):
    return (text or "").strip().lower()


def get_initials(name):
    """
    Two-letter badge text used when a site icon cannot be shown.

    Decorative symbols are removed first. A name of two or more words gives
    the first letter of the first two words, anything else its first two
    characters. The result is upper-cased.
    """
    cleaned_name = DECORATIVE_SYMBOLS.sub('', name or '').strip()
    words = cleaned_name.split()
    if len(words) >= 2:
        return (words[0][0] + words[1][0]).upper()
    return cleaned_name[:2].upper()
