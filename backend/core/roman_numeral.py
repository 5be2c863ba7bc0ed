"""Integer to roman numeral conversion."""

# Largest value standard subtractive notation can express
MAX_ROMAN = 3999

_NUMERALS = (
    (1000, "m"),
    (900, "cm"),
    (500, "d"),
    (400, "cd"),
    (100, "c"),
    (90, "xc"),
    (50, "l"),
    (40, "xl"),
    (10, "x"),
    (9, "ix"),
    (5, "v"),
    (4, "iv"),
    (1, "i"),
)


def integer_to_roman(number: int) -> str:
    """
    Lowercase subtractive roman numeral for an integer in 1..3999.

    >>> integer_to_roman(4)
    'iv'
    >>> integer_to_roman(1994)
    'mcmxciv'
    """
    if not 1 <= number <= MAX_ROMAN:
        raise ValueError(f"Roman numerals cover 1 to {MAX_ROMAN}, got {number}")

    parts = []
    for value, numeral in _NUMERALS:
        count, number = divmod(number, value)
        parts.append(numeral * count)
    return "".join(parts)
