"""User-facing rejection messages."""


def build_unknown_name(keyword: str, name: str) -> str:
    """
    Message for a name with no plausible match.

    >>> build_unknown_name("move damage category", "zzz")
    'Move damage category "zzz" doesn\\'t exist'
    """
    return f'{keyword[:1].upper()}{keyword[1:]} "{name}" doesn\'t exist'


def build_suggested_name(keyword: str, name: str, suggestion: str) -> str:
    """
    Message for a name whose best match was not confident enough to accept.

    >>> print(build_suggested_name("pokemon", "peacachu", "pikachu"))
    Unknown pokemon "peacachu"
    Did you mean "pikachu"?
    """
    return f'Unknown {keyword} "{name}"\nDid you mean "{suggestion}"?'
