"""Identifier casing and declaration naming."""

import re
from enum import Enum

_SEPARATOR = re.compile(r"[\W_]+")


class Role(str, Enum):
    """The part of an operation a declaration describes; the value is its name suffix."""

    PATH_PARAMS = "PathParams"
    QUERY_PARAMS = "QueryParams"
    HEADERS = "Headers"
    ERROR = "Error"
    RESPONSE = "Response"
    REQUEST_BODY = "RequestBody"
    VARIABLES = "Variables"


def _split_words(chunk: str) -> list[str]:
    # A capital starts a word unless it continues an acronym; digit runs are words of their own
    words = []
    word = ""
    for i, ch in enumerate(chunk):
        prev = chunk[i - 1] if i else ""
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
        if word and (
            (ch.isupper() and (not prev.isupper() or nxt.islower()))
            or ch.isdigit() != prev.isdigit()
        ):
            words.append(word)
            word = ""
        word += ch
    if word:
        words.append(word)
    return words


def pascal(text: str) -> str:
    """Convert an arbitrary identifier to PascalCase.

    Non-ASCII letters are kept; a leading digit gets a `_` prefix.

    >>> pascal("listPets"), pascal("get_pet-by_id"), pascal("getHTTPStatus")
    ('ListPets', 'GetPetById', 'GetHttpStatus')
    """
    result = "".join(
        word.capitalize()
        for chunk in _SEPARATOR.split(text)
        for word in _split_words(chunk)
    )
    if result[:1].isdigit():
        result = f"_{result}"
    return result


def declaration_name(operation_id: str, role: Role) -> str:
    """Name of the declaration holding `role` for `operation_id`."""
    return pascal(f"{operation_id}{role.value}")
