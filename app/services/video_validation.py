"""
Turns pydantic errors for VideoCreate / VideoUpdate bodies into ErrorType entries,
one {"message": "Invalid <field>", "field": <camelCase field>} per error, so a bad
element in availableResolutions shows up once per element.
"""
from typing import Any, Mapping, Sequence


def _field(loc: Sequence[Any]) -> str:
    # request errors are prefixed with "body"; a bare "body" means the body itself is bad
    if loc and loc[0] == "body":
        loc = loc[1:]
    if loc and isinstance(loc[0], str):
        return loc[0]
    return "body"


def error_messages(errors: Sequence[Mapping[str, Any]]) -> list[dict]:
    messages = []
    for error in errors:
        field = _field(error["loc"])
        messages.append({"message": f"Invalid {field}", "field": field})
    return messages
