from typing import Any, Mapping

from ...shared.exceptions import ValidationException


def require_fields(values: Mapping[str, Any], message: str = "All fields are required.") -> None:
    """Raise ValidationException for the first missing or falsy value.

    Falsy is meant literally: None, "", and numeric 0 all count as missing.
    """
    for field, value in values.items():
        if not value:
            raise ValidationException(message=message, field=field)
