"""
Input checks shared by the services

Routers already validate bodies with pydantic; these checks cover callers
that hand the services plain dicts (seeding scripts, bulk imports).
"""
from typing import Any, Iterable, Mapping

from byteforge.core.exceptions import ContentValidationError


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Raise ContentValidationError naming every missing or blank field"""
    missing = [field for field in fields if _is_blank(data.get(field))]
    if missing:
        raise ContentValidationError(
            f"Missing required fields: {', '.join(missing)}",
            fields=missing,
        )


def pick(data: Mapping[str, Any], fields: Iterable[str]) -> dict:
    """Keep only the allowed, non-null fields of a patch"""
    return {field: data[field] for field in fields if data.get(field) is not None}
