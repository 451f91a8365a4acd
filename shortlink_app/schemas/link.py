from typing import Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

# AnyUrl accepts every scheme and normalizes the way browsers do
# ("https://example.com" -> "https://example.com/")
_absolute_url = TypeAdapter(AnyUrl)


def normalize_url(value: str) -> str:
    """
    Parse `value` as an absolute URL and return its canonical string form.

    Raises:
        pydantic.ValidationError: If the value is not an absolute URL
    """
    return str(_absolute_url.validate_python(value))


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class LinkTarget(CamelModel):
    """Request body for creating or retargeting a link.

    Kept as a plain string so malformed URLs reach the service and get the
    409 response instead of a validation error.
    """
    target_url: str = Field(..., description="Absolute URL the link should point at")


class LinkResponse(CamelModel):
    id: str
    target_url: str


class CounterLinkStatistics(CamelModel):
    """Number of redirects for one (referer, user agent) pair"""
    amount: int
    referer: Optional[str] = None
    user_agent: Optional[str] = None
