"""Pydantic schema for repository custom property values."""

from pydantic import BaseModel


class CustomPropertyValue(BaseModel):
    """Pydantic model for one custom property value of a repository.

    A single-select (or text) property carries a string, a multi-select
    property carries a list of strings, and an unset property carries None.
    """

    property_name: str
    value: str | list[str] | None = None
