from typing import Annotated, Generic, List, Optional, TypeVar

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

T = TypeVar("T")

_url_adapter = TypeAdapter(AnyUrl)


def _check_absolute_url(value: str) -> str:
    # Validate only; the submitted string is stored untouched
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Invalid URL")
    return value


UrlStr = Annotated[str, AfterValidator(_check_absolute_url)]


def not_null(*fields: str):
    """
    Validator for optional fields backed by NOT NULL columns: they may be
    omitted but not sent as an explicit null.
    """
    def check(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return value

    return field_validator(*fields, mode="before")(check)


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PaginationQuery(CamelModel):
    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1, le=100)
    q: Optional[str] = None

    @field_validator('q')
    @classmethod
    def trim_query(cls, v):
        if v is None:
            return None
        v = v.strip()
        return v or None


class Envelope(CamelModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None


class Page(CamelModel, Generic[T]):
    """
    Paginated listing. ``total`` always counts the whole table, it is not
    narrowed by the search term.
    """
    data: List[T]
    total: int
    page: int
    page_size: int
