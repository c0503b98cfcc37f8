import json
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .errors import ProfileDecodeError


class Record(BaseModel):
    """immutable value decoded from an API body.

    keys arrive in camelCase; unknown keys are ignored and missing keys stay None.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Country(Record):
    name: Optional[str] = None
    code: Optional[str] = None


class Location(Record):
    name: Optional[str] = None
    country: Optional[Country] = None


class Date(Record):
    month: Optional[int] = None
    year: Optional[int] = None


class Company(Record):
    id: Optional[int] = None
    industry: Optional[str] = None
    name: Optional[str] = None
    size: Optional[str] = None
    type: Optional[str] = None


class Position(Record):
    """a work position; only reachable through Profile.positions."""
    id: Optional[int] = None
    is_current: Optional[bool] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    location: Optional[Location] = None
    start_date: Optional[Date] = None
    end_date: Optional[Date] = None
    company: Optional[Company] = None


class Pictures(Record):
    """original-size picture urls, from the `picture-urls::(original)` field."""
    total: Optional[int] = Field(default=None, alias="_total")
    urls: Tuple[str, ...] = Field(default_factory=tuple, alias="values")

    @field_validator("urls", mode="before")
    @classmethod
    def null_urls_as_empty(cls, value):
        return () if value is None else value


class Positions(Record):
    total: Optional[int] = Field(default=None, alias="_total")
    values: Tuple[Position, ...] = Field(default_factory=tuple)

    @field_validator("values", mode="before")
    @classmethod
    def null_values_as_empty(cls, value):
        return () if value is None else value


class Profile(Record):
    """a member's basic profile."""
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    maiden_name: Optional[str] = None
    formatted_name: Optional[str] = None
    phonetic_first_name: Optional[str] = None
    phonetic_last_name: Optional[str] = None
    formatted_phonetic_name: Optional[str] = None
    headline: Optional[str] = None
    industry: Optional[str] = None
    num_connections: Optional[int] = None
    num_connections_capped: Optional[bool] = None
    summary: Optional[str] = None
    specialties: Optional[str] = None
    positions: Optional[Positions] = None
    picture_url: Optional[str] = None
    picture_urls: Optional[Pictures] = None
    public_profile_url: Optional[str] = None
    email_address: Optional[str] = None
    location: Optional[Location] = None

    @classmethod
    def from_json(cls, body: Union[str, bytes]) -> "Profile":
        """
        decode a raw response body.

        raises:
            ProfileDecodeError: if the body is not JSON, not an object, or holds
                values of the wrong type
        """
        try:
            data = json.loads(body)
        except (ValueError, UnicodeDecodeError) as e:
            raise ProfileDecodeError(str(e)) from e

        if not isinstance(data, dict):
            raise ProfileDecodeError(f"expected a JSON object, got {type(data).__name__}")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ProfileDecodeError(str(e)) from e

    @property
    def position_list(self) -> Tuple[Position, ...]:
        if self.positions is None:
            return ()
        return self.positions.values

    @property
    def picture_url_list(self) -> Tuple[str, ...]:
        if self.picture_urls is None:
            return ()
        return self.picture_urls.urls
