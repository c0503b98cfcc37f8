"""client for the LinkedIn basic profile API."""
from .api.client import LinkedInClient
from .api.fields import ALL_FIELDS
from .domain.errors import (
    LinkedInError,
    InvalidClientError,
    ProfileFetchError,
    ProfileDecodeError,
    ProfileStatusError,
)
from .domain.models import Profile, Position, Company, Location, Country, Date

__version__ = "0.1.0"

__all__ = [
    "LinkedInClient",
    "ALL_FIELDS",
    "LinkedInError",
    "InvalidClientError",
    "ProfileFetchError",
    "ProfileDecodeError",
    "ProfileStatusError",
    "Profile",
    "Position",
    "Company",
    "Location",
    "Country",
    "Date",
]
