"""field selectors for the basic profile resource.

see https://developer.linkedin.com/docs/fields/basic-profile
"""
from typing import Sequence, Tuple

API_BASE_URL = "https://api.linkedin.com"
ALL_SENTINEL = "all"

ALL_FIELDS: Tuple[str, ...] = (
    "first-name",
    "last-name",
    "maiden-name",
    "formatted-name",
    "phonetic-first-name",
    "phonetic-last-name",
    "formatted-phonetic-name",
    "headline",
    "current-share",
    "num-connections",
    "num-connections-capped",
    "summary",
    "specialties",
    "picture-url",
    "site-standard-profile-request",
    "api-standard-profile-request",
    "public-profile-url",
    "email-address",
    "industry",
    "picture-urls::(original)",
    "location",
    "positions",
    "id",
)


def resolve_fields(fields: Sequence[str]) -> Tuple[str, ...]:
    """expand a lone "all" into ALL_FIELDS; anything else is kept in order."""
    if len(fields) == 1 and fields[0] == ALL_SENTINEL:
        return ALL_FIELDS
    return tuple(fields)


def build_field_selector(fields: Sequence[str]) -> str:
    resolved = resolve_fields(fields)
    if not resolved:
        return ""
    return ":(" + ",".join(resolved) + ")"


def build_profile_url(fields: Sequence[str] = (), base_url: str = API_BASE_URL) -> str:
    """
    build the url for the current member's profile.

    the selector goes directly after `~`, e.g.
    https://api.linkedin.com/v1/people/~:(id,headline)?format=json
    """
    base_url = base_url.rstrip("/")
    return f"{base_url}/v1/people/~{build_field_selector(fields)}?format=json"
