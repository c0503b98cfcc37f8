from typing import Optional

INVALID_CLIENT = "Invalid Client"


class LinkedInError(Exception):
    """base class for exceptions in linkedin_profile."""
    pass


class InvalidClientError(LinkedInError):
    """raised when a client has no usable access token."""
    def __init__(self, message: str = INVALID_CLIENT):
        super().__init__(message)


class ProfileFetchError(LinkedInError):
    """raised when the profile round trip fails."""
    prefix = "Failed to fetch profile"

    def __init__(self, reason: str, url: Optional[str] = None):
        self.reason = reason
        self.url = url
        super().__init__(f"{self.prefix}: {reason}")


class ProfileDecodeError(ProfileFetchError):
    """raised when the response body is not a decodable profile object."""
    prefix = "Could not decode profile response"


class ProfileStatusError(ProfileFetchError):
    """raised for non-2xx responses when status checking is enabled."""
    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}", url)
