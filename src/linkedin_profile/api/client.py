import logging
from typing import Optional

import httpx

from ..domain.errors import (
    InvalidClientError,
    ProfileDecodeError,
    ProfileFetchError,
    ProfileStatusError,
)
from ..domain.models import Profile
from .fields import API_BASE_URL, build_profile_url

logger = logging.getLogger(__name__)


class LinkedInClient:
    """fetches profile data with an already-issued OAuth2 access token.

    the token never changes after construction, so one client can be shared
    between threads.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = API_BASE_URL,
        http_client: Optional[httpx.Client] = None,
        check_status: bool = False,
    ):
        if not access_token:
            raise InvalidClientError()
        self._access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.check_status = check_status
        self._owns_client = http_client is None
        self.client = http_client if http_client is not None else httpx.Client()

    @property
    def access_token(self) -> str:
        return self._access_token

    def fetch_basic_profile(self, *fields: str) -> Profile:
        """
        get the profile of the member who owns the access token.

        args:
            fields: field names per the basic profile docs, a single "all" for
                every known field, or nothing for the minimal profile

        returns:
            the decoded profile; keys missing from the response are None

        raises:
            InvalidClientError: if the client has no token (no request is sent)
            ProfileStatusError: on a non-2xx response when check_status is set
            ProfileDecodeError: if the body is not a JSON object
            ProfileFetchError: if the request or read fails
        """
        token = getattr(self, "_access_token", None)
        if not token:
            raise InvalidClientError()

        url = build_profile_url(fields, self.base_url)
        logger.debug(f"GET {url}")

        try:
            response = self.client.get(url, headers={"Authorization": f"Bearer {token}"})
            body = response.read()
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            logger.warning(f"profile request failed: {e}")
            raise ProfileFetchError(str(e) or type(e).__name__, url) from e

        logger.debug(f"profile response: HTTP {response.status_code}, {len(body)} bytes")

        if self.check_status and not response.is_success:
            raise ProfileStatusError(response.status_code, url)

        try:
            return Profile.from_json(body)
        except ProfileDecodeError as e:
            logger.warning(f"could not decode profile response: {e.reason}")
            e.url = url
            raise

    def close(self):
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "LinkedInClient":
        return self

    def __exit__(self, *exc_info):
        self.close()
