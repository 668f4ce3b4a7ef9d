import logging
from typing import Any, Dict, Optional

import requests

from core.config import settings

logger = logging.getLogger(__name__)


class Downloader:
    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None):
        """
        Args:
            timeout: Per-request timeout in seconds (defaults to HTTP_TIMEOUT)
            user_agent: User-Agent header sent with every request
        """
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.user_agent = user_agent or settings.HTTP_USER_AGENT

    def get_headers(self) -> Dict[str, str]:
        return {'User-Agent': self.user_agent}

    def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        logger.debug(f"GET {url} params={params}")
        response = requests.get(
            url,
            params=params,
            headers=self.get_headers(),
            timeout=self.timeout
        )
        response.raise_for_status()
        return response

    def get_text(self, url: str, params: Optional[Dict[str, Any]] = None) -> str:
        """
        Download a URL and return the body as text.

        Raises:
            requests.RequestException: On connection errors, timeouts and non-2xx responses
        """
        return self._get(url, params).text

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Download a URL and return the decoded JSON body.

        Raises:
            requests.RequestException: On connection errors, timeouts, non-2xx
                responses and bodies that are not valid JSON
        """
        return self._get(url, params).json()
