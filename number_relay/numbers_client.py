import logging
import os
from typing import List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .models import Number, is_number

DEFAULT_BASE_URL = "https://third-party-server"
FETCH_TIMEOUT = 0.5


def _create_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    # one attempt only; a slow provider is treated as "no new numbers"
    retry = Retry(total=0, raise_on_status=False)
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def _extract_numbers(data: object) -> List[Number]:
    if not isinstance(data, dict):
        raise ValueError("response body is not an object")
    numbers = data.get("numbers")
    if not isinstance(numbers, list):
        raise ValueError("response has no numbers list")
    for value in numbers:
        if not is_number(value):
            raise ValueError(f"non-numeric or non-finite entry {value!r}")
    return numbers


class NumbersClient:
    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = FETCH_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.access_token = access_token if access_token is not None else os.getenv("ACCESS_TOKEN", "")
        self.base_url = (base_url or os.getenv("UPSTREAM_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self._session = session or _create_session()

        if not self.access_token:
            logging.warning("ACCESS_TOKEN is not set; upstream requests will likely be rejected.")

    def fetch(self, series_id: str) -> List[Number]:
        """Fetch the current numbers for ``series_id``; any failure yields an empty list."""
        url = f"{self.base_url}/numbers/{series_id}"
        headers = {"Authorization": f"Bearer {self.access_token}"}
        try:
            resp = self._session.get(url, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            return _extract_numbers(resp.json())
        except requests.Timeout:
            logging.warning("Error fetching numbers: timed out after %.3fs (%s)", self.timeout, url)
        except requests.JSONDecodeError as e:
            logging.warning("Error fetching numbers: invalid response format (%s)", e)
        except requests.RequestException as e:
            logging.warning("Error fetching numbers: %s", e)
        except ValueError as e:
            logging.warning("Error fetching numbers: invalid response format (%s)", e)
        return []
