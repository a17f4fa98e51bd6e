# waitlist/client.py

import httpx
from typing import Any, Dict, Optional


class WaitlistClient:
    """Posts landing-page form submissions to a waitlist endpoint."""

    def __init__(self, endpoint: str, logger=None, timeout: float = 10.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.endpoint = endpoint
        self.logger = logger
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)
        if self.logger:
            self.logger.debug(f"Initialized waitlist client: {self.endpoint}")

    async def submit(self, name: str, email: str) -> Optional[Dict[str, Any]]:
        """
        Send one name/email pair.

        Returns:
            The decoded response body, or None if the request failed. A 4xx
            reply with a JSON body is returned as well. Failures are logged
            only; nothing is retried.
        """
        try:
            response = await self.client.post(self.endpoint, json={'name': name, 'email': email})
            response.raise_for_status()
            data = response.json()
            if self.logger:
                self.logger.info(f"Success: {data}")
            return data

        except httpx.TimeoutException as e:
            if self.logger:
                self.logger.error(f"Waitlist request timed out: {str(e)}")

        except httpx.HTTPStatusError as e:
            if self.logger:
                self.logger.error(f"HTTP {e.response.status_code}: {e.response.text}")
            if e.response.is_client_error:
                try:
                    return e.response.json()
                except ValueError:
                    pass

        except httpx.RequestError as e:
            if self.logger:
                self.logger.error(f"Connection error: {str(e)}")

        except ValueError as e:
            if self.logger:
                self.logger.error(f"Invalid response body: {str(e)}")

        return None

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
