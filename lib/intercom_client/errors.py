from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .result import Failure


class IntercomClientError(Exception):
    """Base client error."""


class NetworkError(IntercomClientError):
    """Transport/network layer error."""


class SelfTestError(IntercomClientError):
    def __init__(self, failure: Failure):
        super().__init__(f"self test failed: {failure.error}")
        self.failure = failure
        self.status_code = failure.status
