from __future__ import annotations

from typing import Optional


class FantasyProsError(RuntimeError):
    pass


class FantasyProsConfigError(FantasyProsError):
    pass


class FantasyProsHTTPError(FantasyProsError):
    """Upstream answered with a non-2xx status (or an unusable body)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        upstream_message: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.upstream_message = upstream_message


class FantasyProsAuthError(FantasyProsHTTPError):
    pass


class FantasyProsRateLimitError(FantasyProsHTTPError):
    pass


class FantasyProsServerError(FantasyProsHTTPError):
    pass


class FantasyProsClientError(FantasyProsHTTPError):
    pass


class FantasyProsTransportError(FantasyProsError):
    pass
