# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-bounded session tokens (HS256 JWT)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from socmed.domain.users.entities import TokenClaims
from socmed.domain.users.exceptions import InvalidTokenError, TokenSigningError
from socmed.domain.users.repositories import TokenIssuer
from socmed.shared.logging import logger

_REQUIRED_CLAIMS = ["id", "iat", "nbf", "exp"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        *,
        secret: str,
        ttl: timedelta,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if ttl <= timedelta(0):
            raise ValueError("token ttl must be positive")
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, subject_id: int) -> str:
        now = self._clock()
        claims = {
            "id": subject_id,
            "sub": str(subject_id),
            "iat": now,
            "nbf": now,
            "exp": now + self._ttl,
        }
        try:
            return jwt.encode(claims, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as exc:
            logger.error(f"token.issue: signing failed error={type(exc).__name__}")
            raise TokenSigningError() from exc

    def verify(self, token: str) -> TokenClaims:
        """Check signature and validity window, returning the embedded claims.

        Raises ``InvalidTokenError`` for a bad signature, a malformed token,
        a token used before ``nbf`` or after ``exp``.
        """
        now = self._clock()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": _REQUIRED_CLAIMS,
                    "verify_exp": False,
                    "verify_nbf": False,
                    "verify_iat": False,
                },
            )
        except jwt.PyJWTError as exc:
            logger.debug(f"token.verify: rejected reason={type(exc).__name__}")
            raise InvalidTokenError() from exc

        try:
            subject_id = int(payload["id"])
            issued_at = datetime.fromtimestamp(payload["iat"], UTC)
            not_before = datetime.fromtimestamp(payload["nbf"], UTC)
            expires_at = datetime.fromtimestamp(payload["exp"], UTC)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidTokenError() from exc

        # Checked against the injected clock so expiry is testable
        if now < not_before or now >= expires_at:
            logger.debug(f"token.verify: outside validity window subject={subject_id}")
            raise InvalidTokenError()

        return TokenClaims(
            subject_id=subject_id,
            issued_at=issued_at,
            not_before=not_before,
            expires_at=expires_at,
        )
