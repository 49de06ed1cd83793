from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError

from consent_portal.constants.enums import TokenType
from consent_portal.core.settings import settings
from consent_portal.dtos.token_dtos import AccessTokenPayload


class TokenService:

    def create_access_token(
        self, user_id: str, username: str | None, email: str | None
    ) -> str:
        now = datetime.now(timezone.utc)
        expires = now + timedelta(seconds=settings.access_token_expire_seconds)
        payload = {
            "sub": user_id,
            "type": TokenType.ACCESS.value,
            "user_id": user_id,
            "username": username,
            "email": email,
            "iat": now,
            "exp": expires,
        }
        return jwt.encode(
            payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm
        )

    def verify_access_token(self, token: str) -> AccessTokenPayload | None:
        try:
            payload = jwt.decode(
                token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
            )
            if payload.get("type") != TokenType.ACCESS.value:
                return None
            return AccessTokenPayload(**payload)
        except jwt.ExpiredSignatureError:
            return None
        except jwt.InvalidTokenError:
            return None
        except ValidationError:
            return None


token_service = TokenService()
