from dataclasses import dataclass
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from app.core.config import Settings
from app.core.exceptions import AuthError


@dataclass
class Identity:
    """The signed-in user as asserted by the identity provider's session token."""
    user_id: str
    name: str
    email: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "Identity":
        full_name = claims.get("name") or " ".join(
            part for part in (claims.get("given_name"), claims.get("family_name")) if part
        )
        return cls(
            user_id=claims["sub"],
            name=full_name.strip() or "User",
            email=claims.get("email"),
            image=claims.get("picture"),
        )


def decode_token(token: str, settings: Settings) -> Identity:
    options = {"verify_aud": False}
    try:
        payload = jwt.decode(
            token,
            settings.AUTH_JWT_KEY,
            algorithms=settings.jwt_algorithms,
            issuer=settings.AUTH_JWT_ISSUER,
            options=options,
        )
    except JWTError:
        raise AuthError.unauthenticated()

    if not payload.get("sub"):
        raise AuthError.unauthenticated()
    return Identity.from_claims(payload)
