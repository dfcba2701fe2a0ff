import base64
import json
import logging
import time
from typing import Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from . import config

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

# Allowed clock skew between us and the identity provider, in seconds
CLOCK_SKEW_SECONDS = 60

# Cache for the identity provider's public key, keyed by the PEM text it was loaded from
_cached_key = None
_cached_key_pem: Optional[str] = None


class Identity(BaseModel):
    """Authenticated caller as asserted by the identity provider"""

    subject: str
    email: Optional[str] = None
    name: Optional[str] = None

    @property
    def owner(self) -> str:
        """Value stored in created_by and used as the default owner filter"""
        return self.email or self.subject


def _b64decode(segment: str) -> bytes:
    padding_needed = 4 - len(segment) % 4
    return base64.urlsafe_b64decode(segment + ("=" * padding_needed if padding_needed != 4 else ""))


def get_identity_provider_key():
    """Load (and cache) the configured PEM public key"""
    global _cached_key, _cached_key_pem

    pem = config.IDENTITY_PROVIDER_PUBLIC_KEY
    if not pem:
        logger.error("❌ IDENTITY_PROVIDER_PUBLIC_KEY not configured")
        raise HTTPException(status_code=500, detail="Identity provider not configured")

    if _cached_key is not None and _cached_key_pem == pem:
        return _cached_key

    try:
        _cached_key = serialization.load_pem_public_key(pem.replace("\\n", "\n").encode())
        _cached_key_pem = pem
        logger.info("✅ Identity provider public key loaded")
    except ValueError as e:
        logger.error(f"❌ Failed to load identity provider public key: {e}")
        raise HTTPException(status_code=500, detail="Identity provider key is invalid") from e
    return _cached_key


def verify_identity_token(token: str) -> dict:
    """
    Verify an RS256 session token issued by the identity provider.
    Checks the signature against the configured public key, then the time claims
    and, when configured, the issuer.
    """
    parts = token.split(".")
    if len(parts) != 3:
        logger.warning(f"⚠️ Malformed token received: {len(parts)} parts")
        raise HTTPException(status_code=401, detail="Invalid token format")

    header_b64, payload_b64, signature_b64 = parts

    try:
        header = json.loads(_b64decode(header_b64))
    except (ValueError, TypeError) as e:
        logger.error(f"❌ Failed to decode token header: {e}")
        raise HTTPException(status_code=401, detail="Invalid token header") from e

    if not isinstance(header, dict) or header.get("alg") != "RS256":
        logger.error("❌ Invalid token algorithm")
        raise HTTPException(status_code=401, detail="Invalid token algorithm")

    public_key = get_identity_provider_key()

    try:
        signature = _b64decode(signature_b64)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=401, detail="Invalid token signature format") from e

    try:
        public_key.verify(
            signature,
            f"{header_b64}.{payload_b64}".encode(),
            padding.PKCS1v15(),
            hashes.SHA256(),
        )
    except InvalidSignature as e:
        logger.error("❌ Token signature verification failed")
        raise HTTPException(status_code=401, detail="Invalid token signature") from e

    try:
        payload = json.loads(_b64decode(payload_b64))
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=401, detail="Invalid token payload") from e

    if not isinstance(payload, dict):
        raise HTTPException(status_code=401, detail="Invalid token payload")

    now = time.time()
    exp = payload.get("exp")
    if not isinstance(exp, (int, float)) or exp < now:
        raise HTTPException(
            status_code=401,
            detail="Token has expired. Please refresh your session.",
            headers={"X-Token-Expired": "true"},
        )

    nbf = payload.get("nbf")
    if isinstance(nbf, (int, float)) and nbf > now + CLOCK_SKEW_SECONDS:
        raise HTTPException(status_code=401, detail="Token not yet valid")

    iat = payload.get("iat")
    if isinstance(iat, (int, float)) and iat > now + CLOCK_SKEW_SECONDS:
        logger.warning("⚠️ Token issued in the future")
        raise HTTPException(status_code=401, detail="Invalid token")

    if config.IDENTITY_PROVIDER_ISSUER and payload.get("iss") != config.IDENTITY_PROVIDER_ISSUER:
        logger.error("❌ Token issuer mismatch")
        raise HTTPException(status_code=401, detail="Invalid token issuer")

    return payload


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Identity:
    """Resolve the caller identity from the bearer token"""
    if not credentials:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated. Please provide a valid Bearer token in the Authorization header.",
        )

    claims = verify_identity_token(credentials.credentials)

    subject = claims.get("sub")
    if not subject:
        logger.error(f"❌ Token missing subject claim. Available claims: {list(claims.keys())}")
        raise HTTPException(status_code=401, detail="Invalid token claims")

    identity = Identity(subject=subject, email=claims.get("email"), name=claims.get("name"))
    logger.debug(f"✅ User authenticated: {identity.owner}")
    return identity
