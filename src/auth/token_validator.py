import uuid
from dataclasses import dataclass
from typing import Optional

from auth_policy import Effect


class Unauthorized(Exception):
    """API Gateway answers 401 when the authorizer fails with exactly this message."""

    def __init__(self):
        super().__init__('Unauthorized')


@dataclass(frozen=True)
class TokenGrant:
    principal_id: str
    effect: Effect


# Demo tokens only. Swap validate_token for an OAuth callout, JWT decode or
# table lookup; the rest of the handler does not change.
TOKEN_EFFECTS = {
    'allow': Effect.ALLOW,
    'deny': Effect.DENY,
}


def validate_token(token: Optional[str]) -> TokenGrant:
    if not token:
        raise Unauthorized()

    parts = token.split()
    if len(parts) == 2 and parts[0].lower() == 'bearer':
        token = parts[1]

    effect = TOKEN_EFFECTS.get(token.strip().lower())
    if effect is None:
        raise Unauthorized()

    return TokenGrant(principal_id=f"user|{uuid.uuid4().hex[:8]}", effect=effect)
