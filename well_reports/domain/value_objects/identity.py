from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Role:
    """Value object for a free-form role name.

    Roles form a flat set: two roles match only when their names are equal
    (case-sensitive). "admin" does not satisfy an "operator" requirement.
    """
    name: str

    def satisfies(self, required: Optional['Role']) -> bool:
        """True when no role is required or the names match exactly."""
        return required is None or self == required

    def __str__(self) -> str:
        return self.name


ADMIN = Role("admin")
OPERATOR = Role("operator")


@dataclass(frozen=True)
class Claims:
    """Payload carried inside an issued token."""
    subject: str
    role: str
    issued_at: Optional[int] = None


@dataclass(frozen=True)
class Identity:
    """Authenticated caller attached to the request by the authorization gate."""
    user_id: str
    role: Role

    @classmethod
    def from_claims(cls, claims: Claims) -> 'Identity':
        return cls(user_id=claims.subject, role=Role(claims.role))
