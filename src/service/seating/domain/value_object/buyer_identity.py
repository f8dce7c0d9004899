from typing import Optional

import attrs


@attrs.frozen
class BuyerIdentity:
    email: str
    first_name: str
    last_name: str


@attrs.frozen
class BuyerForm:
    """Buyer details as typed so far; any field may still be blank."""

    email: str = ''
    first_name: str = ''
    last_name: str = ''

    @classmethod
    def from_identity(cls, identity: BuyerIdentity) -> 'BuyerForm':
        return cls(
            email=identity.email,
            first_name=identity.first_name,
            last_name=identity.last_name,
        )

    def update(
        self,
        *,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> 'BuyerForm':
        changes = {
            'email': email,
            'first_name': first_name,
            'last_name': last_name,
        }
        return attrs.evolve(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def missing_fields(self) -> list[str]:
        return [
            name
            for name in ('email', 'first_name', 'last_name')
            if not getattr(self, name).strip()
        ]

    def to_identity(self) -> Optional[BuyerIdentity]:
        """Trimmed identity, or None while any field is blank."""
        if self.missing_fields:
            return None
        return BuyerIdentity(
            email=self.email.strip(),
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
        )
