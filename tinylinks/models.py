import json
from dataclasses import dataclass, asdict
from typing import Any


@dataclass(frozen=True)
class ShortLinkDetail:
    """Represent the detail document stored alongside a short link.

    Attributes:
        url (str):
            The original long URL that the short link resolves to.
        created_at (str):
            ISO-8601 timestamp of the moment the short link was minted.
        expiration_in_minutes (int):
            Requested lifetime of the short link. 0 means it never expires.

    Example:
        >>> detail = ShortLinkDetail(
        ...     url='https://example.com',
        ...     created_at='2025-10-15T12:00:00+00:00',
        ...     expiration_in_minutes=60,
        ... )
        >>> detail.to_dict()
        {'url': 'https://example.com', 'created_at': '2025-10-15T12:00:00+00:00', 'expiration_in_minutes': 60}
    """

    # fmt: off
    url: str                        # Original long URL
    created_at: str                 # Creation timestamp (ISO-8601)
    expiration_in_minutes: int = 0  # Requested TTL in minutes
    # fmt: on

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, document: str) -> 'ShortLinkDetail':
        """Parse a stored detail document

        Raises:
            ValueError:
                If the document isn't valid JSON or lacks required fields.
        """
        try:
            data = json.loads(document)
            return cls(
                url=data['url'],
                created_at=data['created_at'],
                expiration_in_minutes=int(data.get('expiration_in_minutes', 0)),
            )
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            raise ValueError(f'Malformed short link detail document: {document!r}') from e
