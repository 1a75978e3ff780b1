"""Relay global object identifiers.

Relay expects every node to expose a globally unique ``ID``. A common way to
get one is to prefix the entity's own key with its type and encode the
result:

    RelayIdentifier(identifier="123", type_discriminator=EntityType.CHARACTER)
    # raw:     character::123
    # encoded: Y2hhcmFjdGVyOjoxMjM=

Using these identifiers is optional; any unique string works as an ``ID``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Self

from relay_helpers.core.exceptions import CursorError, InvalidIdentifierError
from relay_helpers.core.pagination.cursor import decode, encode

IDENTIFIER_DELIMITER = "::"


class TypeDiscriminator(Enum):
    """Enum base for the type part of a Relay identifier.

    The discriminator is the lower-cased member name.

    Example:
        class EntityType(TypeDiscriminator):
            CHARACTER = "character"
            LOCATION = "location"
    """

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_discriminator(cls, value: str) -> Self:
        """Parse a discriminator string back into a member.

        Raises:
            InvalidIdentifierError: If no member matches ``value``.
        """
        for member in cls:
            if str(member) == value:
                return member
        raise InvalidIdentifierError(
            detail=f"Invalid type discriminator: {value!r}",
            extra={"discriminator": value, "type": cls.__name__},
        )


@dataclass(frozen=True, slots=True)
class RelayIdentifier:
    """A type-qualified, opaque node identifier.

    Attributes:
        identifier: The entity's own key
        type_discriminator: Which entity type the key belongs to
    """

    identifier: str
    type_discriminator: TypeDiscriminator

    def to_raw_string(self) -> str:
        return f"{self.type_discriminator}{IDENTIFIER_DELIMITER}{self.identifier}"

    def to_encoded_string(self) -> str:
        """Build the URL-safe base64 form used as the GraphQL ``ID``."""
        return encode(self.to_raw_string())

    @classmethod
    def from_encoded_string(
        cls,
        encoded: str,
        discriminator_type: type[TypeDiscriminator],
    ) -> RelayIdentifier:
        """Decode an identifier previously produced by ``to_encoded_string``.

        Args:
            encoded: The encoded identifier.
            discriminator_type: Enum the type discriminator belongs to.

        Raises:
            InvalidIdentifierError: If the value cannot be decoded.
        """
        try:
            raw = decode(encoded)
        except CursorError as e:
            raise InvalidIdentifierError(
                detail=f"Identifier could not be decoded: {e.detail}",
                extra={"identifier": encoded},
            ) from e

        discriminator, sep, identifier = raw.partition(IDENTIFIER_DELIMITER)
        if not sep:
            raise InvalidIdentifierError(
                detail="Identifier is missing its type discriminator",
                extra={"identifier": encoded},
            )
        return cls(
            identifier=identifier,
            type_discriminator=discriminator_type.from_discriminator(discriminator),
        )

    def __str__(self) -> str:
        return self.to_encoded_string()


__all__ = [
    "IDENTIFIER_DELIMITER",
    "RelayIdentifier",
    "TypeDiscriminator",
]
