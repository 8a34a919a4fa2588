"""Natural-key lookup tables built while reading a workbook."""

from typing import Dict, Generic, List, TypeVar

from persistence.exceptions import SchemaViolation, UnresolvedReferenceError

T = TypeVar("T")


class ReferenceRegistry(Generic[T]):
    """
    Maps the natural key of one entity kind (skill name, airport code) to
    the entity.

    Lives for a single read call. Later sheets resolve their string
    references through it.
    """

    def __init__(self, kind: str, sheet_name: str):
        self.kind = kind
        self.sheet_name = sheet_name
        self._entities: Dict[str, T] = {}

    def register(self, key: str, entity: T, position: str) -> None:
        """Add an entity; a duplicate natural key is rejected."""
        if key in self._entities:
            raise SchemaViolation(
                position,
                f"The {self.kind} ({key}) is defined more than once "
                f"in the sheet ({self.sheet_name}).",
                value=key
            )
        self._entities[key] = entity

    def resolve(self, key: str, position: str, referrer: str) -> T:
        """
        Look up an entity by natural key.

        Args:
            key: The natural key found in the referring cell
            position: Position of the referring cell
            referrer: Description of the referring field, e.g.
                "The employee (Ann)'s homeAirport"

        Raises:
            UnresolvedReferenceError: If the key is unknown
        """
        entity = self._entities.get(key)
        if entity is None:
            raise UnresolvedReferenceError(
                position,
                f"{referrer} ({key}) does not exist in the {self.kind}s "
                f"({self.keys()}) of the other sheet ({self.sheet_name}).",
                key=key,
                known_keys=self.keys()
            )
        return entity

    def keys(self) -> List[str]:
        return list(self._entities)

