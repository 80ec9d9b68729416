"""Ordered field list of a collection.

The schema is mutated in memory by migrations and persisted as a JSON array
when the owning collection is saved.
"""

import json
from typing import Any, Iterator

from wanderer.domain.entities.schema_field import SchemaField, generate_field_id
from wanderer.domain.exceptions import SchemaDecodeError


class Schema:
    """Ordered collection of schema fields."""

    def __init__(self, fields: list[SchemaField] | None = None) -> None:
        self._fields: list[SchemaField] = list(fields or [])

    @property
    def fields(self) -> list[SchemaField]:
        """Return a shallow copy of the field list."""
        return list(self._fields)

    def __iter__(self) -> Iterator[SchemaField]:
        return iter(list(self._fields))

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        return f"<Schema(fields={[f.name for f in self._fields]})>"

    def get_field_by_id(self, field_id: str) -> SchemaField | None:
        for f in self._fields:
            if f.id == field_id:
                return f
        return None

    def add_field(self, new_field: SchemaField) -> None:
        """Append a field to the schema.

        A field whose id is already present replaces the existing one in place.
        A field without id gets a generated one.

        Args:
            new_field: The field to add.
        """
        if not new_field.id:
            new_field.id = generate_field_id()

        for i, existing in enumerate(self._fields):
            if existing.id == new_field.id:
                self._fields[i] = new_field
                return

        self._fields.append(new_field)

    def remove_field(self, field_id: str) -> None:
        """Remove the field with the given id. Unknown ids are ignored."""
        self._fields = [f for f in self._fields if f.id != field_id]

    def as_list(self) -> list[dict[str, Any]]:
        return [f.to_dict() for f in self._fields]

    def to_json(self) -> str:
        return json.dumps(self.as_list())

    @classmethod
    def from_list(cls, data: list[dict[str, Any]]) -> "Schema":
        if not isinstance(data, list):
            raise SchemaDecodeError("Schema must be a list of field definitions")
        return cls([SchemaField.from_dict(item) for item in data])

    @classmethod
    def from_json(cls, raw: str | None) -> "Schema":
        """Decode a schema from its stored JSON representation.

        Raises:
            SchemaDecodeError: If the JSON or any field definition is malformed.
        """
        if not raw:
            return cls()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SchemaDecodeError(f"Invalid schema JSON: {e}") from e
        return cls.from_list(data)
