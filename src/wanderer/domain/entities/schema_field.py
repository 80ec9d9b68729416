"""Schema field entities for collection schemas.

A collection schema is an ordered list of field definitions. Each field has a
stable id, a name, a type and a type-specific options structure. Fields are
stored as JSON in the collections table, using camelCase option keys.
"""

import secrets
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from wanderer.domain.exceptions import SchemaDecodeError

FIELD_ID_LENGTH = 8
FIELD_ID_ALPHABET = string.ascii_lowercase + string.digits


class FieldType(str, Enum):
    """Supported field types for collection schemas."""

    TEXT = "text"
    EDITOR = "editor"
    NUMBER = "number"
    BOOL = "bool"
    EMAIL = "email"
    URL = "url"
    DATE = "date"
    SELECT = "select"
    JSON = "json"
    FILE = "file"
    RELATION = "relation"


def generate_field_id() -> str:
    """Generate a random 8-character lowercase alphanumeric field id."""
    return "".join(secrets.choice(FIELD_ID_ALPHABET) for _ in range(FIELD_ID_LENGTH))


@dataclass
class FileOptions:
    """Options of a file field.

    Attributes:
        mime_types: Allowed MIME types (empty allows any).
        thumbs: Thumbnail size specs such as "100x100".
        max_select: Maximum number of files per record.
        max_size: Maximum size of a single file in bytes.
        protected: Whether files require a token to download.
    """

    mime_types: list[str] = field(default_factory=list)
    thumbs: list[str] = field(default_factory=list)
    max_select: int = 1
    max_size: int = 5242880
    protected: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "mimeTypes": list(self.mime_types),
            "thumbs": list(self.thumbs),
            "maxSelect": self.max_select,
            "maxSize": self.max_size,
            "protected": self.protected,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FileOptions":
        """Decode file options, filling defaults for missing keys.

        Raises:
            SchemaDecodeError: If a key holds a value of the wrong type.
        """
        defaults = cls()
        mime_types = data.get("mimeTypes", defaults.mime_types)
        thumbs = data.get("thumbs", defaults.thumbs)
        max_select = data.get("maxSelect", defaults.max_select)
        max_size = data.get("maxSize", defaults.max_size)
        protected = data.get("protected", defaults.protected)

        if not isinstance(mime_types, list) or not all(isinstance(m, str) for m in mime_types):
            raise SchemaDecodeError("File option 'mimeTypes' must be a list of strings")
        if not isinstance(thumbs, list) or not all(isinstance(t, str) for t in thumbs):
            raise SchemaDecodeError("File option 'thumbs' must be a list of strings")
        for key, value in (("maxSelect", max_select), ("maxSize", max_size)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise SchemaDecodeError(f"File option '{key}' must be an integer")
        if not isinstance(protected, bool):
            raise SchemaDecodeError("File option 'protected' must be a boolean")

        return cls(
            mime_types=list(mime_types),
            thumbs=list(thumbs),
            max_select=max_select,
            max_size=max_size,
            protected=protected,
        )


@dataclass
class SchemaField:
    """A single field definition within a collection schema.

    Attributes:
        id: Stable identifier, unique within the collection.
        name: Field name (used as the record attribute).
        type: Field type.
        system: Whether the field is managed by the backend itself.
        required: Whether records must provide a value.
        presentable: Whether the field is shown when the record is referenced.
        unique: Whether values must be unique across records.
        options: Type-specific options. File fields carry FileOptions.
    """

    id: str
    name: str
    type: FieldType
    system: bool = False
    required: bool = False
    presentable: bool = False
    unique: bool = False
    options: FileOptions | dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        options = self.options.to_dict() if isinstance(self.options, FileOptions) else dict(self.options)
        return {
            "system": self.system,
            "id": self.id,
            "name": self.name,
            "type": self.type.value if isinstance(self.type, FieldType) else self.type,
            "required": self.required,
            "presentable": self.presentable,
            "unique": self.unique,
            "options": options,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SchemaField":
        """Decode a stored field definition.

        Args:
            data: Field definition as stored in the collection schema JSON.

        Returns:
            The decoded field.

        Raises:
            SchemaDecodeError: If the definition is malformed.
        """
        if not isinstance(data, dict):
            raise SchemaDecodeError("Field definition must be an object")

        for key in ("id", "name", "type"):
            if not isinstance(data.get(key), str):
                raise SchemaDecodeError(f"Field definition requires string '{key}'")

        try:
            field_type = FieldType(data["type"])
        except ValueError as e:
            raise SchemaDecodeError(f"Unknown field type '{data['type']}'") from e

        flags = {}
        for key in ("system", "required", "presentable", "unique"):
            value = data.get(key, False)
            if not isinstance(value, bool):
                raise SchemaDecodeError(f"Field attribute '{key}' must be a boolean")
            flags[key] = value

        raw_options = data.get("options", {})
        if raw_options is None:
            raw_options = {}
        if not isinstance(raw_options, dict):
            raise SchemaDecodeError("Field 'options' must be an object")
        options: FileOptions | dict[str, Any]
        if field_type == FieldType.FILE:
            options = FileOptions.from_dict(raw_options)
        else:
            options = dict(raw_options)

        return cls(
            id=data["id"],
            name=data["name"],
            type=field_type,
            options=options,
            **flags,
        )
