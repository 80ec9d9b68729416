"""Collection validation service for schema and field validation.

Provides validation for collection names, schema definitions, and field
configurations. A collection is validated every time it is saved.
"""

import re
from dataclasses import dataclass

from wanderer.domain.entities import Collection, FieldType, FileOptions, SchemaField

# Reserved field names that are auto-added by the system
RESERVED_FIELD_NAMES = frozenset({
    "id",
    "created",
    "updated",
    "collectionid",
    "collectionname",
    "expand",
})

# Pattern for valid collection and field names
NAME_PATTERN = re.compile(r"^\w+$", re.ASCII)


@dataclass
class CollectionValidationError:
    """A single collection validation error."""

    field: str
    message: str
    code: str


class CollectionValidator:
    """Validator for collections about to be persisted.

    Validates the collection name, each field definition and the field list as a whole.
    """

    # Collection name constraints
    MAX_NAME_LENGTH = 255

    # Field name constraints
    MAX_FIELD_NAME_LENGTH = 255

    @classmethod
    def validate_name(cls, name: str) -> list[CollectionValidationError]:
        """Validate a collection name.

        Args:
            name: The collection name to validate.

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []

        if not name:
            errors.append(
                CollectionValidationError(
                    field="name",
                    message="Collection name is required",
                    code="name_required",
                )
            )
            return errors

        if len(name) > cls.MAX_NAME_LENGTH:
            errors.append(
                CollectionValidationError(
                    field="name",
                    message=f"Collection name must be at most {cls.MAX_NAME_LENGTH} characters",
                    code="name_too_long",
                )
            )

        if not NAME_PATTERN.fullmatch(name):
            errors.append(
                CollectionValidationError(
                    field="name",
                    message="Collection name must contain only alphanumeric characters and underscores",
                    code="name_invalid_format",
                )
            )

        return errors

    @classmethod
    def validate_field_name(cls, name: str, field_index: int) -> list[CollectionValidationError]:
        """Validate a field name.

        Args:
            name: The field name to validate.
            field_index: Index of the field in the schema (for error messages).

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []
        field_path = f"schema[{field_index}].name"

        if not name:
            errors.append(
                CollectionValidationError(
                    field=field_path,
                    message="Field name is required",
                    code="field_name_required",
                )
            )
            return errors

        if len(name) > cls.MAX_FIELD_NAME_LENGTH:
            errors.append(
                CollectionValidationError(
                    field=field_path,
                    message=f"Field name must be at most {cls.MAX_FIELD_NAME_LENGTH} characters",
                    code="field_name_too_long",
                )
            )

        if not NAME_PATTERN.fullmatch(name):
            errors.append(
                CollectionValidationError(
                    field=field_path,
                    message="Field name must contain only alphanumeric characters and underscores",
                    code="field_name_invalid_format",
                )
            )

        if name.lower() in RESERVED_FIELD_NAMES:
            errors.append(
                CollectionValidationError(
                    field=field_path,
                    message=f"Field name '{name}' is reserved and cannot be used",
                    code="field_name_reserved",
                )
            )

        return errors

    @classmethod
    def validate_field_type(cls, field_type: object, field_index: int) -> list[CollectionValidationError]:
        """Validate a field type.

        Args:
            field_type: The field type to validate.
            field_index: Index of the field in the schema (for error messages).

        Returns:
            List of validation errors (empty if valid).
        """
        valid_types = [t.value for t in FieldType]
        value = field_type.value if isinstance(field_type, FieldType) else field_type
        if value not in valid_types:
            return [
                CollectionValidationError(
                    field=f"schema[{field_index}].type",
                    message=f"Invalid field type '{value}'. Valid types: {', '.join(valid_types)}",
                    code="field_type_invalid",
                )
            ]
        return []

    @classmethod
    def validate_file_options(
        cls, options: object, field_index: int
    ) -> list[CollectionValidationError]:
        """Validate the options of a file field.

        Args:
            options: The options attached to the field.
            field_index: Index of the field in the schema (for error messages).

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []
        path = f"schema[{field_index}].options"

        if not isinstance(options, FileOptions):
            errors.append(
                CollectionValidationError(
                    field=path,
                    message="File field requires file options",
                    code="file_options_required",
                )
            )
            return errors

        if options.max_select < 1:
            errors.append(
                CollectionValidationError(
                    field=f"{path}.maxSelect",
                    message="maxSelect must be at least 1",
                    code="file_max_select_invalid",
                )
            )

        if options.max_size < 0:
            errors.append(
                CollectionValidationError(
                    field=f"{path}.maxSize",
                    message="maxSize must not be negative",
                    code="file_max_size_invalid",
                )
            )

        if any(not mime for mime in options.mime_types):
            errors.append(
                CollectionValidationError(
                    field=f"{path}.mimeTypes",
                    message="MIME types must be non-empty strings",
                    code="file_mime_type_invalid",
                )
            )

        return errors

    @classmethod
    def validate_field(cls, field: SchemaField, field_index: int) -> list[CollectionValidationError]:
        """Validate a single field definition.

        Args:
            field: The field definition.
            field_index: Index of the field in the schema (for error messages).

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []

        if not field.id:
            errors.append(
                CollectionValidationError(
                    field=f"schema[{field_index}].id",
                    message="Field id is required",
                    code="field_id_required",
                )
            )

        errors.extend(cls.validate_field_name(field.name, field_index))
        errors.extend(cls.validate_field_type(field.type, field_index))

        if field.type == FieldType.FILE:
            errors.extend(cls.validate_file_options(field.options, field_index))

        return errors

    @classmethod
    def validate_schema(cls, fields: list[SchemaField]) -> list[CollectionValidationError]:
        """Validate a collection field list.

        Args:
            fields: List of field definitions.

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []

        seen_ids: set[str] = set()
        seen_names: set[str] = set()
        for i, field in enumerate(fields):
            errors.extend(cls.validate_field(field, i))

            if field.id and field.id in seen_ids:
                errors.append(
                    CollectionValidationError(
                        field=f"schema[{i}].id",
                        message=f"Duplicate field id '{field.id}'",
                        code="field_id_duplicate",
                    )
                )
            seen_ids.add(field.id)

            name = field.name.lower()
            if name and name in seen_names:
                errors.append(
                    CollectionValidationError(
                        field=f"schema[{i}].name",
                        message=f"Duplicate field name '{field.name}'",
                        code="field_name_duplicate",
                    )
                )
            seen_names.add(name)

        return errors

    @classmethod
    def validate(cls, collection: Collection) -> list[CollectionValidationError]:
        """Validate a complete collection.

        Args:
            collection: The collection to validate.

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []
        errors.extend(cls.validate_name(collection.name))
        errors.extend(cls.validate_schema(collection.schema.fields))
        return errors
