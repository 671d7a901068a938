"""Validation of JSON-mode replies using jsonschema"""
from typing import Any, Dict, List, Tuple

import jsonschema

from .models.generation import Schema


class ValidationIssue:
    """One schema violation"""
    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "message": self.message}

    def __repr__(self) -> str:
        return f"ValidationIssue(path={self.path!r}, message={self.message!r})"


def schema_to_json_schema(schema: Schema) -> Dict[str, Any]:
    """Translate the API's OpenAPI-style schema into a JSON Schema document"""
    result: Dict[str, Any] = {}

    if schema.schema_type is not None:
        if schema.nullable:
            result["type"] = [schema.schema_type.value, "null"]
        else:
            result["type"] = schema.schema_type.value

    if schema.format:
        result["format"] = schema.format
    if schema.description:
        result["description"] = schema.description
    if schema.enum_values is not None:
        result["enum"] = list(schema.enum_values) + ([None] if schema.nullable else [])
    if schema.properties is not None:
        result["properties"] = {
            name: schema_to_json_schema(child) for name, child in schema.properties.items()
        }
    if schema.required is not None:
        result["required"] = list(schema.required)
    if schema.items is not None:
        result["items"] = schema_to_json_schema(schema.items)
    if schema.min_items is not None:
        result["minItems"] = int(schema.min_items)
    if schema.max_items is not None:
        result["maxItems"] = int(schema.max_items)

    return result


class ResponseValidator:
    """Checks decoded JSON replies against a response schema"""

    def validate(self, instance: Any, schema: Schema) -> Tuple[bool, List[ValidationIssue]]:
        """Validate instance, return (is_valid, errors)"""
        errors = []
        json_schema = schema_to_json_schema(schema)

        try:
            jsonschema.validate(instance=instance, schema=json_schema)
            return True, []
        except jsonschema.ValidationError as e:
            path = "/" + "/".join(str(p) for p in e.absolute_path)
            errors.append(ValidationIssue(path, e.message))
            return False, errors
        except jsonschema.SchemaError as e:
            errors.append(ValidationIssue("/", f"Schema error: {e.message}"))
            return False, errors
