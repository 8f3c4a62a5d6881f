# chat_tokens/engine/formatter.py
"""
Render function definitions the way the provider presents them to the model.

Definitions are not billed as JSON. The backend turns them into a
TypeScript-flavoured declaration block and tokenizes that text:

    namespace functions {

    // Get the current weather
    type get_current_weather = (_: {
    // The city and state, e.g. San Francisco, CA
    location: string,
    unit?: "celsius" | "fahrenheit",
    }) => any;

    } // namespace functions

Property descriptions are only emitted at the top level, and
properties missing from "required" get a "?" suffix.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..exceptions import UnsupportedSchemaType
from ..models import FunctionDef


def format_function_definitions(definitions: Iterable[FunctionDef]) -> str:
    """Render *definitions*, in order, as one namespace block."""
    lines = ["namespace functions {", ""]
    for definition in definitions:
        if definition.description:
            lines.append(f"// {definition.description}")
        if definition.parameters.get("properties"):
            lines.append(f"type {definition.name} = (_: {{")
            lines.append(_format_object_properties(definition.parameters, 0))
            lines.append("}) => any;")
        else:
            lines.append(f"type {definition.name} = () => any;")
        lines.append("")
    lines.append("} // namespace functions")
    return "\n".join(lines)


def _format_object_properties(schema: Mapping[str, Any], indent: int) -> str:
    required = schema.get("required") or ()
    lines: list[str] = []
    for name, prop in (schema.get("properties") or {}).items():
        if not isinstance(prop, Mapping):
            raise UnsupportedSchemaType(prop)
        if prop.get("description") and indent < 2:
            lines.append(f"// {prop['description']}")
        optional = "" if name in required else "?"
        lines.append(f"{name}{optional}: {_format_type(prop, indent)},")
    # A nested object spans several lines but is prefixed as one entry.
    return "\n".join(" " * indent + line for line in lines)


def _format_type(prop: Mapping[str, Any], indent: int) -> str:
    # Boolean subschemas (true / false) have no type to render.
    if not isinstance(prop, Mapping):
        raise UnsupportedSchemaType(prop)
    prop_type = prop.get("type")
    if prop_type == "string":
        if prop.get("enum") is not None:
            return " | ".join(f'"{_literal(v)}"' for v in prop["enum"])
        return "string"
    if prop_type in ("number", "integer"):
        if prop.get("enum") is not None:
            return " | ".join(_literal(v) for v in prop["enum"])
        return prop_type
    if prop_type == "array":
        items = prop.get("items")
        if items is not None and items is not False:
            return f"{_format_type(items, indent)}[]"
        return "any[]"
    if prop_type == "boolean":
        return "boolean"
    if prop_type == "null":
        return "null"
    if prop_type == "object":
        return "\n".join(["{", _format_object_properties(prop, indent + 2), "}"])
    raise UnsupportedSchemaType(prop_type)


def _literal(value: Any) -> str:
    """Spell an enum value the way a JavaScript template literal would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
