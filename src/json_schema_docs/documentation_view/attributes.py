"""Flat attribute listing for schema nodes."""

from __future__ import annotations

from collections.abc import Mapping

from json_schema_docs.markdown_rendering.text_formatting import escape_inline, json_inline
from json_schema_docs.schema_model.schema_values import (
    JSONValue,
    SchemaValue,
    as_bool,
    as_list,
    as_string,
    schema_map,
)

from .view_models import AttributeView

KNOWN_SCHEMA_KEYWORDS = frozenset(
    {
        "$schema", "$id", "id", "$ref",
        "$dynamicRef", "$recursiveRef", "$anchor", "$dynamicAnchor", "$recursiveAnchor",
        "$comment", "$defs", "definitions",
        "type", "title", "description", "default", "examples", "enum", "const", "format",
        "allOf", "anyOf", "oneOf", "not", "if", "then", "else",
        "properties", "patternProperties", "additionalProperties", "unevaluatedProperties",
        "propertyNames", "required", "dependentRequired", "dependentSchemas", "dependencies",
        "minProperties", "maxProperties",
        "items", "prefixItems", "additionalItems", "contains", "unevaluatedItems",
        "minItems", "maxItems", "uniqueItems", "minContains", "maxContains",
        "minimum", "maximum", "exclusiveMinimum", "exclusiveMaximum", "multipleOf",
        "minLength", "maxLength", "pattern",
        "readOnly", "writeOnly", "deprecated",
        "contentEncoding", "contentMediaType", "contentSchema",
    }
)  # fmt: skip

CONSTRAINT_KEYWORDS = (
    "minimum",
    "maximum",
    "exclusiveMinimum",
    "exclusiveMaximum",
    "multipleOf",
    "minLength",
    "maxLength",
    "pattern",
    "minItems",
    "maxItems",
    "uniqueItems",
    "minContains",
    "maxContains",
    "minProperties",
    "maxProperties",
)

_CODE_STRING_ATTRIBUTES = (
    ("$ref", "Reference"),
    ("$dynamicRef", "Dynamic reference"),
    ("$recursiveRef", "Recursive reference"),
    ("$anchor", "Anchor"),
    ("$dynamicAnchor", "Dynamic anchor"),
    ("$recursiveAnchor", "Recursive anchor"),
    ("title", "Title"),
)

_CONTENT_ATTRIBUTES = (
    ("contentEncoding", "Content encoding"),
    ("contentMediaType", "Content media type"),
)

_FLAG_ATTRIBUTES = (
    ("readOnly", "Read only"),
    ("writeOnly", "Write only"),
    ("deprecated", "Deprecated"),
)

_ITEM_SUMMARY_ATTRIBUTES = (
    ("contentSchema", "Content schema"),
    ("items", "Items"),
    ("prefixItems", "Prefix items"),
    ("additionalItems", "Additional items"),
    ("contains", "Contains"),
    ("unevaluatedItems", "Unevaluated items"),
)

_COUNTED_ATTRIBUTES = (
    ("properties", "Properties"),
    ("patternProperties", "Pattern properties"),
)

_PROPERTY_SUMMARY_ATTRIBUTES = (
    ("additionalProperties", "Additional properties"),
    ("unevaluatedProperties", "Unevaluated properties"),
    ("propertyNames", "Property names"),
)


def schema_attributes(node: SchemaValue, required: bool | None = None) -> list[AttributeView]:
    """Return the attribute list for one node; *required* is None for definitions."""
    out: list[AttributeView] = []
    keywords = node.keywords

    if keywords is None:
        if required is not None:
            out.append(AttributeView("Required", yes_no(required)))
        if node.flag is not None:
            out.append(AttributeView("Boolean schema", "true" if node.flag else "false"))
        return out

    type_text = type_string(keywords.get("type"))
    if type_text:
        out.append(AttributeView("Type", code(type_text)))
    if required is not None:
        out.append(AttributeView("Required", yes_no(required)))

    for keyword, label in _CODE_STRING_ATTRIBUTES:
        value = as_string(keywords.get(keyword))
        if value:
            out.append(AttributeView(label, code(value)))

    if "default" in keywords:
        out.append(AttributeView("Default", code(json_inline(keywords["default"]))))
    enum = as_list(keywords.get("enum"))
    if enum:
        out.append(AttributeView("Enum", json_list(enum)))
    if "const" in keywords:
        out.append(AttributeView("Const", code(json_inline(keywords["const"]))))
    examples = as_list(keywords.get("examples"))
    if examples:
        out.append(AttributeView("Examples", json_list(examples)))
    schema_format = as_string(keywords.get("format"))
    if schema_format:
        out.append(AttributeView("Format", code(schema_format)))

    for keyword, label in _FLAG_ATTRIBUTES:
        flag = as_bool(keywords.get(keyword))
        if flag is not None:
            out.append(AttributeView(label, yes_no(flag)))
    for keyword, label in _CONTENT_ATTRIBUTES:
        value = as_string(keywords.get(keyword))
        if value:
            out.append(AttributeView(label, code(value)))
    for keyword, label in _ITEM_SUMMARY_ATTRIBUTES:
        if keyword in keywords:
            out.append(AttributeView(label, summarize_schema_like(keywords[keyword])))

    for keyword, label in _COUNTED_ATTRIBUTES:
        count = len(schema_map(keywords.get(keyword)))
        if count:
            out.append(AttributeView(label, str(count)))
    for keyword, label in _PROPERTY_SUMMARY_ATTRIBUTES:
        if keyword in keywords:
            out.append(AttributeView(label, summarize_schema_like(keywords[keyword])))

    if "dependentRequired" in keywords:
        out.append(
            AttributeView("Dependent required", code(json_inline(keywords["dependentRequired"])))
        )
    dependent_schemas = len(schema_map(keywords.get("dependentSchemas")))
    if dependent_schemas:
        out.append(AttributeView("Dependent schemas", str(dependent_schemas)))
    if "dependencies" in keywords:
        out.append(AttributeView("Dependencies", code(json_inline(keywords["dependencies"]))))

    composition = composition_summary(keywords)
    if composition:
        out.append(AttributeView("Composition", composition))
    conditional = ", ".join(key for key in ("if", "then", "else") if key in keywords)
    if conditional:
        out.append(AttributeView("Conditional", conditional))
    if "not" in keywords:
        out.append(AttributeView("Not", summarize_schema_like(keywords["not"])))

    constraints = [
        f"{key}={json_inline(keywords[key])}" for key in CONSTRAINT_KEYWORDS if key in keywords
    ]
    if constraints:
        out.append(AttributeView("Constraints", "; ".join(constraints)))
    comment = as_string(keywords.get("$comment"))
    if comment:
        out.append(AttributeView("Comment", code(comment)))
    other = [
        f"{key}={json_inline(keywords[key])}"
        for key in sorted(keywords)
        if key not in KNOWN_SCHEMA_KEYWORDS
    ]
    if other:
        out.append(AttributeView("Other keywords", "; ".join(other)))
    return out


def summarize_schema_like(value: JSONValue) -> str:
    """Compact text for a keyword payload that is usually a schema."""
    if isinstance(value, bool):
        return f"boolean schema={'true' if value else 'false'}"
    if isinstance(value, Mapping):
        for keyword, label in (
            ("$ref", "reference"),
            ("$dynamicRef", "dynamicRef"),
            ("$recursiveRef", "recursiveRef"),
        ):
            ref = as_string(value.get(keyword))
            if ref:
                return f"{label} {code(ref)}"
        type_text = type_string(value.get("type"))
        if type_text:
            return f"schema type {code(type_text)}"
        return "inline schema"
    if isinstance(value, list):
        return f"schema list ({len(value)})"
    return code(json_inline(value))


def composition_summary(keywords: Mapping[str, JSONValue]) -> str:
    items = []
    for keyword in ("oneOf", "anyOf", "allOf"):
        count = len(as_list(keywords.get(keyword)))
        if count:
            items.append(f"{keyword}={count}")
    return "; ".join(items)


def type_string(value: JSONValue) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json_inline(value)


def code(value: str) -> str:
    return f"`{escape_inline(value)}`"


def json_list(values: list[JSONValue]) -> str:
    return ", ".join(code(json_inline(item)) for item in values)


def yes_no(value: bool) -> str:
    return "yes" if value else "no"
