"""JSON Schema (Draft 7) of the discovery configuration document."""

from types import MappingProxyType

_STRING_MAP = {"type": "object", "additionalProperties": {"type": "string"}}

_RELATION = {
    "type": "object",
    "required": ["target"],
    "properties": {
        "target": {"type": "string", "minLength": 1},
        "type": {"type": ["string", "null"]},
    },
}

_COMPONENT_DETAIL = {
    "type": "object",
    "required": ["componentName"],
    "properties": {
        "componentName": {"type": "string", "minLength": 1},
        "tags": {"type": ["string", "null"]},
        "technology": {"type": ["string", "null"]},
        "description": {"type": ["string", "null"]},
        "relations": {"type": ["array", "null"], "items": _RELATION},
    },
}

_STRATEGY = {
    "type": "object",
    "required": ["name", "type"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "type": {
            "type": "string",
            "enum": [
                "ANNOTATION",
                "REGEX",
                "NAME_SUFFIX",
                "ANNOTATION_PROPERTY",
                "CUSTOM_ANNOTATION",
            ],
        },
        "config": {
            "type": "object",
            "additionalProperties": {"type": ["string", "number", "boolean", "null"]},
        },
        "containerMapping": {"type": ["string", "null"]},
        "enabled": {"type": "boolean"},
    },
}

_GLOBAL_CONFIG = {
    "type": "object",
    "properties": {
        "excludeInnerClasses": {"type": "boolean"},
        "excludeTestClasses": {"type": "boolean"},
        "basePaths": _STRING_MAP,
        "defaultTechnologies": _STRING_MAP,
    },
}

_CONTAINER = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "description": {"type": ["string", "null"]},
        "technology": {"type": ["string", "null"]},
        "objectMapper": {"type": "array", "items": _COMPONENT_DETAIL},
    },
}

CONFIGURATION_SCHEMA = MappingProxyType(
    {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "title": "compscan discovery configuration",
        "type": "object",
        "required": ["strategies"],
        "properties": {
            "strategies": {"type": "array", "items": _STRATEGY},
            "globalConfig": _GLOBAL_CONFIG,
            "containers": {"type": "object", "additionalProperties": _CONTAINER},
        },
    }
)
