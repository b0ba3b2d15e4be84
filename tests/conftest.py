"""Shared fixtures: local variables responses of a primitives and an admin file."""

import pytest


def _color(r, g, b, a=1.0):
    return {"r": r, "g": g, "b": b, "a": a}


@pytest.fixture
def primitive_response() -> dict:
    """Primitive tokens file: one color collection with a single "Light Mode"."""
    return {
        "status": 200,
        "error": False,
        "meta": {
            "variableCollections": {
                "VariableCollectionId:1:0": {
                    "id": "VariableCollectionId:1:0",
                    "name": "Primitives",
                    "key": "col-primitives",
                    "modes": [{"modeId": "1:0", "name": "Light Mode"}],
                    "defaultModeId": "1:0",
                    "remote": False,
                    "variableIds": ["VariableID:1:1", "VariableID:1:2", "VariableID:1:3"],
                }
            },
            "variables": {
                "VariableID:1:1": {
                    "id": "VariableID:1:1",
                    "name": "red/500",
                    "key": "key-red-500",
                    "variableCollectionId": "VariableCollectionId:1:0",
                    "resolvedType": "COLOR",
                    "valuesByMode": {"1:0": _color(1.0, 0.0, 0.0)},
                    "remote": False,
                    "description": "",
                },
                "VariableID:1:2": {
                    "id": "VariableID:1:2",
                    "name": "blue/500",
                    "key": "key-blue-500",
                    "variableCollectionId": "VariableCollectionId:1:0",
                    "resolvedType": "COLOR",
                    "valuesByMode": {"1:0": _color(0.0, 0.0, 1.0)},
                    "remote": False,
                    "description": "Brand blue",
                },
                "VariableID:1:3": {
                    "id": "VariableID:1:3",
                    "name": "gray/900",
                    "key": "key-gray-900",
                    "variableCollectionId": "VariableCollectionId:1:0",
                    "resolvedType": "COLOR",
                    "valuesByMode": {"1:0": _color(0.0, 0.0, 0.0, 0.5)},
                    "remote": False,
                    "description": "",
                },
            },
        },
    }


@pytest.fixture
def admin_response() -> dict:
    """Admin tokens file: light/dark semantic colors aliasing the primitives."""
    return {
        "status": 200,
        "error": False,
        "meta": {
            "variableCollections": {
                "VariableCollectionId:2:0": {
                    "id": "VariableCollectionId:2:0",
                    "name": "Semantic",
                    "key": "col-semantic",
                    "modes": [
                        {"modeId": "2:0", "name": "Light mode"},
                        {"modeId": "2:1", "name": "Dark mode"},
                    ],
                    "defaultModeId": "2:0",
                    "remote": False,
                    "variableIds": ["VariableID:2:1", "VariableID:2:2"],
                },
                "VariableCollectionId:key-col/1:0": {
                    "id": "VariableCollectionId:key-col/1:0",
                    "name": "Primitives",
                    "key": "col-primitives",
                    "modes": [{"modeId": "1:0", "name": "Light Mode"}],
                    "defaultModeId": "1:0",
                    "remote": True,
                    "variableIds": [],
                },
            },
            "variables": {
                "VariableID:2:1": {
                    "id": "VariableID:2:1",
                    "name": "background/danger",
                    "key": "key-bg-danger",
                    "variableCollectionId": "VariableCollectionId:2:0",
                    "resolvedType": "COLOR",
                    "valuesByMode": {
                        "2:0": {"type": "VARIABLE_ALIAS", "id": "VariableID:key-red-500/1:1"},
                        "2:1": {"type": "VARIABLE_ALIAS", "id": "VariableID:key-blue-500/1:2"},
                    },
                    "remote": False,
                    "description": "",
                },
                "VariableID:2:2": {
                    "id": "VariableID:2:2",
                    "name": "text/default",
                    "key": "key-text-default",
                    "variableCollectionId": "VariableCollectionId:2:0",
                    "resolvedType": "COLOR",
                    "valuesByMode": {
                        "2:0": _color(0.0, 0.0, 0.0),
                        "2:1": _color(1.0, 1.0, 1.0),
                    },
                    "remote": False,
                    "description": "",
                },
                "VariableID:key-red-500/1:1": {
                    "id": "VariableID:key-red-500/1:1",
                    "name": "red/500",
                    "key": "key-red-500",
                    "variableCollectionId": "VariableCollectionId:key-col/1:0",
                    "resolvedType": "COLOR",
                    "valuesByMode": {"1:0": _color(1.0, 0.0, 0.0)},
                    "remote": True,
                    "description": "",
                },
            },
        },
    }
