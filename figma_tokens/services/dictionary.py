"""Build nested design-token dictionaries from Figma local variables."""

import copy
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from figma_tokens.schemas import (
    LocalVariablesResponse,
    Variable,
    VariableAlias,
    VariableCollection,
)

logger = logging.getLogger(__name__)

RawResponse = Union[LocalVariablesResponse, Dict[str, Any]]

TOKEN_TYPES = {
    "COLOR": "color",
    "FLOAT": "number",
    "STRING": "string",
    "BOOLEAN": "boolean",
}


class DictionaryBuildError(ValueError):
    """Raised when a variables response cannot be turned into tokens."""


def _parse(response: RawResponse) -> LocalVariablesResponse:
    if isinstance(response, LocalVariablesResponse):
        return response
    return LocalVariablesResponse.model_validate(response)


def normalize_mode_name(name: str) -> str:
    """Mode names are matched case-insensitively ("Light Mode" -> "light mode")."""
    return name.strip().lower()


def token_path(variable_name: str) -> List[str]:
    """Split a slash separated variable name into its group segments."""
    segments = [segment.strip() for segment in variable_name.split("/")]
    if not all(segments):
        raise DictionaryBuildError(f"Invalid variable name: {variable_name!r}")
    return segments


def reference_to(variable_name: str) -> str:
    """Alias syntax pointing at a token, e.g. ``{color.red.500}``."""
    return "{" + ".".join(token_path(variable_name)) + "}"


def color_to_hex(color: Dict[str, float]) -> str:
    """Convert a Figma RGBA color (0-1 channels) to ``#rrggbb`` or ``#rrggbbaa``."""
    channels = [color["r"], color["g"], color["b"]]
    alpha = color.get("a", 1.0)
    if alpha < 1:
        channels.append(alpha)
    return "#" + "".join(f"{round(channel * 255):02x}" for channel in channels)


def _number(value: Union[int, float]) -> Union[int, float]:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _alias_key(alias_id: str) -> Optional[str]:
    """Variable key embedded in a remote alias id (``VariableID:<key>/<id>``)."""
    _, _, rest = alias_id.partition(":")
    if "/" not in rest:
        return None
    return rest.split("/", 1)[0]


def _live_variables(response: LocalVariablesResponse) -> Dict[str, Variable]:
    return {
        vid: variable
        for vid, variable in response.meta.variables.items()
        if not variable.deleted_but_referenced
    }


class _AliasResolver:
    """Turns variable aliases into symbolic references."""

    def __init__(
        self,
        response: LocalVariablesResponse,
        primitives: Optional[LocalVariablesResponse] = None,
    ):
        # Deleted variables are never written, so they cannot be alias targets
        self.variables = _live_variables(response)
        self.primitive_variables = _live_variables(primitives) if primitives else {}
        self.primitives_by_key = {
            variable.key: variable
            for variable in self.primitive_variables.values()
            if variable.key
        }

    def resolve(self, alias: VariableAlias) -> str:
        target = self.variables.get(alias.id)
        if target is not None and not target.remote:
            return reference_to(target.name)

        primitive = self.primitive_variables.get(alias.id)
        if primitive is None:
            for key in (_alias_key(alias.id), target.key if target else None):
                if key and key in self.primitives_by_key:
                    primitive = self.primitives_by_key[key]
                    break
        if primitive is not None:
            return reference_to(primitive.name)

        if target is not None:
            logger.debug("Alias %s resolved from remote variable %s", alias.id, target.name)
            return reference_to(target.name)

        raise DictionaryBuildError(f"Unresolvable variable alias: {alias.id}")


class Dictionary(BaseModel):
    """Design tokens keyed by mode name.

    ``value`` maps each mode (e.g. ``"light mode"``) to a nested mapping of
    token groups whose leaves are ``{"$type": ..., "$value": ...}`` tokens.

    The model is frozen but ``value`` holds plain dicts; read payloads
    through ``mode()``, which returns a deep copy, and treat ``value`` as
    read-only.
    """

    value: Dict[str, Dict[str, Any]]

    class Config:
        frozen = True

    @property
    def modes(self) -> List[str]:
        return list(self.value)

    def mode(self, name: str) -> Dict[str, Any]:
        """Return a copy of the payload of one mode."""
        key = normalize_mode_name(name)
        if key not in self.value:
            raise DictionaryBuildError(
                f"Mode {name!r} not found; available modes: {', '.join(self.modes) or 'none'}"
            )
        return copy.deepcopy(self.value[key])

    @classmethod
    def from_figma_api_response(
        cls,
        response: RawResponse,
        primitive_response: Optional[RawResponse] = None,
    ) -> "Dictionary":
        """Build a dictionary from a local variables response.

        Args:
            response: Raw or parsed ``/variables/local`` response
            primitive_response: Response of the file holding the primitive
                tokens that ``response`` aliases into

        Returns:
            The token dictionary for every mode of the local collections
        """
        parsed = _parse(response)
        primitives = _parse(primitive_response) if primitive_response is not None else None
        resolver = _AliasResolver(parsed, primitives)

        modes: Dict[str, Dict[str, Any]] = {}
        types: Dict[str, set] = {}
        for collection in parsed.meta.variable_collections.values():
            if collection.remote:
                continue
            variables = _collection_variables(parsed, collection)
            for mode in collection.modes:
                mode_name = normalize_mode_name(mode.name)
                tree = modes.setdefault(mode_name, {})
                mode_types = types.setdefault(mode_name, set())
                for variable in variables:
                    token = _build_token(variable, mode.mode_id, collection, resolver)
                    _insert(tree, token_path(variable.name), token)
                    mode_types.add(token["$type"])

        value = {}
        for mode_name, tree in modes.items():
            if len(types[mode_name]) == 1:
                (common_type,) = types[mode_name]
                tree = {"$type": common_type, **tree}
            value[mode_name] = tree
        logger.debug("Built dictionary with modes: %s", ", ".join(value))
        return cls(value=value)


def _collection_variables(
    response: LocalVariablesResponse, collection: VariableCollection
) -> List[Variable]:
    """Variables emitted for a collection, in collection order."""
    variables = response.meta.variables
    if collection.variable_ids:
        members = [variables[vid] for vid in collection.variable_ids if vid in variables]
    else:
        members = [
            v for v in variables.values() if v.variable_collection_id == collection.id
        ]
    return [v for v in members if not v.remote and not v.deleted_but_referenced]


def _build_token(
    variable: Variable,
    mode_id: str,
    collection: VariableCollection,
    resolver: _AliasResolver,
) -> Dict[str, Any]:
    token_type = TOKEN_TYPES.get(variable.resolved_type)
    if token_type is None:
        raise DictionaryBuildError(
            f"Unsupported type {variable.resolved_type!r} for variable {variable.name!r}"
        )

    if mode_id in variable.values_by_mode:
        raw = variable.values_by_mode[mode_id]
    elif collection.default_mode_id in variable.values_by_mode:
        raw = variable.values_by_mode[collection.default_mode_id]
    else:
        raise DictionaryBuildError(f"Variable {variable.name!r} has no value for mode {mode_id}")

    alias = VariableAlias.parse_value(raw)
    if alias is not None:
        value = resolver.resolve(alias)
    elif token_type == "color":
        value = color_to_hex(raw)
    elif token_type == "number":
        value = _number(raw)
    else:
        value = raw

    token = {"$type": token_type, "$value": value}
    if variable.description:
        token["$description"] = variable.description
    return token


def _insert(tree: Dict[str, Any], path: List[str], token: Dict[str, Any]) -> None:
    node = tree
    for segment in path[:-1]:
        node = node.setdefault(segment, {})
        if "$value" in node:
            raise DictionaryBuildError(
                f"Token {'/'.join(path)!r} is nested under another token"
            )
    leaf = path[-1]
    if leaf in node:
        raise DictionaryBuildError(f"Duplicate token or group name: {'/'.join(path)!r}")
    node[leaf] = token
