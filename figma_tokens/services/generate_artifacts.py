"""Export the design tokens of the Figma token files to JSON artifacts."""

import asyncio
import json
import logging
from typing import Any, Dict, Mapping

from figma_tokens.services.dictionary import Dictionary
from figma_tokens.services.figma_client import FigmaApi
from figma_tokens.services.file_system import FileSystem

logger = logging.getLogger(__name__)

# https://www.figma.com/file/hSDX8IwmRAPOTL4NWPwVCl (Meteor Primitives)
PRIMITIVES_FILE_KEY = "hSDX8IwmRAPOTL4NWPwVCl"
# https://www.figma.com/file/8X90GCcpIa4GllKCHA7qFM (Meteor Admin Tokens)
ADMIN_FILE_KEY = "8X90GCcpIa4GllKCHA7qFM"

PRIMITIVES_PATH = "./tokens/foundation/primitives.tokens.json"
ADMIN_LIGHT_PATH = "./tokens/administration/light.tokens.json"
ADMIN_DARK_PATH = "./tokens/administration/dark.tokens.json"

LIGHT_MODE = "light mode"
DARK_MODE = "dark mode"
TYPE_KEY = "$type"


def omit_key(mapping: Mapping[str, Any], key: str) -> Dict[str, Any]:
    """Copy of ``mapping`` without the top-level ``key``."""
    return {k: v for k, v in mapping.items() if k != key}


def serialize_tokens(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


class GenerateArtifacts:
    """Fetches both token files and writes the primitive and admin artifacts."""

    def __init__(self, file_system: FileSystem, figma_api: FigmaApi):
        self.file_system = file_system
        self.figma_api = figma_api

    async def execute(self) -> None:
        logger.info(
            "Fetching local variables of %s and %s", PRIMITIVES_FILE_KEY, ADMIN_FILE_KEY
        )
        primitive_response, admin_response = await asyncio.gather(
            *(
                self.figma_api.get_local_variables(file_key)
                for file_key in (PRIMITIVES_FILE_KEY, ADMIN_FILE_KEY)
            )
        )

        primitive_dictionary = Dictionary.from_figma_api_response(primitive_response)
        self._write(PRIMITIVES_PATH, primitive_dictionary, LIGHT_MODE)

        admin_dictionary = Dictionary.from_figma_api_response(
            admin_response, primitive_response
        )
        self._write(ADMIN_LIGHT_PATH, admin_dictionary, LIGHT_MODE)
        self._write(ADMIN_DARK_PATH, admin_dictionary, DARK_MODE)

    def _write(self, path: str, dictionary: Dictionary, mode: str) -> None:
        tokens = omit_key(dictionary.mode(mode), TYPE_KEY)
        # TODO: run the output through a formatter (prettier) once one is chosen
        self.file_system.save_file(path, serialize_tokens(tokens))
        logger.info("Exported %s tokens to %s", mode, path)
