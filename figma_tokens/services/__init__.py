"""Services package initialization."""

from figma_tokens.services.figma_client import FigmaApi, FigmaClient
from figma_tokens.services.file_system import FileSystem, LocalFileSystem
from figma_tokens.services.dictionary import Dictionary, DictionaryBuildError
from figma_tokens.services.generate_artifacts import GenerateArtifacts

__all__ = [
    "FigmaApi",
    "FigmaClient",
    "FileSystem",
    "LocalFileSystem",
    "Dictionary",
    "DictionaryBuildError",
    "GenerateArtifacts",
]
