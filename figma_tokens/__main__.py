"""Export design tokens from Figma: ``python -m figma_tokens``."""

import asyncio
import logging

from figma_tokens.config import get_settings
from figma_tokens.services import FigmaClient, GenerateArtifacts, LocalFileSystem


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    generate = GenerateArtifacts(LocalFileSystem(settings.output_dir), FigmaClient())
    asyncio.run(generate.execute())


if __name__ == "__main__":
    main()
