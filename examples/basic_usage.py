from __future__ import annotations

import asyncio
import logging
import sys

from genprompt import FileInput, GenAIConfig, GenPrompt


async def main(image_paths: list[str]) -> None:
    # The default model ids are retired; export GENPROMPT_TEXT_MODEL and
    # GENPROMPT_VISION_MODEL (e.g. "gemini-2.5-flash") before running this.
    client = GenPrompt(GenAIConfig.from_env())

    print(await client.complete_text("Write a haiku about autumn."))

    if image_paths:
        files = [FileInput.from_path(path) for path in image_paths]
        print(await client.complete_with_files("Describe these images.", files))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main(sys.argv[1:]))
