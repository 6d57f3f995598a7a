import logging
from pathlib import Path
from typing import Union

from ..core.errors import ExtractionError
from .languages import ContractLanguage, extract_code
from .openai_client import OpenAIChatClient
from .prompts import build_prompt
from .templates import load_reference_template

logger = logging.getLogger(__name__)


class ContractGenerator:
    def __init__(self, client: OpenAIChatClient, template_path: Union[str, Path]):
        self.client = client
        self.template_path = template_path

    async def generate(self, description: str, language: str) -> str:
        """
        Generate smart-contract source for `description` in `language`.

        Unsupported languages are rejected before the upstream call since no
        extraction pattern exists for them.

        Raises:
            TemplateLoadError, UpstreamError, ExtractionError
        """
        target = ContractLanguage.parse(language)
        if target is None:
            logger.warning(f"Unsupported language requested: {language!r}")
            raise ExtractionError(language)

        template = load_reference_template(self.template_path)
        prompt = build_prompt(description, template, language)

        logger.info(f"Requesting {target.value} contract from {self.client.model}")
        reply = await self.client.complete(prompt)

        code = extract_code(reply, target)
        if not code:
            logger.warning(f"No ```{target.value} block found in model reply")
            raise ExtractionError(language)

        return code
