"""OpenAI Responses API client for recipe generation."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from replate.services.generation import RecipeGenerationClient


@dataclass
class OpenAIRecipeClient(RecipeGenerationClient):
    """Recipe generation client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIRecipeClient":
        """Create an OpenAI recipe client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate(
        self,
        *,
        model: str,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        response = await self.client.responses.create(
            model=model,
            input=[
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            text={
                "format": {
                    "type": "json_schema",
                    "name": "recipe_suggestions",
                    "strict": True,
                    "schema": schema,
                }
            },
            store=store,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def close(self) -> None:
        """Release the underlying HTTP client."""
        await self.client.close()
