"""OpenAI Responses API client for root cause explanations."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from ecommerce_insights.services.analysis import AnalysisClient


@dataclass
class OpenAIAnalysisClient(AnalysisClient):
    """Analysis client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIAnalysisClient":
        """Create an OpenAI analysis client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def explain(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        """Call OpenAI Responses API and return the output text."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": prompt,
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        return (response.output_text or "").strip()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
