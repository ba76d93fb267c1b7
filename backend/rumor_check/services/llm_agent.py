# backend/rumor_check/services/llm_agent.py
"""
Rumor analysis client.

One outbound call per claim:
 - fixed system instruction + the claim wrapped in formatting directives,
 - strict JSON schema so the reply is {message, isRumor, graphData},
 - reply parsed and checked locally; graph problems drop the graph,
   everything else falls back to a fixed "system busy" result.
analyze() never raises.
"""

from typing import Optional, Any
import json
import logging

from openai import AsyncOpenAI

from rumor_check.config import Config
from rumor_check.models.schema import AnalysisResult
from rumor_check.services.prompts import build_messages, response_format
from rumor_check.services.propagation_graph import validate_graph

logger = logging.getLogger("llm_agent")

FALLBACK_MESSAGE = "系统繁忙，无法获取分析结果，请稍后重试。"


def fallback_result() -> AnalysisResult:
    return AnalysisResult(message=FALLBACK_MESSAGE, isRumor=False, graphData=None)


def _parse_model_response(resp: Any) -> str:
    """Pull the reply text out of a chat completion (choices[0].message.content)."""
    choices = getattr(resp, "choices", None)
    if not choices:
        return ""
    msg = getattr(choices[0], "message", None)
    return getattr(msg, "content", None) or ""


def normalize_result(payload: Any) -> AnalysisResult:
    """
    Turn the decoded reply into an AnalysisResult.
    Raises ValueError (or pydantic's ValidationError) when message/isRumor are
    unusable; a bad graphData never raises, it becomes None.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    if "message" not in payload or "isRumor" not in payload:
        raise ValueError("reply is missing 'message' or 'isRumor'")

    graph = validate_graph(payload.get("graphData"))
    return AnalysisResult(message=payload["message"], isRumor=payload["isRumor"], graphData=graph)


class AnalysisClient:
    def __init__(self,
                 api_key: Optional[str] = None,
                 model: Optional[str] = None,
                 base_url: Optional[str] = None,
                 client: Optional[Any] = None):
        self.model = model or Config.OPENAI_MODEL
        if client is not None:
            self.client = client
            return

        key = api_key or Config.OPENAI_KEY
        if not key:
            raise RuntimeError("OPENAI_API_KEY is not set; cannot create the analysis client")
        self.client = AsyncOpenAI(api_key=key, base_url=base_url or Config.OPENAI_BASE_URL)

    async def close(self):
        # releases the shared connection pool
        close = getattr(self.client, "close", None)
        if close is not None:
            await close()

    async def _call_model(self, query: str) -> str:
        resp = await self.client.chat.completions.create(
            model=self.model,
            messages=build_messages(query),
            response_format=response_format(),
        )
        text = _parse_model_response(resp)
        if not text:
            raise RuntimeError("No response from AI")
        return text

    async def analyze(self, query: str) -> AnalysisResult:
        """
        Analyze one claim. Returns the model's verdict or fallback_result().
        """
        try:
            raw = await self._call_model(query)
            result = normalize_result(json.loads(raw))
        except Exception as e:
            logger.error("analysis call failed (%s): %s", type(e).__name__, str(e)[:300])
            return fallback_result()

        logger.debug("analysis ok: isRumor=%s graph=%s", result.isRumor, result.graphData is not None)
        return result

