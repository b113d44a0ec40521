"""Prompt completion client for AI-assisted contract authoring."""

import asyncio
import os
import re
import socket
from typing import Any, Mapping, Optional, Protocol
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

import orjson

from ..config.defaults import CompletionParams
from ..errors import GenerationError
from ..logging.config import get_logger

logger = get_logger(__name__)

SYSTEM_PROMPT = """You are an expert Rust smart contract developer specializing in MultiversX blockchain contracts.

Generate a production-ready Rust smart contract based on the user's requirements.

# Technical Requirements:
1. Write code only, no explanations or documentation outside the code itself
2. Use only MultiversX macros and patterns (#[multiversx_sc::contract], etc.)
3. Use MultiversX-specific types (ManagedBuffer, BigUint, TokenIdentifier, etc.)
4. Include proper error handling with require! macros
5. Implement security best practices for MultiversX contracts
6. Include helpful inline comments to explain complex logic

# Output Format:
Return ONLY the raw Rust code with NO markdown formatting, NO code blocks with triple backticks with the rust language specifier, etc.
Just provide the pure Rust code for a MultiversX smart contract."""

OPENING_FENCE_RE = re.compile(r"\A```[A-Za-z0-9_+.-]*[ \t]*\n?")
CLOSING_FENCE_RE = re.compile(r"\n?```\Z")


def strip_code_fences(text: Optional[str]) -> str:
    """Remove a leading ```lang fence and a trailing ``` fence, then trim."""
    if not text:
        return ""
    cleaned = OPENING_FENCE_RE.sub("", text.strip())
    cleaned = CLOSING_FENCE_RE.sub("", cleaned.rstrip())
    return cleaned.strip()


class PromptCompletionService(Protocol):
    """Produces contract source from a prompt."""

    async def generate(self, prompt_text: str) -> str:
        ...


class HttpCompletionService:
    """OpenAI-compatible chat-completions client."""

    def __init__(
        self,
        params: Optional[CompletionParams] = None,
        environ: Optional[Mapping[str, str]] = None
    ):
        self.params = params or CompletionParams()
        self.environ = os.environ if environ is None else environ
        self.logger = logger

    async def generate(self, prompt_text: str) -> str:
        """Generate contract source for prompt_text, unfenced."""
        if not prompt_text or not prompt_text.strip():
            raise GenerationError("Please provide a contract description")

        api_key = self.environ.get(self.params.api_key_env)
        if not api_key:
            raise GenerationError(f"{self.params.api_key_env} environment variable is not set")

        payload = self.build_payload(prompt_text)
        response = await asyncio.to_thread(self._post, payload, api_key)
        contract = self.extract_contract(response)

        self.logger.info(
            "Contract generated",
            model=self.params.model,
            prompt_length=len(prompt_text),
            contract_length=len(contract)
        )
        return contract

    def build_payload(self, prompt_text: str) -> dict[str, Any]:
        return {
            "model": self.params.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt_text},
            ],
            "max_tokens": self.params.max_tokens,
            "temperature": self.params.temperature,
        }

    def extract_contract(self, response: Mapping[str, Any]) -> str:
        """Pull the first choice's message content out of a completion response."""
        try:
            content = response["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise GenerationError(f"Malformed completion response: {e}") from e

        contract = strip_code_fences(content)
        if not contract:
            raise GenerationError("Completion response contained no contract source")
        return contract

    def _post(self, payload: dict[str, Any], api_key: str) -> dict[str, Any]:
        data = orjson.dumps(payload)
        req = Request(
            self.params.api_url,
            data=data,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
                "User-Agent": "contract-builder/1.0",
            },
            method="POST"
        )

        try:
            with urlopen(req, timeout=self.params.timeout_seconds) as response:
                body = response.read()
        except HTTPError as e:
            message = self._error_message(e.read()) or e.reason
            self.logger.warning("Completion request rejected", status_code=e.code, reason=message)
            raise GenerationError(
                f"Contract generation failed: {message}",
                status_code=e.code
            ) from e
        except (URLError, socket.timeout, OSError) as e:
            self.logger.warning("Completion request network error", error=str(e))
            raise GenerationError(f"Network error: {e}") from e

        try:
            return orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise GenerationError(f"Invalid JSON from completion endpoint: {e}") from e

    @staticmethod
    def _error_message(body: bytes) -> Optional[str]:
        """`error.message` of an API error body, if it has one."""
        try:
            parsed = orjson.loads(body)
        except orjson.JSONDecodeError:
            return None
        error = parsed.get("error") if isinstance(parsed, dict) else None
        if isinstance(error, dict):
            return error.get("message")
        return None
