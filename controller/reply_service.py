from __future__ import annotations

import asyncio
from typing import Any

from config.defaults import REPLY_MAX_TOKENS
from config.defaults import REPLY_TEMPERATURE
from controller.persona import Persona

QUOTA_ERROR_CODE = "insufficient_quota"


def build_reply_messages(*, persona: Persona, text: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": persona.system_prompt},
        {"role": "user", "content": text},
    ]


def is_quota_exhausted(exc: BaseException) -> bool:
    if getattr(exc, "code", None) == QUOTA_ERROR_CODE:
        return True
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        err = body.get("error") if isinstance(body.get("error"), dict) else body
        return err.get("code") == QUOTA_ERROR_CODE
    return False


async def generate_reply(
    text: str,
    *,
    client: Any,
    model: str,
    persona: Persona,
    temperature: float = REPLY_TEMPERATURE,
    max_tokens: int = REPLY_MAX_TOKENS,
) -> str | None:
    """
    One completion for `text` under the persona prompt.

    Returns None when there is nothing to post: empty input, empty output,
    exhausted quota, or any other provider error. Never retries.
    """
    if not (text or "").strip():
        return None

    try:
        resp = await asyncio.to_thread(
            client.chat.completions.create,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            messages=build_reply_messages(persona=persona, text=text),
        )
    except Exception as e:
        if is_quota_exhausted(e):
            print("[OpenAI] quota exhausted; skipping reply")
            return None
        print(f"[OpenAI] Error: {type(e).__name__}: {e}")
        return None

    choices = getattr(resp, "choices", None) or []
    if not choices:
        return None
    reply = (choices[0].message.content or "").strip()
    return reply or None
