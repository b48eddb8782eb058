from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from config.defaults import DEFAULT_OPENAI_MODEL

REQUIRED_ENV_VARS = (
    "DISCORD_TOKEN",
    "OPENAI_API_KEY",
    "QUESTION_CHANNEL_ID",
    "AI_REPLIED_TAG_ID",
    "HUMAN_REPLIED_TAG_ID",
)

_SNOWFLAKE_RE = re.compile(r"\d{8,22}")


def parse_id_set(raw: str | None) -> set[int]:
    if not raw:
        return set()
    out: set[int] = set()
    for tok in re.split(r"[\s,;]+", raw.strip()):
        if not tok:
            continue
        if _SNOWFLAKE_RE.fullmatch(tok):
            out.add(int(tok))
    return out


def parse_snowflake(raw: str | None) -> int | None:
    tok = (raw or "").strip()
    if not _SNOWFLAKE_RE.fullmatch(tok):
        return None
    return int(tok)


@dataclass(frozen=True)
class ResponderSettings:
    discord_token: str = field(repr=False)
    openai_api_key: str = field(repr=False)
    question_channel_id: int
    ai_replied_tag_id: int
    human_replied_tag_id: int
    openai_model: str = DEFAULT_OPENAI_MODEL
    timezone_name: str | None = None
    persona_path: str | None = None
    owner_user_ids: frozenset[int] = frozenset()

    def describe(self) -> str:
        return (
            f"channel={self.question_channel_id} ai_tag={self.ai_replied_tag_id} "
            f"human_tag={self.human_replied_tag_id} model={self.openai_model} "
            f"tz={self.timezone_name or '(local)'} owners={len(self.owner_user_ids)}"
        )


def load_settings(environ: Mapping[str, str] | None = None) -> ResponderSettings:
    env = os.environ if environ is None else environ

    problems: list[str] = []
    for name in REQUIRED_ENV_VARS:
        if not (env.get(name) or "").strip():
            problems.append(f"missing {name}")

    ids: dict[str, int] = {}
    for name in ("QUESTION_CHANNEL_ID", "AI_REPLIED_TAG_ID", "HUMAN_REPLIED_TAG_ID"):
        raw = (env.get(name) or "").strip()
        if not raw:
            continue
        value = parse_snowflake(raw)
        if value is None:
            problems.append(f"{name} is not a Discord id: {raw!r}")
        else:
            ids[name] = value

    timezone_name = (env.get("RESPONDER_TIMEZONE") or "").strip() or None
    if timezone_name:
        try:
            ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError):
            problems.append(f"RESPONDER_TIMEZONE is not a known timezone: {timezone_name!r}")

    if problems:
        raise RuntimeError("Invalid configuration: " + "; ".join(problems))

    return ResponderSettings(
        discord_token=env["DISCORD_TOKEN"].strip(),
        openai_api_key=env["OPENAI_API_KEY"].strip(),
        question_channel_id=ids["QUESTION_CHANNEL_ID"],
        ai_replied_tag_id=ids["AI_REPLIED_TAG_ID"],
        human_replied_tag_id=ids["HUMAN_REPLIED_TAG_ID"],
        openai_model=(env.get("OPENAI_MODEL") or "").strip() or DEFAULT_OPENAI_MODEL,
        timezone_name=timezone_name,
        persona_path=(env.get("RESPONDER_PERSONA_PATH") or "").strip() or None,
        owner_user_ids=frozenset(parse_id_set(env.get("RESPONDER_OWNER_USER_IDS"))),
    )
