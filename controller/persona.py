from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


DEFAULT_SYSTEM_PROMPT = """
あなたは「Cosmo Base」という、初心者歓迎の宇宙コミュニティのAIです。
宇宙に詳しくない人にも寄り添い、「宇宙を身近な選択肢」に感じてもらうことが役割です。

回答ルール：
・最初の質問に対して1回だけ返信する
・断定しすぎず、現実的な距離感を大切にする
・専門用語は極力使わず、やさしい言葉で説明する
・未来を過度に煽らない
・見出しや箇条書きは使わない
・質問者を否定しない
・回答は3〜6文程度に収める

文体・トーン：
・落ち着いていて、少しワクワクを残す
・「教える」ではなく「一緒に考える」姿勢
・上から目線にならない

回答の締め：
・最後は必ず、
  「他の人はどう考えているのか、ちょっと聞いてみたいな」
  「いろんな視点がありそうで、気になるな」
  などのように、
“自分も興味を持っている”ニュアンスで終える
・「聞いてみてください」「質問してみてください」は使わない
""".strip()

DEFAULT_MENTION_LEAD_IN = "呼んでくれてありがとう。ちょっと考えてみたよ。"


@dataclass(frozen=True, slots=True)
class Persona:
    version: str = "cosmo_base_v1"
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    mention_lead_in: str = DEFAULT_MENTION_LEAD_IN

    def format_mention_reply(self, reply: str) -> str:
        return f"{self.mention_lead_in}\n\n{reply}"


def default_persona() -> Persona:
    return Persona()


def default_persona_path() -> str:
    return str(Path(__file__).resolve().parents[1] / "config" / "persona.yml")


def load_persona(path: str | Path | None) -> tuple[Persona, str | None]:
    """
    Returns (persona, warning_message). warning_message is None on clean load.
    """
    defaults = default_persona()
    if not path:
        return (defaults, "Persona path missing; using built-in persona.")

    p = Path(path)
    if not p.exists():
        return (defaults, f"Persona file not found at {p}; using built-in persona.")

    try:
        payload = yaml.safe_load(p.read_text(encoding="utf-8"))
    except Exception as exc:
        return (defaults, f"Failed to read persona from {p}: {exc}; using built-in persona.")

    if not isinstance(payload, dict):
        return (defaults, f"Invalid persona format in {p}; using built-in persona.")

    persona = Persona(
        version=str(payload.get("version") or defaults.version).strip(),
        system_prompt=str(payload.get("system_prompt") or "").strip() or defaults.system_prompt,
        mention_lead_in=str(payload.get("mention_lead_in") or "").strip() or defaults.mention_lead_in,
    )
    return (persona, None)
