from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


class _DummyCompletions:
    def create(self, *args, **kwargs):
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="ok"))]
        )


class _DummyClient:
    def __init__(self):
        self.chat = SimpleNamespace(completions=_DummyCompletions())


def _try_import_or_skip(module_name: str, pip_name: str | None = None) -> bool:
    try:
        importlib.import_module(module_name)
        return True
    except ModuleNotFoundError:
        install_name = pip_name or module_name
        print(
            f"Smoke wiring check skipped: missing dependency '{module_name}'. "
            f"Install requirements and retry (e.g. `pip install {install_name}` "
            f"or `pip install -e .`)."
        )
        return False


def _main() -> int:
    if not _try_import_or_skip("discord", "discord.py"):
        return 0

    import discord
    from discord.ext import commands
    from controller.persona import default_persona
    from controller.settings import load_settings
    from misc.chunking import send_chunked
    from misc.forum_responder import ForumResponder
    from misc.runtime_wiring import wire_bot_runtime

    settings = load_settings(
        {
            "DISCORD_TOKEN": "x",
            "OPENAI_API_KEY": "x",
            "QUESTION_CHANNEL_ID": "100000000000000001",
            "AI_REPLIED_TAG_ID": "100000000000000002",
            "HUMAN_REPLIED_TAG_ID": "100000000000000003",
        }
    )
    bot = commands.Bot(command_prefix="!", intents=discord.Intents.none())
    responder = ForumResponder(
        bot=bot,
        client=_DummyClient(),
        openai_model=settings.openai_model,
        persona=default_persona(),
        question_channel_id=settings.question_channel_id,
        ai_replied_tag_id=settings.ai_replied_tag_id,
        human_replied_tag_id=settings.human_replied_tag_id,
        now_func=lambda: datetime(2026, 1, 7, 10, 0),
    )
    wire_bot_runtime(bot, responder=responder, settings=settings, send_chunked=send_chunked)

    expected_commands = {"responder.status", "responder.scan"}
    missing = sorted(expected_commands - set(bot.all_commands.keys()))
    if missing:
        raise RuntimeError(f"Missing expected commands: {missing}")

    for name in ("on_ready", "on_thread_create", "on_message"):
        if getattr(getattr(bot, name, None), "__module__", "") != "misc.events_runtime":
            raise RuntimeError(f"Runtime event {name} was not registered")

    print("Smoke wiring check passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(_main())
