from __future__ import annotations

import unittest

import discord
from discord.ext import commands

from controller.persona import default_persona
from controller.settings import load_settings
from forum_fakes import AI_TAG_ID
from forum_fakes import DummyClient
from forum_fakes import FakeBot
from forum_fakes import FakeForum
from forum_fakes import FakeGuild
from forum_fakes import FakeThread
from forum_fakes import HUMAN_TAG_ID
from forum_fakes import QUESTION_CHANNEL_ID
from forum_fakes import WEDNESDAY_10AM
from forum_fakes import human
from misc.commands.command_deps import CommandDeps
from misc.commands.command_deps import CommandGates
from misc.commands.commands_responder import register as register_responder
from misc.forum_responder import ForumResponder

OWNER_ID = 111111111111111111


class FakeChannel:
    id = 123

    def __init__(self):
        self.sent: list[str] = []

    async def send(self, text):
        self.sent.append(text)


class FakeCtx:
    def __init__(self, author_id: int):
        self.channel = FakeChannel()
        self.author = human(author_id)
        self.sent: list[str] = []

    async def send(self, text):
        self.sent.append(text)


async def _send_chunked(channel, text):
    await channel.send(text)


class ResponderCommandsTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.settings = load_settings(
            {
                "DISCORD_TOKEN": "x",
                "OPENAI_API_KEY": "x",
                "QUESTION_CHANNEL_ID": str(QUESTION_CHANNEL_ID),
                "AI_REPLIED_TAG_ID": str(AI_TAG_ID),
                "HUMAN_REPLIED_TAG_ID": str(HUMAN_TAG_ID),
                "RESPONDER_OWNER_USER_IDS": str(OWNER_ID),
            }
        )
        self.fake_discord = FakeBot()
        self.thread = FakeThread(1)
        self.thread.add_message(human(), "question")
        self.fake_discord.add_channel(self.thread)
        self.fake_discord.add_channel(FakeForum(guild=FakeGuild([self.thread])))
        self.responder = ForumResponder(
            bot=self.fake_discord,
            client=DummyClient("answer"),
            openai_model=self.settings.openai_model,
            persona=default_persona(),
            question_channel_id=self.settings.question_channel_id,
            ai_replied_tag_id=self.settings.ai_replied_tag_id,
            human_replied_tag_id=self.settings.human_replied_tag_id,
            now_func=lambda: WEDNESDAY_10AM,
        )
        self.bot = commands.Bot(command_prefix="!", intents=discord.Intents.none())
        register_responder(
            self.bot,
            deps=CommandDeps(responder=self.responder, settings=self.settings, send_chunked=_send_chunked),
            gates=CommandGates(user_is_owner=lambda user: int(user.id) in self.settings.owner_user_ids),
        )

    async def test_commands_are_owner_only(self):
        for name in ("responder.status", "responder.scan"):
            ctx = FakeCtx(author_id=5)
            await self.bot.get_command(name).callback(ctx)
            self.assertEqual(ctx.sent, ["This command is owner-only."])
        self.assertEqual(self.thread.sent, [])

    async def test_status_reports_gate_and_config(self):
        ctx = FakeCtx(author_id=OWNER_ID)
        await self.bot.get_command("responder.status").callback(ctx)
        text = "\n".join(ctx.channel.sent)
        self.assertIn("reply window open: yes", text)
        self.assertIn(str(QUESTION_CHANNEL_ID), text)
        self.assertIn("gpt-4o-mini", text)

    async def test_scan_runs_and_reports(self):
        ctx = FakeCtx(author_id=OWNER_ID)
        await self.bot.get_command("responder.scan").callback(ctx)
        self.assertEqual(ctx.sent, ["scan done: candidates=1 replied=1"])
        self.assertEqual(self.thread.sent, ["answer"])


if __name__ == "__main__":
    unittest.main()
