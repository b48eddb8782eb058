from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import discord

QUESTION_CHANNEL_ID = 500000000000000001
AI_TAG_ID = 500000000000000010
HUMAN_TAG_ID = 500000000000000020
OTHER_TAG_ID = 500000000000000030

# 2026-01-07 is a Wednesday.
WEDNESDAY_10AM = datetime(2026, 1, 7, 10, 0)
WEDNESDAY_11PM = datetime(2026, 1, 7, 23, 0)


class QuotaError(Exception):
    code = "insufficient_quota"


class _DummyCompletions:
    def __init__(self, text: str | None = "Generated answer", error: Exception | None = None):
        self._text = text
        self._error = error
        self.calls: list[dict] = []

    def create(self, *args, **kwargs):
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=self._text))])


class DummyClient:
    def __init__(self, text: str | None = "Generated answer", error: Exception | None = None):
        self.completions = _DummyCompletions(text, error)
        self.chat = SimpleNamespace(completions=self.completions)

    @property
    def calls(self) -> list[dict]:
        return self.completions.calls


def human(user_id: int = 1, name: str = "alice"):
    return SimpleNamespace(id=user_id, name=name, bot=False)


def bot_user(user_id: int = 999, name: str = "cosmo"):
    return SimpleNamespace(id=user_id, name=name, bot=True)


class FakeThread:
    def __init__(
        self,
        thread_id: int,
        *,
        parent_id: int = QUESTION_CHANNEL_ID,
        tag_ids: list[int] | None = None,
        archived: bool = False,
        history_error: Exception | None = None,
    ):
        self.id = int(thread_id)
        self.parent_id = int(parent_id)
        self.applied_tags = [SimpleNamespace(id=int(t)) for t in (tag_ids or [])]
        self.archived = archived
        self.messages: list[FakeMessage] = []
        self.sent: list[str] = []
        self.edits: list[list[int]] = []
        self.log: list[str] = []
        self._history_error = history_error

    def add_message(self, author, content: str, *, mentions=None) -> "FakeMessage":
        message_id = self.id if not self.messages else self.id + len(self.messages)
        message = FakeMessage(message_id, author, content, channel=self, mentions=mentions)
        self.messages.append(message)
        return message

    def history(self, limit: int = 100):
        if self._history_error is not None:
            raise self._history_error

        async def _newest_first():
            for message in list(reversed(self.messages))[:limit]:
                yield message

        return _newest_first()

    async def send(self, text: str):
        self.sent.append(text)
        self.log.append("send")

    async def edit(self, *, applied_tags):
        ids = [int(t.id) for t in applied_tags]
        self.edits.append(ids)
        self.log.append("edit")
        self.applied_tags = [SimpleNamespace(id=i) for i in ids]
        return self

    @property
    def tag_ids(self) -> list[int]:
        return [int(t.id) for t in self.applied_tags]


class FakeMessage:
    def __init__(self, message_id: int, author, content: str, *, channel, mentions=None):
        self.id = int(message_id)
        self.author = author
        self.content = content
        self.channel = channel
        self.mentions = list(mentions or [])


class FakeGuild:
    def __init__(self, threads: list[FakeThread] | None = None):
        self.threads = list(threads or [])
        self.active_threads_calls = 0

    async def active_threads(self):
        self.active_threads_calls += 1
        return list(self.threads)


class FakeForum:
    def __init__(self, channel_id: int = QUESTION_CHANNEL_ID, *, guild: FakeGuild | None = None, channel_type=None):
        self.id = int(channel_id)
        self.type = channel_type if channel_type is not None else discord.ChannelType.forum
        self.guild = guild or FakeGuild()


class FakeBot:
    def __init__(self, *, user=None):
        self.user = user or bot_user()
        self._channels: dict[int, object] = {}
        self._cached = set()
        self.fetch_calls: list[int] = []

    def add_channel(self, channel, *, cached: bool = True):
        self._channels[int(channel.id)] = channel
        if cached:
            self._cached.add(int(channel.id))

    def get_channel(self, channel_id: int):
        if int(channel_id) in self._cached:
            return self._channels.get(int(channel_id))
        return None

    async def fetch_channel(self, channel_id: int):
        self.fetch_calls.append(int(channel_id))
        channel = self._channels.get(int(channel_id))
        if channel is None:
            raise LookupError(f"unknown channel {channel_id}")
        return channel
