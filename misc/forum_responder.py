from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from config.defaults import INTAKE_HISTORY_LIMIT
from config.defaults import MENTION_HISTORY_LIMIT
from controller.persona import Persona
from controller.reply_service import generate_reply
from misc.chunking import send_chunked
from misc.thread_gates import is_forum_channel
from misc.thread_gates import should_intake_new_thread
from misc.thread_gates import tags_with
from misc.thread_gates import thread_has_tag
from misc.thread_gates import thread_in_channel
from misc.thread_history import build_transcript
from misc.thread_history import fetch_chronological
from misc.thread_history import first_human_message
from misc.thread_locks import ThreadLocks
from misc.time_gate import is_allowed_time


@dataclass(slots=True)
class ScanReport:
    skipped_reason: str | None = None
    candidates: int = 0
    replied: int = 0

    def summary(self) -> str:
        if self.skipped_reason:
            return f"scan skipped ({self.skipped_reason})"
        return f"scan done: candidates={self.candidates} replied={self.replied}"


class ForumResponder:
    def __init__(
        self,
        *,
        bot,
        client: Any,
        openai_model: str,
        persona: Persona,
        question_channel_id: int,
        ai_replied_tag_id: int,
        human_replied_tag_id: int,
        now_func: Callable[[], datetime],
        locks: ThreadLocks | None = None,
    ) -> None:
        self.bot = bot
        self.client = client
        self.openai_model = openai_model
        self.persona = persona
        self.question_channel_id = int(question_channel_id)
        self.ai_replied_tag_id = int(ai_replied_tag_id)
        self.human_replied_tag_id = int(human_replied_tag_id)
        self.now_func = now_func
        self.locks = locks or ThreadLocks()

    def allowed_now(self) -> bool:
        return is_allowed_time(self.now_func())

    async def generate_reply(self, text: str) -> str | None:
        return await generate_reply(
            text,
            client=self.client,
            model=self.openai_model,
            persona=self.persona,
        )

    async def _refresh_thread(self, thread):
        # Tags are read from Discord, never from a local cache.
        fresh = await self.bot.fetch_channel(int(thread.id))
        return fresh if fresh is not None else thread

    async def _add_tag_locked(self, thread, tag_id: int) -> None:
        await thread.edit(applied_tags=tags_with(thread, tag_id))

    # ---- ThreadCreated ----

    async def on_new_thread(self, thread) -> bool:
        if not should_intake_new_thread(
            thread,
            question_channel_id=self.question_channel_id,
            ai_replied_tag_id=self.ai_replied_tag_id,
            allowed_now=self.allowed_now(),
        ):
            return False
        return await self.handle_thread(thread)

    # ---- ThreadIntake ----

    async def handle_thread(self, thread) -> bool:
        try:
            async with self.locks.hold(thread.id):
                thread = await self._refresh_thread(thread)
                if thread_has_tag(thread, self.ai_replied_tag_id):
                    return False

                messages = await fetch_chronological(thread, INTAKE_HISTORY_LIMIT)
                first_message = first_human_message(messages)
                if first_message is None:
                    return False

                print(f"[Forum] generating answer thread={thread.id} chars={len(first_message.content or '')}")
                reply = await self.generate_reply(first_message.content)
                if not reply:
                    return False

                await send_chunked(thread, reply)
                await self._add_tag_locked(thread, self.ai_replied_tag_id)
                print(f"[Forum] answered thread={thread.id}")
                return True
        except Exception as e:
            print(f"[Forum] handle_thread error thread={getattr(thread, 'id', '?')}: {e}")
            return False

    # ---- Mention Re-Reply ----

    async def reply_to_mention(self, message) -> bool:
        if not self.allowed_now():
            return False

        thread = message.channel
        try:
            print(f"[Mention] thread={thread.id} author={message.author.id}")
            messages = await fetch_chronological(thread, MENTION_HISTORY_LIMIT)
            transcript = build_transcript(messages)

            reply = await self.generate_reply(transcript)
            if not reply:
                return False

            await send_chunked(thread, self.persona.format_mention_reply(reply))
            return True
        except Exception as e:
            print(f"[Mention] reply error thread={getattr(thread, 'id', '?')}: {e}")
            return False

    # ---- Human-replied bookkeeping ----

    async def mark_human_replied(self, message) -> bool:
        thread = message.channel
        if not thread_in_channel(thread, self.question_channel_id):
            return False
        if thread_has_tag(thread, self.human_replied_tag_id):
            return False

        async with self.locks.hold(thread.id):
            thread = await self._refresh_thread(thread)
            if thread_has_tag(thread, self.human_replied_tag_id):
                return False
            await self._add_tag_locked(thread, self.human_replied_tag_id)

        print(f"[Forum] human reply tagged thread={thread.id}")
        return True

    # ---- StartupScan ----

    async def _resolve_question_channel(self):
        channel = self.bot.get_channel(self.question_channel_id)
        if channel is None:
            channel = await self.bot.fetch_channel(self.question_channel_id)
        return channel

    async def _list_active_threads(self, channel) -> list:
        threads = await channel.guild.active_threads()
        return [
            t for t in threads
            if thread_in_channel(t, channel.id) and not getattr(t, "archived", False)
        ]

    async def scan_unanswered_threads(self) -> ScanReport:
        report = ScanReport()
        if not self.allowed_now():
            report.skipped_reason = "outside_hours"
            print(f"[Forum] {report.summary()}")
            return report

        channel = await self._resolve_question_channel()
        if not is_forum_channel(channel):
            report.skipped_reason = "not_forum"
            print(f"[Forum] {report.summary()} channel={self.question_channel_id}")
            return report

        for thread in await self._list_active_threads(channel):
            if thread_has_tag(thread, self.ai_replied_tag_id):
                continue
            report.candidates += 1
            if await self.handle_thread(thread):
                report.replied += 1

        print(f"[Forum] {report.summary()}")
        return report
