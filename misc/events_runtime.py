from __future__ import annotations

import discord
from discord.ext import commands
from misc.runtime_deps import RuntimeBootDeps
from misc.runtime_deps import RuntimeDeps
from misc.thread_gates import is_thread_starter
from misc.thread_gates import mentions_user


def register_runtime_events(
    bot: commands.Bot,
    *,
    deps: RuntimeDeps,
    boot: RuntimeBootDeps,
) -> None:
    @bot.event
    async def on_ready():
        print(f"Logged in as {bot.user}")
        # on_ready fires again after reconnects; the scan runs once per process.
        if getattr(bot, "_startup_scan_done", False):
            return
        bot._startup_scan_done = True

        try:
            await boot.startup_scan_func()
        except Exception as e:
            print(f"[Forum] startup scan failed: {e}")

    @bot.event
    async def on_thread_create(thread: discord.Thread):
        try:
            await deps.responder.on_new_thread(thread)
        except Exception as e:
            print(f"[Forum] on_thread_create error thread={getattr(thread, 'id', '?')}: {e}")

    @bot.event
    async def on_message(message: discord.Message):
        if message.author.bot:
            return

        # Only real commands leave the forum routing; "!すごい" is still a reply.
        if (message.content or "").lstrip().startswith(deps.command_prefix):
            ctx = await bot.get_context(message)
            if ctx.valid:
                await bot.invoke(ctx)
                return

        if not isinstance(message.channel, discord.Thread):
            return

        try:
            if mentions_user(message, bot.user):
                await deps.responder.reply_to_mention(message)
                return

            if is_thread_starter(message):
                return
            await deps.responder.mark_human_replied(message)
        except Exception as e:
            print(f"[Forum] on_message error thread={message.channel.id}: {e}")
