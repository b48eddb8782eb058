from __future__ import annotations

from discord.ext import commands
from misc.commands.command_deps import CommandDeps
from misc.commands.command_deps import CommandGates


def register(
    bot: commands.Bot,
    *,
    deps: CommandDeps,
    gates: CommandGates,
) -> None:
    @bot.command(name="responder.status")
    async def cmd_status(ctx: commands.Context):
        if not gates.user_is_owner(ctx.author):
            await ctx.send("This command is owner-only.")
            return

        responder = deps.responder
        now = responder.now_func()
        lines = [
            "Responder status:",
            f"- local time: {now.strftime('%a %Y-%m-%d %H:%M %Z').strip()}",
            f"- timezone: {deps.settings.timezone_name or '(host local)'}",
            f"- reply window open: {'yes' if responder.allowed_now() else 'no'}",
            f"- question channel: {responder.question_channel_id}",
            f"- ai_replied tag: {responder.ai_replied_tag_id}",
            f"- human_replied tag: {responder.human_replied_tag_id}",
            f"- model: {responder.openai_model}",
            f"- persona: {responder.persona.version}",
            f"- threads in flight: {len(responder.locks)}",
        ]
        await deps.send_chunked(ctx.channel, "```\n" + "\n".join(lines) + "\n```")

    @bot.command(name="responder.scan")
    async def cmd_scan(ctx: commands.Context):
        if not gates.user_is_owner(ctx.author):
            await ctx.send("This command is owner-only.")
            return

        print(f"[Commands] manual scan requested by user={ctx.author.id}")
        try:
            report = await deps.responder.scan_unanswered_threads()
        except Exception as e:
            print(f"[Commands] manual scan failed: {e}")
            await ctx.send("Scan failed. Check logs.")
            return
        await ctx.send(report.summary())
