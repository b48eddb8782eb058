from __future__ import annotations


async def fetch_chronological(thread, limit: int) -> list:
    # thread.history yields newest first.
    newest_first = [m async for m in thread.history(limit=int(limit))]
    newest_first.reverse()
    return newest_first


def first_human_message(messages: list):
    for message in messages:
        if not message.author.bot:
            return message
    return None


def build_transcript(messages: list) -> str:
    lines = [
        f"{m.author.name}: {m.content}"
        for m in messages
        if not m.author.bot
    ]
    return "\n".join(lines)
