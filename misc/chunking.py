from __future__ import annotations

import re

from config.defaults import DISCORD_MAX_MESSAGE_LEN

# Zero-width split after a sentence end or line break; the delimiter stays with its sentence.
_SENTENCE_END_RE = re.compile(r"(?<=[。！？!?\n])")


def split_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_END_RE.split(text or "") if s]


def chunk_text(text: str, limit: int = DISCORD_MAX_MESSAGE_LEN) -> list[str]:
    """Pack whole sentences into messages of at most `limit` characters.

    Persona answers are a handful of sentences, so a reply only splits when a
    mention transcript or an unusually long answer runs past Discord's limit.
    A single sentence longer than `limit` is cut hard.
    """
    text = text or ""
    if len(text) <= limit:
        return [text]

    segments: list[str] = []
    current = ""
    for sentence in split_sentences(text):
        while len(sentence) > limit:
            if current:
                segments.append(current)
                current = ""
            segments.append(sentence[:limit])
            sentence = sentence[limit:]
        if len(current) + len(sentence) > limit:
            segments.append(current)
            current = ""
        current += sentence
    if current:
        segments.append(current)

    return [s.strip() for s in segments if s.strip()]


async def send_chunked(channel, text: str) -> None:
    for part in chunk_text(text, DISCORD_MAX_MESSAGE_LEN):
        await channel.send(part)
