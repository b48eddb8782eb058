from __future__ import annotations

import discord


def applied_tag_ids(thread) -> list[int]:
    out: list[int] = []
    for tag in getattr(thread, "applied_tags", None) or []:
        tag_id = int(tag.id)
        if tag_id not in out:
            out.append(tag_id)
    return out


def thread_has_tag(thread, tag_id: int) -> bool:
    return int(tag_id) in applied_tag_ids(thread)


def tags_with(thread, tag_id: int) -> list[discord.Object]:
    # Union with the current tags; existing order is preserved.
    ids = applied_tag_ids(thread)
    if int(tag_id) not in ids:
        ids.append(int(tag_id))
    return [discord.Object(id=i) for i in ids]


def is_forum_channel(channel) -> bool:
    return getattr(channel, "type", None) == discord.ChannelType.forum


def thread_in_channel(thread, channel_id: int) -> bool:
    parent_id = getattr(thread, "parent_id", None)
    return parent_id is not None and int(parent_id) == int(channel_id)


def is_thread_starter(message) -> bool:
    # Forum posts share their id with the starter message.
    return int(message.id) == int(message.channel.id)


def mentions_user(message, user) -> bool:
    if user is None:
        return False
    return any(int(m.id) == int(user.id) for m in getattr(message, "mentions", None) or [])


def should_intake_new_thread(thread, *, question_channel_id: int, ai_replied_tag_id: int, allowed_now: bool) -> bool:
    if not allowed_now:
        return False
    if not thread_in_channel(thread, question_channel_id):
        return False
    return not thread_has_tag(thread, ai_replied_tag_id)
