from __future__ import annotations

from controller.settings import ResponderSettings
from misc.commands.command_deps import CommandDeps
from misc.commands.command_deps import CommandGates
from misc.commands.commands_responder import register as register_responder
from misc.forum_responder import ForumResponder
from misc.runtime_deps import RuntimeBootDeps
from misc.runtime_deps import RuntimeDeps
from misc.events_runtime import register_runtime_events


def wire_bot_runtime(
    bot,
    *,
    responder: ForumResponder,
    settings: ResponderSettings,
    send_chunked,
    command_prefix: str = "!",
) -> None:
    def user_is_owner(user) -> bool:
        try:
            return int(user.id) in settings.owner_user_ids
        except Exception:
            return False

    register_responder(
        bot,
        deps=CommandDeps(
            responder=responder,
            settings=settings,
            send_chunked=send_chunked,
        ),
        gates=CommandGates(user_is_owner=user_is_owner),
    )

    register_runtime_events(
        bot,
        deps=RuntimeDeps(
            responder=responder,
            command_prefix=command_prefix,
        ),
        boot=RuntimeBootDeps(
            startup_scan_func=responder.scan_unanswered_threads,
        ),
    )
