from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from controller.settings import ResponderSettings
from misc.forum_responder import ForumResponder


def _default_false(*args, **kwargs) -> bool:
    return False


@dataclass(frozen=True)
class CommandDeps:
    responder: ForumResponder
    settings: ResponderSettings
    send_chunked: Callable


@dataclass(frozen=True)
class CommandGates:
    user_is_owner: Callable = _default_false
