from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from misc.forum_responder import ForumResponder


@dataclass(frozen=True)
class RuntimeDeps:
    responder: ForumResponder
    command_prefix: str = "!"


@dataclass(frozen=True)
class RuntimeBootDeps:
    startup_scan_func: Callable
