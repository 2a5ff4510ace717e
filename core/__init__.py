from __future__ import annotations

from .collaborators import Renderer, Scheduler, Notifier
from .config import AppConfig, load_config
from .outcomes import Outcome, MESSAGES, message_for
from .selection import SelectionController
from .workbench import GraphWorkbench, ActiveTraversal

__all__ = [
    'Renderer', 'Scheduler', 'Notifier',
    'AppConfig', 'load_config',
    'Outcome', 'MESSAGES', 'message_for',
    'SelectionController',
    'GraphWorkbench', 'ActiveTraversal',
]
