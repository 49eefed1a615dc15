"""Public model exports for the project.

Keep the :mod:`src` namespace clean: tests and other modules should import
``from src.models import RuleMatch, UserConfig``.
"""

from __future__ import annotations

from .contributor import Contributor
from .enums import MaintainedState
from .rule_match import RuleMatch
from .user_config import UserConfig

__all__ = ["Contributor", "MaintainedState", "RuleMatch", "UserConfig"]
