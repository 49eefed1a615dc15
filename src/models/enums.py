"""Enumerations shared by the language profile models."""

from __future__ import annotations

from enum import Enum


class MaintainedState(str, Enum):
    """How actively a language module is looked after by its maintainers.

    Values mirror the tags the LanguageTool project publishes for each
    language so they can be serialised unchanged.
    """

    ACTIVELY_MAINTAINED = "ActivelyMaintained"
    LOOKING_FOR_NEW_MAINTAINER = "LookingForNewMaintainer"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]
