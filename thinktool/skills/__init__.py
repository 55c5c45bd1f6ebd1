from .clear_skill import ClearSkill
from .recall_skill import RecallSkill
from .think_skill import ThinkSkill


def default_skills():
    return [ThinkSkill(), RecallSkill(), ClearSkill()]


__all__ = ["ThinkSkill", "RecallSkill", "ClearSkill", "default_skills"]
