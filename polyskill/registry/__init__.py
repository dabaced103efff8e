"""Client for the remote skill registry."""

from polyskill.registry.client import RegistryClient, RegistryError
from polyskill.registry.install import install_skill
from polyskill.registry.models import RegistrySkill, SearchResponse, SkillSummary

__all__ = [
    "RegistryClient",
    "RegistryError",
    "RegistrySkill",
    "SearchResponse",
    "SkillSummary",
    "install_skill",
]
