"""Write a skill fetched from the registry to disk."""

from __future__ import annotations

from pathlib import Path

from polyskill.builder import DIST_DIR
from polyskill.registry.client import RegistryError
from polyskill.registry.models import RegistrySkill
from polyskill.utils import get_logger, scoped_name_to_dirname, write_json

logger = get_logger(__name__)

SKILLS_DIR = "skills"


def _contained(base: Path, name: str) -> Path:
    """Join ``name`` onto ``base``, refusing anything that lands outside it."""
    path = (base / name).resolve()
    base = base.resolve()
    if path == base or not path.is_relative_to(base):
        raise RegistryError(f"Refusing to write outside {base}: {name}")
    return path


def install_skill(skill: RegistrySkill, output_dir: str | Path) -> Path:
    """Materialise a published skill under ``<output_dir>/skills``.

    Layout::

        skills/@scope__name/
            skill.json
            tools.json          (when published with tools)
            instructions.md     (when published with instructions)
            dist/<platform>.json

    Args:
        skill: Payload returned by ``RegistryClient.get_skill``
        output_dir: Project directory to install into

    Returns:
        The skill's install directory

    Raises:
        RegistryError: The skill name or a platform name would place files
            outside the install directory
    """
    skills_root = Path(output_dir) / SKILLS_DIR
    skill_dir = _contained(skills_root, scoped_name_to_dirname(skill.name))
    dist_dir = skill_dir / DIST_DIR
    outputs = {
        platform: _contained(dist_dir, f"{platform}.json")
        for platform in skill.adapters
    }

    skill_dir.mkdir(parents=True, exist_ok=True)
    write_json(skill_dir / "skill.json", skill.manifest)

    if skill.tools:
        write_json(skill_dir / "tools.json", skill.tools)

    if skill.instructions:
        (skill_dir / "instructions.md").write_text(skill.instructions, encoding="utf-8")

    if outputs:
        dist_dir.mkdir(parents=True, exist_ok=True)
        for platform, path in outputs.items():
            write_json(path, skill.adapters[platform])

    logger.info(f"Installed {skill.name}@{skill.version} to {skill_dir}")
    return skill_dir
