"""Build platform-specific adapter outputs for a skill.

The on-disk result is one pretty-printed ``<platform>.json`` per adapter in
the skill's ``dist/`` directory, each holding a serialized TranspileResult.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from polyskill.adapters import resolve_adapters
from polyskill.skills import SkillDefinition, TranspileResult, load_skill
from polyskill.utils import get_logger

logger = get_logger(__name__)

DIST_DIR = "dist"


@dataclass
class BuildReport:
    """What a build produced."""

    skill: SkillDefinition
    out_dir: Path
    outputs: dict[str, Path] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)


def transpile_skill(skill: SkillDefinition) -> tuple[dict[str, TranspileResult], list[str]]:
    """Transpile a skill for every platform listed in its manifest.

    Unknown platforms are skipped, not treated as errors.

    Args:
        skill: Loaded skill definition

    Returns:
        (results, skipped): results keyed by platform in manifest order, and
        the platform names with no registered adapter
    """
    adapters, skipped = resolve_adapters(skill.manifest.adapters)
    for platform in skipped:
        logger.warning(f"Skipping unknown adapter: {platform}", extra={"skill": skill.name})

    results = {adapter.platform: adapter.transpile(skill) for adapter in adapters}
    return results, skipped


def build_skill(skill_dir: str | Path, out_dir: str | Path | None = None) -> BuildReport:
    """Load a skill and write its adapter outputs.

    Args:
        skill_dir: Skill directory containing ``skill.json``
        out_dir: Output directory, defaults to ``<skill_dir>/dist``

    Returns:
        BuildReport listing written files and skipped platforms

    Raises:
        SkillLoadError: The skill failed to load
        OSError: The output directory or a file could not be written
    """
    skill_dir = Path(skill_dir)
    skill = load_skill(skill_dir)

    out_dir = Path(out_dir) if out_dir is not None else skill_dir / DIST_DIR
    out_dir.mkdir(parents=True, exist_ok=True)

    results, skipped = transpile_skill(skill)
    report = BuildReport(skill=skill, out_dir=out_dir, skipped=skipped)

    for platform, result in results.items():
        output_path = out_dir / f"{platform}.json"
        output_path.write_text(result.to_json(), encoding="utf-8")
        report.outputs[platform] = output_path
        logger.info(f"Built {platform} -> {output_path}")

    return report
