"""PolySkill utilities."""

from polyskill.utils.helpers import (
    dump_json,
    scoped_name_to_dirname,
    truncate_string,
    write_json,
)
from polyskill.utils.logging import get_logger, setup_logging

__all__ = [
    "dump_json",
    "write_json",
    "scoped_name_to_dirname",
    "truncate_string",
    "setup_logging",
    "get_logger",
]
