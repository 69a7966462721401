"""
Writes generated units to disk.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .generate import DEFAULT_ROOT_NAME, generate_units
from .models import GeneratedUnit, Module

logger = logging.getLogger(__name__)


def write_units(units: Iterable[GeneratedUnit], out_dir: Union[str, Path]) -> List[Path]:
    """
    Write units under an output directory.

    Args:
        units: Generated units (their output paths are relative to out_dir)
        out_dir: Output root, created if missing

    Returns:
        Paths of the written files
    """
    root = Path(out_dir)
    written = []

    for unit in units:
        path = root.joinpath(*unit.output_path.parts)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(unit.text)

        logger.info("Generated %s", path)
        written.append(path)

    return written


def write_files(
    module: Module, out_dir: Union[str, Path], root_name: str = DEFAULT_ROOT_NAME
) -> List[Path]:
    """
    Generate and write every unit of a module tree.

    Nothing is written unless every unit generates successfully.
    """
    return write_units(generate_units(module, root_name), out_dir)


__all__ = ["write_units", "write_files"]
