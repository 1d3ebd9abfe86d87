"""
Output Writer - Write rendered HTML and its assets to disk.
"""

import shutil
from importlib import resources
from pathlib import Path
from typing import List, Iterable, Union


ASSET_NAMES = ("style.css", "script.js")


def write_lines(filepath: Union[str, Path], lines: Iterable[str]) -> Path:
    """
    Write lines to a file, each followed by a newline.
    
    Args:
        filepath: Output file; parent directories are created
        lines: Lines without terminators
        
    Returns:
        The path written
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    return path


def write_assets(directory: Union[str, Path]) -> List[Path]:
    """Copy the bundled stylesheet and script into a directory."""
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    
    written = []
    static = resources.files(__package__).joinpath("static")
    for name in ASSET_NAMES:
        target = target_dir / name
        with resources.as_file(static.joinpath(name)) as source:
            shutil.copyfile(source, target)
        written.append(target)
    return written
