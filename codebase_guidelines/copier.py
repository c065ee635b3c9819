"""
Directory copier of codebase-guidelines.

Copies one bundled guideline directory into the output root. The existence
check and the copy are two sequential steps: the tool assumes a single
invocation has exclusive use of the output root.
"""

import shutil
from pathlib import Path
from codebase_guidelines.errors import FileSystemError
from codebase_guidelines.logger import logger
from codebase_guidelines.schemas.commands import CopyResult
from codebase_guidelines.targets import Target


def copy_directory(target: Target, package_root: Path, output_root: Path, force: bool = False) -> CopyResult:
    """
    Copy the bundled directory of a target into the output root.

    Args:
        target (Target): Target to copy.
        package_root (Path): Directory holding the bundled targets.
        output_root (Path): Directory receiving the copy. Created if missing.
        force (bool): Overwrite an existing destination. Defaults to False.

    Returns:
        CopyResult: Absolute source and destination paths.

    Raises:
        FileSystemError: If the destination exists and ``force`` is False,
            or if the copy fails.
    """
    output_root = Path(output_root).absolute()
    source = Path(package_root).absolute() / target.value
    destination = output_root / target.value

    if destination.exists() and not force:
        raise FileSystemError(
            f"Destination already exists: {destination}. Re-run with --force to overwrite."
        )

    logger.debug(f"Copying {source} to {destination} (force={force})")
    try:
        output_root.mkdir(parents=True, exist_ok=True)
        shutil.copytree(source, destination, dirs_exist_ok=force)
    except OSError as err:
        raise FileSystemError(str(err)) from err

    return CopyResult(target=target, source=source, destination=destination)
