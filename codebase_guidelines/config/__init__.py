""" codebase-guidelines configuration module. """

import yaml
from pathlib import Path
from typing import Any


def load_yaml(yaml_file: str) -> Any:
    """
    Loads and parses a YAML file.

    Args:
        yaml_file (str): The path to the YAML file to be loaded.

    Returns:
        Any: The parsed YAML data, which can be of any structure depending on the file contents.

    Raises:
        FileNotFoundError: If the YAML file does not exist.
    """
    with open(yaml_file, 'r') as stream:
        return yaml.safe_load(stream.read())


# assign variables
config_file = Path.joinpath(Path(__file__).resolve().parent, 'codebase_guidelines.yml')
globals().update(load_yaml(config_file))

# root of the bundled guideline directories, one sub-directory per target
PACKAGE_ROOT = Path(__file__).resolve().parent.parent / GUIDELINES_DIRECTORY  # noqa: F821
