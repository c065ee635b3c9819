""" Usage text of the codebase-guidelines command line interface. """

import codebase_guidelines.config as config
from codebase_guidelines.targets import Target


def usage_text() -> str:
    """ Build the usage text, listing every available target. """
    targets = "\n".join(f"  {name}" for name in Target.values())
    return (
        "codebase-guidelines\n"
        "\n"
        "Usage:\n"
        "  codebase-guidelines copy <target...> [--force]\n"
        "\n"
        "Targets:\n"
        f"{targets}\n"
        "\n"
        "Behavior:\n"
        "  Copies selected directories from this package into:\n"
        f"  <current-working-directory>/{config.OUTPUT_DIRECTORY_NAME}/\n"
        "\n"
        "Options:\n"
        "  --force        Overwrite existing files/directories\n"
        "  -h, --help     Show this help\n"
        "\n"
        "Examples:\n"
        "  codebase-guidelines copy backend\n"
        "  codebase-guidelines copy frontend browser-extension --force\n"
    )
