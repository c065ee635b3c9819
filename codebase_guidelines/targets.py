"""
Copy targets distributed with codebase-guidelines.

Each member of :class:`Target` names a directory bundled under
``codebase_guidelines/guidelines/``. The set is closed: it mirrors the
package contents and is fixed at build time.
"""

from enum import Enum
from typing import List


class Target(str, Enum):
    """ Guideline directories that can be copied. """

    BACKEND = "backend"
    FRONTEND = "frontend"
    BROWSER_EXTENSION = "browser-extension"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> List[str]:
        """ Target names in declaration order. """
        return [target.value for target in cls]
