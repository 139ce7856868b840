"""Editor modes."""

from enum import Enum, auto


class Mode(Enum):
    """The mode the editor is in; it decides how keys are read."""

    NORMAL = auto()
    INSERT = auto()
    VISUAL = auto()
    COMMAND = auto()