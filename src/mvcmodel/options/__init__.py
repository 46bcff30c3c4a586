"""Option storage: the mutable value mapping behind every model."""

from mvcmodel.options.manager import CHANGE_EVENT, OptionChange, OptionsManager, merge

__all__ = [
    "CHANGE_EVENT",
    "OptionChange",
    "OptionsManager",
    "merge",
]
