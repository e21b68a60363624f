# Services package

from .background_task_runner import BackgroundTaskRunner
from .command_registry import CommandRegistry
from .dispatcher import Dispatcher
from .help_formatter import HelpFormatter
from .macro_expander import MacroExpander
from .parameter_matcher import ParameterMatcher
from .permission_evaluator import PermissionEvaluator
from .tokenizer import tokenize

__all__ = [
    "BackgroundTaskRunner",
    "CommandRegistry",
    "Dispatcher",
    "HelpFormatter",
    "MacroExpander",
    "ParameterMatcher",
    "PermissionEvaluator",
    "tokenize",
]
