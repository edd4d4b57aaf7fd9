"""
Command line front end.

Every public text and numeric function is exposed as a subcommand:

    ustr wrap_to_width "AAAA BBBB CCCC DDDD" 4
    ustr center_align hello 10 --fill=*
    ustr human_readable_size 1048576
    ustr --verbose wrap_to_width "ABCDEFGH IJ" 4

Pass `--verbose` before the command to print debug logs to stderr.
fire parses numeric-looking words as numbers; arguments declared as text
are turned back into strings, so `ustr is_number 123` works.
"""

__all__ = [
    "COMMANDS",
    "main",
]

import functools
import inspect
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

import fire
from loguru import logger

import ustr

_VERBOSE_FLAG = "--verbose"


def _with_text_arguments(func: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap func so that its str-annotated arguments are always strings."""
    signature = inspect.signature(func)
    text_params = [
        name
        for name, param in signature.parameters.items()
        if param.annotation is str
    ]

    @functools.wraps(func)
    def command(*args: Any, **kwargs: Any) -> Any:
        bound = signature.bind(*args, **kwargs)
        for name in text_params:
            if name in bound.arguments and not isinstance(bound.arguments[name], str):
                bound.arguments[name] = str(bound.arguments[name])
        return func(*bound.args, **bound.kwargs)

    return command


COMMANDS: Dict[str, Callable[..., Any]] = {
    name: _with_text_arguments(getattr(ustr, name))
    for name in ustr.__all__
    if name not in ("__version__", "enable_logging", "replace_inplace", "strip_inplace")
}


def _split_options(args: List[str]) -> Tuple[bool, List[str]]:
    """Separate a leading --verbose flag from the command and its arguments."""
    if args and args[0] == _VERBOSE_FLAG:
        return True, args[1:]
    return False, args


def main(argv: Optional[List[str]] = None) -> Any:
    """
    Run a subcommand.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Result of the subcommand
    """
    verbose, args = _split_options(list(sys.argv[1:] if argv is None else argv))
    if verbose:
        ustr.enable_logging("DEBUG")
        logger.debug(f"Running command: {args}")
    return fire.Fire(COMMANDS, command=args, name="ustr")


if __name__ == "__main__":
    main()
