"""Command-line option handling for the interpreter front end."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

__all__ = [
    "Options",
    "UsageError",
    "match_option",
    "parse_args",
    "split_module_paths",
    "help_text",
    "version_text",
]

BERRY_VERSION = "1.1.0"
DEBUG = False

OPTION_PATTERN = "m?vhilegsc?o?"
DEFAULT_OUTPUT = "a.out"
PATH_SEPARATOR = os.pathsep

if sys.platform.startswith("win"):
    DEFAULT_MODULE_PATHS = ("\\Windows\\system32\\berry\\packages",)
else:
    DEFAULT_MODULE_PATHS = ("/usr/local/lib/berry/packages",)


class UsageError(ValueError):
    """Raised when the command line is malformed."""

    def __init__(self, option: str):
        super().__init__(f"missing argument to '{option}'")
        self.option = option


@dataclass
class Options:
    """Parsed command-line options."""

    interactive: bool = False
    compile: bool = False
    output: bool = False
    local: bool = False
    help: bool = False
    version: bool = False
    execute: bool = False
    named_globals: bool = False
    strict: bool = False
    module_paths: list[str] | None = None
    source: str | None = None
    destination: str | None = None
    args: list[str] = field(default_factory=list)

    @property
    def script(self) -> str | None:
        """The script path or source string, if any."""
        return self.args[0] if self.args else None

    @property
    def build_mode(self) -> bool:
        """True when the command compiles a script to a bytecode file."""
        return self.compile or self.output

    @property
    def build_source(self) -> str | None:
        """The script to compile: the -c argument or the first argument."""
        return self.source if self.source is not None else self.script

    @property
    def build_output(self) -> str:
        """The bytecode file to write."""
        return self.destination if self.destination is not None else DEFAULT_OUTPUT

    @property
    def repl_mode(self) -> bool:
        """True when an interactive session follows (or replaces) the script."""
        if self.interactive:
            return True
        flags = (
            self.compile, self.output, self.local,
            self.help, self.version, self.execute,
        )
        return not any(flags) and not self.args

    @property
    def module_search_paths(self) -> list[str]:
        """Module search paths: the -m ones, else the defaults."""
        if self.module_paths is not None:
            return list(self.module_paths)
        return list(DEFAULT_MODULE_PATHS)


def match_option(pattern: str | None, ch: str) -> str | None:
    """Find option letter *ch* in *pattern*.

    Return the part of the pattern starting at the letter (so that any
    modifier such as ``?`` follows it), or None if the letter is not a
    valid option.
    """
    if not pattern:
        return None
    i = 0
    n = len(pattern)
    while i < n:
        if pattern[i] == ch:
            return pattern[i:]
        i += 1
        while i < n and not pattern[i].isascii() or (i < n and not pattern[i].isalpha()):
            i += 1
    return None


def parse_args(argv: list[str] | None = None) -> Options:
    """Parse command-line arguments (without the program name)."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    opts = Options()
    idx = 0
    count = len(argv)
    while idx < count:
        arg = argv[idx]
        if not (arg.startswith("-") and len(arg) == 2):
            break
        res = match_option(OPTION_PATTERN, arg[1])
        idx += 1
        optarg = None
        if (
            res is not None
            and len(res) > 1
            and res[1] == "?"
            and idx < count
            and not argv[idx].startswith("-")
        ):
            optarg = argv[idx]
            idx += 1
        if res is None:
            raise UsageError(arg)
        letter = res[0]
        if letter == "h":
            opts.help = True
        elif letter == "v":
            opts.version = True
        elif letter == "i":
            opts.interactive = True
        elif letter == "l":
            opts.local = True
        elif letter == "e":
            opts.execute = True
        elif letter == "g":
            opts.named_globals = True
        elif letter == "s":
            opts.strict = True
        elif letter == "m":
            opts.module_paths = split_module_paths(optarg or "")
        elif letter == "c":
            opts.compile = True
            opts.source = optarg
        elif letter == "o":
            opts.output = True
            opts.destination = optarg
    opts.args = argv[idx:]
    return opts


def split_module_paths(text: str) -> list[str]:
    """Split a separator-delimited list of paths, dropping empty entries."""
    return [part for part in text.split(PATH_SEPARATOR) if part]


def version_text() -> str:
    """Return the full version string."""
    text = f"Berry {BERRY_VERSION}"
    if DEBUG:
        text += " (debug)"
    return text


def help_text() -> str:
    """Return the usage message."""
    return (
        "Usage: berry [options] [script [args]]\n"
        "Available options are:\n"
        "  -i        enter interactive mode after executing 'file'\n"
        "  -l        all variables in 'file' are parsed as local\n"
        "  -e        load 'script' source string and execute\n"
        f"  -m <path> custom module search path(s) separated by '{PATH_SEPARATOR}'\n"
        "  -c <file> compile script 'file' to bytecode file\n"
        "  -o <file> save bytecode to 'file'\n"
        "  -g        force named globals in VM\n"
        "  -s        force Berry compiler in strict mode\n"
        "  -v        show version information\n"
        "  -h        show help information\n"
    )