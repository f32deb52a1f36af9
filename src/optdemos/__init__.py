from .argp import GNU_CONTEXT_SETTINGS, bug_report_epilog, run_app, usage_option, version_option
from .getsubopt_demo import MountOptionError, MountOptions, parse_mount_args
from .logging import configure_logger, get_logger, set_module_level
from .subopt import UNKNOWN, Suboption, atoi, getsubopt
from .version import __version__

__all__ = [
    "GNU_CONTEXT_SETTINGS",
    "bug_report_epilog",
    "run_app",
    "usage_option",
    "version_option",
    "MountOptionError",
    "MountOptions",
    "parse_mount_args",
    "getsubopt",
    "atoi",
    "Suboption",
    "UNKNOWN",
    "configure_logger",
    "get_logger",
    "set_module_level",
    "__version__",
]
