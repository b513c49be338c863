"""
atlasfont.scripting - command-line script support

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import os
import sys
import logging
from contextlib import contextmanager


# exit status for errors reported by a script
EXIT_ERROR = 1
# exit status when interrupted by the user
EXIT_INTERRUPTED = 130


def setup_logging(debug=False):
    """Log to stderr; debug messages only if requested."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(levelname)s: %(message)s',
        force=True,
    )


@contextmanager
def wrap_main(debug=False):
    """
    Run the body of a script's main function.

    Errors are logged and turned into exit status EXIT_ERROR;
    with debug set, the traceback is shown instead.
    """
    setup_logging(debug)
    try:
        yield
    except BrokenPipeError:
        # output pipe closed early, e.g. by `head`
        sys.stdout = os.fdopen(1)
    except KeyboardInterrupt:
        sys.exit(EXIT_INTERRUPTED)
    except (OSError, ValueError, ImportError) as exc:
        if debug:
            raise
        logging.error('%s: %s', type(exc).__name__, exc)
        sys.exit(EXIT_ERROR)
