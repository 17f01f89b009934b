"""Package entry point for ``python -m basenc``.

WHY: Lets users run the codec without the installed console script,
e.g. ``python -m basenc --base64 photo.jpg``.

HOW: Delegates straight to the CLI's main() and propagates its exit code.
"""

import sys

if __name__ == "__main__":
    from basenc.cli import main
    sys.exit(main())
