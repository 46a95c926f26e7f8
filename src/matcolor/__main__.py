"""Entry point for running matcolor as a module.

Usage: python -m matcolor [SEED] [--dark]

Prints every role of the scheme derived from SEED (a hex color such as
#0000FF). Without a seed, the configured default is used.
"""

import sys
import logging

from matcolor.config.settings import THEME_CONFIG
from matcolor.core.color import RGBA
from matcolor.core.scheme import Schemes
from matcolor.exceptions.errors import ColorParseError


def main(argv=None):
    """Main entry point for the scheme preview."""
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    args = list(sys.argv[1:] if argv is None else argv)
    dark = THEME_CONFIG.dark
    if "--dark" in args:
        args.remove("--dark")
        dark = True
    if "--light" in args:
        args.remove("--light")
        dark = False

    seed = THEME_CONFIG.seed
    if args:
        try:
            seed = RGBA.from_hex(args[0])
        except ColorParseError as e:
            print(f"Invalid seed color {e}", file=sys.stderr)
            return 2

    scheme = Schemes.from_seed(seed).get(dark)
    width = max(len(role) for role in scheme.to_dict())
    for role, value in scheme.to_dict().items():
        print(f"{role:<{width}}  {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
