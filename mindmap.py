#!/usr/bin/env python3
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

import sys
import pathlib
import argparse

# Put this folder on sys.path so `import core` works when run from a checkout.
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent))

def cli():
    parser = argparse.ArgumentParser(description="MindMap Builder application")
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Previously exported mind-map JSON file to open"
    )
    parser.add_argument(
        "--verbosity",
        type=int, default=0,
        help="Set verbosity level (0=quiet, 1=normal, 2=verbose, 3+=debug)"
    )
    parser.add_argument(
        "--stdexp",
        action="store_true",
        help="Use standard exception handling to stdout / stderr."
    )
    args = parser.parse_args()

    from app import main
    return main(verbosity=args.verbosity, stdexp=args.stdexp, open_path=args.file)

if __name__ == "__main__":
    sys.exit(cli())
