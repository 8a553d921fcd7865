"""Run the Unblock API server."""

import argparse
import os

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(prog="unblock", description="An Unblock Me! clone")
    parser.add_argument("--dir", help="Level file, or a directory containing levels.dat")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    if args.dir:
        # Settings are read from the environment on first use
        os.environ["UNBLOCK_LEVELS_PATH"] = args.dir

    uvicorn.run("unblock.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
