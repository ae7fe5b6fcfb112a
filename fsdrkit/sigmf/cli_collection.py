"""Command line tool that gathers SigMF recordings into a collection file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from fsdrkit.sigmf.description import DescriptionBuilder, RecordingBuilder
from fsdrkit.sigmf.errors import SigMFError


def create_collection(files, output):
    """Write a collection at ``output`` listing every recording with its SHA-512."""
    builder = DescriptionBuilder.collection()
    for a_file in files:
        print(f'Adding "{a_file}"')
        record = RecordingBuilder(a_file).compute_sha512().build()
        builder.add_stream(record)
    output = Path(output)
    try:
        builder.build().create(output, pretty=True)
    except OSError as exc:
        raise OSError(f"Error writing to {output}: {exc}") from exc
    return output


def _parser():
    parser = argparse.ArgumentParser(
        prog="sigmf-col",
        description="Create and update collections of SigMF records",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    create = commands.add_parser(
        "create", help="Create a collection from given SigMF files"
    )
    create.add_argument("-o", "--output", metavar="FILE", type=Path, required=True)
    create.add_argument("files", metavar="FILE", type=Path, nargs="+")
    return parser


def main(argv=None):
    args = _parser().parse_args(argv)
    try:
        create_collection(args.files, args.output)
    except (SigMFError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())