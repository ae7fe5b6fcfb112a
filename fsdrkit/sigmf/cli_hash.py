"""Command line tool that checks and updates the SHA-512 of SigMF recordings."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from fsdrkit.sigmf.description import RecordingBuilder
from fsdrkit.sigmf.errors import MissingMandatoryField, SigMFError


def _computed_hash_and_description(basename):
    try:
        record = RecordingBuilder(basename).compute_sha512().build()
    except (SigMFError, OSError) as exc:
        raise type(exc)(f"Computing sha512 of {basename}: {exc}") from exc
    computed = record.require_hash()
    return computed, record.load_description()


def check_sigmf(basename):
    """Compare the stored hash with the data file's; return True on a match."""
    computed, desc = _computed_hash_and_description(basename)
    expected = desc.require_global().sha512
    if expected is None:
        raise MissingMandatoryField("sha512")
    if expected == computed:
        print("Hash match")
        return True
    print(expected)
    print(computed)
    print("Hash doesn't match")
    return False


def update_sigmf(basename):
    """Store the data file's hash in the metadata if it differs; return True if written."""
    computed, desc = _computed_hash_and_description(basename)
    global_ = desc.require_global()
    if global_.sha512 is not None and global_.sha512 == computed:
        return False
    meta_path = Path(basename).with_suffix(".sigmf-meta")
    global_.sha512 = computed
    try:
        desc.create(meta_path, pretty=True)
    except OSError as exc:
        raise OSError(f"Error writing to {meta_path}: {exc}") from exc
    return True


def _parser():
    parser = argparse.ArgumentParser(
        prog="sigmf-hash", description="Check and update hashes on SigMF files"
    )
    commands = parser.add_subparsers(dest="command", required=True)
    check = commands.add_parser("check", help="Verify the hash of a dataset")
    check.add_argument("files", metavar="FILE", type=Path, nargs="+")
    update = commands.add_parser(
        "update", help="Recompute and update the hash of a dataset"
    )
    update.add_argument("files", metavar="FILE", type=Path, nargs="*")
    return parser


def main(argv=None):
    args = _parser().parse_args(argv)
    action = check_sigmf if args.command == "check" else update_sigmf
    status = 0
    for a_file in args.files:
        try:
            action(a_file)
        except (SigMFError, OSError) as exc:
            print(exc, file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())