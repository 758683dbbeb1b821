"""Resolve every hostname listed in input files and write the results."""

import sys

from hostresolve.resolver import LookupFailure, first_address

MAX_HOSTNAME = 1024
USAGE = "<inputFilePath> <outputFilePath>"


def _hostnames(stream):
    """Yield whitespace-separated words, each cut into pieces of at most MAX_HOSTNAME."""
    for line in stream:
        for word in line.split():
            for start in range(0, len(word), MAX_HOSTNAME):
                yield word[start:start + MAX_HOSTNAME]


def lookup_files(input_paths, output):
    """Resolve the hostnames in each input file, writing ``host,address`` lines.

    A hostname that cannot be resolved is written with an empty address.
    Processing stops at the first input file that cannot be opened.
    Returns the number of lines written.
    """
    written = 0
    for path in input_paths:
        try:
            stream = open(path, encoding="utf-8", errors="replace")
        except OSError as exc:
            print(f"Error Opening Input File: {path}: {exc.strerror}", file=sys.stderr)
            break
        with stream:
            for hostname in _hostnames(stream):
                try:
                    address = first_address(hostname)
                except LookupFailure as exc:
                    print(exc, file=sys.stderr)
                    print(f"dnslookup error: {hostname}", file=sys.stderr)
                    address = ""
                output.write(f"{hostname},{address}\n")
                written += 1
    return written


def main(argv=None):
    """Run the lookup command; the last argument names the output file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        program = sys.argv[0] if sys.argv and sys.argv[0] else "lookup"
        print(f"Not enough arguments: {len(args)}", file=sys.stderr)
        print(f"Usage:\n {program} {USAGE}", file=sys.stderr)
        return 1
    try:
        output = open(args[-1], "w", encoding="utf-8")
    except OSError as exc:
        print(f"Error Opening Output File: {exc.strerror}", file=sys.stderr)
        return 1
    with output:
        lookup_files(args[:-1], output)
    return 0


if __name__ == "__main__":
    sys.exit(main())