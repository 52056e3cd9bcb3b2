"""download: match a download path and print the requested file."""

import sys

from path_to_regex import match

matcher = match("/api/v1/download/:file{.:ext}")


def main(path: str = "/api/v1/download/archive.zip") -> int:
    """Print file and extension of a download path."""
    matched, params = matcher(path)
    if not matched:
        print("Wrong path", file=sys.stderr)
        return 1

    print(f"File '{params['file']}' with extension '{params['ext']}' requested")
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
