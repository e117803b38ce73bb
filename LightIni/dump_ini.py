import argparse
import json
import logging
import sys
from pprint import pformat

from LightIni.INIReader import INIReader
from LightIni.IniParser import IniParser
from LightIni.LineClassifier import DEFAULT_COMMENT_PREFIX
from LightIni.utils.exceptions import IniError


def dump(reader, as_json=False):
    """
    Render the globals and sections collected by an INIReader.
    """
    if as_json:
        return json.dumps({"globals": reader.globals, "sections": reader.sections}, indent=2, ensure_ascii=False)
    return f"Globals {pformat(reader.globals)}\nSections {pformat(reader.sections)}"


def main(argv=None):
    """
    Parse INI files and print their global options and sections.

    Command-line Arguments:
    - files (str): One or more INI files to parse, in order.
    - --comment-prefix (str): The character starting a comment line. Default is ";".
    - --json (bool): Print the parsed maps as JSON. Default is False.
    - -v, --verbose (bool): Enable debug logging of the parser.

    Stops at the first file that fails to parse and returns 1.

    Example:
    python3 -m LightIni.dump_ini --comment-prefix "#" ./data/settings.ini
    """

    args = argparse.ArgumentParser(prog="light-ini-dump")
    args.add_argument("files", nargs="+", help="The INI files to parse")
    args.add_argument("--comment-prefix", type=str, help="The comment prefix character", default=DEFAULT_COMMENT_PREFIX)
    args.add_argument("--json", action="store_true", help="Print the parsed maps as JSON")
    args.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = args.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    for filename in args.files:
        reader = INIReader()
        try:
            parser = IniParser(reader, args.comment_prefix)
            parser.parse_file(filename)
        except IniError as e:
            print(f"{filename}: {e}", file=sys.stderr)
            return 1
        print(f"File {filename}")
        print(dump(reader, args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
