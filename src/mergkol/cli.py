# src/mergkol/cli.py
import sys
import argparse
from pathlib import Path

# Module imports
from mergkol.config import (
    DEFAULT_DIR,
    DEFAULT_EXTENSION_FILTER,
    DEFAULT_LINE_ENDING,
    DEFAULT_OUTPUT_FILE,
    LINE_ENDINGS,
)
from mergkol.core.ignore import load_ignore_spec, output_exclusion_pattern
from mergkol.core.merger import merge_directory
from mergkol.core.writer import write
from mergkol.errors import MergeError, WalkError, WriteError

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="mergkol",
        description="Merge the source files of a directory into a single file, deduplicating imports and stripping local packages."
    )
    parser.add_argument("-d", "--dir", type=str, default=DEFAULT_DIR, help=f"Source code directory (default: {DEFAULT_DIR})")
    parser.add_argument(
        "-e", "--extension",
        type=str,
        default=DEFAULT_EXTENSION_FILTER,
        help="Only process files ending with this extension, '*' for all (default: *)"
    )
    parser.add_argument("-o", "--output", type=str, default=DEFAULT_OUTPUT_FILE, help=f"Write merged code into this file (default: {DEFAULT_OUTPUT_FILE})")
    parser.add_argument("-t", "--skip-tests", action="store_true", help="Skip files with 'test' in their name (ignoring case)")
    parser.add_argument("--exclude", action="append", default=[], metavar="PATTERN", help="Gitignore-style pattern to exclude (repeatable)")
    parser.add_argument("--ignore-file", type=str, default=None, help="File with gitignore-style exclude patterns")
    parser.add_argument(
        "--line-ending",
        choices=sorted(LINE_ENDINGS),
        default=DEFAULT_LINE_ENDING,
        help=f"Line terminator of the output file (default: {DEFAULT_LINE_ENDING})"
    )
    parser.add_argument("--sort-imports", action="store_true", help="Sort merged imports for reproducible output")
    return parser

def main(argv=None):
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)

        input_dir = Path(args.dir)
        output_file = Path(args.output)
        line_ending = LINE_ENDINGS[args.line_ending]

        print("--- mergkol ---")
        print(f"Merging files in:    {input_dir}")
        print(f"Extension filter:    {args.extension}")
        print(f"Skipping test files: {args.skip_tests}")

        if not input_dir.is_dir():
            print(f"Error: Input directory not found '{input_dir}'", file=sys.stderr)
            sys.exit(1)

        # 2. Ignore Rules (Using PathSpec)
        patterns = list(args.exclude)
        own_output = output_exclusion_pattern(input_dir, output_file)
        if own_output:
            patterns.append(own_output)
        ignore_spec = load_ignore_spec(args.ignore_file, extra_patterns=patterns)

        # 3. Discover, parse and merge
        merged = merge_directory(
            input_dir,
            extension_filter=args.extension,
            skip_test_files=args.skip_tests,
            ignore_spec=ignore_spec,
            sort_imports=args.sort_imports,
        )

        # 4. Output Generation
        print(f"Write output to: {output_file}")
        write(merged, output_file, line_ending)

        print("-" * 60)
        print(f"Imports:    {len(merged.imports)}")
        print(f"Code lines: {len(merged.code)}")
        print("-" * 60)
        print(f"\nSuccess! Merged code written to: {output_file}")

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except WalkError as e:
        print(f"Error while file discovery: {e}", file=sys.stderr)
        sys.exit(1)

    except WriteError as e:
        print(f"Error while writing result: {e}", file=sys.stderr)
        sys.exit(1)

    except MergeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
