"""
linecalc - Command Line Interface

Usage:
    linecalc [input.calc] [-o output.txt] [--debug] [--emit-ast]
    python -m linecalc < input.calc
"""

import sys
import argparse


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="linecalc",
        description="Evaluate one assignment per line and print the final variables",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the source file (default: read lines from stdin)",
    )
    parser.add_argument("-o", "--output", help="Write the result to this file instead of stdout")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print per-line processing info to stderr",
    )
    parser.add_argument(
        "--emit-ast",
        action="store_true",
        dest="emit_ast",
        help="Emit the parsed statements as JSON instead of evaluating them",
    )

    args = parser.parse_args(argv)

    from .calculator import execute_file, execute_source
    from .errors import CalcError

    try:
        if args.input:
            result = execute_file(args.input, debug=args.debug, emit_ast=args.emit_ast)
        else:
            result = execute_source(
                sys.stdin.read(), debug=args.debug, emit_ast=args.emit_ast
            )
    except FileNotFoundError:
        print(f"[linecalc] Error: Input file not found: {args.input!r}", file=sys.stderr)
        sys.exit(1)
    except CalcError as e:
        print(str(e), file=sys.stderr)
        print(f"  Hint: {e.hint}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(result + "\n")
    else:
        print(result)


if __name__ == "__main__":
    main()
