"""
sccparse command line interface.

Examples:
    sccparse check program.scc              # trace + SUCCESS / Compilation Exception
    sccparse check --quiet program.scc      # outcome only
    sccparse check --prefix rgg program.scc # mark every trace line
    sccparse check a.scc b.scc              # check several files
    sccparse lex program.scc                # dump the token stream
    cat program.scc | sccparse check -      # read standard input

Exit status: 0 when every input is syntactically valid, 1 on a syntax error,
2 when an input could not be read or tokenized, or nests too deeply to check.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .lexer import Lexer, LexerError
from .parser import Parser, ParseDepthError, Rule, StreamTrace, SyntaxAnalysisError

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_SYNTAX_ERROR = 1
EXIT_INPUT_ERROR = 2


def _eprint(*args) -> None:
    print(*args, file=sys.stderr)


def _open_source(path: str) -> TextIO:
    if path == "-":
        return sys.stdin
    return open(path, "r", encoding="utf-8")


def _filename(path: str) -> str:
    return "<stdin>" if path == "-" else path


def _check_one(path: str, args) -> int:
    trace = StreamTrace(sys.stdout, prefix=args.prefix, rules=not args.quiet)
    start = Rule[args.start]

    try:
        source = _open_source(path)
        try:
            Parser(Lexer(source, _filename(path)), trace).parse(start)
        finally:
            if source is not sys.stdin:
                source.close()
    except SyntaxAnalysisError as e:
        print("Compilation Exception")
        print(e.trace())
        return EXIT_SYNTAX_ERROR
    except ParseDepthError as e:
        _eprint(f"error: {_filename(path)}: {e}")
        return EXIT_INPUT_ERROR
    except LexerError as e:
        _eprint(str(e).rstrip())
        return EXIT_INPUT_ERROR
    except OSError as e:
        _eprint(f"error: cannot read {path}: {e}")
        return EXIT_INPUT_ERROR

    return EXIT_SUCCESS


def cmd_check(args) -> int:
    # Every file is checked; the worst outcome decides the status
    return max(_check_one(path, args) for path in args.files)


def cmd_lex(args) -> int:
    try:
        source = _open_source(args.file)
        try:
            lexer = Lexer(source, _filename(args.file))
            while True:
                token = lexer.next_token()
                text = f" '{token.text}'" if token.carries_lexeme else ""
                print(f"{token.line}: {token.kind.value}{text}")
                if token.is_eof:
                    break
        finally:
            if source is not sys.stdin:
                source.close()
    except LexerError as e:
        _eprint(str(e).rstrip())
        return EXIT_INPUT_ERROR
    except OSError as e:
        _eprint(f"error: cannot read {args.file}: {e}")
        return EXIT_INPUT_ERROR

    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="sccparse",
        description="Recursive descent syntax checker for SCC#",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1],
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="check source files against the grammar")
    p_check.add_argument("files", nargs="+", metavar="file", help="source file, or - for standard input")
    p_check.add_argument("--prefix", default="", help="marker written before every trace line")
    p_check.add_argument("-q", "--quiet", action="store_true", help="only report the outcome")
    p_check.add_argument(
        "--start",
        choices=[rule.name for rule in Rule],
        default=Rule.STATEMENT_PART.name,
        help="rule the whole input must derive from",
    )
    p_check.set_defaults(func=cmd_check)

    p_lex = sub.add_parser("lex", help="print the token stream of a source file")
    p_lex.add_argument("file", help="source file, or - for standard input")
    p_lex.set_defaults(func=cmd_lex)

    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.debug("running %s", args.cmd)

    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
