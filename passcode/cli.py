import sys
import json
import logging
import argparse
from datetime import date
from getpass import getpass
from typing import List, Optional

from .analysis import AnalysisResult, analyze_password
from .dictionary import DictionaryUnavailableError, default_dictionary, load_dictionary
from .personal import UserProfile
from .scoring import Strength

# ---------------------------
# Text report
# ---------------------------

ANSI = {
    "reset": "\033[0m",
    "red": "\033[31m",
    "yellow": "\033[33m",
    "green": "\033[32m",
}

STRENGTH_COLORS = {
    Strength.STRONG: "green",
    Strength.MODERATE: "yellow",
    Strength.WEAK: "red",
}


def colorize(text: str, color: str, use_color: bool) -> str:
    if not use_color:
        return text
    return f"{ANSI[color]}{text}{ANSI['reset']}"


def _section(title: str, items) -> List[str]:
    if not items:
        return []
    return [f"{title}:"] + [f"  - {item}" for item in items]


def format_report(result: AnalysisResult, use_color: bool = False) -> str:
    headline = f"Strength: {result.strength.value} ({result.score}/100)"
    lines = [
        colorize(headline, STRENGTH_COLORS[result.strength], use_color),
        f"Common password: {'yes' if result.is_common_password else 'no'}",
    ]
    if result.suggestions:
        lines += _section("Suggestions", result.suggestions)
    else:
        lines.append("Suggestions: none, looks good!")
    lines += _section("Personal info", result.personal_info_warnings)
    lines += _section("Patterns", result.pattern_warnings)
    return "\n".join(lines)


# ---------------------------
# Command line
# ---------------------------

def birth_date_arg(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from None


def parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="passcode", description="Password strength checker")
    parser.add_argument("--password", help="Password value (prefer the prompt or --stdin)")
    parser.add_argument("--stdin", action="store_true", help="Read the password from STDIN")
    parser.add_argument("--name", default="", help="Your name, to flag passwords derived from it")
    parser.add_argument("--email", default="", help="Your email, to flag passwords derived from it")
    parser.add_argument("--birth-date", type=birth_date_arg, help="Your birth date (YYYY-MM-DD)")
    parser.add_argument("--wordlist", help="Common-password list to use instead of the bundled one")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Output JSON")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def read_password(args: argparse.Namespace) -> str:
    if args.stdin:
        return sys.stdin.read().rstrip("\r\n")
    if args.password is not None:
        return args.password
    return getpass("Enter password to evaluate: ")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.wordlist:
        try:
            dictionary = load_dictionary(args.wordlist)
        except DictionaryUnavailableError as exc:
            print(f"passcode: {exc}", file=sys.stderr)
            return 2
    else:
        dictionary = default_dictionary()

    profile = None
    if args.name or args.email or args.birth_date:
        profile = UserProfile(name=args.name, email=args.email, birth_date=args.birth_date)

    result = analyze_password(read_password(args), profile, dictionary)

    if args.as_json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        print(format_report(result, use_color))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
