"""Command line interface and interactive mode"""
import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO, Tuple

from . import __version__
from .errors import FormulaError
from .sum_formula import compute_mass

logger = logging.getLogger(__file__)

USAGE = f"""Molarmass {__version__}

Usage:
$> molarmass C6H12O6          #calculates the mass of C6H12O6
$> molarmass -i               #Enter interactive mode. (In this mode, you can get the weight of as many molecules as you want.)
$> molarmass -s               #Enter silent mode. (In this mode, molarmass won't say anything but the molecule weights.)

Limitations:
Molarmass doesn't know what to do with parentheses or molecule charges. You will need to make things simple to understand for molarmass.
Examples and fixes:
$> molarmass CH₃-COOH     ➜ $> molarmass CH3COOH
$> molarmass 3CO2         ➜ $> molarmass C3O6
$> molarmass (CH3)2C=O    ➜ $> molarmass C2H6CO
$> molarmass NH4+         ➜ $> molarmass NH4"""

INTERACTIVE_BANNER = """Molarmass interactive mode
Type a molecule and Molarmass will tell you how much it weighs.
Type "help" for help, "license" for the license and "exit" to exit."""

INTERACTIVE_HELP = """===========================
 Molarmass interactive mode help
 Type a molecule and Molarmass will tell you how much it weighs.
 Type "help" to see this text and type "exit" to exit.

 Molarmass is a simple tool to calculate the molar mass of a molecule.
 You are now in Molarmass interactive mode.
 That means that you can type molecule formulas and molarmass will answer with the molar mass of that molecule.

 Keep in mind that Molarmass doesn't know what to do with parentheses or molecule charges. You will need to make things simple to understand for molarmass.
 Examples and fixes:
 CH₃-COOH     ➜ CH3COOH
 3CO2         ➜ C3O6
 (CH3)2C=O    ➜ C2H6CO
 NH4+         ➜ NH4
==========================="""

LICENSE = """===========================
 Molarmass is distributed under the GPLv3.0 license.
 More information about the license: https://raw.githubusercontent.com/Thijmer/molarmass-go/master/LICENSE
 Source code: https://github.com/Thijmer/molarmass-go
==========================="""

PROMPT = "Molecule formula: "

# arguments handled by the argument parser, everything else is a formula
OPTION_ARGS = {
    "-h",
    "--help",
    "-help",
    "-s",
    "--silent",
    "-i",
    "--interactive",
    "-si",
    "-is",
}


@dataclass
class ShellOptions:
    """Output and mode settings for one invocation

    Attributes:
        silent: Only print masses. No prompts, banners or diagnostics.
        interactive: Read formulas from standard input after evaluating the
            formulas given on the command line.
    """

    silent: bool = False
    interactive: bool = False


def evaluate(
    formula: str, options: ShellOptions, stdout: Optional[TextIO] = None
) -> bool:
    """Print the mass of the given formula.

    Failures are logged unless in silent mode and never propagate.

    :returns: Whether the mass could be computed.
    """
    stdout = stdout or sys.stdout
    try:
        mass = compute_mass(formula)
    except FormulaError as e:
        if not options.silent:
            logger.error(str(e))
        return False

    print(mass, file=stdout)
    return True


def read_command(
    prompt: str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Tuple[str, bool]:
    """Show the prompt and read one line.

    :returns:
        The line without trailing newline, and whether to continue reading
        afterwards (``False`` once the end of the input has been reached).
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    if prompt:
        print(prompt, end="", file=stdout, flush=True)

    line = stdin.readline()
    if not line.endswith("\n"):
        # end of input, possibly after an unterminated last line
        return line, False
    return line.rstrip("\r\n"), True


def interactive_mode(
    options: ShellOptions,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Evaluate formulas from ``stdin`` until ``exit`` or end of input"""
    stdout = stdout or sys.stdout
    if not options.silent:
        print(INTERACTIVE_BANNER, file=stdout)

    prompt = "" if options.silent else PROMPT
    keep_running = True
    while keep_running:
        command, keep_running = read_command(prompt, stdin, stdout)
        if command == "exit":
            if not options.silent:
                print("Bye!", file=stdout)
            break
        elif command == "help":
            print(INTERACTIVE_HELP, file=stdout)
        elif command == "license":
            print(LICENSE, file=stdout)
        elif command:
            evaluate(command.replace(" ", ""), options, stdout)

    logger.debug("Leaving interactive mode")


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="molarmass",
        usage=argparse.SUPPRESS,
        description=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        "-help",
        action="help",
        help="Show this help text and exit.",
    )
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Only print molecule weights.",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Read formulas from standard input.",
    )
    parser.add_argument(
        "formulas",
        nargs="*",
        metavar="FORMULA",
        help="Sum formula to evaluate, e.g. C6H12O6.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the ``molarmass`` command"""
    logging.basicConfig(format="%(message)s", stream=sys.stderr)

    argv = sys.argv[1:] if argv is None else argv
    parser = get_parser()
    if not argv:
        parser.print_help()
        return 0

    # arguments are handled in order, options only affect later formulas
    options = ShellOptions()
    for arg in argv:
        if arg == "help":
            parser.print_help()
            return 0
        if arg not in OPTION_ARGS:
            evaluate(arg, options)
            continue

        flags = parser.parse_args([arg])
        options.silent |= flags.silent
        options.interactive |= flags.interactive
        logger.debug(f"{arg}: {options}")

    if options.interactive:
        interactive_mode(options)

    return 0
