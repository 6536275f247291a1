"""Command-line interface for turning images into text art."""

from __future__ import annotations

import argparse
import os
import re
import sys
from collections.abc import Callable, Sequence

from awesomeascii.charsets import AsciiCharType, parse_ascii_type
from awesomeascii.files import ImageLoadError, open_image, write_text
from awesomeascii.images import (
    convert_to_grayscale,
    map_pixels_to_ascii,
    scale_image,
)
from awesomeascii.sobel import SOBEL_THRESHOLD, apply_sobel
from awesomeascii.terminal import get_terminal_size

__all__ = ["build_parser", "process_form", "run_interactive", "main"]

VERSION = "0.0.1-alpha"
_MAX_WIDTH = 0xFFFF
_DIGITS = re.compile(r"[0-9]+")


def _parse_width(value: str) -> int:
    """Parse an unsigned 16-bit width written in base 10."""
    if not _DIGITS.fullmatch(value):
        raise ValueError(f"invalid width {value!r}: expected a non-negative integer")
    width = int(value)
    if width > _MAX_WIDTH:
        raise ValueError(f"invalid width {value!r}: value out of range")
    return width


def _width_arg(value: str) -> int:
    try:
        return _parse_width(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _ascii_type_arg(value: str) -> AsciiCharType:
    try:
        return parse_ascii_type(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _threshold_arg(value: str) -> int:
    try:
        threshold = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid threshold {value!r}") from None
    if not 0 <= threshold <= 255:
        raise argparse.ArgumentTypeError(
            f"invalid threshold {value!r}: must be between 0 and 255"
        )
    return threshold


def _add_concurrency(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--concurrency",
        type=int,
        default=os.cpu_count() or 1,
        help="Set the level of parallelism",
    )


def _add_width(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-w",
        "--width",
        type=_width_arg,
        default=None,
        help="Width of the output in characters (default: terminal width)",
    )


def _add_base_options(parser: argparse.ArgumentParser, input_required: bool) -> None:
    parser.add_argument(
        "-i",
        "--input",
        required=input_required,
        default=None,
        help="An image path which will be converted to ASCII",
    )
    _add_width(parser)
    parser.add_argument(
        "-a",
        "--ascii-type",
        type=_ascii_type_arg,
        default=AsciiCharType.BASIC,
        help="Which set of ascii characters will be used "
        "(basic, binary, contrast, extended, high_detail)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="",
        help="An output path for the converted image",
    )
    parser.add_argument(
        "-C",
        "--color",
        action="store_true",
        help="Select if the image should be colored or not",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="awesome-ascii",
        description="A command-line tool that converts images into ASCII art.",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s version {VERSION}"
    )
    _add_concurrency(parser)
    _add_base_options(parser, input_required=False)

    commands = parser.add_subparsers(dest="command")

    colored = commands.add_parser(
        "colored",
        help="colored mode",
        description="Render the image in colour using a single character for every pixel.",
    )
    _add_concurrency(colored)
    colored.add_argument(
        "-i",
        "--input",
        required=True,
        help="An image path which will be converted to ASCII",
    )
    colored.add_argument(
        "-H",
        "--char",
        default="#",
        help="The character every pixel is replaced with",
    )
    _add_width(colored)

    interactive = commands.add_parser(
        "interactive",
        help="Interactive mode",
        description="Ask for the options one by one.",
    )
    _add_concurrency(interactive)

    sobel = commands.add_parser(
        "sobel",
        help="Apply Sobel edge detection and render the edges as ASCII art.",
        description="Scale the image, detect its edges with the Sobel operator "
        "and draw them with characters that follow the edge direction.",
    )
    _add_concurrency(sobel)
    _add_base_options(sobel, input_required=True)
    sobel.add_argument(
        "-t",
        "--threshold",
        type=_threshold_arg,
        default=SOBEL_THRESHOLD,
        help="Threshold between 0..255 controlling how strong an edge must be to be drawn",
    )
    return parser


def _emit(text: str, output: str | None) -> None:
    if output:
        write_text(text, output)
    else:
        print(text)


def _resolve_width(width: int | None) -> int:
    return width if width is not None else get_terminal_size().col


def _render(
    path: str,
    width: int,
    ascii_type: AsciiCharType | None,
    colored: bool,
    ascii_char: str = "#",
) -> str:
    img = open_image(path)
    scaled = scale_image(img, width)
    gray = convert_to_grayscale(scaled)
    return map_pixels_to_ascii(gray, scaled, ascii_type, colored, ascii_char)


def process_form(
    image_input: str,
    width: str,
    ascii_type: AsciiCharType,
    colored: bool,
    output: str | None = None,
) -> None:
    """Render an image from answers given as text and print or save it."""
    img = open_image(image_input)
    new_width = _parse_width(width)
    scaled = scale_image(img, new_width)
    gray = convert_to_grayscale(scaled)
    art = map_pixels_to_ascii(gray, scaled, ascii_type, colored)
    _emit(art, output)


def _ask(message: str) -> str:
    return input(f"{message} ").strip()


def _select(message: str, options: Sequence[str]) -> str:
    while True:
        print(message)
        for number, option in enumerate(options, start=1):
            print(f"  {number}) {option}")
        answer = _ask(">")
        if not answer:
            return options[0]
        if answer in options:
            return answer
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        print(f"Please choose one of: {', '.join(options)}")


def _confirm(message: str) -> bool:
    while True:
        answer = _ask(f"{message} (y/N)").lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("", "n", "no"):
            return False
        print("Please answer yes or no")


def run_interactive(output: str | None = None) -> None:
    """Ask for the options on the terminal and render the image."""
    width = _ask("Please enter the image width:")
    image_input = _ask("Please enter the image path:")
    ascii_type = _select(
        "Choose an ASCII type:", [member.value for member in AsciiCharType]
    )
    colored = _confirm("Do you want the image to be colored?")
    process_form(image_input, width, AsciiCharType(ascii_type), colored, output)


def _run_root(args: argparse.Namespace) -> int:
    art = _render(args.input, _resolve_width(args.width), args.ascii_type, args.color)
    _emit(art, args.output)
    return 0


def _run_colored(args: argparse.Namespace) -> int:
    if len(args.char) != 1:
        print("Error: Please provide exactly one character for the --char flag")
        return 1
    art = _render(
        args.input, _resolve_width(args.width), None, True, ascii_char=args.char
    )
    print(art)
    return 0


def _run_interactive(args: argparse.Namespace) -> int:
    run_interactive()
    return 0


def _run_sobel(args: argparse.Namespace) -> int:
    img = open_image(args.input)
    scaled = scale_image(img, _resolve_width(args.width))
    gray = convert_to_grayscale(scaled)
    art = apply_sobel(gray).to_ascii(args.threshold)
    _emit(art, args.output)
    return 0


_HANDLERS: dict[str | None, Callable[[argparse.Namespace], int]] = {
    None: _run_root,
    "colored": _run_colored,
    "interactive": _run_interactive,
    "sobel": _run_sobel,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None and args.input is None:
        parser.error('required flag(s) "input" not set')
    try:
        return _HANDLERS[args.command](args)
    except (ImageLoadError, ValueError, OSError, EOFError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())