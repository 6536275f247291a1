from pathlib import Path
from unittest import mock

import pytest
from PIL import Image

from awesomeascii.charsets import AsciiCharType
from awesomeascii.cli import build_parser, main, process_form, run_interactive
from awesomeascii.files import ImageLoadError, open_image
from awesomeascii.images import (
    convert_image_to_ascii,
    convert_to_grayscale,
    scale_image,
)
from awesomeascii.sobel import apply_sobel


@pytest.fixture
def image_path(tmp_path: Path) -> Path:
    width, height = 20, 10
    img = Image.new("RGB", (width, height))
    img.putdata(
        [
            ((x * 13) % 256, (y * 25) % 256, ((x + y) * 7) % 256)
            for y in range(height)
            for x in range(width)
        ]
    )
    path = tmp_path / "picture.png"
    img.save(path)
    return path


def test_root_prints_rendered_image(image_path, capsys):
    code = main(["-i", str(image_path), "-w", "10", "-a", "contrast"])
    out = capsys.readouterr().out
    expected = convert_image_to_ascii(
        open_image(image_path), 10, AsciiCharType.CONTRAST
    )
    assert code == 0
    assert out == expected + "\n"


def test_root_output_shape(image_path, capsys):
    main(["-i", str(image_path), "-w", "10"])
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) == 5
    assert all(len(line) == 10 for line in lines)


def test_root_writes_output_file(image_path, tmp_path, capsys):
    target = tmp_path / "art.txt"
    code = main(["-i", str(image_path), "-w", "8", "-o", str(target)])
    assert code == 0
    assert capsys.readouterr().out == ""
    expected = convert_image_to_ascii(open_image(image_path), 8, AsciiCharType.BASIC)
    assert target.read_text(encoding="utf-8") == expected


def test_root_colored_flag(image_path, capsys):
    main(["-i", str(image_path), "-w", "6", "-C"])
    out = capsys.readouterr().out
    expected = convert_image_to_ascii(
        open_image(image_path), 6, AsciiCharType.BASIC, colored=True
    )
    assert out == expected + "\n"
    assert "\033[38;2;" in out


def test_root_requires_input():
    with pytest.raises(SystemExit) as info:
        main(["-w", "10"])
    assert info.value.code != 0


def test_invalid_ascii_type_rejected(image_path):
    with pytest.raises(SystemExit) as info:
        main(["-i", str(image_path), "-a", "fancy"])
    assert info.value.code != 0


def test_width_out_of_range_rejected(image_path):
    with pytest.raises(SystemExit) as info:
        main(["-i", str(image_path), "-w", "70000"])
    assert info.value.code != 0


def test_missing_image_reports_error(tmp_path, capsys):
    code = main(["-i", str(tmp_path / "nope.png"), "-w", "10"])
    assert code == 1
    assert "failed to open image" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "0.0.1-alpha" in capsys.readouterr().out


def test_colored_requires_single_char(image_path, capsys):
    code = main(["colored", "-i", str(image_path), "-H", "ab", "-w", "5"])
    assert code == 1
    assert (
        "Error: Please provide exactly one character for the --char flag"
        in capsys.readouterr().out
    )


def test_colored_uses_given_char(image_path, capsys):
    code = main(["colored", "-i", str(image_path), "-H", "@", "-w", "10"])
    out = capsys.readouterr().out
    lines = out.rstrip("\n").split("\n")
    assert code == 0
    assert len(lines) == 5
    assert out.count("@") == 50
    assert out.count("\033[0m") == 50


def test_sobel_matches_library(image_path, capsys):
    code = main(["sobel", "-i", str(image_path), "-w", "12", "-t", "200"])
    out = capsys.readouterr().out
    gray = convert_to_grayscale(scale_image(open_image(image_path), 12))
    expected = apply_sobel(gray).to_ascii(200)
    assert code == 0
    assert out == expected + "\n"


def test_sobel_default_threshold():
    args = build_parser().parse_args(["sobel", "-i", "x.png"])
    assert args.threshold == 130


def test_sobel_threshold_out_of_range(image_path):
    with pytest.raises(SystemExit) as info:
        main(["sobel", "-i", str(image_path), "-t", "300"])
    assert info.value.code != 0


def test_sobel_requires_input():
    with pytest.raises(SystemExit) as info:
        main(["sobel", "-w", "10"])
    assert info.value.code != 0


def test_parser_defaults():
    args = build_parser().parse_args(["-i", "x.png"])
    assert args.ascii_type is AsciiCharType.BASIC
    assert args.output == ""
    assert args.color is False
    assert args.command is None


def test_process_form_rejects_bad_width(image_path):
    with pytest.raises(ValueError):
        process_form(str(image_path), "abc", AsciiCharType.BASIC, False)
    with pytest.raises(ValueError):
        process_form(str(image_path), "-3", AsciiCharType.BASIC, False)
    with pytest.raises(ValueError):
        process_form(str(image_path), "65536", AsciiCharType.BASIC, False)


def test_process_form_missing_image(tmp_path):
    with pytest.raises(ImageLoadError):
        process_form(str(tmp_path / "gone.png"), "10", AsciiCharType.BASIC, False)


def test_process_form_writes_file(image_path, tmp_path):
    target = tmp_path / "form.txt"
    process_form(str(image_path), "10", AsciiCharType.EXTENDED, False, str(target))
    expected = convert_image_to_ascii(
        open_image(image_path), 10, AsciiCharType.EXTENDED
    )
    assert target.read_text(encoding="utf-8") == expected


def test_run_interactive_by_name(image_path, capsys):
    answers = ["10", str(image_path), "binary", "n"]
    with mock.patch("builtins.input", side_effect=answers):
        run_interactive()
    out = capsys.readouterr().out
    expected = convert_image_to_ascii(open_image(image_path), 10, AsciiCharType.BINARY)
    assert out.endswith(expected + "\n")


def test_run_interactive_by_number_colored(image_path, tmp_path):
    target = tmp_path / "interactive.txt"
    answers = ["7", str(image_path), "4", "yes"]
    with mock.patch("builtins.input", side_effect=answers):
        run_interactive(str(target))
    expected = convert_image_to_ascii(
        open_image(image_path), 7, AsciiCharType.EXTENDED, colored=True
    )
    assert target.read_text(encoding="utf-8") == expected


def test_interactive_command_reports_bad_width(image_path, capsys):
    answers = ["wide", str(image_path), "basic", "n"]
    with mock.patch("builtins.input", side_effect=answers):
        code = main(["interactive"])
    assert code == 1
    assert "Error:" in capsys.readouterr().err