"""Training the glyph network and reading segmented text with it."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Union
import os

from .display import load_image
from .glyphs import generate_matrices, img_to_mat
from .network import Activation, Network
from .storage import ask_to_save, load

PathLike = Union[str, "os.PathLike[str]"]

VALUES = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789,.-!?"

CANVAS_INPUTS = 40 * 40
HIDDEN_LAYERS = 4
HIDDEN_SIZE = 128
TRAINING_STEPS = 1_000_000

CLEAR_SCREEN = "\x1b[1;1H\x1b[2J"
_RED = "\033[1;31m"
_GREEN = "\033[0;32m"
_RESET = "\033[0m"
_COLUMN_GAP = " " * 9
_ROWS = 26
_THIRD_COLUMN_ROWS = 15

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Info:
    """The last training report for one character."""

    text: str
    correct: bool


def _read_count(path: Path) -> int:
    """Read the integer at the start of the first line of a file (0 if none)."""
    with path.open("r") as stream:
        first = stream.readline()
    if not first:
        raise ValueError(f"Can't read {path}")
    match = _LEADING_INT.match(first)
    return int(match.group(1)) if match else 0


def format_infos(infos: Sequence[Info]) -> str:
    """Lay the 67 reports out in three coloured columns, green when correct."""
    if len(infos) < len(VALUES):
        raise ValueError(f"expected {len(VALUES)} reports, got {len(infos)}")

    def paint(info: Info) -> str:
        return f"{_GREEN if info.correct else _RED}{info.text}{_RESET}"

    lines = []
    for row in range(_ROWS):
        cells = [infos[row], infos[_ROWS + row]]
        if row < _THIRD_COLUMN_ROWS:
            cells.append(infos[2 * _ROWS + row])
        lines.append(_COLUMN_GAP.join(paint(cell) for cell in cells))
    return "\n" + "".join(line + "\n" for line in lines)


def learning(
    network: Network,
    data_dir: PathLike = "Data",
    steps: int = TRAINING_STEPS,
    out: Optional[TextIO] = None,
) -> List[Info]:
    """Train on the fonts Police0 .. PoliceN of data_dir; return the last reports.

    The fonts are cycled one per pass over the alphabet, and the reports are
    redrawn on out after each full pass.
    """
    if network.output_size != len(VALUES):
        raise ValueError(
            f"network has {network.output_size} outputs, expected {len(VALUES)}"
        )
    sink = sys.stdout if out is None else out
    root = Path(data_dir)
    fonts = _read_count(root / "Len.txt")
    if fonts <= 0:
        raise ValueError(f"no fonts listed in {root}")
    data = [generate_matrices(root / f"Police{index}") for index in range(fonts)]

    infos = [Info("", False) for _ in VALUES]
    count = len(VALUES)
    rate = 0.05
    font = 0
    for step in range(steps):
        k = step % count
        if step == 150_000:
            rate = 0.03
        if step == 500_000:
            rate = 0.01
        if k == 0:
            font = (font + 1) % fonts

        network.set_input(data[font][k])
        network.feedforward()
        got = network.result()
        cost = network.cost(k)
        infos[k] = Info(
            f"for '{VALUES[k]}' we got '{VALUES[got]}' |  cost = {cost:f}",
            VALUES[k] == VALUES[got],
        )
        if k == 0 and step != 0:
            sink.write(CLEAR_SCREEN)
            sink.write(format_infos(infos))
            sink.write(f"\nstep = {step}\n")

        network.backpropagation(k, rate)
    return infos


def recognise_word(network: Network, root: PathLike, line: int, word: int) -> str:
    """Read the glyph files of one word and return the characters recognised."""
    word_dir = Path(root) / f"Line{line}" / f"Word{word}"
    chars = _read_count(word_dir / "Len.txt")
    letters = []
    for index in range(chars):
        network.set_input(img_to_mat(load_image(word_dir / f"{index}.bmp")))
        network.feedforward()
        letters.append(VALUES[network.result()])
    return "".join(letters)


def recognise_line(network: Network, root: PathLike, line: int) -> str:
    """Return the words of a line, each followed by a space."""
    words = _read_count(Path(root) / f"Line{line}" / "Len.txt")
    return "".join(
        recognise_word(network, root, line, word) + " " for word in range(words)
    )


def recognise_text(network: Network, root: PathLike) -> str:
    """Return every line of the segmented text, each followed by a newline."""
    lines = _read_count(Path(root) / "Len.txt")
    return "".join(recognise_line(network, root, line) + "\n" for line in range(lines))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Train a new network or load Save.txt, read ./Text, then offer to save."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("ocr: Usage: ocr [new / load]", file=sys.stderr)
        return 1
    try:
        if args[0] == "new":
            network = Network(
                CANVAS_INPUTS,
                HIDDEN_LAYERS,
                HIDDEN_SIZE,
                len(VALUES),
                Activation.SOFTMAX,
            )
            learning(network)
        else:
            network = load("Save.txt")
        print(recognise_text(network, "Text"), end="")
        ask_to_save(network)
    except (OSError, ValueError, EOFError) as exc:
        print(f"ocr: {exc}", file=sys.stderr)
        return 1
    return 0