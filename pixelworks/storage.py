"""Reading and writing networks as one number per line of text."""

from __future__ import annotations

import os
import re
import sys
from typing import Iterator, Optional, TextIO, Union

from .matrix import Matrix
from .network import Activation, Network

PathLike = Union[str, "os.PathLike[str]"]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class SaveFormatError(ValueError):
    """Raised when a save file is truncated or describes no valid network."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def dump(network: Network, stream: TextIO) -> None:
    """Write the network to a text stream."""
    header = [
        network.activation.value,
        network.input_size,
        network.layers,
        network.hidden_size,
        network.output_size,
    ]
    stream.writelines(f"{item}\n" for item in header)

    def write(matrix: Matrix) -> None:
        stream.writelines(f"{value:f}\n" for value in matrix)

    write(network.weight_ih)
    for index, bias in enumerate(network.hidden_biases):
        write(bias)
        if index < len(network.weight_hh):
            write(network.weight_hh[index])
    write(network.weight_ho)
    write(network.output_bias)


def save(network: Network, path: PathLike = "Save.txt") -> None:
    """Write the network to a file."""
    with open(path, "w") as stream:
        dump(network, stream)


def _read(stream: TextIO) -> Network:
    lines: Iterator[str] = iter(stream)

    def next_line() -> str:
        line = next(lines, None)
        if line is None:
            raise SaveFormatError("Can't read")
        return line

    function = next_line()
    inputs = _atoi(next_line())
    layers = _atoi(next_line())
    hidden = _atoi(next_line())
    outputs = _atoi(next_line())
    activation = Activation.SOFTMAX if function == "SoftMax\n" else Activation.SIGMOID
    try:
        network = Network(inputs, layers, hidden, outputs, activation, randomise=False)
    except ValueError as exc:
        raise SaveFormatError(f"invalid network description: {exc}") from exc

    def fill(matrix: Matrix) -> None:
        matrix.values = [_atof(next_line()) for _ in matrix.values]

    fill(network.weight_ih)
    for index, bias in enumerate(network.hidden_biases):
        fill(bias)
        if index < len(network.weight_hh):
            fill(network.weight_hh[index])
    fill(network.weight_ho)
    fill(network.output_bias)
    return network


def load(path: PathLike) -> Network:
    """Read a network written by save."""
    with open(path, "r") as stream:
        return _read(stream)


def ask_to_save(
    network: Network,
    path: PathLike = "Save.txt",
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> bool:
    """Ask yes/no until answered; save on yes. Return whether it saved."""
    source = sys.stdin if stdin is None else stdin
    sink = sys.stdout if stdout is None else stdout
    print("Save? yes/no", file=sink)
    while True:
        line = source.readline()
        if not line:
            raise EOFError("no answer to the save prompt")
        answer = line.rstrip("\n")
        if answer == "yes":
            save(network, path)
            return True
        if answer == "no":
            return False