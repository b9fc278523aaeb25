"""Training a small network on the XOR function."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO, Tuple

from .network import Activation, Network
from .storage import ask_to_save, load

Sample = Tuple[Tuple[float, float], int]

STEPS = 100_000
LEARNING_RATE = 0.05


def xor_samples() -> List[Sample]:
    """The four XOR cases in training order, as (inputs, expected output)."""
    return [
        ((1.0, 0.0), 1),
        ((0.0, 1.0), 1),
        ((0.0, 0.0), 0),
        ((1.0, 1.0), 0),
    ]


def train_xor(
    network: Network,
    steps: int = STEPS,
    learning_rate: float = LEARNING_RATE,
    out: Optional[TextIO] = None,
) -> List[float]:
    """Cycle through the XOR cases, reporting each step; return the costs."""
    sink = sys.stdout if out is None else out
    samples = xor_samples()
    costs = []
    for step in range(steps):
        inputs, expected = samples[step % len(samples)]
        network.set_input(inputs)
        network.feedforward()
        got = network.result()
        cost = network.cost(expected)
        costs.append(cost)
        print(
            f"for {inputs[0]:f} {inputs[1]:f} | We get = {got} "
            f"| cost = {cost:f} | step = {step}",
            file=sink,
        )
        network.backpropagation(expected, learning_rate)
    return costs


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Train a new (or loaded) XOR network, then offer to save it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) not in (1, 2):
        print("xor: Usage : xor [load] [don't load]", file=sys.stderr)
        return 1
    try:
        if args[0] == "load":
            network = load("./Save.txt")
        else:
            softmax = len(args) == 2 and args[1] == "s"
            activation = Activation.SOFTMAX if softmax else Activation.SIGMOID
            network = Network(2, 2, 3, 2, activation)
        train_xor(network)
        ask_to_save(network)
    except (OSError, ValueError, EOFError) as exc:
        print(f"xor: {exc}", file=sys.stderr)
        return 1
    return 0