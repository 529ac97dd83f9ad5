"""Leaky bucket traffic shaping simulation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Step:
    """What happened to one incoming packet."""

    packet: int
    accepted: bool
    dropped: int
    filled: int
    level: int

    def describe(self, size: int) -> str:
        """One status line as the simulator prints it."""
        if self.accepted:
            head = f"Adding Packet: {self.filled}/{size}"
        else:
            head = f"Dropped {self.dropped}"
        return f"{head} | STATUS -> Bucket Filled: {self.level}/{size}"


class LeakyBucket:
    """A bucket of fixed size that leaks a fixed amount after every packet."""

    def __init__(self, size: int, out_rate: int) -> None:
        self.size = size
        self.out_rate = out_rate
        self.level = 0

    def offer(self, packet: int) -> Step:
        """Add a packet, dropping what does not fit, then leak."""
        space = self.size - self.level
        if packet <= space:
            self.level += packet
            accepted, dropped = True, 0
        else:
            accepted, dropped = False, packet - space
            self.level = self.size
        filled = self.level
        self.level = max(self.level - self.out_rate, 0)
        return Step(packet=packet, accepted=accepted, dropped=dropped, filled=filled, level=self.level)


def _read_int(prompt: str) -> int:
    text = input(prompt).strip()
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"expected an integer, got {text!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation on packet sizes typed at the prompt."""
    parser = argparse.ArgumentParser(description="Leaky bucket simulation.")
    parser.parse_args(argv)
    try:
        size = _read_int("Bucket size: ")
        out_rate = _read_int("Outflow rate: ")
        count = _read_int("No. of incoming packets: ")
        bucket = LeakyBucket(size, out_rate)
        for _ in range(count):
            step = bucket.offer(_read_int("\n\nIncoming packet: "))
            print(step.describe(size), end="")
    except (ValueError, EOFError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())