"""Debug port and breakpoint helpers for talking to the emulated program."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

DEBUG_PORT_ADDRESS = 0xCCCC


@dataclass
class DebugPort:
    """An I/O port the emulated program uses as stdin and stdout."""

    stdin: deque[int] = field(default_factory=deque)
    stdout: deque[int] = field(default_factory=deque)

    def write(self, port: int, data: int) -> None:
        """Called when the target writes to the port."""
        self.stdout.append(data & 0xFF)

    def read(self, port: int) -> int:
        """Called when the target reads the port; 0 when nothing is queued."""
        return self.stdin.popleft() if self.stdin else 0

    def extends_port(self, port: int) -> bool:
        return port == DEBUG_PORT_ADDRESS

    def put_byte(self, value: int) -> None:
        self.stdin.append(value & 0xFF)

    def take_byte(self) -> int | None:
        return self.stdout.popleft() if self.stdout else None

    def put_text(self, text: str) -> None:
        self.stdin.extend(text.encode("utf-8"))

    def take_text(self) -> str:
        """Drain the target's output and decode it as UTF-8."""
        return self.take_buffer().decode("utf-8")

    def take_buffer(self) -> bytes:
        """Drain the target's output as raw bytes."""
        data = bytes(self.stdout)
        self.stdout.clear()
        return data

    def reset(self) -> None:
        self.stdin.clear()
        self.stdout.clear()


@dataclass
class BreakpointDebugger:
    """Holds program-counter breakpoints and remembers the last one hit."""

    breakpoints: set[int] = field(default_factory=set)
    last_hit: int | None = None

    def add_breakpoint(self, address: int) -> None:
        self.breakpoints.add(address)

    def clear_breakpoints(self) -> None:
        self.breakpoints.clear()
        self.last_hit = None

    def check_pc_breakpoint(self, address: int) -> bool:
        """Return True and record the hit if ``address`` has a breakpoint."""
        if address in self.breakpoints:
            self.last_hit = address
            return True
        return False