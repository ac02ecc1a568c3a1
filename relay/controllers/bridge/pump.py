"""
Line Pump

Drives a SessionBridge from a line-oriented stdin/stdout pair: one input
line is fully forwarded before the next one is read.
"""

import sys
from typing import Optional, TextIO

from relay.configs import get_logger
from relay.controllers.bridge.envelope import error_reply
from relay.controllers.bridge.session import SessionBridge
from relay.exceptions import ForwardError

logger = get_logger("bridge.pump")


class LinePump:
    """Reads requests from `stdin`, writes replies to `stdout`, diagnostics to `stderr`."""

    def __init__(
        self,
        bridge: SessionBridge,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.bridge = bridge
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def write_lines(self, text: str) -> None:
        """Write each non-blank line of `text` to stdout and flush."""
        # Split on "\n" only; JSON strings may legally hold U+2028 and friends
        for line in text.split("\n"):
            line = line.removesuffix("\r")
            if line.strip():
                self.stdout.write(line + "\n")
        self.stdout.flush()

    def handle_line(self, line: str) -> None:
        """Forward one raw input line; blank lines are ignored."""
        message = line.strip()
        if not message:
            return

        try:
            result = self.bridge.forward(message)
        except ForwardError as e:
            logger.info(f"Forward failed: {e}")
            reply = error_reply(message, e)
            if reply is not None:
                self.write_lines(reply)
            print(f"Error: {e}", file=self.stderr, flush=True)
            return

        if result is not None:
            self.write_lines(result)

    def run(self) -> None:
        """Pump until stdin reaches EOF or stops decoding."""
        lines = iter(self.stdin)
        while True:
            try:
                line = next(lines)
            except StopIteration:
                logger.info("stdin closed")
                return
            except UnicodeDecodeError as e:
                logger.warning(f"Stopped reading stdin: {e}")
                return
            self.handle_line(line)
