"""Small TCP exchanges: a one-shot client and server, and a sum service."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from collections.abc import Sequence

logger = logging.getLogger(__name__)

BUFFER_SIZE = 1024
SUM_REQUEST_SIZE = 50
STATUS_LINE = b"HTTP/1.0 200 OK\n"

DEFAULT_PORT = 8080
DEFAULT_SUM_PORT = 5001
LOOPBACK = "127.0.0.1"
ANY_ADDRESS = "0.0.0.0"
DEFAULT_MESSAGE = "sun raha hai na tu [are you listening]"
DEFAULT_REPLY = "haan [Yes]"

_DIGITS = frozenset("0123456789")


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else data


def _read_number(text: str, start: int) -> tuple[int, int]:
    """Read the decimal digits at ``start``; return their value and the index after them."""
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    digits = text[start:end] if start < len(text) else ""
    return (int(digits) if digits else 0), end


def parse_operands(request: str) -> tuple[int, int]:
    """Pull the operands ``a`` and ``b`` out of a request such as ``"a=3&b=4"``.

    Each ``a`` or ``b`` is followed by one separator character and then the
    digits of its value; no digits give 0. A later occurrence overrides an
    earlier one. The character right after a value is skipped, except that a
    ``b`` directly after the value of ``a`` is still read.
    """
    a = b = 0
    index = 0
    while index < len(request):
        if request[index] == "a":
            a, index = _read_number(request, index + 2)
        if index < len(request) and request[index] == "b":
            b, index = _read_number(request, index + 2)
        index += 1
    return a, b


def format_sum(value: int) -> str:
    """Render ``value`` the way the sum service sends it.

    The decimal digits go out least significant first, followed by a newline;
    a value that is not positive sends only the newline.
    """
    digits = str(value)[::-1] if value > 0 else ""
    return digits + "\n"


def answer_sum_request(request: str) -> str:
    """The reply the sum service gives to one request."""
    a, b = parse_operands(request)
    total = a + b
    logger.info("a = %d", a)
    logger.info("b = %d", b)
    logger.info("sum = %d", total)
    return format_sum(total)


def send_message(host: str, port: int, message: bytes | str) -> bytes:
    """Connect to ``host:port``, send ``message`` and return the reply."""
    with socket.create_connection((host, port)) as connection:
        connection.sendall(_as_bytes(message))
        return connection.recv(BUFFER_SIZE)


def serve_once(host: str, port: int, reply: bytes | str) -> bytes:
    """Accept one client, read its message, answer with ``reply``; return the message."""
    with socket.create_server((host, port), backlog=3) as server:
        connection, _ = server.accept()
        with connection:
            received = connection.recv(BUFFER_SIZE)
            connection.sendall(_as_bytes(reply))
    return received


def serve_sums(host: str, port: int) -> int:
    """Serve one client of the sum service until it disconnects.

    The client first gets a status line, then every request it sends is
    answered with the sum of its operands. Returns the number of requests
    answered.
    """
    answered = 0
    with socket.create_server((host, port), backlog=3) as server:
        connection, _ = server.accept()
        with connection:
            logger.info("Connection Established.")
            connection.sendall(STATUS_LINE)
            while chunk := connection.recv(SUM_REQUEST_SIZE):
                reply = answer_sum_request(chunk.decode("latin-1"))
                connection.sendall(reply.encode("ascii"))
                answered += 1
    return answered


def _parser(description: str, host: str, port: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--host", default=host, help=f"address (default {host})")
    parser.add_argument(
        "--port", type=int, default=port, help=f"TCP port (default {port})"
    )
    return parser


def client_main(argv: Sequence[str] | None = None) -> int:
    """Send one message to the server and print its reply."""
    parser = _parser("Send a message and print the reply.", LOOPBACK, DEFAULT_PORT)
    parser.add_argument("--message", default=DEFAULT_MESSAGE)
    args = parser.parse_args(argv)
    try:
        reply = send_message(args.host, args.port, args.message)
    except OSError as exc:
        print(f"Connection failed: {exc}", file=sys.stderr)
        return 1
    print("Connection Established.")
    print("Client: Msg Sent")
    print(f"Received: {reply.decode('utf-8', errors='replace')}")
    return 0


def server_main(argv: Sequence[str] | None = None) -> int:
    """Answer one client with a fixed reply and print what it sent."""
    parser = _parser("Answer one client.", ANY_ADDRESS, DEFAULT_PORT)
    parser.add_argument("--reply", default=DEFAULT_REPLY)
    args = parser.parse_args(argv)
    print("Listening ... ", flush=True)
    try:
        received = serve_once(args.host, args.port, args.reply)
    except OSError as exc:
        print(f"Server failed: {exc}", file=sys.stderr)
        return 1
    print("Connection Established.")
    print(f"Received: {received.decode('utf-8', errors='replace')} {len(received)}")
    print("Server: Sent Msg")
    return 0


def sum_server_main(argv: Sequence[str] | None = None) -> int:
    """Run the sum service for one client."""
    parser = _parser("Add the operands a and b of each request.", LOOPBACK, DEFAULT_SUM_PORT)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        serve_sums(args.host, args.port)
    except OSError as exc:
        print(f"Server failed: {exc}", file=sys.stderr)
        return 1
    return 0