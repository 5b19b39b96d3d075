#!/usr/bin/python3
# client.py

from __future__ import annotations

import argparse
import socket
import sys
from typing import List, NoReturn


RECV_BUFSIZE = 4096  # how many bytes we ask for per recv() call.
RECV_TIMEOUT_SECONDS = 5.0  # stops client hanging forever if server stalls

RESULT_MATCHES = b"MATCHES "
RESULT_NO_MATCHES = b"NO MATCHES\n"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TCP Pattern Search Client")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=44445)
    parser.add_argument(
        "pattern",
        help="Pattern to search for (exact substring match)",
    )
    return parser.parse_args()


def has_result_line(buf: bytes) -> bool:
    """Return True once `buf` holds a complete result line."""
    for line in buf.split(b"\n")[:-1]:
        if line + b"\n" == RESULT_NO_MATCHES:
            return True
        if line.startswith(RESULT_MATCHES):
            return True
    return False


def recv_until_result(sock: socket.socket) -> bytes:
    """
    Receive data until a complete result line arrives:
      - MATCHES count=N positions=...\\n
      - NO MATCHES\\n

    This supports a persistent server connection, where EOF never arrives.
    """
    chunks: List[bytes] = []
    buf = b""

    while True:
        data = sock.recv(RECV_BUFSIZE)
        if not data:
            # Server closed (EOF)
            chunks.append(buf)
            break

        buf += data

        if has_result_line(buf):
            chunks.append(buf)
            break

        # Safety: prevent unbounded growth if something goes wrong.
        if len(buf) > 1024 * 1024:  # 1MB
            chunks.append(buf)
            break

    return b"".join(chunks)


def _die(msg: str, code: int = 2) -> NoReturn:
    print(msg, file=sys.stderr)
    raise SystemExit(code)


def main() -> None:
    args = parse_args()
    pattern_line = args.pattern + "\n"

    try:
        with socket.create_connection(
            (args.host, args.port),
            timeout=RECV_TIMEOUT_SECONDS,
        ) as sock:
            sock.settimeout(RECV_TIMEOUT_SECONDS)
            sock.sendall(pattern_line.encode("utf-8"))

            # Read just one response (debug + result), then exit cleanly.
            response = recv_until_result(sock)

        print(response.decode("utf-8", errors="replace"), end="")

    except ConnectionResetError:
        _die("Connection reset by server. Check server status.")

    except TimeoutError as exc:
        _die(f"Timeout: {exc}")

    except socket.timeout:
        _die(
            "Timeout: no complete response received.\n"
            "Check that the server is reachable."
        )

    except OSError as exc:
        _die(f"Network error: {exc}")


if __name__ == "__main__":
    main()
