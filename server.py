#!/usr/bin/python3
"""
TCP Pattern Search Server.

This module implements a newline-delimited TCP server
that accepts search patterns over a persistent connection.
For each pattern line received, it returns:

- A DEBUG line with the client IP, pattern, and elapsed time in milliseconds.
- A result line: "MATCHES count=N positions=a,b,..." or "NO MATCHES".

Occurrences are located in the configured text file with the configured
search algorithm (Knuth-Morris-Pratt by default).
"""

from __future__ import annotations

import argparse
import logging
import socket
import threading
import time
from dataclasses import dataclass
from typing import Optional

from config import ConfigError, load_config
from logging_config import setup_logging
from search_engine import EngineError, SearchEngine


logger = logging.getLogger(__name__)

MAX_PAYLOAD_BYTES = 1024
RESPONSE_NO_MATCHES = b"NO MATCHES\n"
RESPONSE_MATCHES_PREFIX = b"MATCHES "


def format_result(occurrences: list[int]) -> bytes:
    """Encode the result line for a list of occurrences.

    Args:
        occurrences: Ascending match offsets.

    Returns:
        The newline-terminated result line.
    """
    if not occurrences:
        return RESPONSE_NO_MATCHES
    positions = ",".join(str(pos) for pos in occurrences)
    return (
        f"MATCHES count={len(occurrences)} positions={positions}\n"
    ).encode("utf-8")


@dataclass(frozen=True)
class ServerConfig:
    """Runtime server configuration.

    Attributes:
        host: Interface address to bind to.
        port: TCP port to listen on.
    """

    host: str
    port: int


class TCPPatternSearchServer:
    """A threaded TCP server that answers newline-delimited pattern searches.

    The server listens on the configured host/port and
    spawns a daemon thread per client connection.
    Each client connection is handled as a persistent session
    that reads newline-delimited patterns and responds per pattern.
    """

    def __init__(self, cfg: ServerConfig, engine: SearchEngine) -> None:
        """Initialize the server.

        Args:
            cfg: Network bind configuration (host/port).
            engine: Search engine used to locate pattern occurrences.
        """
        self._cfg = cfg
        self._engine = engine
        self._sock: Optional[socket.socket] = None
        self._stop_event = threading.Event()

    def start(self) -> None:
        """Start listening and accepting connections (blocking).

        This method binds and listens on the configured address, then accepts
        connections in a loop until `stop()` is called.
        """
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._sock.bind((self._cfg.host, self._cfg.port))
        self._sock.listen(128)
        self._sock.settimeout(0.5)  # allows graceful shutdown checks

        logger.info(
            "Listening on %s:%d (algo=%s, reread_on_query=%s)",
            self._cfg.host,
            self._cfg.port,
            self._engine.search_algo,
            self._engine.reread_on_query,
        )

        while not self._stop_event.is_set():
            try:
                conn, addr = self._sock.accept()
            except socket.timeout:
                continue
            except OSError:
                break

            logger.debug("Accepted connection from %s:%d", *addr)
            t = threading.Thread(
                target=self._handle_client,
                args=(conn, addr),
                daemon=True,
            )
            t.start()

    def stop(self) -> None:
        """Signal the server to stop and close the listening socket."""
        self._stop_event.set()
        if self._sock is not None:
            try:
                self._sock.close()
            except OSError:
                pass

    def _search(self, pattern: str) -> list[int]:
        try:
            return self._engine.find(pattern)
        except EngineError as exc:
            logger.error("Search failed for pattern=%r: %s", pattern, exc)
            return []

    def _handle_client(
        self, conn: socket.socket, addr: tuple[str, int]
    ) -> None:
        """Serve a persistent client session.

        Per pattern, the server sends:
        1) a DEBUG line with timing information
        2) a result line listing the match positions

        Args:
            conn: Connected client socket.
            addr: The client address tuple (ip, port).
        """
        client_ip, _client_port = addr

        # Small timeout so threads notice server.stop(); idle clients stay.
        conn.settimeout(1.0)

        buf = b""

        try:
            while not self._stop_event.is_set():
                try:
                    chunk = conn.recv(4096)
                except socket.timeout:
                    continue

                if not chunk:
                    break

                buf += chunk

                while b"\n" in buf:
                    raw_line, buf = buf.split(b"\n", 1)

                    # Trim CRLF and NULLs.
                    raw_line = raw_line.rstrip(b"\r").rstrip(b"\x00")

                    if len(raw_line) > MAX_PAYLOAD_BYTES:
                        logger.warning(
                            "Rejected %d-byte pattern from %s",
                            len(raw_line),
                            client_ip,
                        )
                        msg = (
                            "DEBUG: error=ValueError: pattern too long\n"
                        ).encode("utf-8")
                        try:
                            conn.sendall(msg)
                            conn.sendall(RESPONSE_NO_MATCHES)
                        except OSError:
                            return
                        continue

                    pattern = raw_line.decode("utf-8", errors="replace")

                    start = time.perf_counter()
                    occurrences = self._search(pattern)
                    elapsed_ms = (time.perf_counter() - start) * 1000.0

                    logger.info(
                        "ip=%s pattern=%r matches=%d elapsed_ms=%.3f",
                        client_ip,
                        pattern,
                        len(occurrences),
                        elapsed_ms,
                    )
                    debug = (
                        f"DEBUG: ip={client_ip} "
                        f"pattern={pattern!r} "
                        f"elapsed_ms={elapsed_ms:.3f}\n"
                    ).encode("utf-8")

                    try:
                        conn.sendall(debug)
                        conn.sendall(format_result(occurrences))
                    except OSError:
                        return
        finally:
            try:
                conn.close()
            except OSError:
                pass


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed command-line arguments.
    """
    p = argparse.ArgumentParser(description="TCP Pattern Search Server")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=44445)
    p.add_argument(
        "--config",
        required=True,
        help="Path to configuration file (must include linuxpath=...)",
    )
    return p.parse_args()


def main() -> None:
    """Run the TCP server entry point."""
    args = parse_args()

    try:
        app_cfg = load_config(args.config)
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc

    setup_logging(app_cfg.log_level)

    try:
        engine = SearchEngine.from_config(app_cfg)
        if not app_cfg.reread_on_query:
            engine.warmup()
    except EngineError as exc:
        raise SystemExit(f"Engine error: {exc}") from exc

    cfg = ServerConfig(host=args.host, port=args.port)
    server = TCPPatternSearchServer(cfg, engine=engine)

    try:
        server.start()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as exc:
        raise SystemExit(f"Fatal error: {exc}") from exc
    finally:
        server.stop()


if __name__ == "__main__":
    main()
