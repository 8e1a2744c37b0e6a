"""Text messaging between processes over SIGUSR1 and SIGUSR2: wire protocol, client, server and a small formatter."""

__version__ = "0.1.0"