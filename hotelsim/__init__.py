"""Hotel simulation over TCP: booking logic, a server, a monitor and a random client."""

__version__ = "0.1.0"

__all__ = ["hotel", "server", "monitor", "randclient"]