"""CIP / EtherNet/IP building blocks: codes, types, reply headers, forward-open messages, connections and routing."""

__version__ = "0.1.0"

__all__ = [
    "cipstring",
    "connections",
    "headers",
    "messages",
    "router",
    "services",
    "types",
    "udt",
]