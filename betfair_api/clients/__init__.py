"""HTTP and JSON-RPC clients."""
