"""Remote control of a running design (JSON over TCP)."""
