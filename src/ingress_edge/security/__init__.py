"""Security – server-side sealing of synthesized events."""
