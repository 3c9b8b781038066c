"""Security sealing – PayloadSealer contract and the NaCl box implementation."""
from ingress_edge.security.sealing.nacl_box import NaclBoxSealer, PayloadSealer, decode_key, encode_key

__all__ = ["NaclBoxSealer", "PayloadSealer", "decode_key", "encode_key"]
