"""Presentation request orchestration for a verifiable credential Verifier"""

__version__ = "0.1.0"
