"""Hessian 2.0 encoding of scalars, binary data and dates, with Dubbo header parsing."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "codec",
    "constants",
    "decoder",
    "encoder",
    "java8_time",
    "protocol",
]