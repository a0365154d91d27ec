"""Building blocks of an Ethereum Virtual Machine interpreter: 256-bit words, stack, memory, opcodes and jump analysis."""

__version__ = "0.1.0"
__all__ = ["words", "arithmetic", "memory", "stack", "opcode", "opinfo", "analysis"]