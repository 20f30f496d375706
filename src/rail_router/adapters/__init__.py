"""
Adapter implementations for the rail router.

Adapters are concrete implementations of the port interfaces.
"""
