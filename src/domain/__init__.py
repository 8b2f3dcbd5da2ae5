"""
domain - Value objects, entities, ports and exceptions.

No third-party imports. Everything else depends on this package.
"""
