"""
adapters - Outer surfaces (REST) built on the ServiceFactory.
"""
