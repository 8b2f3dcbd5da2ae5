"""
infrastructure - Concrete implementations of domain ports.

Contains all vendor-specific code: LangChain chat models, the in-memory
history store, key/value storage, ids and clock. Depends on domain/ only
(implements ports). Never imported by application/.
"""
