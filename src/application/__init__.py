"""
application - Services, DTOs, AI contracts and form validation.

Depends on domain/ only; infrastructure is reached through ports.
"""
