"""Application layer: DTOs, interfaces (ports), and services.

Depends only on the domain layer; infrastructure implements the ports.
"""
