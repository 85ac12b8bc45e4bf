"""
Gateways Package - Infrastructure Layer

This package contains the HTTP clients used to reach external services.
"""

from .supabase_gateway import SupabaseGateway

__all__ = ["SupabaseGateway"]
