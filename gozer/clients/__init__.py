"""API clients used by gozer."""

from __future__ import annotations

from .zerotier import ZeroTierClient

__all__ = ["ZeroTierClient"]
