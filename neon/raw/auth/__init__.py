"""Authentication: access tokens, token exchange and serialized refresh."""

from .access import AccessToken
from .authenticator import Authenticator
from .token_manager import TokenManager, TokenSource

__all__ = ["AccessToken", "Authenticator", "TokenManager", "TokenSource"]
