from .client import ProxyClient
from .results import RemoteResult

__all__ = ["ProxyClient", "RemoteResult"]
