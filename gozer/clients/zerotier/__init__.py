"""ZeroTier Central API client module.

Example usage:
    ```python
    import asyncio
    from gozer.clients.zerotier import ZeroTierClient
    from gozer.config import ClientConfig

    async def main():
        async with ZeroTierClient(ClientConfig(token="...")) as client:
            await client.list_networks(echo=True)

    asyncio.run(main())
    ```
"""

from __future__ import annotations

from .client import ZeroTierClient
from .transport import ZeroTierTransport, decode_json_stream, merge_json

__all__ = ["ZeroTierClient", "ZeroTierTransport", "decode_json_stream", "merge_json"]
