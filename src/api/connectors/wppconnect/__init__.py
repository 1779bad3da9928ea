"""Connector do servidor WPPConnect."""

from api.connectors.wppconnect.client import (
    WppConnectClient,
    create_wppconnect_client,
    normalize_phone,
)

__all__ = ["WppConnectClient", "create_wppconnect_client", "normalize_phone"]
