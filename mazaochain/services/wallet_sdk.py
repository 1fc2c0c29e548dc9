"""Deferred, load-once access to the Hedera wallet SDK."""

import importlib
import logging
import threading
from abc import ABC, abstractmethod
from types import ModuleType
from typing import Optional

from mazaochain.config import settings

logger = logging.getLogger(__name__)


class WalletSdkProvider(ABC):
    """
    Capability interface for the wallet SDK.

    Callers receive a provider instead of importing the SDK themselves, so
    the SDK is only loaded by processes that actually sign transactions.
    """

    @abstractmethod
    def load_once(self) -> ModuleType:
        """
        Return the SDK module, loading it on first use.

        Raises:
            RuntimeError: If the SDK is unavailable
        """
        pass


class ImportlibWalletSdkProvider(WalletSdkProvider):
    """Imports the SDK module by name the first time it is requested."""

    def __init__(self, module_name: str):
        self.module_name = module_name
        self._module: Optional[ModuleType] = None
        self._lock = threading.Lock()

    def load_once(self) -> ModuleType:
        if self._module is not None:
            return self._module

        with self._lock:
            if self._module is None:
                try:
                    self._module = importlib.import_module(self.module_name)
                except ImportError as e:
                    logger.error(f"Failed to load wallet SDK '{self.module_name}': {e}")
                    raise RuntimeError(
                        f"Wallet SDK '{self.module_name}' is not installed"
                    ) from e
                logger.info(f"Loaded wallet SDK '{self.module_name}'")
        return self._module


class DisabledWalletSdkProvider(WalletSdkProvider):
    """Provider used when wallet signing is turned off."""

    def load_once(self) -> ModuleType:
        raise RuntimeError("Wallet SDK is disabled (set WALLET_SDK_ENABLED=true)")


def get_wallet_sdk_provider() -> WalletSdkProvider:
    """Build the provider selected by settings."""
    if settings.WALLET_SDK_ENABLED:
        return ImportlibWalletSdkProvider(settings.WALLET_SDK_MODULE)
    return DisabledWalletSdkProvider()
