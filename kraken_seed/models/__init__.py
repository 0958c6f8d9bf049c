# kraken_seed/models/__init__.py

# Owners before the rows that reference them
from .pluginMetadata import PluginMetadata, PluginPriceDetails, PluginConfigOption
from .pluginPack import PluginPack, PluginPackPriceDetails, PluginPackItem
from .credential import Credential
from .hardwareIdentifier import HardwareIdentifier


__all__ = [
    'PluginMetadata', 'PluginPriceDetails', 'PluginConfigOption',
    'PluginPack', 'PluginPackPriceDetails', 'PluginPackItem',
    'Credential', 'HardwareIdentifier',
]
