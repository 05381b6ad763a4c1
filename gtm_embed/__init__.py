"""GTM Embed - Google Tag Manager container snippet injection."""

__version__ = "0.1.0"
