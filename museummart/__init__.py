"""MuseumMart: catalogue browsing and shopping-cart API for museum merchandise."""

__version__ = "1.0.0"
