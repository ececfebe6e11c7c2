"""staticdeploy - parallel static asset deployment for Magento-style theme trees."""

__version__ = "0.1.0"
