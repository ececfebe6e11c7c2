"""Concrete adapters for deploy ports."""

from .magento_toolchain import MagentoToolchain

__all__ = ["MagentoToolchain"]
