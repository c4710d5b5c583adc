"""
Apparel Pricing Package

Order-intake pricing and fulfillment tracking for a custom-apparel print shop.
Resolves item pricing using Product Family → Size Tier → Price pipeline with a
total (never-failing) quote contract.
"""

__version__ = "1.0.0"
