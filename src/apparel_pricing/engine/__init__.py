"""Engine subpackage - core pricing logic and aggregation."""
from .pricing_engine import PricingEngine, PriceSchedule, quote, price, get_engine
from .models import Coverage, ProductType, ProductFamily, SizeTier, Quote, OrderLine, BatchSummary
from .sizes import classify_size, normalize_size
from .categories import product_family, resolve_category
from .batch import customer_key, effective_price, summarize_batch

__all__ = [
    'PricingEngine', 'PriceSchedule', 'quote', 'price', 'get_engine',
    'Coverage', 'ProductType', 'ProductFamily', 'SizeTier', 'Quote', 'OrderLine', 'BatchSummary',
    'classify_size', 'normalize_size', 'product_family', 'resolve_category',
    'customer_key', 'effective_price', 'summarize_batch',
]
