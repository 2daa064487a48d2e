"""
Caching helpers for read-mostly reference data (the warehouse list).

Product reads are never cached: every mutation is followed by an explicit
refetch, so a product list must always reflect the store.
"""
from django.core.cache import cache
import hashlib
import logging

logger = logging.getLogger(__name__)

WAREHOUSE_LIST_KEY_PREFIX = 'warehouse_list'


def make_cache_key(prefix, *args, **kwargs):
    """Generate a unique cache key from arguments"""
    key_data = f"{prefix}:{args}:{sorted(kwargs.items())}"
    # Hash it to keep key length reasonable
    key_hash = hashlib.md5(key_data.encode()).hexdigest()
    return f"{prefix}:{key_hash}"


def get_or_set(prefix, loader, ttl, *args, **kwargs):
    """
    Return the cached value for (prefix, args, kwargs), calling loader() on a miss.

    Returns:
        (value, hit) tuple
    """
    cache_key = make_cache_key(prefix, *args, **kwargs)
    cached_data = cache.get(cache_key)
    if cached_data is not None:
        logger.debug(f"Cache HIT for {prefix}: {cache_key}")
        return cached_data, True

    logger.debug(f"Cache MISS for {prefix}: {cache_key}")
    data = loader()
    cache.set(cache_key, data, ttl)
    return data, False


def invalidate(prefix, *args, **kwargs):
    """Drop a single cached entry"""
    cache_key = make_cache_key(prefix, *args, **kwargs)
    cache.delete(cache_key)
    logger.debug(f"Invalidated cache for {prefix}: {cache_key}")
