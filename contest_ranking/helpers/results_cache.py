import time

# key: (step_id, category_id, genre_key)
# value: (expires_at, rows, category_label)
RESULTS_CACHE: dict = {}


def get_cached_results(key):
    """
    Return (rows, category_label) if cached and not expired, else None.
    """
    entry = RESULTS_CACHE.get(key)
    if entry is None:
        return None

    expires_at, rows, category_label = entry
    if time.time() >= expires_at:
        RESULTS_CACHE.pop(key, None)
        return None

    return rows, category_label


def set_cached_results(key, rows, category_label, ttl):
    # ttl <= 0 disables caching
    if ttl <= 0:
        return
    RESULTS_CACHE[key] = (time.time() + ttl, rows, category_label)


def invalidate_results_cache(step_id=None):
    """
    Drop the cached tables of one step, or every table when step_id is None.
    """
    if step_id is None:
        RESULTS_CACHE.clear()
        return

    for key in [k for k in RESULTS_CACHE if k[0] == step_id]:
        RESULTS_CACHE.pop(key, None)
