from src.fighter_pool.classification import (
    ClassifiedFighters,
    classify_fighters,
    is_pool_member,
)
from src.fighter_pool.cleaning import FighterCleaner, safe_num
from src.fighter_pool.ingestion import FighterIngester, IngestionError
from src.fighter_pool.models import STAT_NAMES, Fighter
from src.fighter_pool.proxy_fetch import Proxy, ProxyFetcher, ProxyFetchError
from src.fighter_pool.store import JsonStore, load_fighters

__all__ = [
    "ClassifiedFighters",
    "Fighter",
    "FighterCleaner",
    "FighterIngester",
    "IngestionError",
    "JsonStore",
    "Proxy",
    "ProxyFetchError",
    "ProxyFetcher",
    "STAT_NAMES",
    "classify_fighters",
    "is_pool_member",
    "load_fighters",
    "safe_num",
]
