from storage.result_store import ResultStore
from storage.stats import StatsAggregator

__all__ = [
    "ResultStore",
    "StatsAggregator",
]
