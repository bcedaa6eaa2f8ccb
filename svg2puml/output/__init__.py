from .index_aggregator import IndexAggregator
