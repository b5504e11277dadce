class FeedSyncError(Exception):
    """Base exception for a failed feed run."""
    pass


class EmptyFeedError(FeedSyncError):
    """No variant in the catalog qualified for the feed."""
    pass


class DeliveryConfigError(FeedSyncError):
    """The FTP drop is not configured."""
    pass
