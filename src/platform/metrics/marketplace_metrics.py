from prometheus_client import Counter


class MarketplaceMetrics:
    """
    Marketplace Core Metrics Collector

    Tracks seller-portal product mutations and rejected authentications
    """

    def __init__(self):
        # ========== Product Mutation Metrics ==========
        self.product_mutations = Counter(
            'marketplace_product_mutations_total',
            'Total product mutation requests',
            ['operation', 'result'],  # operation: create/update/delete
        )

        # ========== Auth Metrics ==========
        self.auth_rejections = Counter(
            'marketplace_auth_rejections_total',
            'Requests rejected by the auth gate',
            ['reason'],  # missing_token/invalid_token/expired_token/unknown_seller
        )

        self.seller_logins = Counter(
            'marketplace_seller_logins_total',
            'Seller login attempts',
            ['result'],
        )

    # ========== Helper Methods ==========

    def record_product_mutation(self, *, operation: str, result: str):
        self.product_mutations.labels(operation=operation, result=result).inc()

    def record_auth_rejection(self, *, reason: str):
        self.auth_rejections.labels(reason=reason).inc()

    def record_seller_login(self, *, result: str):
        self.seller_logins.labels(result=result).inc()


# Global metrics instance
metrics = MarketplaceMetrics()
