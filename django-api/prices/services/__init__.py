from prices.services.pricing_service import PricingService

__all__ = ["PricingService"]
