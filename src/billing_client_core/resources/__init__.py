"""Resource operation surfaces built on BillingClient."""

from billing_client_core.resources.base import Resource
from billing_client_core.resources.invoices import Invoices
from billing_client_core.resources.plans import Plans

__all__ = ["Invoices", "Plans", "Resource"]
