"""
Payouts

Send money to one recipient and track the batch and its items.
"""

from paypalsdk.types import Payout, PayoutItemResponse, PayoutResponse

PAYOUTS_PATH = "/v1/payments/payouts"
PAYOUT_ITEMS_PATH = "/v1/payments/payouts-item"


class PayoutMixin:
    def create_single_payout(self, payout: Payout) -> PayoutResponse:
        """Submit a payout synchronously; the response already holds the item outcome."""
        req = self.new_request(
            "POST", self.url(PAYOUTS_PATH), payout, params={"sync_mode": "true"}
        )
        return self.send_with_auth(req, PayoutResponse)

    def get_payout(self, payout_batch_id: str) -> PayoutResponse:
        req = self.new_request("GET", self.url(PAYOUTS_PATH, payout_batch_id))
        return self.send_with_auth(req, PayoutResponse)

    def get_payout_item(self, payout_item_id: str) -> PayoutItemResponse:
        req = self.new_request("GET", self.url(PAYOUT_ITEMS_PATH, payout_item_id))
        return self.send_with_auth(req, PayoutItemResponse)

    def cancel_payout_item(self, payout_item_id: str) -> PayoutItemResponse:
        # Only unclaimed items can be cancelled
        req = self.new_request(
            "POST", self.url(PAYOUT_ITEMS_PATH, payout_item_id, "cancel")
        )
        return self.send_with_auth(req, PayoutItemResponse)
