from typing import Optional

from paypalsdk.types import Amount, Refund, Sale


class SaleMixin:
    def get_sale(self, sale_id: str) -> Sale:
        req = self.new_request("GET", self.url("/v1/payments/sale", sale_id))
        return self.send_with_auth(req, Sale)

    def refund_sale(self, sale_id: str, amount: Optional[Amount] = None) -> Refund:
        """Refund a completed sale. Without an amount the full sale is refunded."""
        body = {"amount": amount.to_payload()} if amount else {}
        req = self.new_request(
            "POST", self.url("/v1/payments/sale", sale_id, "refund"), body
        )
        return self.send_with_auth(req, Refund)

    def get_refund(self, refund_id: str) -> Refund:
        req = self.new_request("GET", self.url("/v1/payments/refund", refund_id))
        return self.send_with_auth(req, Refund)
