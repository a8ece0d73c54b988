"""
Orders created by payments with intent "order".
"""

from paypalsdk.types import Amount, Authorization, Capture, Order

ORDERS_PATH = "/v1/payments/orders"


class OrderMixin:
    def get_order(self, order_id: str) -> Order:
        req = self.new_request("GET", self.url(ORDERS_PATH, order_id))
        return self.send_with_auth(req, Order)

    def authorize_order(self, order_id: str, amount: Amount) -> Authorization:
        req = self.new_request(
            "POST",
            self.url(ORDERS_PATH, order_id, "authorize"),
            {"amount": amount.to_payload()},
        )
        return self.send_with_auth(req, Authorization)

    def capture_order(self, order_id: str, amount: Amount, is_final_capture: bool) -> Capture:
        req = self.new_request(
            "POST",
            self.url(ORDERS_PATH, order_id, "capture"),
            {"amount": amount.to_payload(), "is_final_capture": is_final_capture},
        )
        return self.send_with_auth(req, Capture)

    def void_order(self, order_id: str) -> Order:
        req = self.new_request("POST", self.url(ORDERS_PATH, order_id, "do-void"))
        return self.send_with_auth(req, Order)
