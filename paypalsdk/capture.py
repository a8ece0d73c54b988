from typing import Optional

from paypalsdk.types import Amount, Capture, Refund


class CaptureMixin:
    def get_captured_payment_details(self, capture_id: str) -> Capture:
        req = self.new_request("GET", self.url("/v1/payments/capture", capture_id))
        return self.send_with_auth(req, Capture)

    def refund_capture(self, capture_id: str, amount: Optional[Amount] = None) -> Refund:
        body = {"amount": amount.to_payload()} if amount else {}
        req = self.new_request(
            "POST", self.url("/v1/payments/capture", capture_id, "refund"), body
        )
        return self.send_with_auth(req, Refund)
