"""
Payments

Create, execute and look up payments under /v1/payments/payment.
"""

from paypalsdk.types import (
    Amount,
    CreatePaymentResponse,
    ExecuteResponse,
    ListPaymentResponse,
    Payer,
    Payment,
    PaymentResponse,
    RedirectURLs,
    Transaction,
)

PAYMENTS_PATH = "/v1/payments/payment"


class PaymentMixin:
    def create_direct_paypal_payment(
        self,
        amount: Amount,
        redirect_uri: str,
        cancel_uri: str,
        description: str,
    ) -> PaymentResponse:
        """
        Create a sale paid through a PayPal account.

        The buyer approves it at the "approval_url" link of the response, then
        the payment is completed with execute_approved_payment.
        """
        payment = Payment(
            intent="sale",
            payer=Payer(payment_method="paypal"),
            transactions=[Transaction(amount=amount, description=description)],
            redirect_urls=RedirectURLs(return_url=redirect_uri, cancel_url=cancel_uri),
        )
        req = self.new_request("POST", self.url(PAYMENTS_PATH), payment)
        return self.send_with_auth(req, PaymentResponse)

    def create_payment(self, payment: Payment) -> CreatePaymentResponse:
        req = self.new_request("POST", self.url(PAYMENTS_PATH), payment)
        return self.send_with_auth(req, CreatePaymentResponse)

    def execute_approved_payment(self, payment_id: str, payer_id: str) -> ExecuteResponse:
        req = self.new_request(
            "POST",
            self.url(PAYMENTS_PATH, payment_id, "execute"),
            {"payer_id": payer_id},
        )
        return self.send_with_auth(req, ExecuteResponse)

    def get_payment(self, payment_id: str) -> Payment:
        req = self.new_request("GET", self.url(PAYMENTS_PATH, payment_id))
        return self.send_with_auth(req, Payment)

    def get_payments(self) -> list[Payment]:
        req = self.new_request("GET", self.url(PAYMENTS_PATH))
        resp = self.send_with_auth(req, ListPaymentResponse)
        return resp.payments if resp else []
