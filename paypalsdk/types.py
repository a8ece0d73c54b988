"""
PayPal Wire Types

This module defines Pydantic models for the JSON payloads exchanged with the
PayPal REST API. Optional fields default to None and are left out of request
bodies, so only what the caller sets is sent.
"""

from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PayPalModel(BaseModel):
    """Base for every PayPal payload."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize using wire names, dropping unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# Shared


class Link(PayPalModel):
    href: Optional[str] = None
    rel: Optional[str] = None
    method: Optional[str] = None
    enctype: Optional[str] = None


class ErrorResponseDetail(PayPalModel):
    field: Optional[str] = None
    issue: Optional[str] = None
    links: Optional[list[Link]] = Field(default=None, alias="link")


class ErrorResponse(PayPalModel):
    """Standard PayPal error envelope returned with non-2xx responses."""

    name: Optional[str] = None  # machine readable code, e.g. VALIDATION_ERROR
    message: Optional[str] = None
    debug_id: Optional[str] = None
    information_link: Optional[str] = None
    details: Optional[list[ErrorResponseDetail]] = None

    @model_validator(mode="before")
    @classmethod
    def from_oauth_error(cls, data: Any) -> Any:
        # OAuth endpoints answer with {error, error_description}
        if isinstance(data, dict) and "error" in data and "name" not in data:
            data = {
                **data,
                "name": data["error"],
                "message": data.get("message", data.get("error_description")),
            }
        return data


class TokenResponse(PayPalModel):
    refresh_token: Optional[str] = None
    access_token: str
    token_type: Optional[str] = None
    expires_in: Optional[int] = None  # seconds


class Address(PayPalModel):
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    country_code: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None
    phone: Optional[str] = None


class ShippingAddress(PayPalModel):
    recipient_name: Optional[str] = None
    type: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    country_code: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None
    phone: Optional[str] = None


# Identity


class UserInfo(PayPalModel):
    """Claims returned by the openidconnect userinfo endpoint."""

    user_id: Optional[str] = None
    name: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    email: Optional[str] = None
    verified: Optional[bool] = None
    gender: Optional[str] = None
    birthdate: Optional[str] = None
    zoneinfo: Optional[str] = None
    locale: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[Address] = None
    verified_account: Optional[bool] = None
    account_type: Optional[str] = None
    age_range: Optional[str] = None
    payer_id: Optional[str] = None


# Payments


class Details(PayPalModel):
    shipping: Optional[str] = None
    subtotal: Optional[str] = None
    tax: Optional[str] = None
    insurance: Optional[str] = None
    handling_fee: Optional[str] = None
    shipping_discount: Optional[str] = None


class Amount(PayPalModel):
    """Money amount; totals are decimal strings such as "7.00"."""

    currency: str
    total: str
    details: Optional[Details] = None


class Item(PayPalModel):
    name: Optional[str] = None
    price: Optional[str] = None
    currency: Optional[str] = None
    quantity: Optional[int] = None
    sku: Optional[str] = None
    description: Optional[str] = None
    tax: Optional[str] = None


class ItemList(PayPalModel):
    items: Optional[list[Item]] = None
    shipping_address: Optional[ShippingAddress] = None


class PayerInfo(PayPalModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    payer_id: Optional[str] = None
    phone: Optional[str] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[ShippingAddress] = None
    country_code: Optional[str] = None


class Payer(PayPalModel):
    payment_method: str  # "paypal" or "credit_card"
    funding_instruments: Optional[list[dict[str, Any]]] = None
    payer_info: Optional[PayerInfo] = None
    status: Optional[str] = None


class RedirectURLs(PayPalModel):
    return_url: Optional[str] = None
    cancel_url: Optional[str] = None


class Sale(PayPalModel):
    id: Optional[str] = None
    amount: Optional[Amount] = None
    description: Optional[str] = None
    create_time: Optional[datetime] = None
    state: Optional[str] = None
    parent_payment: Optional[str] = None
    update_time: Optional[datetime] = None
    payment_mode: Optional[str] = None
    reason_code: Optional[str] = None
    clearing_time: Optional[str] = None
    receipt_id: Optional[str] = None
    links: Optional[list[Link]] = None


class Refund(PayPalModel):
    id: Optional[str] = None
    amount: Optional[Amount] = None
    create_time: Optional[datetime] = None
    state: Optional[str] = None
    capture_id: Optional[str] = None
    parent_payment: Optional[str] = None
    sale_id: Optional[str] = None
    update_time: Optional[datetime] = None


class Authorization(PayPalModel):
    id: Optional[str] = None
    amount: Optional[Amount] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    state: Optional[str] = None
    parent_payment: Optional[str] = None
    valid_until: Optional[datetime] = None
    links: Optional[list[Link]] = None


class Capture(PayPalModel):
    id: Optional[str] = None
    amount: Optional[Amount] = None
    is_final_capture: Optional[bool] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    state: Optional[str] = None
    parent_payment: Optional[str] = None
    transaction_fee: Optional[dict[str, str]] = None
    links: Optional[list[Link]] = None


class Order(PayPalModel):
    id: Optional[str] = None
    amount: Optional[Amount] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    state: Optional[str] = None
    parent_payment: Optional[str] = None
    reason_code: Optional[str] = None
    links: Optional[list[Link]] = None


class RelatedResources(PayPalModel):
    sale: Optional[Sale] = None
    authorization: Optional[Authorization] = None
    order: Optional[Order] = None
    capture: Optional[Capture] = None
    refund: Optional[Refund] = None


class Transaction(PayPalModel):
    amount: Optional[Amount] = None
    description: Optional[str] = None
    item_list: Optional[ItemList] = None
    invoice_number: Optional[str] = None
    custom: Optional[str] = None
    soft_descriptor: Optional[str] = None
    related_resources: Optional[list[RelatedResources]] = None
    payment_options: Optional[dict[str, Any]] = None
    notify_url: Optional[str] = None
    order_url: Optional[str] = None


class Payment(PayPalModel):
    id: Optional[str] = None
    intent: Optional[str] = None  # "sale", "authorize" or "order"
    payer: Optional[Payer] = None
    transactions: Optional[list[Transaction]] = None
    redirect_urls: Optional[RedirectURLs] = None
    experience_profile_id: Optional[str] = None
    note_to_payer: Optional[str] = None
    state: Optional[str] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    links: Optional[list[Link]] = None


class PaymentResponse(PayPalModel):
    id: Optional[str] = None
    links: Optional[list[Link]] = None


class CreatePaymentResponse(PayPalModel):
    id: Optional[str] = None
    intent: Optional[str] = None
    payer: Optional[Payer] = None
    transactions: Optional[list[Transaction]] = None
    redirect_urls: Optional[RedirectURLs] = None
    state: Optional[str] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    links: Optional[list[Link]] = None


class ExecuteResponse(PayPalModel):
    id: Optional[str] = None
    state: Optional[str] = None
    transactions: Optional[list[Transaction]] = None
    links: Optional[list[Link]] = None


class ListPaymentResponse(PayPalModel):
    payments: list[Payment] = Field(default_factory=list)
    count: Optional[int] = None
    next_id: Optional[str] = None


# Payouts


class AmountPayout(PayPalModel):
    currency: str
    value: str


class SenderBatchHeader(PayPalModel):
    email_subject: Optional[str] = None
    sender_batch_id: Optional[str] = None
    recipient_type: Optional[str] = None


class PayoutItem(PayPalModel):
    recipient_type: str  # EMAIL, PHONE or PAYPAL_ID
    receiver: str
    amount: AmountPayout
    note: Optional[str] = None
    sender_item_id: Optional[str] = None


class Payout(PayPalModel):
    sender_batch_header: SenderBatchHeader
    items: list[PayoutItem]


class BatchHeader(PayPalModel):
    payout_batch_id: Optional[str] = None
    batch_status: Optional[str] = None
    time_created: Optional[datetime] = None
    time_completed: Optional[datetime] = None
    sender_batch_header: Optional[SenderBatchHeader] = None
    amount: Optional[AmountPayout] = None
    fees: Optional[AmountPayout] = None


class PayoutItemResponse(PayPalModel):
    payout_item_id: Optional[str] = None
    transaction_id: Optional[str] = None
    transaction_status: Optional[str] = None
    payout_batch_id: Optional[str] = None
    payout_item_fee: Optional[AmountPayout] = None
    payout_item: Optional[PayoutItem] = None
    time_processed: Optional[datetime] = None
    links: Optional[list[Link]] = None
    errors: Optional[ErrorResponse] = None


class PayoutResponse(PayPalModel):
    batch_header: Optional[BatchHeader] = None
    items: Optional[list[PayoutItemResponse]] = None
    links: Optional[list[Link]] = None


# Web experience profiles


class LandingPageType(str, Enum):
    billing = "Billing"
    login = "Login"


class NoShipping(IntEnum):
    display = 0
    hide = 1
    buyer_account = 2


class AddressOverride(IntEnum):
    from_file = 0
    from_call = 1


class Presentation(PayPalModel):
    brand_name: Optional[str] = None
    logo_image: Optional[str] = None
    locale_code: Optional[str] = None


class InputFields(PayPalModel):
    allow_note: Optional[bool] = None
    no_shipping: Optional[NoShipping] = None
    address_override: Optional[AddressOverride] = None


class FlowConfig(PayPalModel):
    landing_page_type: Optional[LandingPageType] = None
    bank_txn_pending_url: Optional[str] = None


class WebProfile(PayPalModel):
    """Saved checkout experience; id is assigned by PayPal on create."""

    id: Optional[str] = None
    name: Optional[str] = None
    temporary: Optional[bool] = None
    presentation: Optional[Presentation] = None
    input_fields: Optional[InputFields] = None
    flow_config: Optional[FlowConfig] = None
