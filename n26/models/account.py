"""Pydantic models for account, profile and onboarding responses."""

from typing import List, Optional

from pydantic import Field

from n26.models.base import N26Model


class Balance(N26Model):
    """Main account balance from /api/accounts."""

    id: str = ""
    available_balance: float = 0.0
    usable_balance: float = 0.0
    iban: str = ""
    bic: str = ""
    bank_name: str = ""
    seized: bool = False


class PersonalInfo(N26Model):
    """Account holder profile from /api/me."""

    id: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    kyc_first_name: str = ""
    kyc_last_name: str = ""
    title: str = ""
    gender: str = ""
    birth_date: int = 0
    signup_completed: bool = False
    nationality: str = ""
    mobile_phone_number: str = ""
    shadow_user_id: str = ""
    transfer_wise_terms_accepted: bool = False
    id_now_token: Optional[str] = None


class Statuses(N26Model):
    """Onboarding and KYC milestones from /api/me/statuses, as epoch millis."""

    id: str = ""
    created: int = 0
    updated: int = 0
    single_step_signup: int = 0
    email_validation_initiated: int = 0
    email_validation_completed: int = 0
    product_selection_completed: int = 0
    phone_pairing_initiated: int = 0
    phone_pairing_completed: int = 0
    kyc_initiated: int = 0
    kyc_completed: int = 0
    kyc_web_id_initiated: int = Field(0, alias="kycWebIDInitiated")
    kyc_web_id_completed: int = Field(0, alias="kycWebIDCompleted")
    card_activation_completed: int = 0
    pin_definition_completed: int = 0
    bank_account_creation_initiated: int = 0
    # Upstream spelling
    bank_account_creation_succeded: int = 0
    flex_account: bool = False


class Paging(N26Model):
    total_results: int = 0


class Address(N26Model):
    id: str = ""
    address_line1: str = ""
    street_name: str = ""
    house_number_block: str = ""
    zip_code: str = ""
    city_name: str = ""
    country_name: str = ""
    type: str = ""


class Addresses(N26Model):
    """Postal addresses from /api/addresses."""

    paging: Paging = Paging()
    data: List[Address] = []


class Barzahlen(N26Model):
    """Cash deposit and withdrawal allowances from /api/barzahlen/check.

    Amounts are sent as decimal strings.
    """

    deposit_allowance: str = ""
    withdraw_allowance: str = ""
    remaining_amount_month: str = ""
    fee_rate: str = ""
    cash26_withdrawals_count: str = ""
    cash26_withdrawals_sum: str = ""
    atm_withdrawals_count: str = ""
    atm_withdrawals_sum: str = ""
    monthly_deposit_fee_threshold: str = ""
    success: bool = False
