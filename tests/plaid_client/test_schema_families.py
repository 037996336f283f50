import copy
from datetime import date, datetime, timezone

import pytest

from plaid_client.schema import (
    AprType,
    CreateDepositSwitchTokenResponse,
    DepositSwitchState,
    EmailType,
    GetAuthResponse,
    GetDepositSwitchResponse,
    GetHoldingsResponse,
    GetIdentityResponse,
    GetInstitutionByIdResponse,
    GetInstitutionsResponse,
    GetInvestmentTransactionsResponse,
    GetItemResponse,
    GetLiabilitiesResponse,
    GetWebhookVerificationKeyResponse,
    InterestRateType,
    PhoneNumberType,
    RepaymentPlanType,
    SecurityType,
    StudentLoanStatusType,
    WebhookCode,
)


CREDIT_LIABILITY = {
    "account_id": "acc-cc",
    "aprs": [
        {
            "apr_percentage": 15.24,
            "apr_type": "balance_transfer_apr",
            "balance_subject_to_apr": 1562.32,
            "interest_charge_amount": 130.22,
        }
    ],
    "is_overdue": False,
    "last_payment_amount": 168.25,
    "last_payment_date": "2019-05-22",
    "last_statement_balance": 1708.77,
    "last_statement_issue_date": "2019-05-28",
    "minimum_payment_amount": 20,
    "next_payment_due_date": "2020-05-28",
}

MORTGAGE_LIABILITY = {
    "account_id": "acc-mortgage",
    "account_number": "3120194154",
    "has_pmi": True,
    "interest_rate": {"percentage": 3.99, "type": "fixed"},
    "maturity_date": "2045-07-31",
    "origination_principal_amount": 425000,
    "property_address": {
        "city": "Malakoff",
        "country": "US",
        "postal_code": "14236",
        "region": "NY",
        "street": "2992 Cameron Road",
    },
}

STUDENT_LIABILITY = {
    "account_id": "acc-student",
    "account_number": "4277075694",
    "disbursement_dates": ["2002-08-28"],
    "expected_payoff_date": "2032-07-28",
    "guarantor": "DEPT OF ED",
    "interest_rate_percentage": 5.25,
    "is_overdue": False,
    "last_payment_amount": 138.05,
    "last_payment_date": "2019-04-22",
    "loan_name": "Consolidation",
    "loan_status": {"end_date": "2032-07-28", "type": "repayment"},
    "minimum_payment_amount": 25,
    "origination_principal_amount": 25000,
    "outstanding_interest_amount": 6227.36,
    "pslf_status": {
        "estimated_eligibility_date": "2021-01-01",
        "payments_made": 200,
        "payments_remaining": 160,
    },
    "repayment_plan": {"description": "Standard Repayment", "type": "standard"},
    "sequence_number": "1",
    "servicer_address": {
        "city": "San Matias",
        "country": "US",
        "postal_code": "99415",
        "region": "CA",
        "street": "123 Relaxation Road",
    },
    "ytd_interest_paid": 280.55,
    "ytd_principal_paid": 271.65,
}

OWNER = {
    "names": ["Alberta Bobbeth Charleson"],
    "phone_numbers": [{"data": "1112223333", "primary": False, "type": "home"}],
    "emails": [{"data": "accountholder0@example.com", "primary": True, "type": "primary"}],
    "addresses": [
        {
            "data": {
                "city": "Malakoff",
                "country": "US",
                "postal_code": "14236",
                "region": "NY",
                "street": "2992 Cameron Road",
            },
            "primary": True,
        }
    ],
}

AUTH_NUMBERS = {
    "ach": [
        {
            "account_id": "acc-1",
            "account": "1111222233330000",
            "routing": "011401533",
            "wire_routing": "021000021",
        }
    ],
    "eft": [{"account_id": "acc-1", "account": "111122223333", "institution": "021", "branch": "01140"}],
    "international": [{"account_id": "acc-1", "iban": "GB33BUKB20201555555555", "bic": "BUKBGB22"}],
    "bacs": [{"account_id": "acc-1", "account": "31926819", "sort_code": "601613"}],
}

INSTITUTION = {
    "institution_id": "ins_109508",
    "name": "First Platypus Bank",
    "products": ["auth", "balance", "transactions"],
    "country_codes": ["US"],
    "url": None,
    "primary_color": "#1f1f1f",
    "logo": None,
    "routing_numbers": ["011000138"],
    "oauth": False,
    "status": {"item_logins": {"status": "HEALTHY"}},
}

SECURITY = {
    "security_id": "sec-1",
    "cusip": "577130834",
    "name": "Matthews Pacific Tiger Fund Insti Class",
    "ticker_symbol": "MIPTX",
    "is_cash_equivalent": False,
    "type": "mutual fund",
    "close_price": 27,
    "close_price_as_of": None,
    "iso_currency_code": "USD",
    "unofficial_currency_code": None,
}

HOLDING = {
    "account_id": "acc-inv",
    "security_id": "sec-1",
    "institution_price": 27,
    "institution_price_as_of": "2020-05-29",
    "institution_value": 270,
    "cost_basis": 250.5,
    "quantity": 10,
    "iso_currency_code": "USD",
    "unofficial_currency_code": None,
}

INVESTMENT_TRANSACTION = {
    "investment_transaction_id": "inv-txn-1",
    "account_id": "acc-inv",
    "security_id": "sec-1",
    "date": "2020-05-29",
    "name": "BUY Matthews Pacific Tiger Fund",
    "quantity": 0.5,
    "amount": 13.5,
    "price": 27,
    "fees": None,
    "type": "buy",
    "subtype": "buy",
    "iso_currency_code": "USD",
    "unofficial_currency_code": None,
}

ITEM_STATUS = {
    "investments": {
        "last_successful_update": "2019-02-15T15:52:39Z",
        "last_failed_update": "2019-01-22T04:32:00Z",
    },
    "transactions": {"last_successful_update": "2019-02-15T15:52:39Z", "last_failed_update": None},
    "last_webhook": {"sent_at": "2019-02-15T15:53:00Z", "code_sent": "DEFAULT_UPDATE"},
}

DEPOSIT_SWITCH = {
    "request_id": "req-1",
    "deposit_switch_id": "ds-1",
    "target_account_id": "acc-1",
    "target_item_id": "item-1",
    "state": "completed",
    "account_has_multiple_allocations": False,
    "is_allocated_remainder": False,
    "percent_allocated": 50,
    "amount_allocated": None,
    "date_created": "2020-01-01",
    "date_completed": "2020-01-02",
}

WEBHOOK_KEY = {
    "request_id": "req-1",
    "key": {
        "alg": "ES256",
        "created_at": 1560466143,
        "crv": "P-256",
        "expired_at": None,
        "kid": "bfbd5111-8e33-4643-8ced-b2e642a72f26",
        "kty": "EC",
        "use": "sig",
        "x": "hKXLGIjWvCBv-cP5euCTxl8g9GLG9zHo_3pO5NN1DwQ",
        "y": "shhexqPB7YffGn6fR6h2UhTSuCtPmfzQJ6ENVIoO4Ys",
    },
}


def _liabilities_payload(account, item):
    return {
        "request_id": "req-1",
        "accounts": [account],
        "item": item,
        "liabilities": {
            "credit": [copy.deepcopy(CREDIT_LIABILITY)],
            "mortgage": [copy.deepcopy(MORTGAGE_LIABILITY)],
            "student": [copy.deepcopy(STUDENT_LIABILITY)],
        },
    }


def _assert_round_trip(model, result):
    assert model.model_validate(result.model_dump(mode="json")) == result


@pytest.mark.unit
def test_liabilities_decode(account_payload, item_payload):
    result = GetLiabilitiesResponse.model_validate(_liabilities_payload(account_payload, item_payload))

    credit = result.liabilities.credit[0]
    assert credit.aprs[0].apr_type is AprType.BALANCE_TRANSFER_APR
    assert credit.next_payment_due_date == date(2020, 5, 28)

    mortgage = result.liabilities.mortgage[0]
    assert mortgage.interest_rate.type is InterestRateType.FIXED
    assert mortgage.property_address.city == "Malakoff"
    assert mortgage.escrow_balance is None

    student = result.liabilities.student[0]
    assert student.loan_status.type is StudentLoanStatusType.REPAYMENT
    assert student.loan_status.end_date == date(2032, 7, 28)
    assert student.pslf_status.payments_remaining == 160
    assert student.repayment_plan.type is RepaymentPlanType.STANDARD
    assert student.disbursement_dates == [date(2002, 8, 28)]

    _assert_round_trip(GetLiabilitiesResponse, result)


@pytest.mark.unit
def test_liabilities_unknown_student_loan_types(account_payload, item_payload):
    payload = _liabilities_payload(account_payload, item_payload)
    student = payload["liabilities"]["student"][0]
    student["loan_status"]["type"] = "brand new status"
    student["repayment_plan"]["type"] = "brand new plan"

    result = GetLiabilitiesResponse.model_validate(payload)

    loan = result.liabilities.student[0]
    assert loan.loan_status.type.is_unknown
    assert loan.loan_status.type.value == "brand new status"
    assert loan.repayment_plan.type.is_unknown
    assert loan.repayment_plan.type.value == "brand new plan"
    _assert_round_trip(GetLiabilitiesResponse, result)


@pytest.mark.unit
def test_liabilities_kinds_are_optional(account_payload, item_payload):
    result = GetLiabilitiesResponse.model_validate(
        {
            "request_id": "req-1",
            "accounts": [account_payload],
            "item": item_payload,
            "liabilities": {"credit": [copy.deepcopy(CREDIT_LIABILITY)], "mortgage": None},
        }
    )

    assert result.liabilities.mortgage is None
    assert result.liabilities.student is None


@pytest.mark.unit
def test_item_status_decode(item_payload):
    result = GetItemResponse.model_validate(
        {"request_id": "req-1", "item": item_payload, "status": copy.deepcopy(ITEM_STATUS)}
    )

    status = result.status
    assert status.investments.last_failed_update == datetime(2019, 1, 22, 4, 32, tzinfo=timezone.utc)
    assert status.transactions.last_failed_update is None
    assert status.last_webhook.code_sent is WebhookCode.DEFAULT_UPDATE
    _assert_round_trip(GetItemResponse, result)


@pytest.mark.unit
def test_item_status_unknown_webhook_code(item_payload):
    status = copy.deepcopy(ITEM_STATUS)
    status["last_webhook"]["code_sent"] = "SOMETHING_NEW"

    result = GetItemResponse.model_validate({"request_id": "req-1", "item": item_payload, "status": status})

    assert result.status.last_webhook.code_sent.is_unknown
    assert result.status.last_webhook.code_sent.value == "SOMETHING_NEW"
    _assert_round_trip(GetItemResponse, result)


@pytest.mark.unit
def test_item_without_status(item_payload):
    result = GetItemResponse.model_validate({"request_id": "req-1", "item": item_payload})

    assert result.status is None
    assert result.item.error is None


@pytest.mark.unit
def test_identity_decode(account_payload, item_payload):
    account_payload["owners"] = [copy.deepcopy(OWNER)]

    result = GetIdentityResponse.model_validate(
        {"request_id": "req-1", "accounts": [account_payload], "item": item_payload}
    )

    owner = result.accounts[0].owners[0]
    assert result.accounts[0].balances.current.value == 110.5
    assert owner.names == ["Alberta Bobbeth Charleson"]
    assert owner.emails[0].type is EmailType.PRIMARY
    assert owner.phone_numbers[0].type is PhoneNumberType.HOME
    assert owner.addresses[0].data.postal_code == "14236"
    _assert_round_trip(GetIdentityResponse, result)


@pytest.mark.unit
def test_auth_decode(account_payload, item_payload):
    result = GetAuthResponse.model_validate(
        {
            "request_id": "req-1",
            "accounts": [account_payload],
            "numbers": copy.deepcopy(AUTH_NUMBERS),
            "item": item_payload,
        }
    )

    assert result.numbers.ach[0].routing == "011401533"
    assert result.numbers.eft[0].branch == "01140"
    assert result.numbers.international[0].bic == "BUKBGB22"
    assert result.numbers.bacs[0].sort_code == "601613"
    _assert_round_trip(GetAuthResponse, result)


@pytest.mark.unit
def test_institutions_decode():
    institution = copy.deepcopy(INSTITUTION)
    institution["products"].append("brand_new_product")

    result = GetInstitutionsResponse.model_validate(
        {"request_id": "req-1", "institutions": [institution], "total": 11000}
    )

    decoded = result.institutions[0]
    assert result.total == 11000
    assert decoded.oauth is False
    assert decoded.url is None
    assert decoded.products[-1].is_unknown
    assert decoded.status == {"item_logins": {"status": "HEALTHY"}}
    _assert_round_trip(GetInstitutionsResponse, result)


@pytest.mark.unit
def test_institution_by_id_decode():
    result = GetInstitutionByIdResponse.model_validate(
        {"request_id": "req-1", "institution": copy.deepcopy(INSTITUTION)}
    )

    assert result.institution.routing_numbers == ["011000138"]
    _assert_round_trip(GetInstitutionByIdResponse, result)


@pytest.mark.unit
def test_holdings_decode(account_payload, item_payload):
    result = GetHoldingsResponse.model_validate(
        {
            "request_id": "req-1",
            "accounts": [account_payload],
            "holdings": [dict(HOLDING)],
            "securities": [dict(SECURITY)],
            "item": item_payload,
        }
    )

    holding = result.holdings[0]
    assert holding.cost_basis.value == 250.5
    assert holding.institution_price_as_of == date(2020, 5, 29)
    assert result.securities[0].type is SecurityType.MUTUAL_FUND
    assert result.securities[0].close_price.currency == "USD"
    _assert_round_trip(GetHoldingsResponse, result)


@pytest.mark.unit
def test_investment_transactions_decode(account_payload, item_payload):
    result = GetInvestmentTransactionsResponse.model_validate(
        {
            "request_id": "req-1",
            "accounts": [account_payload],
            "securities": [dict(SECURITY)],
            "investment_transactions": [dict(INVESTMENT_TRANSACTION)],
            "total_investment_transactions": 1,
            "item": item_payload,
        }
    )

    txn = result.investment_transactions[0]
    assert txn.date == date(2020, 5, 29)
    assert txn.amount.value == 13.5
    assert txn.price.currency == "USD"
    assert txn.fees is None
    assert result.total_investment_transactions == 1
    _assert_round_trip(GetInvestmentTransactionsResponse, result)


@pytest.mark.unit
def test_deposit_switch_decode():
    result = GetDepositSwitchResponse.model_validate(dict(DEPOSIT_SWITCH))

    assert result.state is DepositSwitchState.COMPLETED
    assert result.date_created == date(2020, 1, 1)
    assert result.percent_allocated == 50.0
    assert result.amount_allocated is None
    _assert_round_trip(GetDepositSwitchResponse, result)


@pytest.mark.unit
def test_deposit_switch_unknown_state():
    payload = dict(DEPOSIT_SWITCH, state="switch_in_review")

    result = GetDepositSwitchResponse.model_validate(payload)

    assert result.state.is_unknown
    assert result.model_dump(mode="json")["state"] == "switch_in_review"


@pytest.mark.unit
def test_deposit_switch_token_decode():
    result = CreateDepositSwitchTokenResponse.model_validate(
        {
            "request_id": "req-1",
            "deposit_switch_token": "deposit-switch-sandbox-1",
            "deposit_switch_token_expiration_time": "2020-01-01T00:30:00Z",
        }
    )

    assert result.deposit_switch_token_expiration_time.tzinfo is not None
    _assert_round_trip(CreateDepositSwitchTokenResponse, result)


@pytest.mark.unit
def test_webhook_verification_key_decode():
    result = GetWebhookVerificationKeyResponse.model_validate(copy.deepcopy(WEBHOOK_KEY))

    assert result.key.kid == "bfbd5111-8e33-4643-8ced-b2e642a72f26"
    assert result.key.created_at == 1560466143
    assert result.key.expired_at is None
    _assert_round_trip(GetWebhookVerificationKeyResponse, result)
