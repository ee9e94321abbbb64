from decimal import Decimal

import pytest

from models.payment import (
    BitcoinPayment,
    EthereumPayment,
    IbanPayment,
    PaymentKind,
    PayPalPayment,
    UpiPayment,
    UrlPayment,
)
from payloads import payment
from payloads.checksums import iban_checksum_ok
from payloads.errors import ErrorKind

BTC_ADDRESS = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
ETH_ADDRESS = "0x" + "a" * 40
IBAN = "DE89370400440532013000"


def test_every_kind_has_a_codec():
    assert set(payment.PAYMENT_CODECS) == set(PaymentKind)


# ─────────────────────────────────────────────
# Encoding
# ─────────────────────────────────────────────
def test_upi_encoding():
    upi = UpiPayment(upi_id="foo@bank", name="Jane Doe", amount=100)
    assert payment.validate(upi) is None
    assert payment.encode(upi) == "upi://pay?pa=foo@bank&pn=Jane%20Doe&am=100&cu=INR"


def test_upi_without_amount_has_no_currency():
    assert payment.encode(UpiPayment(upi_id="foo@bank", name="Jane")) == "upi://pay?pa=foo@bank&pn=Jane"


def test_paypal_encoding():
    assert payment.encode(PayPalPayment(username="jane.doe")) == "https://paypal.me/jane.doe"
    assert payment.encode(PayPalPayment(username="jane.doe", amount="12.50")) == "https://paypal.me/jane.doe/12.5"


def test_bitcoin_encoding():
    assert payment.encode(BitcoinPayment(address=BTC_ADDRESS)) == f"bitcoin:{BTC_ADDRESS}"
    btc = BitcoinPayment(address=BTC_ADDRESS, amount=Decimal("0.001"), label="Cafe Luna")
    assert payment.encode(btc) == f"bitcoin:{BTC_ADDRESS}?amount=0.001&label=Cafe%20Luna"


def test_ethereum_encoding():
    assert payment.encode(EthereumPayment(address=ETH_ADDRESS, amount=0.5)) == f"ethereum:{ETH_ADDRESS}?value=0.5"


def test_iban_encoding_cleans_code():
    iban = IbanPayment(iban="de89 3704 0044 0532 0130 00", beneficiary="Max Mustermann", amount="250")
    assert payment.validate(iban) is None
    assert payment.encode(iban) == f"iban:{IBAN}?beneficiary=Max%20Mustermann&amount=250&currency=EUR"


def test_amount_is_written_without_exponent():
    assert payment.format_amount(Decimal("1E+2")) == "100"
    assert payment.format_amount(Decimal("0.10")) == "0.1"


def test_url_payment_passes_through():
    url = "https://pay.example.com/checkout?id=42"
    assert payment.validate(UrlPayment(url=url)) is None
    assert payment.encode(UrlPayment(url=url)) == url


# ─────────────────────────────────────────────
# Validation
# ─────────────────────────────────────────────
def test_bitcoin_address_validity():
    assert payment.validate(BitcoinPayment(address=BTC_ADDRESS)) is None
    failure = payment.validate(BitcoinPayment(address="not-an-address"))
    assert failure.kind is ErrorKind.FORMAT_INVALID


def test_iban_checksum_accepts_reference_iban():
    assert iban_checksum_ok(IBAN)


@pytest.mark.parametrize("pos", [i for i, ch in enumerate(IBAN) if ch.isdigit()])
def test_iban_checksum_rejects_any_single_digit_change(pos):
    mutated = IBAN[:pos] + str((int(IBAN[pos]) + 1) % 10) + IBAN[pos + 1:]
    assert not iban_checksum_ok(mutated)
    failure = payment.validate(IbanPayment(iban=mutated, beneficiary="Max Mustermann"))
    assert failure.kind is ErrorKind.CHECKSUM_INVALID


@pytest.mark.parametrize(
    "instruction, kind",
    [
        (PayPalPayment(username=""), ErrorKind.MISSING_REQUIRED_FIELD),
        (PayPalPayment(username="ab"), ErrorKind.FORMAT_INVALID),
        (PayPalPayment(username="jane doe"), ErrorKind.FORMAT_INVALID),
        (PayPalPayment(username="jane", amount="10001"), ErrorKind.OUT_OF_RANGE),
        (PayPalPayment(username="jane", amount="0"), ErrorKind.OUT_OF_RANGE),
        (PayPalPayment(username="jane", amount="abc"), ErrorKind.FORMAT_INVALID),
        (BitcoinPayment(address=BTC_ADDRESS, amount=22), ErrorKind.OUT_OF_RANGE),
        (EthereumPayment(address="0x123"), ErrorKind.FORMAT_INVALID),
        (EthereumPayment(address=ETH_ADDRESS, amount="1000.01"), ErrorKind.OUT_OF_RANGE),
        (UpiPayment(upi_id="foo@bank", name=""), ErrorKind.MISSING_REQUIRED_FIELD),
        (UpiPayment(upi_id="foobank", name="Jane"), ErrorKind.FORMAT_INVALID),
        (UpiPayment(upi_id="foo@bank", name="J4ne"), ErrorKind.FORMAT_INVALID),
        (UpiPayment(upi_id="foo@bank", name="Jane", amount=100001), ErrorKind.OUT_OF_RANGE),
        (IbanPayment(iban="", beneficiary="Max"), ErrorKind.MISSING_REQUIRED_FIELD),
        (IbanPayment(iban="XX12", beneficiary="Max"), ErrorKind.FORMAT_INVALID),
        (IbanPayment(iban=IBAN, beneficiary="Max", amount=1000000), ErrorKind.OUT_OF_RANGE),
        (UrlPayment(url=""), ErrorKind.MISSING_REQUIRED_FIELD),
        (UrlPayment(url="ftp://pay.example.com"), ErrorKind.FORMAT_INVALID),
        (UrlPayment(url="https://pay.example.com/?x=<script>"), ErrorKind.FORMAT_INVALID),
        (UrlPayment(url="https://pay.example.com/" + "a" * 2048), ErrorKind.FORMAT_INVALID),
    ],
)
def test_validation_failures(instruction, kind):
    assert payment.validate(instruction).kind is kind


def test_amount_caps_are_inclusive():
    assert payment.validate(BitcoinPayment(address=BTC_ADDRESS, amount=21)) is None
    assert payment.validate(PayPalPayment(username="jane", amount="10000")) is None


# ─────────────────────────────────────────────
# Decoding
# ─────────────────────────────────────────────
def test_decode_upi():
    decoded = payment.decode_payment("upi://pay?pa=foo@bank&pn=Jane%20Doe&am=100&cu=INR")
    assert decoded == UpiPayment(upi_id="foo@bank", name="Jane Doe", amount=Decimal("100"))


def test_decode_tolerates_missing_optional_parameters():
    assert payment.decode(PaymentKind.BITCOIN, f"bitcoin:{BTC_ADDRESS}") == BitcoinPayment(address=BTC_ADDRESS)
    assert payment.decode("iban", f"iban:{IBAN}") == IbanPayment(iban=IBAN, beneficiary="")


def test_decode_paypal_and_ethereum():
    assert payment.decode_payment("https://paypal.me/jane.doe/25") == PayPalPayment(username="jane.doe", amount=Decimal("25"))
    assert payment.decode_payment(f"ethereum:{ETH_ADDRESS}?value=1.5") == EthereumPayment(
        address=ETH_ADDRESS, amount=Decimal("1.5")
    )


def test_decode_reverses_iban_encode():
    original = IbanPayment(iban=IBAN, beneficiary="Max Mustermann", amount=Decimal("250"), reference="Invoice 7")
    assert payment.decode_payment(payment.encode(original)) == original


def test_decode_url_and_unknown():
    assert payment.decode_payment("https://pay.example.com/x") == UrlPayment(url="https://pay.example.com/x")
    assert payment.decode_payment("litecoin:abc").kind is ErrorKind.UNPARSEABLE
    assert payment.decode("bitcoin", "bitcoin:not-an-address").kind is ErrorKind.UNPARSEABLE
    assert payment.decode("dogecoin", "x").kind is ErrorKind.UNPARSEABLE


def test_mismatched_kind_raises_type_error():
    class FakePayment(PayPalPayment):
        kind = PaymentKind.BITCOIN

    with pytest.raises(TypeError):
        payment.validate(FakePayment(username="jane"))
