import pytest

from src.fdl_site.config import DEFAULT_CONTACT_MESSAGE
from src.fdl_site.data.coverage_repository import build_coverage_table
from src.fdl_site.services import coverage as coverage_package
from src.fdl_site.services.coverage import Outcome, OutcomeKind, classify, render_outcome


@pytest.fixture
def table():
    return build_coverage_table(
        [
            {"Zone": "A", "Zip": "08817", "City": "Edison", "DeliveryDays": "DNT"},
            {"Zone": "A", "Zip": "08901", "City": "New Brunswick", "DeliveryDays": "MON-FRI"},
            {"Zone": "B", "Zip": "08837", "City": "", "DeliveryDays": "TUE"},
            {"Zone": "C", "Zip": "07001", "City": "", "DeliveryDays": "dnt"},
        ]
    )


@pytest.mark.parametrize("raw", ["123", "abcde", "", "   ", "123456", "08 17", "０８８１７"])
def test_classify_rejects_malformed_input(table, raw):
    assert classify(raw, table) == Outcome(kind=OutcomeKind.INVALID_INPUT)


def test_classify_affiliate_zip(table):
    outcome = classify("08817", table)

    assert outcome == Outcome(kind=OutcomeKind.AFFILIATE_COVERED, zip="08817", city="Edison")


def test_classify_covered_zip(table):
    outcome = classify(" 08901 ", table)

    assert outcome.kind is OutcomeKind.COVERED
    assert outcome.zip == "08901"
    assert outcome.city == "New Brunswick"
    assert outcome.delivery_days == "MON-FRI"


def test_classify_covered_without_city(table):
    outcome = classify("08837", table)

    assert outcome.kind is OutcomeKind.COVERED
    assert outcome.city is None


def test_classify_not_covered_carries_contact_message(table):
    outcome = classify("99999", table)

    assert outcome.kind is OutcomeKind.NOT_COVERED
    assert outcome.contact_message == DEFAULT_CONTACT_MESSAGE
    assert classify("99999", table, contact_message="Call us").contact_message == "Call us"


def test_classify_is_deterministic(table):
    assert classify("08817", table) == classify("08817", table)
    assert len(table) == 4


def test_render_invalid_and_not_covered(table):
    invalid = render_outcome(classify("12", table))
    assert (invalid.tone, invalid.title, invalid.body) == ("bad", "Invalid ZIP", "Enter a valid 5-digit ZIP.")

    missing = render_outcome(classify("99999", table))
    assert missing.tone == "bad"
    assert missing.title == "We Do Not Deliver"
    assert missing.body == DEFAULT_CONTACT_MESSAGE
    assert missing.meta is None


def test_render_affiliate_banner(table):
    banner = render_outcome(classify("08817", table))

    assert banner.tone == "warn"
    assert banner.title == "DNT Delivers"
    assert banner.body == (
        "ZIP 08817 is our Affiliate DNT Zone (Edison), for more information, "
        "click their link at the bottom footer."
    )

    no_city = render_outcome(classify("07001", table))
    assert no_city.body == "ZIP 07001 is our Affiliate DNT Zone."


def test_render_covered_banner(table):
    banner = render_outcome(classify("08901", table))

    assert banner.tone == "ok"
    assert banner.title == "We Deliver Here"
    assert banner.body == "ZIP 08901 (New Brunswick)."
    assert banner.meta == "Days: MON-FRI"

    assert render_outcome(classify("08837", table)).body == "ZIP 08837."


def test_input_validation_lives_in_classify(table):
    assert not hasattr(coverage_package, "is_valid_zip")
    assert classify(" 08817 ", table).kind is OutcomeKind.AFFILIATE_COVERED
    assert classify("0881a", table).kind is OutcomeKind.INVALID_INPUT
