"""Tests for support answer callback data"""
import pytest

from support_relay.bot import (
    SupportAnswerCallback,
    build_support_answer_token,
    get_support_answer_keyboard,
    parse_support_answer_token,
    short_ticket_id,
)

TICKET_ID = "a1b2c3d4-5e6f-4a7b-8c9d-0e1f2a3b4c5d"


def test_token_round_trip():
    token = build_support_answer_token(42, "a1b2c3d4")
    parsed = parse_support_answer_token(token)

    assert parsed is not None
    assert parsed.telegram_id == 42
    assert parsed.ticket == "a1b2c3d4"


def test_token_format():
    assert build_support_answer_token(42, "a1b2c3d4") == "support_answer:42:a1b2c3d4"


def test_token_shortens_full_ticket_id():
    assert build_support_answer_token(42, TICKET_ID) == "support_answer:42:a1b2c3d4"
    assert short_ticket_id(TICKET_ID) == "a1b2c3d4"


def test_token_fits_callback_data_limit():
    token = build_support_answer_token(9_999_999_999_999, TICKET_ID)

    assert len(token.encode()) <= 64


@pytest.mark.parametrize("data", [
    "",
    "support_answer",
    "support_answer:42",
    "support_answer:abc:a1b2c3d4",
    "support_answer:42:a1b2c3d4:extra",
    "support_answer:42:",
    "support_answer:42:a",
    "support_answer:42:a1b2c3d",
    "support_answer:42:zzzzzzzz",
    "review:42:a1b2c3d4",
])
def test_parse_rejects_malformed_tokens(data):
    assert parse_support_answer_token(data) is None


def test_token_unpacks_to_callback_data():
    """Admin bot handlers receive the token as SupportAnswerCallback"""
    unpacked = SupportAnswerCallback.unpack(build_support_answer_token(7, TICKET_ID))

    assert unpacked == SupportAnswerCallback(telegram_id=7, ticket="a1b2c3d4")


def test_support_answer_keyboard():
    keyboard = get_support_answer_keyboard(7, TICKET_ID)

    assert len(keyboard.inline_keyboard) == 1
    assert len(keyboard.inline_keyboard[0]) == 1
    assert keyboard.inline_keyboard[0][0].callback_data == "support_answer:7:a1b2c3d4"
