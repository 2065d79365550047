"""
Unit tests for TokenService

Runs against an in-memory access token store with a frozen clock.
"""
from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from civicgate.app.services.token_service import (
    INVALID_TOKEN_MESSAGE,
    TokenService,
    hash_token,
    is_valid_anonymous_id,
)
from civicgate.domain.entities import AccessToken, TokenKind, TokenSubjectType


class InMemoryAccessTokens:
    def __init__(self):
        self.rows = {}

    async def create(self, token):
        self.rows[token.id] = token
        return token

    async def get_by_token_hash(self, token_hash):
        for row in self.rows.values():
            if row.token_hash == token_hash:
                return row
        return None

    @staticmethod
    def _outstanding(row, now):
        return row.consumed_at is None and (row.expires_at is None or row.expires_at > now)

    async def mark_consumed(self, token_id, now):
        row = self.rows.get(token_id)
        if row is None or not self._outstanding(row, now):
            return False
        row.consumed_at = now
        return True

    async def consume_outstanding_for_subject(self, kind, subject_type, subject_id, now):
        count = 0
        for row in self.rows.values():
            if (
                row.kind == kind
                and row.subject_type == subject_type
                and row.subject_id == subject_id
                and self._outstanding(row, now)
            ):
                row.consumed_at = now
                count += 1
        return count


@pytest.fixture
def store():
    return InMemoryAccessTokens()


@pytest.fixture
def tokens(mock_uow, store, clock):
    mock_uow.access_tokens = store
    return TokenService(mock_uow, clock=clock)


@pytest.mark.asyncio
async def test_issue_stores_only_the_hash(tokens, store, clock):
    subject_id = uuid4()

    token = await tokens.issue(
        TokenKind.password_reset, TokenSubjectType.admin_user, subject_id
    )

    assert len(token) >= 43
    (row,) = store.rows.values()
    assert row.token_hash == hash_token(token)
    assert token not in row.token_hash
    assert row.subject_id == subject_id
    assert row.expires_at == clock.now + timedelta(hours=1)


@pytest.mark.asyncio
async def test_password_reset_valid_for_one_hour(tokens, clock):
    token = await tokens.issue(
        TokenKind.password_reset, TokenSubjectType.admin_user, uuid4()
    )

    clock.advance(timedelta(minutes=59))
    assert (await tokens.validate(TokenKind.password_reset, token)).is_ok()

    clock.advance(timedelta(minutes=1))
    assert (await tokens.validate(TokenKind.password_reset, token)).is_err()

    clock.advance(timedelta(seconds=1))
    result = await tokens.validate(TokenKind.password_reset, token)
    assert result.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_consume_twice(tokens):
    subject_id = uuid4()
    token = await tokens.issue(
        TokenKind.invitation, TokenSubjectType.elected_official, subject_id
    )

    first = await tokens.consume(TokenKind.invitation, token)
    second = await tokens.consume(TokenKind.invitation, token)

    assert first.is_ok()
    assert first.value.subject_id == subject_id
    assert first.value.subject_type == TokenSubjectType.elected_official
    assert second.is_err()
    assert second.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_validate_does_not_consume(tokens):
    token = await tokens.issue(
        TokenKind.invitation, TokenSubjectType.elected_official, uuid4()
    )

    assert (await tokens.validate(TokenKind.invitation, token)).is_ok()
    assert (await tokens.validate(TokenKind.invitation, token)).is_ok()
    assert (await tokens.consume(TokenKind.invitation, token)).is_ok()


@pytest.mark.asyncio
async def test_kind_mismatch_is_invalid(tokens):
    token = await tokens.issue(
        TokenKind.invitation, TokenSubjectType.elected_official, uuid4()
    )

    result = await tokens.validate(TokenKind.password_reset, token)

    assert result.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_all_failures_share_one_message(tokens, clock):
    expired = await tokens.issue(
        TokenKind.password_reset, TokenSubjectType.admin_user, uuid4()
    )
    clock.advance(timedelta(hours=2))

    unknown = await tokens.validate(TokenKind.password_reset, "not-a-token")
    too_late = await tokens.validate(TokenKind.password_reset, expired)
    empty = await tokens.validate(TokenKind.password_reset, "")

    assert unknown.error == too_late.error == empty.error
    assert unknown.error.message == INVALID_TOKEN_MESSAGE


@pytest.mark.asyncio
async def test_reissue_supersedes_outstanding_token(tokens):
    subject_id = uuid4()
    old = await tokens.issue(
        TokenKind.invitation, TokenSubjectType.elected_official, subject_id
    )
    new = await tokens.issue(
        TokenKind.invitation, TokenSubjectType.elected_official, subject_id
    )

    assert (await tokens.validate(TokenKind.invitation, old)).is_err()
    assert (await tokens.validate(TokenKind.invitation, new)).is_ok()


@pytest.mark.asyncio
async def test_public_tracking_token_never_expires(tokens, store, clock):
    token = await tokens.issue(
        TokenKind.public_tracking, TokenSubjectType.idea, uuid4()
    )
    clock.advance(timedelta(days=3650))

    for _ in range(3):
        assert (await tokens.validate(TokenKind.public_tracking, token)).is_ok()

    (row,) = store.rows.values()
    assert row.expires_at is None
    assert row.consumed_at is None


@pytest.mark.asyncio
async def test_reusable_kind_cannot_be_consumed(tokens):
    token = await tokens.issue(
        TokenKind.public_tracking, TokenSubjectType.incident, uuid4()
    )

    with pytest.raises(ValueError):
        await tokens.consume(TokenKind.public_tracking, token)


@pytest.mark.asyncio
async def test_ttl_argument_overrides_policy(tokens, store, clock):
    await tokens.issue(
        TokenKind.invitation,
        TokenSubjectType.elected_official,
        uuid4(),
        ttl=timedelta(minutes=5),
    )

    (row,) = store.rows.values()
    assert row.expires_at == clock.now + timedelta(minutes=5)


@pytest.mark.asyncio
async def test_lost_consumption_race_is_invalid(mock_uow, clock):
    record = AccessToken(
        kind=TokenKind.password_reset,
        token_hash=hash_token("secret"),
        subject_type=TokenSubjectType.admin_user,
        subject_id=uuid4(),
        expires_at=clock.now + timedelta(minutes=30),
    )
    mock_uow.access_tokens.get_by_token_hash = AsyncMock(return_value=record)
    mock_uow.access_tokens.mark_consumed = AsyncMock(return_value=False)
    tokens = TokenService(mock_uow, clock=clock)

    result = await tokens.consume(TokenKind.password_reset, "secret")

    assert result.error.code == "INVALID_TOKEN"
    mock_uow.access_tokens.mark_consumed.assert_awaited_once_with(record.id, clock.now)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("anon_" + "0123456789abcdef" * 2, True),
        ("anon_" + "0123456789ABCDEF" * 2, False),
        ("anon_" + "0" * 31, False),
        ("anon_" + "0" * 33, False),
        ("user_" + "0" * 32, False),
        ("", False),
        (None, False),
    ],
)
def test_anonymous_id_format(value, expected):
    assert is_valid_anonymous_id(value) is expected
