"""
Unit tests for UserDirectory against the in-memory user repository.
"""
from unittest.mock import AsyncMock

import pytest

from procircle.core.security import verify_password
from procircle.domain.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidInputError,
    NotFoundError,
)
from procircle.domain.services.user_directory import UserDirectory


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_then_authenticate_returns_same_id(self, user_directory):
        user = await user_directory.register("Alice", "a@x.com", "secret123")
        user_id = await user_directory.authenticate_credentials("a@x.com", "secret123")
        assert user_id == user.id

    @pytest.mark.asyncio
    async def test_password_is_hashed(self, user_directory):
        user = await user_directory.register("Alice", "a@x.com", "secret123")
        assert user.hashed_password != "secret123"
        assert verify_password("secret123", user.hashed_password)

    @pytest.mark.asyncio
    async def test_bio_defaults_to_empty(self, user_directory):
        user = await user_directory.register("Alice", "a@x.com", "secret123")
        assert user.bio == ""

    @pytest.mark.asyncio
    async def test_email_normalized(self, user_directory):
        user = await user_directory.register("Alice", "  A@X.com ", "secret123", bio="hi")
        assert user.email == "a@x.com"
        assert user.bio == "hi"

    @pytest.mark.asyncio
    async def test_duplicate_email_leaves_existing_user_untouched(self, user_directory, user_repo):
        first = await user_directory.register("Alice", "a@x.com", "secret123")
        with pytest.raises(DuplicateEmailError):
            await user_directory.register("Mallory", "A@x.com", "other-pass")

        assert len(user_repo.users) == 1
        stored = user_repo.users[first.id]
        assert stored.name == "Alice"
        assert verify_password("secret123", stored.hashed_password)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name,email,password",
        [
            ("", "a@x.com", "secret123"),
            ("  ", "a@x.com", "secret123"),
            ("Alice", "not-an-email", "secret123"),
            ("Alice", "alice@", "secret123"),
            ("Alice", "alice@localhost", "secret123"),
            ("Alice", "a@x.com", "short"),
        ],
    )
    async def test_invalid_input(self, user_directory, user_repo, name, email, password):
        with pytest.raises(InvalidInputError):
            await user_directory.register(name, email, password)
        assert user_repo.users == {}

    @pytest.mark.asyncio
    async def test_password_policy_is_configurable(self, user_repo):
        directory = UserDirectory(user_repo, min_password_length=12)
        with pytest.raises(InvalidInputError, match="12"):
            await directory.register("Alice", "a@x.com", "secret123")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["\u00e9" * 40, "p" * 73])
    async def test_password_longer_than_bcrypt_accepts_is_rejected(
        self, user_directory, user_repo, password
    ):
        with pytest.raises(InvalidInputError, match="72 bytes"):
            await user_directory.register("Eve", "eve@x.com", password)
        assert user_repo.users == {}

    @pytest.mark.asyncio
    async def test_password_of_exactly_72_bytes_is_accepted(self, user_directory):
        password = "\u00e9" * 36
        user = await user_directory.register("Eve", "eve@x.com", password)
        assert await user_directory.authenticate_credentials("eve@x.com", password) == user.id


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_fail_identically(self, user_directory):
        await user_directory.register("Alice", "a@x.com", "secret123")

        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await user_directory.authenticate_credentials("a@x.com", "wrong-pass")
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await user_directory.authenticate_credentials("nobody@x.com", "secret123")

        assert wrong_password.value.user_message == unknown_email.value.user_message

    @pytest.mark.asyncio
    async def test_email_lookup_is_case_insensitive(self, user_directory):
        user = await user_directory.register("Alice", "a@x.com", "secret123")
        assert await user_directory.authenticate_credentials("A@X.COM", "secret123") == user.id


class TestGetById:
    @pytest.mark.asyncio
    async def test_missing_user(self, user_directory):
        with pytest.raises(NotFoundError):
            await user_directory.get_by_id("000000000000000000000000")


class TestUpdateProfile:
    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(self, user_directory):
        user = await user_directory.register("Alice", "a@x.com", "secret123", bio="old bio")
        original_hash = user.hashed_password

        updated = await user_directory.update_profile(user.id, bio="new bio")

        assert updated.bio == "new bio"
        assert updated.name == "Alice"
        assert updated.email == "a@x.com"
        assert updated.hashed_password == original_hash

    @pytest.mark.asyncio
    async def test_set_picture_and_name(self, user_directory):
        user = await user_directory.register("Alice", "a@x.com", "secret123")
        updated = await user_directory.update_profile(
            user.id, name=" Alice B ", profile_picture_url="https://img/a.png"
        )
        assert updated.name == "Alice B"
        assert updated.profile_picture_url == "https://img/a.png"

    @pytest.mark.asyncio
    async def test_no_changes_returns_current_user(self, user_directory):
        user = await user_directory.register("Alice", "a@x.com", "secret123")
        assert (await user_directory.update_profile(user.id)).id == user.id

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, user_directory):
        user = await user_directory.register("Alice", "a@x.com", "secret123")
        with pytest.raises(InvalidInputError):
            await user_directory.update_profile(user.id, name="   ")

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        repo = AsyncMock()
        repo.update_profile.return_value = None
        directory = UserDirectory(repo)
        with pytest.raises(NotFoundError):
            await directory.update_profile("missing", bio="x")
