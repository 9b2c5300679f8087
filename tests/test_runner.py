"""Tests for the Runner entity and EmailAddress value object."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from race_tracker.core.entities import EmailAddress, Runner
from race_tracker.core.errors import EmptyNameError, InvalidEmailError, ValidationError


class TestRunnerCreate:
    """Test suite for Runner.create."""

    @pytest.mark.parametrize(
        "name,email",
        [
            ("John Doe", "john.doe@example.com"),
            ("Jane", "jane+races@mail.example.org"),
            ("Ελένη", "eleni_k%1@running-club.gr"),
        ],
    )
    def test_valid_data(self, name, email):
        """Test a runner keeps the given name and email."""
        runner = Runner.create(name, email)

        assert runner.name == name
        assert str(runner.email_address) == email
        assert isinstance(runner.id, uuid.UUID)
        assert runner.id != uuid.UUID(int=0)

    def test_created_at_is_utc_now(self):
        """Test creation time is stamped in UTC."""
        before = datetime.now(timezone.utc)
        runner = Runner.create("John Doe", "john.doe@example.com")
        after = datetime.now(timezone.utc)

        assert runner.created_at.tzinfo is not None
        assert runner.created_at.utcoffset() == timedelta(0)
        assert before <= runner.created_at <= after

    def test_ids_are_unique(self):
        """Test each runner gets its own identity."""
        first = Runner.create("John Doe", "john.doe@example.com")
        second = Runner.create("John Doe", "john.doe@example.com")

        assert first.id != second.id

    def test_empty_name(self):
        """Test an empty name is rejected."""
        with pytest.raises(EmptyNameError):
            Runner.create("", "john.doe@example.com")

    def test_empty_name_checked_before_email(self):
        """Test name validation runs before email validation."""
        with pytest.raises(EmptyNameError):
            Runner.create("", "invalid-email")

    @pytest.mark.parametrize(
        "email",
        [
            "invalid-email",
            "john.doe.example.com",
            "john.doe@",
            "@example.com",
            "john.doe@example",
            "john.doe@example.c",
            "john doe@example.com",
            "",
        ],
    )
    def test_invalid_email(self, email):
        """Test malformed email addresses are rejected."""
        with pytest.raises(InvalidEmailError):
            Runner.create("John Doe", email)

    def test_validation_errors_share_base(self):
        """Test entity errors can be caught as validation errors."""
        with pytest.raises(ValidationError):
            Runner.create("John Doe", "invalid-email")


class TestRunnerRename:
    """Test suite for Runner.rename."""

    def test_valid_rename(self):
        """Test renaming updates only the name."""
        runner = Runner.create("John Doe", "john.doe@example.com")
        runner_id = runner.id
        created_at = runner.created_at

        runner.rename("Jane Doe")

        assert runner.name == "Jane Doe"
        assert runner.id == runner_id
        assert runner.created_at == created_at
        assert str(runner.email_address) == "john.doe@example.com"

    def test_empty_new_name(self):
        """Test renaming to an empty name is rejected and keeps the old name."""
        runner = Runner.create("John Doe", "john.doe@example.com")

        with pytest.raises(EmptyNameError):
            runner.rename("")

        assert runner.name == "John Doe"


class TestRunnerLoad:
    """Test suite for rehydrating stored runners."""

    def test_valid_data(self):
        """Test a loaded runner keeps the stored identity and timestamp."""
        runner_id = uuid.uuid4()
        created_at = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        runner = Runner.load(runner_id, "John Doe", "john.doe@example.com", created_at)

        assert runner.id == runner_id
        assert runner.name == "John Doe"
        assert str(runner.email_address) == "john.doe@example.com"
        assert runner.created_at == created_at

    def test_empty_name(self):
        with pytest.raises(EmptyNameError):
            Runner.load(uuid.uuid4(), "", "john.doe@example.com", datetime.now(timezone.utc))

    def test_invalid_email(self):
        with pytest.raises(InvalidEmailError):
            Runner.load(uuid.uuid4(), "John Doe", "invalid-email", datetime.now(timezone.utc))


class TestEmailAddress:
    """Test suite for the EmailAddress value object."""

    def test_parse_valid(self):
        email = EmailAddress.parse("john.doe@example.com")

        assert str(email) == "john.doe@example.com"
        assert email == EmailAddress("john.doe@example.com")

    def test_parse_invalid(self):
        with pytest.raises(InvalidEmailError):
            EmailAddress.parse("not-an-address")

    def test_is_immutable(self):
        """Test the address cannot be reassigned."""
        email = EmailAddress.parse("john.doe@example.com")

        with pytest.raises(AttributeError):
            email.value = "other@example.com"


class TestRunnerImmutability:
    """Test suite for the read-only parts of a Runner."""

    def test_identity_is_read_only(self):
        """Test id, email address and creation time cannot be reassigned."""
        runner = Runner.create("John Doe", "john.doe@example.com")
        runner_id = runner.id

        with pytest.raises(AttributeError):
            runner.id = uuid.uuid4()
        with pytest.raises(AttributeError):
            runner.email_address = EmailAddress("not an email")
        with pytest.raises(AttributeError):
            runner.created_at = datetime.now(timezone.utc)

        assert runner.id == runner_id
        assert str(runner.email_address) == "john.doe@example.com"

    def test_name_changes_only_through_rename(self):
        runner = Runner.create("John Doe", "john.doe@example.com")

        with pytest.raises(AttributeError):
            runner.name = ""

        assert runner.name == "John Doe"
