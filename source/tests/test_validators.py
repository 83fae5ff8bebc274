# ABOUTME: Tests for CLI input validation and application ID derivation
# ABOUTME: Covers the ID pattern, slug generation and required options

import pytest

from humctl_wrapper.cli.utils.validators import require_option, validate_app_id
from humctl_wrapper.errors import MissingOptionError
from humctl_wrapper.models import Application, slugify


class TestValidateAppId:
    """Test cases for application ID validation"""

    def test_valid_ids(self):
        for app_id in ["test-app", "app2", "team-a-service-1", "ab"]:
            assert validate_app_id(app_id), f"Failed for {app_id}"

    def test_invalid_ids(self):
        invalid_ids = ["", "a", "Test-App", "-app", "app-", "my--app", "my_app", "my app"]

        for app_id in invalid_ids:
            assert not validate_app_id(app_id), f"Should reject {app_id!r}"


class TestSlugify:
    """Test cases for deriving IDs from names"""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Test App", "test-app"),
            ("test-app", "test-app"),
            ("  Spaced   Out  ", "spaced-out"),
            ("Billing_Service v2", "billing-service-v2"),
            ("!!!", ""),
        ],
    )
    def test_slugify(self, name, expected):
        assert slugify(name) == expected

    def test_slug_is_a_valid_id(self):
        assert validate_app_id(slugify("My Shiny App"))


class TestRequireOption:
    """Test cases for required options"""

    def test_returns_value(self):
        assert require_option("name", "Test App") == "Test App"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_value(self, value):
        with pytest.raises(MissingOptionError) as exc_info:
            require_option("name", value)

        assert str(exc_info.value) == 'required option "--name" not set'
        assert exc_info.value.option == "name"


class TestApplicationModel:
    """Test cases for decoding application payloads"""

    def test_extra_fields_are_ignored(self):
        app = Application.from_dict({"id": "test-app", "name": "Test App", "created_by": "someone"})
        assert app == Application(id="test-app", name="Test App")

    @pytest.mark.parametrize("payload", [[], "test-app", {"id": "test-app"}, {"id": 1, "name": "x"}])
    def test_invalid_payloads(self, payload):
        with pytest.raises(ValueError):
            Application.from_dict(payload)
