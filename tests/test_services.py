"""Tests for opensocial service registry."""

import pytest
from opensocial.services import (
    POST_ALIASES,
    REGISTRY,
    URL_TEMPLATES,
    ServiceTemplateRegistry,
)


class TestTemplates:
    """Tests for template lookup."""

    def test_get_template_known(self):
        """Test known services return their template."""
        assert REGISTRY.get_template("people") == "people/{userId}/{groupId}/{personId}"
        assert REGISTRY.get_template("messages") == "messages/{userId}/outbox/{msgId}"
        assert (
            REGISTRY.get_template("statusmood")
            == "statusmood/{userId}/{groupId}/{friendId}/{moodId}/{history}"
        )

    def test_get_template_unknown(self):
        """Test unknown services return None."""
        assert REGISTRY.get_template("unknown-service") is None

    def test_get_template_case_sensitive(self):
        """Test lookups are exact matches."""
        assert REGISTRY.get_template("mediaItems") is not None
        assert REGISTRY.get_template("mediaitems") is None
        assert REGISTRY.get_template("People") is None

    def test_groups_leading_slash_quirk(self):
        """Test the groups template keeps its leading slash."""
        assert REGISTRY.get_template("groups") == "/groups/{userId}/{groupId}"
        others = [s for s in REGISTRY.services if s != "groups"]
        assert all(not REGISTRY.get_template(s).startswith("/") for s in others)

    def test_services_order(self):
        """Test all ten services are listed."""
        assert REGISTRY.services == (
            "people",
            "activities",
            "appdata",
            "messages",
            "albums",
            "mediaItems",
            "statusmood",
            "notifications",
            "groups",
            "profilecomments",
        )

    def test_placeholders(self):
        """Test placeholder names are listed in path order."""
        assert REGISTRY.placeholders("messages") == ["userId", "msgId"]
        assert REGISTRY.placeholders("activities") == [
            "userId",
            "groupId",
            "appId",
            "activityId",
        ]
        assert REGISTRY.placeholders("unknown") == []

    def test_path_parts(self):
        """Test path parts include literal segments."""
        assert REGISTRY.path_parts("messages") == ["{userId}", "outbox", "{msgId}"]
        assert REGISTRY.path_parts("groups") == ["{userId}", "{groupId}"]
        assert REGISTRY.path_parts("unknown") == []


class TestAliases:
    """Tests for body aliases."""

    def test_get_aliases(self):
        """Test alias mapping contents."""
        aliases = REGISTRY.get_aliases()
        assert aliases["albums"] == "album"
        assert aliases["people"] == "person"
        assert aliases["statusmood"] == "statusMood"
        assert aliases["profilecomments"] == "profileComment"
        assert len(aliases) == 9

    def test_groups_has_no_alias(self):
        """Test groups has a template but no alias."""
        assert "groups" not in REGISTRY.get_aliases()
        assert REGISTRY.get_alias("groups") is None

    def test_aliases_shared_and_read_only(self):
        """Test the same read-only mapping is returned each time."""
        aliases = REGISTRY.get_aliases()
        assert aliases is REGISTRY.get_aliases()
        with pytest.raises(TypeError):
            aliases["groups"] = "group"

    def test_module_tables_read_only(self):
        """Test module level tables cannot be changed."""
        with pytest.raises(TypeError):
            URL_TEMPLATES["people"] = "x"
        with pytest.raises(TypeError):
            POST_ALIASES["people"] = "x"

    def test_custom_registry_copies_input(self):
        """Test a registry is unaffected by later changes to its source."""
        templates = {"things": "things/{userId}"}
        registry = ServiceTemplateRegistry(templates, {"things": "thing"})
        templates["things"] = "changed"
        assert registry.get_template("things") == "things/{userId}"
        assert registry.get_alias("things") == "thing"
