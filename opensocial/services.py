"""Static per-service URL templates and body aliases."""

import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

# Service to path template mapping. Placeholders are not substituted.
# "groups" carries a leading slash unlike every other template; kept as-is.
URL_TEMPLATES = MappingProxyType(
    {
        "people": "people/{userId}/{groupId}/{personId}",
        "activities": "activities/{userId}/{groupId}/{appId}/{activityId}",
        "appdata": "appdata/{userId}/{groupId}/{appId}",
        "messages": "messages/{userId}/outbox/{msgId}",
        "albums": "albums/{userId}/{groupId}/{albumId}",
        "mediaItems": "mediaItems/{userId}/{groupId}/{albumId}/{mediaItemId}",
        "statusmood": "statusmood/{userId}/{groupId}/{friendId}/{moodId}/{history}",
        "notifications": "notifications/{userId}/{groupId}",
        "groups": "/groups/{userId}/{groupId}",
        "profilecomments": "profilecomments/{userId}/{groupId}",
    }
)

# Service to singular element name used in request bodies
POST_ALIASES = MappingProxyType(
    {
        "activities": "activity",
        "albums": "album",
        "appdata": "appdata",
        "mediaItems": "mediaItem",
        "messages": "message",
        "notifications": "notification",
        "people": "person",
        "statusmood": "statusMood",
        "profilecomments": "profileComment",
    }
)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class ServiceTemplateRegistry:
    """Read-only lookup of service templates and aliases."""

    def __init__(
        self,
        templates: Mapping[str, str] = URL_TEMPLATES,
        aliases: Mapping[str, str] = POST_ALIASES,
    ):
        self._templates = MappingProxyType(dict(templates))
        self._aliases = MappingProxyType(dict(aliases))

    @property
    def services(self) -> Tuple[str, ...]:
        return tuple(self._templates)

    def get_template(self, service: str) -> Optional[str]:
        """Return the path template for a service, or None if unknown."""
        return self._templates.get(service)

    def get_aliases(self) -> Mapping[str, str]:
        """Return the shared, read-only service to alias mapping."""
        return self._aliases

    def get_alias(self, service: str) -> Optional[str]:
        return self._aliases.get(service)

    def placeholders(self, service: str) -> List[str]:
        """
        List placeholder names of a service template in path order.

        Returns an empty list for unknown services.
        """
        template = self.get_template(service)
        if template is None:
            return []
        return _PLACEHOLDER.findall(template)

    def path_parts(self, service: str) -> List[str]:
        """
        List template path parts after the service name.

        Literal parts such as "outbox" in the messages template are
        included. Returns an empty list for unknown services.
        """
        template = self.get_template(service)
        if template is None:
            return []
        return template.strip("/").split("/")[1:]


REGISTRY = ServiceTemplateRegistry()
