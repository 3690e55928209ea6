"""Catalogue of the methods offered by each Drive API.

Argument names are the keyword names the Drive v2 discovery client accepts
(camelCase query/path parameters plus ``body``, ``media_body`` and
``media_mime_type``).
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Tuple

from .api_name import ApiName
from .exceptions import InvalidMethodError

logger = logging.getLogger(__name__)

# Standard parameter accepted by every Drive method
COMMON_ARGUMENTS = ("fields",)


@dataclass(frozen=True)
class ApiMethod:
    """A single method on a Drive API resource."""

    name: str
    required: Tuple[str, ...] = ()
    optional: Tuple[str, ...] = ()

    @property
    def arguments(self) -> Tuple[str, ...]:
        """All argument names accepted by this method."""
        return self.required + self.optional + COMMON_ARGUMENTS

    def accepts(self, argument: str) -> bool:
        return argument in self.arguments


_ALL_DRIVES = ("supportsAllDrives",)
_MEDIA = ("media_body", "media_mime_type")
_PAGING = ("maxResults", "pageToken")

# copy takes no useContentAsIndexableText, patch/update take no visibility
_FILE_WRITE_OPTIONS = (
    "convert", "ocr", "ocrLanguage", "pinned", "timedTextLanguage", "timedTextTrackName",
) + _ALL_DRIVES

_CHANGE_LIST_OPTIONS = (
    "driveId", "includeDeleted", "includeItemsFromAllDrives",
    "includeSubscribed", "spaces", "startChangeId",
) + _PAGING + _ALL_DRIVES


def _rw_methods(*keys: str) -> List[ApiMethod]:
    """Build the delete/get/insert/list/patch/update set shared by child resources.

    ``keys`` is the chain of ids leading to an item, e.g. ('fileId', 'commentId').
    """
    parent, item = keys[:-1], keys
    return [
        ApiMethod("delete", item),
        ApiMethod("get", item, ("includeDeleted",) if "commentId" in keys else ()),
        ApiMethod("insert", parent + ("body",)),
        ApiMethod("list", parent, _PAGING + (("includeDeleted",) if "commentId" in keys else ())),
        ApiMethod("patch", item + ("body",)),
        ApiMethod("update", item + ("body",)),
    ]


API_METHODS: Dict[ApiName, List[ApiMethod]] = {
    ApiName.DRIVE_FILES: [
        ApiMethod("copy", ("fileId",), ("body", "visibility") + _FILE_WRITE_OPTIONS),
        ApiMethod("delete", ("fileId",), _ALL_DRIVES),
        ApiMethod("emptyTrash", (), ("driveId",)),
        ApiMethod("generateIds", (), ("maxResults", "space")),
        ApiMethod("get", ("fileId",), (
            "acknowledgeAbuse", "projection", "revisionId", "updateViewedDate",
        ) + _ALL_DRIVES),
        ApiMethod("insert", (), (
            "body", "useContentAsIndexableText", "visibility",
        ) + _MEDIA + _FILE_WRITE_OPTIONS),
        ApiMethod("list", (), (
            "corpora", "driveId", "includeItemsFromAllDrives", "orderBy",
            "projection", "q", "spaces",
        ) + _PAGING + _ALL_DRIVES),
        ApiMethod("patch", ("fileId",), (
            "body", "addParents", "removeParents", "modifiedDateBehavior",
            "newRevision", "setModifiedDate", "updateViewedDate", "useContentAsIndexableText",
        ) + _FILE_WRITE_OPTIONS),
        ApiMethod("touch", ("fileId",), _ALL_DRIVES),
        ApiMethod("trash", ("fileId",), _ALL_DRIVES),
        ApiMethod("untrash", ("fileId",), _ALL_DRIVES),
        ApiMethod("update", ("fileId",), (
            "body", "addParents", "removeParents", "modifiedDateBehavior",
            "newRevision", "setModifiedDate", "updateViewedDate", "useContentAsIndexableText",
        ) + _MEDIA + _FILE_WRITE_OPTIONS),
        ApiMethod("watch", ("fileId", "body"), (
            "acknowledgeAbuse", "projection", "revisionId", "updateViewedDate",
        ) + _ALL_DRIVES),
    ],
    ApiName.DRIVE_ABOUT: [
        ApiMethod("get", (), ("includeSubscribed", "maxChangeIdCount", "startChangeId")),
    ],
    ApiName.DRIVE_APPS: [
        ApiMethod("get", ("appId",)),
        ApiMethod("list", (), ("appFilterExtensions", "appFilterMimeTypes", "languageCode")),
    ],
    ApiName.DRIVE_CHANGES: [
        ApiMethod("get", ("changeId",), ("driveId",) + _ALL_DRIVES),
        ApiMethod("getStartPageToken", (), ("driveId",) + _ALL_DRIVES),
        ApiMethod("list", (), _CHANGE_LIST_OPTIONS),
        ApiMethod("watch", ("body",), _CHANGE_LIST_OPTIONS),
    ],
    ApiName.DRIVE_COMMENTS: [
        ApiMethod("delete", ("fileId", "commentId")),
        ApiMethod("get", ("fileId", "commentId"), ("includeDeleted",)),
        ApiMethod("insert", ("fileId", "body")),
        ApiMethod("list", ("fileId",), ("includeDeleted", "updatedMin") + _PAGING),
        ApiMethod("patch", ("fileId", "commentId", "body")),
        ApiMethod("update", ("fileId", "commentId", "body")),
    ],
    ApiName.DRIVE_PERMISSIONS: [
        ApiMethod("delete", ("fileId", "permissionId"), _ALL_DRIVES),
        ApiMethod("get", ("fileId", "permissionId"), _ALL_DRIVES),
        ApiMethod("getIdForEmail", ("email",)),
        ApiMethod("insert", ("fileId", "body"), ("emailMessage", "sendNotificationEmails") + _ALL_DRIVES),
        ApiMethod("list", ("fileId",), _PAGING + _ALL_DRIVES),
        ApiMethod("patch", ("fileId", "permissionId", "body"), (
            "removeExpiration", "transferOwnership",
        ) + _ALL_DRIVES),
        ApiMethod("update", ("fileId", "permissionId", "body"), (
            "removeExpiration", "transferOwnership",
        ) + _ALL_DRIVES),
    ],
    ApiName.DRIVE_PROPERTIES: [
        ApiMethod("delete", ("fileId", "propertyKey"), ("visibility",)),
        ApiMethod("get", ("fileId", "propertyKey"), ("visibility",)),
        ApiMethod("insert", ("fileId", "body")),
        ApiMethod("list", ("fileId",)),
        ApiMethod("patch", ("fileId", "propertyKey", "body"), ("visibility",)),
        ApiMethod("update", ("fileId", "propertyKey", "body"), ("visibility",)),
    ],
    ApiName.DRIVE_REPLIES: _rw_methods("fileId", "commentId", "replyId"),
    ApiName.DRIVE_REVISIONS: [
        method for method in _rw_methods("fileId", "revisionId")
        if method.name != "insert"
    ],
}


class ApiMethodHelper:
    """Looks up methods and validates arguments for one Drive API."""

    def __init__(self, api_name: ApiName, methods: Iterable[ApiMethod]):
        self.api_name = api_name
        self._methods = {method.name: method for method in methods}

    def method_names(self) -> List[str]:
        return sorted(self._methods)

    def get_method(self, name: str) -> ApiMethod:
        """
        Get a method by name.

        Raises:
            InvalidMethodError: If the API has no such method
        """
        method = self._methods.get(name)
        if method is None:
            raise InvalidMethodError(
                f"Invalid method name '{name}' for API {self.api_name.value}. "
                f"Valid methods: {', '.join(self.method_names())}"
            )
        return method

    def argument_names(self, method_name: str) -> Tuple[str, ...]:
        return self.get_method(method_name).arguments

    def missing_arguments(self, method_name: str, args: Mapping) -> List[str]:
        """List required arguments with no value in ``args``."""
        method = self.get_method(method_name)
        return [name for name in method.required if args.get(name) is None]

    def filter_arguments(self, method_name: str, args: Mapping) -> dict:
        """Keep only the arguments the method accepts."""
        method = self.get_method(method_name)
        dropped = [name for name in args if not method.accepts(name)]
        if dropped:
            logger.debug(f"Ignoring arguments not accepted by {self.api_name.value}/{method_name}: {dropped}")
        return {name: value for name, value in args.items() if method.accepts(name)}


_HELPERS = {name: ApiMethodHelper(name, methods) for name, methods in API_METHODS.items()}


def get_helper(api_name) -> ApiMethodHelper:
    """Get the method helper for an API name (or its URI value)."""
    return _HELPERS[ApiName.from_value(api_name)]


def describe_api(api_name) -> Dict[str, Dict[str, List[str]]]:
    """Describe the methods of an API as plain data, for CLI and MCP listings."""
    helper = get_helper(api_name)
    description = {}
    for name in helper.method_names():
        method = helper.get_method(name)
        description[name] = {
            "required": list(method.required),
            "optional": list(method.optional + COMMON_ARGUMENTS),
        }
    return description
