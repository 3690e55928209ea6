"""Names of the Drive APIs an endpoint can address."""

from enum import Enum

from .exceptions import InvalidApiNameError


class ApiName(Enum):
    """Drive API names as they appear in endpoint URIs."""

    DRIVE_FILES = "drive-files"
    DRIVE_ABOUT = "drive-about"
    DRIVE_APPS = "drive-apps"
    DRIVE_CHANGES = "drive-changes"
    DRIVE_COMMENTS = "drive-comments"
    DRIVE_PERMISSIONS = "drive-permissions"
    DRIVE_PROPERTIES = "drive-properties"
    DRIVE_REPLIES = "drive-replies"
    DRIVE_REVISIONS = "drive-revisions"

    @classmethod
    def from_value(cls, value) -> "ApiName":
        """
        Resolve an API name from its URI value or member name.

        Args:
            value: e.g. 'drive-files', 'DRIVE_FILES' or an ApiName

        Raises:
            InvalidApiNameError: If the name is not a supported API
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value == member.value or value.upper() == member.name:
                    return member
        raise InvalidApiNameError(f"Invalid API name {value}")

    def __str__(self) -> str:
        return self.value
