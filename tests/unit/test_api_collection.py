"""Unit tests for API names and the method catalogue."""

import json
import os

import googleapiclient.discovery_cache
import pytest

from drivelink.sdk.api_collection import API_METHODS, describe_api, get_helper
from drivelink.sdk.api_name import ApiName
from drivelink.sdk.exceptions import InvalidApiNameError, InvalidMethodError


class TestApiName:
    """Tests for resolving API names."""

    @pytest.mark.parametrize("value, expected", [
        ("drive-files", ApiName.DRIVE_FILES),
        ("drive-about", ApiName.DRIVE_ABOUT),
        ("drive-revisions", ApiName.DRIVE_REVISIONS),
        ("DRIVE_PERMISSIONS", ApiName.DRIVE_PERMISSIONS),
        ("drive_replies", ApiName.DRIVE_REPLIES),
    ])
    def test_from_value(self, value, expected):
        assert ApiName.from_value(value) is expected

    def test_from_value_accepts_member(self):
        assert ApiName.from_value(ApiName.DRIVE_APPS) is ApiName.DRIVE_APPS

    @pytest.mark.parametrize("value", ["drive-children", "files", "", None])
    def test_unknown_name_rejected(self, value):
        with pytest.raises(InvalidApiNameError) as exc:
            ApiName.from_value(value)
        assert "invalid api name" in str(exc.value).lower()

    def test_invalid_api_name_is_value_error(self):
        with pytest.raises(ValueError):
            ApiName.from_value("drive-parents")

    def test_nine_apis(self):
        assert len(ApiName) == 9
        assert set(API_METHODS) == set(ApiName)


class TestApiMethodHelper:
    """Tests for method lookup and argument checks."""

    def test_files_methods(self):
        helper = get_helper("drive-files")
        assert helper.method_names() == [
            "copy", "delete", "emptyTrash", "generateIds", "get", "insert", "list",
            "patch", "touch", "trash", "untrash", "update", "watch",
        ]

    def test_revisions_have_no_insert(self):
        assert "insert" not in get_helper(ApiName.DRIVE_REVISIONS).method_names()

    def test_permissions_get_id_for_email(self):
        method = get_helper("drive-permissions").get_method("getIdForEmail")
        assert method.required == ("email",)

    def test_replies_chain_of_ids(self):
        helper = get_helper("drive-replies")
        assert helper.get_method("get").required == ("fileId", "commentId", "replyId")
        assert helper.get_method("list").required == ("fileId", "commentId")
        assert helper.get_method("insert").required == ("fileId", "commentId", "body")

    def test_unknown_method_lists_valid_names(self):
        with pytest.raises(InvalidMethodError) as exc:
            get_helper("drive-about").get_method("list")
        assert "get" in str(exc.value)
        assert "drive-about" in str(exc.value)

    def test_every_method_accepts_fields(self):
        for api_name in ApiName:
            helper = get_helper(api_name)
            for name in helper.method_names():
                assert "fields" in helper.argument_names(name)

    def test_missing_arguments(self):
        helper = get_helper("drive-comments")
        assert helper.missing_arguments("get", {"fileId": "f1"}) == ["commentId"]
        assert helper.missing_arguments("get", {"fileId": "f1", "commentId": "c1"}) == []

    def test_none_counts_as_missing(self):
        helper = get_helper("drive-files")
        assert helper.missing_arguments("get", {"fileId": None}) == ["fileId"]

    def test_filter_arguments(self):
        helper = get_helper("drive-files")
        filtered = helper.filter_arguments("get", {
            "fileId": "f1",
            "fields": "id,title",
            "apiName": "drive-files",
        })
        assert filtered == {"fileId": "f1", "fields": "id,title"}


def test_describe_api():
    description = describe_api("drive-properties")
    assert set(description) == {"delete", "get", "insert", "list", "patch", "update"}
    assert description["get"]["required"] == ["fileId", "propertyKey"]
    assert "visibility" in description["get"]["optional"]
    assert "fields" in description["list"]["optional"]


@pytest.fixture(scope="module")
def drive_v2_discovery():
    """The Drive v2 discovery document bundled with google-api-python-client."""
    path = os.path.join(
        os.path.dirname(googleapiclient.discovery_cache.__file__), "documents", "drive.v2.json"
    )
    if not os.path.exists(path):
        pytest.skip("google-api-python-client ships no bundled drive.v2.json")
    with open(path) as f:
        return json.load(f)


def _client_keywords(method_doc, discovery):
    """Keyword arguments the discovery client accepts for a method."""
    keywords = set(method_doc.get("parameters", {})) | set(discovery.get("parameters", {}))
    if "request" in method_doc:
        keywords.add("body")
    if method_doc.get("supportsMediaUpload"):
        keywords.update({"media_body", "media_mime_type"})
    return keywords


class TestCatalogueMatchesDiscovery:
    """Every catalogued argument must be accepted by the real Drive v2 client."""

    @pytest.mark.parametrize("api_name", list(ApiName), ids=lambda a: a.value)
    def test_arguments_accepted_by_client(self, api_name, drive_v2_discovery):
        resource = drive_v2_discovery["resources"][api_name.value[len("drive-"):]]
        for method in API_METHODS[api_name]:
            method_doc = resource["methods"][method.name]
            rejected = set(method.arguments) - _client_keywords(method_doc, drive_v2_discovery)
            assert not rejected, f"{api_name.value}.{method.name}: {sorted(rejected)}"

    def test_file_write_options_per_method(self):
        helper = get_helper("drive-files")
        assert "useContentAsIndexableText" not in helper.argument_names("copy")
        assert "visibility" in helper.argument_names("copy")
        assert "visibility" not in helper.argument_names("patch")
        assert "visibility" not in helper.argument_names("update")
        assert "useContentAsIndexableText" in helper.argument_names("update")
        assert {"visibility", "useContentAsIndexableText"} <= set(helper.argument_names("insert"))
