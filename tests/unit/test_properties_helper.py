"""Unit tests for property-name translation."""

import pytest

from drivelink.sdk.configuration import DriveConfiguration
from drivelink.sdk.exchange import Exchange
from drivelink.sdk.properties_helper import PROPERTY_PREFIX, get_helper


@pytest.fixture
def helper():
    return get_helper()


@pytest.mark.parametrize("name, expected", [
    ("fileId", "fileId"),
    ("file_id", "fileId"),
    ("include_items_from_all_drives", "includeItemsFromAllDrives"),
    ("content", "body"),
    ("mediaContent", "media_body"),
    ("media_content", "media_body"),
    ("mediaMimeType", "media_mime_type"),
    ("media_body", "media_body"),
    ("media_mime_type", "media_mime_type"),
    ("q", "q"),
])
def test_translate_name(helper, name, expected):
    assert helper.translate_name(name) == expected


def test_configuration_properties_skip_empty(helper):
    configuration = DriveConfiguration(arguments={"file_id": "f1", "fields": None, "content": {"title": "t"}})
    assert helper.get_configuration_properties(configuration) == {
        "fileId": "f1",
        "body": {"title": "t"},
    }


def test_exchange_headers_override_properties(helper):
    exchange = Exchange.of(headers={
        PROPERTY_PREFIX + "fileId": "from-header",
        PROPERTY_PREFIX + "content": {"title": "t"},
        "Unrelated": "ignored",
    })
    merged = helper.get_exchange_properties(exchange, {"fileId": "from-endpoint", "fields": "id"})
    assert merged == {"fileId": "from-header", "fields": "id", "body": {"title": "t"}}


def test_exchange_properties_do_not_mutate_input(helper):
    properties = {"fileId": "f1"}
    helper.get_exchange_properties(Exchange.of(headers={PROPERTY_PREFIX + "fileId": "f2"}), properties)
    assert properties == {"fileId": "f1"}
