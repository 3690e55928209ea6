"""Unit tests for the producer: argument collection and method invocation."""

import pytest
from unittest.mock import MagicMock
from googleapiclient.errors import HttpError

from drivelink.sdk.exceptions import ApiInvocationError, MissingArgumentError
from drivelink.sdk.exchange import Exchange


def _http_error(status: int, message: str) -> HttpError:
    resp = MagicMock(status=status, reason="Error")
    content = ('{"error": {"code": %d, "message": "%s"}}' % (status, message)).encode("utf-8")
    return HttpError(resp, content)


def test_endpoint_arguments_passed_to_method(component, fake_client):
    fake_client.files().get().execute.return_value = {"id": "f1", "title": "notes"}
    producer = component.create_endpoint("google-drive://drive-files/get?fileId=f1&fields=id,title").create_producer()

    result = producer.request()

    assert result == {"id": "f1", "title": "notes"}
    fake_client.files().get.assert_called_with(fileId="f1", fields="id,title")


def test_header_arguments_override_endpoint(component, fake_client):
    producer = component.create_endpoint("google-drive://drive-files/get?fileId=f1").create_producer()

    producer.request(headers={"DriveLink.fileId": "f2"})

    fake_client.files().get.assert_called_with(fileId="f2")


def test_unprefixed_headers_ignored(component, fake_client):
    producer = component.create_endpoint("google-drive://drive-files/get?fileId=f1").create_producer()

    producer.request(headers={"fileId": "f2", "Other": "x"})

    fake_client.files().get.assert_called_with(fileId="f1")


def test_in_body_becomes_argument(component, fake_client):
    fake_client.files().insert().execute.return_value = {"id": "new"}
    producer = component.create_endpoint("google-drive://drive-files/insert?inBody=content").create_producer()

    result = producer.request(body={"title": "report.txt"})

    assert result == {"id": "new"}
    fake_client.files().insert.assert_called_with(body={"title": "report.txt"})


def test_media_content_alias(component, fake_client):
    producer = component.create_endpoint("google-drive://drive-files/insert").create_producer()

    producer.request(headers={
        "DriveLink.content": {"title": "a.txt"},
        "DriveLink.mediaContent": "/tmp/a.txt",
    })

    fake_client.files().insert.assert_called_with(body={"title": "a.txt"}, media_body="/tmp/a.txt")


def test_dispatch_to_comments_resource(component, fake_client):
    fake_client.comments().list().execute.return_value = {"items": []}
    producer = component.create_endpoint("google-drive://drive-comments/list").create_producer()

    producer.request(headers={"DriveLink.fileId": "f1"})

    fake_client.comments().list.assert_called_with(fileId="f1")
    fake_client.files.assert_not_called()


def test_missing_required_argument(component, fake_client):
    producer = component.create_endpoint("google-drive://drive-replies/get?fileId=f1").create_producer()

    with pytest.raises(MissingArgumentError) as exc:
        producer.request()
    assert "commentId" in str(exc.value)
    assert "replyId" in str(exc.value)
    fake_client.replies().get.assert_not_called()


def test_result_headers_set(component, fake_client):
    fake_client.about().get().execute.return_value = {"name": "Test User"}
    producer = component.create_endpoint("google-drive://drive-about/get").create_producer()
    exchange = Exchange.of()

    producer.process(exchange)

    assert exchange.in_message.body == {"name": "Test User"}
    assert exchange.in_message.get_header("DriveLink.apiName") == "drive-about"
    assert exchange.in_message.get_header("DriveLink.methodName") == "get"


def test_result_headers_from_previous_step_not_passed_as_arguments(component, fake_client):
    producer = component.create_endpoint("google-drive://drive-files/get?fileId=f1").create_producer()

    producer.request(headers={"DriveLink.apiName": "drive-about", "DriveLink.methodName": "get"})

    fake_client.files().get.assert_called_with(fileId="f1")


def test_http_error_wrapped(component, fake_client):
    fake_client.files().get().execute.side_effect = _http_error(404, "File not found: f1")
    producer = component.create_endpoint("google-drive://drive-files/get?fileId=f1").create_producer()

    with pytest.raises(ApiInvocationError) as exc:
        producer.request()
    assert exc.value.status == 404
    assert isinstance(exc.value.__cause__, HttpError)
    assert "drive-files" in str(exc.value)
