"""Tests for the S3 image adapter, using botocore's Stubber."""
import boto3
import pytest
from botocore.stub import ANY, Stubber

from barbershop.errors import UploadFailure
from barbershop.storage import ImageStorage


@pytest.fixture
def s3():
    client = boto3.client(
        "s3",
        region_name="eu-west-2",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


def test_upload_returns_bucket_url(s3):
    client, stubber = s3
    stubber.add_response(
        "put_object",
        {},
        {"Bucket": "shop-images", "Key": ANY, "Body": b"img", "ContentType": "image/jpeg"},
    )
    storage = ImageStorage(client, "shop-images", "eu-west-2")

    url = storage.upload(b"img", "image/jpeg")

    prefix = "https://shop-images.s3.eu-west-2.amazonaws.com/"
    assert url.startswith(prefix)
    assert len(url[len(prefix):]) == 64


def test_upload_error_becomes_upload_failure(s3):
    client, stubber = s3
    stubber.add_client_error("put_object", service_error_code="AccessDenied", http_status_code=403)
    storage = ImageStorage(client, "shop-images", "eu-west-2")

    with pytest.raises(UploadFailure):
        storage.upload(b"img", "image/jpeg")


def test_delete_by_key(s3):
    client, stubber = s3
    stubber.add_response("delete_object", {}, {"Bucket": "shop-images", "Key": "abc"})
    storage = ImageStorage(client, "shop-images", "eu-west-2")

    storage.delete("abc")


def test_delete_error_becomes_upload_failure(s3):
    client, stubber = s3
    stubber.add_client_error("delete_object", service_error_code="NoSuchBucket", http_status_code=404)
    storage = ImageStorage(client, "shop-images", "eu-west-2")

    with pytest.raises(UploadFailure):
        storage.delete("abc")


def test_key_from_url():
    storage = ImageStorage(None, "shop-images", "eu-west-2")
    assert ImageStorage.key_from_url(storage.url_for("deadbeef")) == "deadbeef"


def test_from_settings_builds_s3_client(settings):
    storage = ImageStorage.from_settings(settings)

    assert storage.bucket_name == "test-bucket"
    assert storage.client.meta.region_name == "us-east-1"
