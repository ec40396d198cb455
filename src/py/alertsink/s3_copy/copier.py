import logging
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from alertsink.s3_copy.exceptions import CopyError
from alertsink.s3_copy.location import LocationDescriptor
from alertsink.utils import format_s3_uri

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"
DEFAULT_CONNECT_TIMEOUT = 5
DEFAULT_READ_TIMEOUT = 60


def build_s3_client(
    endpoint_url: Optional[str] = None,
    region_name: str = DEFAULT_REGION,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: float = DEFAULT_READ_TIMEOUT,
    path_style: bool = False,
):
    """Create an S3 client for the copy.

    Requests are bounded by the given timeouts and never retried, so a slow
    or failing backend surfaces as a single error. Set ``endpoint_url`` and
    ``path_style`` to talk to a local S3 emulator.
    """

    config = Config(
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        retries={"max_attempts": 0},
        s3={"addressing_style": "path" if path_style else "auto"},
    )
    return boto3.client(
        "s3", endpoint_url=endpoint_url, region_name=region_name, config=config
    )


def unquote_etag(etag: str) -> str:
    """Remove the one pair of double quotes S3 puts around an ETag."""

    if len(etag) >= 2 and etag[0] == etag[-1] == '"':
        return etag[1:-1]
    return etag


def copy_object(location: LocationDescriptor, s3_client) -> str:
    """Copy the source object to the sink and return the resulting ETag."""

    source_uri = format_s3_uri(location.source_bucket, location.source_key)
    sink_uri = format_s3_uri(location.sink_bucket, location.sink_key)

    try:
        response = s3_client.copy_object(
            Bucket=location.sink_bucket,
            Key=location.sink_key,
            CopySource={"Bucket": location.source_bucket, "Key": location.source_key},
        )
    except (ClientError, BotoCoreError) as err:
        raise CopyError(
            f"Failed to copy {source_uri} to {sink_uri}: {err}",
            location=location,
            cause=err,
        ) from err

    try:
        etag = response["CopyObjectResult"]["ETag"]
    except (KeyError, TypeError) as err:
        raise CopyError(
            f"S3 returned no ETag when copying {source_uri} to {sink_uri}",
            location=location,
            cause=err,
        ) from err

    logger.debug(f"Copied {source_uri} to {sink_uri}")

    return unquote_etag(etag)
