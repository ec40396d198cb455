import logging
import os

from alertsink.s3_copy.copier import (DEFAULT_CONNECT_TIMEOUT,
                                      DEFAULT_READ_TIMEOUT, DEFAULT_REGION,
                                      build_s3_client, copy_object)
from alertsink.s3_copy.event import parse_first_record
from alertsink.s3_copy.exceptions import AlertSinkError
from alertsink.s3_copy.location import resolve_location
from alertsink.s3_copy.report import report
from alertsink.utils import format_s3_uri

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())

s3 = build_s3_client(
    endpoint_url=os.environ.get("S3_ENDPOINT_URL") or None,
    region_name=os.environ.get("AWS_REGION", DEFAULT_REGION),
    connect_timeout=float(
        os.environ.get("COPY_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)
    ),
    read_timeout=float(os.environ.get("COPY_READ_TIMEOUT", DEFAULT_READ_TIMEOUT)),
    path_style=os.environ.get("S3_FORCE_PATH_STYLE", "false").lower() == "true",
)


def handle(event, context):
    try:
        record = parse_first_record(event)
        location = resolve_location(record, os.environ)
        logger.info(
            "copy "
            f"{format_s3_uri(location.source_bucket, location.source_key)} -> "
            f"{format_s3_uri(location.sink_bucket, location.sink_key)}"
        )

        etag = copy_object(location, s3)
    except AlertSinkError as err:
        logger.error(f"{type(err).__name__}: {err}")
        raise

    logger.info(f"copy succeeded, etag: {etag}")
    return report(etag)
