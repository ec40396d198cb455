import logging
from dataclasses import dataclass
from typing import Optional

from alertsink.s3_copy.exceptions import EmptyNotificationError
from alertsink.utils import unquote_s3_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class S3Record:
    """One object-created event: the bucket and key of the new object."""

    bucket_name: str
    object_key: str


def parse_record(record: dict) -> S3Record:
    try:
        bucket = record["s3"]["bucket"]["name"]
        key = record["s3"]["object"]["key"]
    except (KeyError, TypeError) as err:
        raise EmptyNotificationError(
            f"S3 event record is missing bucket or object information: {err}"
        ) from err

    if not bucket or not key:
        raise EmptyNotificationError("S3 event record has an empty bucket or key")

    return S3Record(bucket_name=bucket, object_key=unquote_s3_key(key))


def parse_first_record(event: Optional[dict]) -> S3Record:
    """Extract the first S3 record from a notification event.

    Only the first record is processed. Any trailing records are dropped
    with a warning.
    """

    records = (event or {}).get("Records") or []
    if len(records) == 0:
        raise EmptyNotificationError("No records can be obtained from the S3 event")

    if len(records) > 1:
        logger.warning(
            f"S3 event has {len(records)} records, ignoring all but the first"
        )

    return parse_record(records[0])
