import os
from dataclasses import dataclass
from typing import Mapping, Optional

from alertsink.s3_copy.event import S3Record

SINK_BUCKET_ENV_KEY = "SINK_BUCKET"
DEFAULT_SINK_BUCKET = "alert-sink-bucket"


@dataclass(frozen=True)
class LocationDescriptor:
    source_bucket: str
    source_key: str
    sink_bucket: str
    sink_key: str


def resolve_sink_bucket(config: Mapping[str, str]) -> str:
    """Use the configured sink bucket, or the default when it is unset or blank."""

    sink_bucket = (config.get(SINK_BUCKET_ENV_KEY) or "").strip()
    if sink_bucket:
        return sink_bucket
    return DEFAULT_SINK_BUCKET


def resolve_location(
    record: S3Record,
    config: Mapping[str, str] = os.environ,
    sink_key: Optional[str] = None,
) -> LocationDescriptor:
    """Compute where the object in ``record`` gets copied to.

    The sink key mirrors the source key unless ``sink_key`` is given.
    """

    return LocationDescriptor(
        source_bucket=record.bucket_name,
        source_key=record.object_key,
        sink_bucket=resolve_sink_bucket(config),
        sink_key=sink_key or record.object_key,
    )
