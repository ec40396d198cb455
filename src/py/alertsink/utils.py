import urllib.parse


def unquote_s3_key(key: str) -> str:
    """Decode an object key as delivered in an S3 event notification."""

    return urllib.parse.unquote_plus(key, encoding="utf-8")


def format_s3_uri(bucket: str, key: str) -> str:
    return f"s3://{bucket}/{key}"
