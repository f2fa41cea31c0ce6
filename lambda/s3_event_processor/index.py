"""
Lambda: S3 Event Processor

Triggered directly by S3 "object created" notifications.
- Extracts bucket and key from each notification record
- Fetches object metadata with HeadObject (read-only, no content download)
- Logs size, content type and last-modified time
- Logs a file-type classification based on the key suffix

Records are processed in order. The first metadata lookup failure stops
the batch and is reported in the returned string.
"""

import os
import sys
import boto3
from typing import Callable, Dict, Any, List
from urllib.parse import unquote_plus

# Add shared utilities to path
sys.path.insert(0, '/opt/python')  # Lambda layer path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../shared'))

from file_classifier import FILE_HANDLERS, classify_key

# Initialize client once per execution environment, reused across warm invocations
s3_client = boto3.client('s3')


def handler(event, context):
    """
    Main handler for S3 Event Processor Lambda

    Args:
        event: S3 event notification with a 'Records' list
        context: Lambda context (unused)

    Returns:
        "Successfully processed {N} records." or "Error: {message}"
    """
    return process_records(parse_records(event))


def parse_records(event: Dict[str, Any]) -> List[Dict[str, str]]:
    """
    Extract (bucket, key) pairs from an S3 event, preserving record order
    """
    records = []
    for record in event.get('Records', []):
        bucket = record['s3']['bucket']['name']
        # S3 events URL-encode special characters in keys
        key = unquote_plus(record['s3']['object']['key'])
        records.append({'bucket': bucket, 'key': key})
    return records


def fetch_object_metadata(bucket: str, key: str) -> Dict[str, Any]:
    """
    Get object metadata from S3 (HeadObject)

    Raises whatever the S3 client raises (e.g. botocore ClientError for
    missing objects or denied access).

    Returns:
        Dict with contentLength, contentType and lastModified
    """
    response = s3_client.head_object(Bucket=bucket, Key=key)

    return {
        'contentLength': response['ContentLength'],
        'contentType': response.get('ContentType', 'unknown'),
        'lastModified': response['LastModified'],
    }


def process_records(
    records: List[Dict[str, str]],
    fetch_metadata: Callable[[str, str], Dict[str, Any]] = None,
    log: Callable[[str], None] = print,
    handlers: List[Dict[str, Any]] = FILE_HANDLERS,
) -> str:
    """
    Log metadata and classification for each record, in order

    Args:
        records: Notification records with 'bucket' and 'key'
        fetch_metadata: Metadata lookup, defaults to fetch_object_metadata
        log: Logging sink, one line per call
        handlers: File handler table used for classification

    Returns:
        Result string for the invoking platform
    """
    if fetch_metadata is None:
        fetch_metadata = fetch_object_metadata

    for record in records:
        bucket = record['bucket']
        key = record['key']

        log(f"Received event for bucket: {bucket}, key: {key}")

        try:
            metadata = fetch_metadata(bucket, key)
        except Exception as e:
            log(f"Error processing S3 event: {str(e)}")
            return f"Error: {str(e)}"

        log(f"File size: {metadata['contentLength']} bytes")
        log(f"Content type: {metadata['contentType']}")
        log(f"Last modified: {metadata['lastModified'].isoformat()}")

        file_handler = classify_key(key, handlers)
        if file_handler:
            log(file_handler['message'])

    return f"Successfully processed {len(records)} records."
