"""
Shared file-type classification for uploaded S3 objects

Each handler pairs a predicate over the object key with the message logged
when the key matches. New file types are added by extending FILE_HANDLERS
(or passing a custom table); the dispatch loop stays unchanged.
"""

from typing import Callable, Dict, Any, List, Optional


def suffix_matcher(*suffixes: str) -> Callable[[str], bool]:
    """
    Build a predicate that matches keys ending with any of the given suffixes.

    Matching is case-sensitive: suffix_matcher('.txt') does not match 'README.TXT'.
    """
    def matches(key: str) -> bool:
        return key.endswith(suffixes)

    return matches


# Checked in order, first match wins
FILE_HANDLERS: List[Dict[str, Any]] = [
    {
        'category': 'text',
        'matches': suffix_matcher('.txt'),
        'message': 'Processing text file...',
    },
    {
        'category': 'image',
        'matches': suffix_matcher('.jpg', '.png'),
        'message': 'Processing image file...',
    },
]


def classify_key(key: str, handlers: List[Dict[str, Any]] = FILE_HANDLERS) -> Optional[Dict[str, Any]]:
    """
    Find the file handler for an object key

    Args:
        key: Decoded S3 object key
        handlers: Ordered handler table (defaults to FILE_HANDLERS)

    Returns:
        The first matching handler entry, or None if no category applies
    """
    for file_handler in handlers:
        if file_handler['matches'](key):
            return file_handler
    return None
