class MediaDecodingError(Exception):
    """Raised when the decoding engine cannot load or read a media file."""
