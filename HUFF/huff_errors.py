class HuffException(ValueError):
    """Base class for every failure raised while decoding a Huffman stream."""


class FormatError(HuffException):
    """Stream is not in this format (bad magic) or its header is illegal."""


class TruncatedHeaderError(HuffException):
    """End of stream reached while reading the tree header."""


class TruncatedBodyError(HuffException):
    """End of stream reached before the PSEUDO_EOF code was decoded."""
