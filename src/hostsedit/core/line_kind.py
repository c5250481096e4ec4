from enum import Enum


class LineKind(Enum):
    """
    Classification of a hosts-file line — drives lookup and serialization.
    """
    COMMENT = "comment"          # starts with '#', ignored by lookups
    MAPPING = "mapping"          # <ip> <host> [<host> ...]
    PASSTHROUGH = "passthrough"  # unrecognized row, written back verbatim
