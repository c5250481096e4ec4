from hostsedit.hosts import parser
from hostsedit.hosts import serializer
from hostsedit.hosts import validator
from hostsedit.hosts.parser import is_ip_literal, parse_line
from hostsedit.hosts.serializer import serialize
from hostsedit.hosts.validator import validate_strict

__all__ = [
    "parser",
    "serializer",
    "validator",
    "is_ip_literal",
    "parse_line",
    "serialize",
    "validate_strict",
]
