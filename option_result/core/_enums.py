from __future__ import annotations

from enum import Enum


class OptionTag(str, Enum):
    """
    Discriminant of an Option instance.

    - SOME: the instance holds exactly one present value
    - NONE: the instance holds nothing (the shared ``NONE`` singleton)
    """
    SOME = "some"
    NONE = "none"


class ResultTag(str, Enum):
    """
    Discriminant of a Result instance.

    - OK: success, the instance holds a value
    - ERR: failure, the instance holds an error

    The string values double as the keyword names accepted by ``match``.
    """
    OK = "ok"
    ERR = "err"
