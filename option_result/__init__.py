from typing import List

# Interfaces
from option_result.i_option import IOption
from option_result.i_result import IResult

# Option
from option_result.option import (
    Some,
    Nothing,
    Option,
    NONE,
    some,
    none,
    from_optional,
)

# Result
from option_result.result import (
    Ok,
    Err,
    Result,
    ok,
    err,
    maybe_ok,
    maybe_err,
)

# Enums
from option_result.core._enums import OptionTag, ResultTag

# Helpers
from option_result.utils._convert import (
    is_some,
    is_nothing,
    is_ok,
    is_err,
    option_to_result,
    result_to_option,
    from_optional_result,
    try_,
    try_call_,
    try_with_,
    collect,
    collect_options,
    partition,
    partition_with_key,
    flatten,
    transpose,
)

# Decorators
from option_result.decorators.result_decorators import as_result, as_option

# Logging
from option_result.core._logging import get_logger

# Exceptions
from option_result.core.exceptions import (
    OptionResultError,
    InvalidConstruction,
    UnwrapError,
    EmptyUnwrap,
    UnwrapOnErr,
    UnwrapOnOk,
    IncompleteMatch,
)

__all__: List[str] = [
    # Version
    "__version__",
    # Interfaces
    "IOption",
    "IResult",
    # Option
    "Some",
    "Nothing",
    "Option",
    "NONE",
    "some",
    "none",
    "from_optional",
    # Result
    "Ok",
    "Err",
    "Result",
    "ok",
    "err",
    "maybe_ok",
    "maybe_err",
    # Enums
    "OptionTag",
    "ResultTag",
    # Helpers
    "is_some",
    "is_nothing",
    "is_ok",
    "is_err",
    "option_to_result",
    "result_to_option",
    "from_optional_result",
    "try_",
    "try_call_",
    "try_with_",
    "collect",
    "collect_options",
    "partition",
    "partition_with_key",
    "flatten",
    "transpose",
    # Decorators
    "as_result",
    "as_option",
    # Logging
    "get_logger",
    # Exceptions
    "OptionResultError",
    "InvalidConstruction",
    "UnwrapError",
    "EmptyUnwrap",
    "UnwrapOnErr",
    "UnwrapOnOk",
    "IncompleteMatch",
]

__version__ = "0.1.0"
