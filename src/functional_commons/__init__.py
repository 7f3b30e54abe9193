"""Functional Commons - 시퀀스 조합 함수 라이브러리"""
from functional_commons.types import (
    Function, Predicate,
    UnaryFunction, BinaryFunction, NaryFunction,
    UnaryPredicate, BinaryPredicate, NaryPredicate,
    apply_nary,
)
from functional_commons.option import (
    Option, Some, Nothing, NOTHING,
    is_some, as_option, from_nullable, to_nullable,
    map_option, get_or,
)
from functional_commons.result import (
    Result, Success, Failure,
    bind, unwrap_or, unwrap_or_raise,
)
from functional_commons.errors import (
    ConfigError, ConfigNotFoundError, FunctionalError,
    error_to_dict,
)
from functional_commons.config import (
    LoggingConfig, FunctionalConfig,
    load_yaml, parse_config, load_config, merge_config,
)
from functional_commons.logger import (
    logger, resolve_level, setup_logger, configure_logging,
)
from functional_commons.functions import (
    for_each, for_each_of,
    map, map_of,
    some, some_of,
    every, every_of,
    filter, filter_of,
    resolve, resolve_of, resolve_option,
    reduce, reduce_of,
)
from functional_commons.callables import (
    as_string,
    Sum, integer_sum, long_sum, double_sum,
    wrap_int32, wrap_int64,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "Function", "Predicate",
    "UnaryFunction", "BinaryFunction", "NaryFunction",
    "UnaryPredicate", "BinaryPredicate", "NaryPredicate",
    "apply_nary",
    # Option
    "Option", "Some", "Nothing", "NOTHING",
    "is_some", "as_option", "from_nullable", "to_nullable",
    "map_option", "get_or",
    # Result
    "Result", "Success", "Failure",
    "bind", "unwrap_or", "unwrap_or_raise",
    # Errors
    "ConfigError", "ConfigNotFoundError", "FunctionalError",
    "error_to_dict",
    # Config
    "LoggingConfig", "FunctionalConfig",
    "load_yaml", "parse_config", "load_config", "merge_config",
    # Logging
    "logger", "resolve_level", "setup_logger", "configure_logging",
    # Functions
    "for_each", "for_each_of",
    "map", "map_of",
    "some", "some_of",
    "every", "every_of",
    "filter", "filter_of",
    "resolve", "resolve_of", "resolve_option",
    "reduce", "reduce_of",
    # Callables
    "as_string",
    "Sum", "integer_sum", "long_sum", "double_sum",
    "wrap_int32", "wrap_int64",
]
