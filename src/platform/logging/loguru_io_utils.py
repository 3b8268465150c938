from inspect import FullArgSpec, getfile, getfullargspec, getsourcelines
from os.path import basename
import re
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'
MAX_CONTENT_LENGTH = 1000

_SENSITIVE_ASSIGNMENT = re.compile(
    r"(\w*(?:%s)\w*)(['\"]?\s*[=:]\s*)(['\"])(.*?)\3" % '|'.join(SENSITIVE_KEYWORDS),
    re.IGNORECASE,
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    try:
        lineno = getsourcelines(func)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def normalize_args_kwargs(
    func: Callable[..., Any], *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[Any, Any]]:
    """Drop kwargs the wrapped function cannot accept (FastAPI passes every dependency by name)."""
    if hasattr(func, '__wrapped__'):
        func = func.__wrapped__  # type: ignore
    full_arg_spec: FullArgSpec = getfullargspec(func)

    if not full_arg_spec.varkw:
        accepted = set(full_arg_spec.args) | set(full_arg_spec.kwonlyargs)
        kwargs = {k: v for k, v in kwargs.items() if k in accepted}

    return args, kwargs


def is_sensitive_keyword(keyword: Any) -> bool:
    return isinstance(keyword, str) and any(k in keyword.lower() for k in SENSITIVE_KEYWORDS)


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if is_sensitive_keyword(keyword) else value


def mask_sensitive(data: Any) -> Any:
    data_str = str(data)
    masked = _SENSITIVE_ASSIGNMENT.sub(rf'\1\2\3{MASK}\3', data_str)
    return data if masked == data_str else masked


def truncate_content(data: Any) -> Any:
    data_str = str(data)
    if len(data_str) <= MAX_CONTENT_LENGTH:
        return data
    return f'{data_str[:MAX_CONTENT_LENGTH]}... [truncated {len(data_str) - MAX_CONTENT_LENGTH} chars]'
