from .patterns import (
    FLAG_TRUE,
    FLAG_FALSE,
    LIST_SEP,
    COMMENT_LINE,
)

__all__ = [
    "FLAG_TRUE",
    "FLAG_FALSE",
    "LIST_SEP",
    "COMMENT_LINE",
]
