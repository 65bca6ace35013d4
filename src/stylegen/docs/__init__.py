"""Style documentation output."""

from stylegen.docs.builder import (
    DocJSONBuilder,
    MarkdownBuilder,
    generate_docs,
    run_docs,
)

__all__ = ["DocJSONBuilder", "MarkdownBuilder", "generate_docs", "run_docs"]
