from hostsedit.infrastructure.document_io import (
    parse_document,
    load_document,
    render_document,
    save_document,
)

__all__ = [
    "parse_document",
    "load_document",
    "render_document",
    "save_document",
]
