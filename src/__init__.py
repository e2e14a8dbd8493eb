"""Single-page book builder package."""

from .models.document import ContentBlock, DocumentModel, Heading, Section

__all__ = ["ContentBlock", "DocumentModel", "Heading", "Section"]
