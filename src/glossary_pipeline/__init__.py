"""Gloss abbreviation extraction and glossary enrichment package."""

from .models import DocumentReport, FillResult, GenerateResult, GlossRecord, ParagraphReport

__all__ = ["GlossRecord", "ParagraphReport", "DocumentReport", "GenerateResult", "FillResult"]
