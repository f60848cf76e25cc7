from __future__ import annotations

from .corpus import generate_broken_sources, generate_corpus_files, generate_json_sources

__all__ = ["generate_broken_sources", "generate_corpus_files", "generate_json_sources"]
