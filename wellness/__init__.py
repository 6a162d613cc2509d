"""
Wellness survey service root package.

This package is organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, validation and cross-cutting utilities
- scoring/   : Question set and deterministic survey scoring
- services/  : Business logic and orchestration
- llm/       : LLM integration and prompt management
- models/    : Pydantic models for request/response schemas
"""
__version__ = "1.0.0"
