"""
Chronus AI backend package.

Organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, errors and input validation
- services/  : Chat orchestration and the offline fallback
- llm/       : Instruction templates, provider adapters, normalization
- models/    : Pydantic request/response schemas
"""
__version__ = "0.3.0"
