"""
Infrastructure layer module.

Concrete implementations of domain protocols that talk to external services.

Key components:
- llm/: Claude verification provider, prompt template and reply parsing
"""
